"""
Task Models.

Pydantic models for study tasks.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

DEFAULT_SUBJECT = "General"
DEFAULT_PRIORITY = 2
POINTS_PER_PRIORITY = 10


class Task(BaseModel):
    """Study task created by a member."""

    id: str
    title: str
    description: str = ""
    subject: str = DEFAULT_SUBJECT
    creator_id: str
    priority: int = Field(default=DEFAULT_PRIORITY, ge=1, le=3)
    completed: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    completed_at: Optional[datetime] = None

    @property
    def reward(self) -> int:
        """Points granted when the task is completed."""
        return POINTS_PER_PRIORITY * self.priority

    def __str__(self) -> str:
        status = "✅" if self.completed else "⏳"
        text = f"{status} **{self.title}** [{self.subject}]"
        if self.description:
            text += f"\n   {self.description}"
        return text
