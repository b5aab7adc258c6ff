"""
Subject Models.

Pydantic models for academic subjects.
"""

from datetime import datetime

from pydantic import BaseModel, Field, computed_field


class Subject(BaseModel):
    """Academic subject created by a member."""

    id: str
    code: str
    name: str
    description: str = ""
    professor: str = ""
    creator_id: str
    active: bool = True
    created_at: datetime = Field(default_factory=datetime.now)

    @computed_field
    @property
    def full_name(self) -> str:
        """Display name, e.g. 'MAT101 - Matemáticas'."""
        return f"{self.code} - {self.name}"
