"""
Member Models.

Pydantic models for bot members and their progress.
"""

from datetime import datetime, timedelta

from pydantic import BaseModel, Field, computed_field

POINTS_PER_LEVEL = 100
ACTIVE_WINDOW = timedelta(days=7)


def default_member_name(member_id: str) -> str:
    """Build the placeholder display name for a member."""
    return f"Usuario_{member_id[:6]}"


class Member(BaseModel):
    """A chat user tracked by the bot."""

    id: str
    name: str
    points: int = 0
    points_by_subject: dict[str, int] = Field(default_factory=dict)
    registered_at: datetime = Field(default_factory=datetime.now)
    last_activity: datetime = Field(default_factory=datetime.now)

    @computed_field
    @property
    def level(self) -> int:
        """Level derived from total points."""
        return self.points // POINTS_PER_LEVEL + 1

    def add_points(self, points: int, subject: str) -> None:
        """
        Credit points to the member, attributed to a subject.

        Args:
            points: Points to add
            subject: Subject code or name the points belong to
        """
        self.points += points
        self.points_by_subject[subject] = self.points_by_subject.get(subject, 0) + points
        self.last_activity = datetime.now()

    def is_active(self, now: datetime | None = None) -> bool:
        """Whether the member was active within the last week."""
        now = now or datetime.now()
        return now - self.last_activity <= ACTIVE_WINDOW

    def progress_summary(self) -> str:
        """Short multi-line progress summary."""
        points_to_next = POINTS_PER_LEVEL - self.points % POINTS_PER_LEVEL
        return "\n".join([
            f"🏆 **Puntos:** {self.points}",
            f"⭐ **Nivel:** {self.level}",
            f"⏫ **Para el siguiente nivel:** {points_to_next} pts",
        ])
