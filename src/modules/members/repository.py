"""
Member Repository.

Store operations for bot members.
"""

from typing import Optional

from loguru import logger

from src.connections.memory import MemoryStore
from src.modules.members.models import Member, default_member_name


class MemberRepository:
    """
    Repository for member records.

    Returned members are copies taken under the store lock; changes go
    through the repository methods.
    """

    def __init__(self, store: MemoryStore):
        """
        Initialize repository with the shared store.

        Args:
            store: Memory store instance
        """
        self._store = store

    def get(self, member_id: str) -> Optional[Member]:
        """Find a member by id."""
        with self._store.lock:
            member = self._store.members.get(member_id)
            return member.model_copy(deep=True) if member else None

    def _get_or_create(self, member_id: str) -> Member:
        member = self._store.members.get(member_id)
        if member is None:
            member = Member(id=member_id, name=default_member_name(member_id))
            self._store.members[member_id] = member
            logger.info(f"Registered member {member_id}")
        return member

    def get_or_create(self, member_id: str) -> Member:
        """
        Find a member by id, registering it on first sight.

        Args:
            member_id: Platform user id

        Returns:
            Snapshot of the existing or newly created member
        """
        with self._store.lock:
            return self._get_or_create(member_id).model_copy(deep=True)

    def add_points(self, member_id: str, points: int, subject: str) -> Member:
        """
        Credit points to a member, creating it if needed.

        Args:
            member_id: Platform user id
            points: Points to add
            subject: Subject the points are attributed to

        Returns:
            Snapshot of the updated member
        """
        with self._store.lock:
            member = self._get_or_create(member_id)
            member.add_points(points, subject)
            return member.model_copy(deep=True)
