"""
Subject Repository.

Store operations for academic subjects.
"""

import uuid
from typing import Optional

from loguru import logger

from src.connections.memory import MemoryStore
from src.modules.subjects.models import Subject


class SubjectRepository:
    """Repository for subject records."""

    def __init__(self, store: MemoryStore):
        """
        Initialize repository with the shared store.

        Args:
            store: Memory store instance
        """
        self._store = store

    @staticmethod
    def normalize_code(code: str) -> str:
        """Subject codes are stored trimmed and upper-cased."""
        return code.strip().upper()

    def create(
        self,
        code: str,
        name: str,
        creator_id: str,
        description: str = "",
        professor: str = "",
    ) -> Subject:
        """
        Create a new subject.

        Args:
            code: Unique subject code (case-insensitive)
            name: Subject name
            creator_id: Member who creates the subject
            description: Optional description
            professor: Optional professor name

        Returns:
            Created subject

        Raises:
            ValueError: If code or name is empty, or the code already exists
        """
        code = self.normalize_code(code)
        name = name.strip()
        if not code or not name:
            raise ValueError("Código y nombre son obligatorios")

        with self._store.lock:
            if self._find(code) is not None:
                raise ValueError(f"Ya existe una materia con código: {code}")

            subject = Subject(
                id=str(uuid.uuid4()),
                code=code,
                name=name,
                description=description.strip(),
                professor=professor.strip(),
                creator_id=creator_id,
            )
            self._store.subjects.append(subject)

        logger.info(f"Subject created: {code} by {creator_id}")
        return subject

    def _find(self, code: str) -> Optional[Subject]:
        for subject in self._store.subjects:
            if subject.code == code:
                return subject
        return None

    def find_by_code(self, code: str) -> Optional[Subject]:
        """Find a subject by code, ignoring case."""
        with self._store.lock:
            return self._find(self.normalize_code(code))

    def list_all(self, active: Optional[bool] = None) -> list[Subject]:
        """
        List subjects in creation order.

        Args:
            active: Only active (True) or archived (False) subjects; None for all
        """
        with self._store.lock:
            if active is None:
                return list(self._store.subjects)
            return [s for s in self._store.subjects if s.active is active]

    def count(self) -> int:
        """Number of stored subjects."""
        with self._store.lock:
            return len(self._store.subjects)

    def delete(self, code: str) -> bool:
        """
        Delete a subject by code.

        Returns:
            True if a subject was removed
        """
        code = self.normalize_code(code)
        with self._store.lock:
            before = len(self._store.subjects)
            self._store.subjects[:] = [s for s in self._store.subjects if s.code != code]
            removed = len(self._store.subjects) < before

        if removed:
            logger.info(f"Subject deleted: {code}")
        return removed
