"""
Teacher Repository.

Store operations for institution teachers.
"""

import uuid

from loguru import logger

from src.connections.memory import MemoryStore
from src.modules.teachers.models import Teacher


class TeacherRepository:
    """Repository for teacher records."""

    def __init__(self, store: MemoryStore):
        self._store = store

    def create(self, name: str, description: str = "") -> Teacher:
        """
        Register a teacher.

        Raises:
            ValueError: If the name is empty
        """
        name = name.strip()
        if not name:
            raise ValueError("Debes proporcionar un nombre para el docente")

        teacher = Teacher(id=str(uuid.uuid4()), name=name, description=description.strip())
        with self._store.lock:
            self._store.teachers.append(teacher)

        logger.info(f"Teacher created: {name}")
        return teacher

    def list_all(self) -> list[Teacher]:
        """Teachers in registration order."""
        with self._store.lock:
            return list(self._store.teachers)

    def delete_by_name(self, name: str) -> bool:
        """
        Remove the first teacher whose name matches, ignoring case.

        Returns:
            True if a teacher was removed
        """
        key = name.strip().lower()
        with self._store.lock:
            for i, teacher in enumerate(self._store.teachers):
                if teacher.name.lower() == key:
                    del self._store.teachers[i]
                    logger.info(f"Teacher deleted: {teacher.name}")
                    return True
        return False
