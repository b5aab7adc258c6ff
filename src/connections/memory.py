"""
Memory Store Module.

Owns the in-process collections shared by the bot commands.
"""

import threading
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from src.modules.members.models import Member
    from src.modules.subjects.models import Subject
    from src.modules.tasks.models import Task
    from src.modules.teachers.models import Teacher

store_log = logger.bind(module="MemoryStore")


class MemoryStore:
    """
    In-memory datastore injected into repositories.

    All collections are guarded by a single re-entrant lock. Repositories
    must hold ``store.lock`` while reading or mutating any collection.
    """

    def __init__(self):
        """Initialize empty collections."""
        self.lock = threading.RLock()
        self.members: dict[str, "Member"] = {}
        self.subjects: list["Subject"] = []
        self.tasks: list["Task"] = []
        self.teachers: list["Teacher"] = []
        store_log.debug("Memory store created")

    def clear(self) -> None:
        """Drop every stored record."""
        with self.lock:
            self.members.clear()
            self.subjects.clear()
            self.tasks.clear()
            self.teachers.clear()
        store_log.info("Memory store cleared")

    def stats(self) -> dict[str, int]:
        """Return record counts per collection."""
        with self.lock:
            return {
                "members": len(self.members),
                "subjects": len(self.subjects),
                "tasks": len(self.tasks),
                "teachers": len(self.teachers),
            }
