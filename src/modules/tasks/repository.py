"""
Task Repository.

Store operations for study tasks.
"""

import uuid
from datetime import datetime
from typing import Optional

from loguru import logger

from src.connections.memory import MemoryStore
from src.modules.tasks.models import DEFAULT_PRIORITY, DEFAULT_SUBJECT, Task


class TaskRepository:
    """Repository for task records."""

    def __init__(self, store: MemoryStore):
        """
        Initialize repository with the shared store.

        Args:
            store: Memory store instance
        """
        self._store = store

    def create(
        self,
        title: str,
        creator_id: str,
        description: str = "",
        subject: str = DEFAULT_SUBJECT,
        priority: int = DEFAULT_PRIORITY,
    ) -> Task:
        """
        Create a new task.

        Args:
            title: Task title (required)
            creator_id: Member who creates the task
            description: Optional description
            subject: Subject code, "General" when omitted
            priority: 1 (low) to 3 (high)

        Returns:
            Created task

        Raises:
            ValueError: If the title is empty
        """
        title = title.strip()
        if not title:
            raise ValueError("El título es obligatorio")

        task = Task(
            id=str(uuid.uuid4()),
            title=title,
            description=description.strip(),
            subject=subject.strip() or DEFAULT_SUBJECT,
            creator_id=creator_id,
            priority=priority,
        )
        with self._store.lock:
            self._store.tasks.append(task)

        logger.info(f"Task created: {task.title!r} ({task.subject}) by {creator_id}")
        return task

    def list_all(self, completed: Optional[bool] = None) -> list[Task]:
        """
        List tasks in creation order.

        Args:
            completed: Only completed (True) or pending (False) tasks; None for all
        """
        with self._store.lock:
            if completed is None:
                return list(self._store.tasks)
            return [t for t in self._store.tasks if t.completed is completed]

    def count(self) -> int:
        """Number of stored tasks."""
        with self._store.lock:
            return len(self._store.tasks)

    def complete_at(self, position: int) -> tuple[Optional[Task], bool]:
        """
        Mark the task at a 1-based position as completed.

        Args:
            position: 1-based index in creation order

        Returns:
            (task, changed): task is None when the position is out of range,
            changed is False when the task was already completed
        """
        with self._store.lock:
            if position < 1 or position > len(self._store.tasks):
                return None, False

            task = self._store.tasks[position - 1]
            if task.completed:
                return task, False

            task.completed = True
            task.completed_at = datetime.now()

        logger.info(f"Task completed: {task.title!r}")
        return task, True

    def list_numbered(
        self,
        completed: Optional[bool] = None,
        subject: Optional[str] = None,
    ) -> list[tuple[int, Task]]:
        """
        List tasks with their 1-based position in the full task list.

        Positions stay stable under filtering, so they can be passed to
        ``complete_at``.

        Args:
            completed: Only completed (True) or pending (False) tasks; None for all
            subject: Only tasks of this subject code (case-insensitive)
        """
        key = subject.strip().lower() if subject is not None else None
        with self._store.lock:
            return [
                (position, task)
                for position, task in enumerate(self._store.tasks, 1)
                if (completed is None or task.completed is completed)
                and (key is None or task.subject.lower() == key)
            ]

    def count_by_subject(self, code: str) -> int:
        """Number of tasks attached to a subject code."""
        return len(self.list_numbered(subject=code))
