"""
Tasks Module.

Study tasks and their completion state.
"""

from src.modules.tasks.models import Task
from src.modules.tasks.repository import TaskRepository

__all__ = [
    "Task",
    "TaskRepository",
]
