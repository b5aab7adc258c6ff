"""
Teachers Module.
"""

from src.modules.teachers.models import Teacher
from src.modules.teachers.repository import TeacherRepository

__all__ = [
    "Teacher",
    "TeacherRepository",
]
