"""Modules package - Domain modules with repository pattern."""

from src.modules.members import Member, MemberRepository
from src.modules.subjects import Subject, SubjectRepository
from src.modules.tasks import Task, TaskRepository
from src.modules.teachers import Teacher, TeacherRepository

__all__ = [
    # Members
    "Member",
    "MemberRepository",
    # Subjects
    "Subject",
    "SubjectRepository",
    # Tasks
    "Task",
    "TaskRepository",
    # Teachers
    "Teacher",
    "TeacherRepository",
]
