"""
Subjects Module.

Academic subjects members organize their tasks under.
"""

from src.modules.subjects.models import Subject
from src.modules.subjects.repository import SubjectRepository

__all__ = [
    "Subject",
    "SubjectRepository",
]
