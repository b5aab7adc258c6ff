"""
Teacher Models.
"""

from pydantic import BaseModel


class Teacher(BaseModel):
    """Teacher registered in the institution."""

    id: str
    name: str
    description: str = ""
