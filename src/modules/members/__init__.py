"""
Members Module.

Chat users, their points and levels.
"""

from src.modules.members.models import Member, default_member_name
from src.modules.members.repository import MemberRepository

__all__ = [
    "Member",
    "MemberRepository",
    "default_member_name",
]
