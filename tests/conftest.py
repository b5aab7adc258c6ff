"""
Shared pytest fixtures for all tests.
"""

import pytest

from config.settings import BotSettings, Settings
from src.connections.memory import MemoryStore
from src.modules.members import MemberRepository
from src.modules.subjects import SubjectRepository
from src.modules.tasks import TaskRepository
from src.modules.teachers import TeacherRepository


# ============================================================
# Settings Fixtures
# ============================================================


@pytest.fixture
def settings() -> Settings:
    """Settings with a known prefix and one admin."""
    return Settings(
        bot=BotSettings(
            prefix="!",
            help_command="ayuda",
            admin_ids=["admin-1"],
            admin_channel_ids=["staff"],
        )
    )


# ============================================================
# Store Fixtures
# ============================================================


@pytest.fixture
def store() -> MemoryStore:
    """Fresh in-memory store."""
    return MemoryStore()


@pytest.fixture
def members(store) -> MemberRepository:
    return MemberRepository(store)


@pytest.fixture
def subjects(store) -> SubjectRepository:
    return SubjectRepository(store)


@pytest.fixture
def tasks(store) -> TaskRepository:
    return TaskRepository(store)


@pytest.fixture
def teachers(store) -> TeacherRepository:
    return TeacherRepository(store)
