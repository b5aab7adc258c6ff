"""
Unit tests for src/channels/commands/permissions.py
"""

from config.settings import BotSettings
from src.channels.commands.permissions import (
    AdminPermissions,
    AllowAllPermissions,
    DenyAllPermissions,
)


class TestAdminPermissions:
    """Tests for AdminPermissions."""

    def test_admin_user_allowed_anywhere(self):
        checker = AdminPermissions(admin_ids=["42"])
        assert checker.is_allowed("42", "any-channel") is True

    def test_other_user_denied(self):
        checker = AdminPermissions(admin_ids=["42"])
        assert checker.is_allowed("7", "any-channel") is False

    def test_admin_channel_allows_everyone(self):
        checker = AdminPermissions(admin_channel_ids=["staff"])
        assert checker.is_allowed("7", "staff") is True
        assert checker.is_allowed("7", "general") is False

    def test_empty_configuration_denies(self):
        checker = AdminPermissions()
        assert checker.is_allowed("42", "general") is False

    def test_from_settings(self):
        checker = AdminPermissions.from_settings(
            BotSettings(admin_ids=["1"], admin_channel_ids=["mods"])
        )
        assert checker.is_allowed("1", "x") is True
        assert checker.is_allowed("2", "mods") is True
        assert checker.is_allowed("2", "x") is False


class TestStaticCheckers:
    """Tests for the allow/deny-all checkers."""

    def test_allow_all(self):
        assert AllowAllPermissions().is_allowed("a", "b") is True

    def test_deny_all(self):
        assert DenyAllPermissions().is_allowed("a", "b") is False
