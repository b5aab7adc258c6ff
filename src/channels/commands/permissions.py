"""
Permissions Module.

Authorization checks for commands that declare ``requires_permission``.
"""

from typing import Iterable, Optional, Protocol

from loguru import logger

from config.settings import BotSettings, get_settings

perm_log = logger.bind(module="Permissions")


class PermissionChecker(Protocol):
    """Decides whether a caller may run a restricted command in a channel."""

    def is_allowed(self, caller_id: str, channel_id: str) -> bool:
        ...


class AllowAllPermissions:
    """Allows every caller."""

    def is_allowed(self, caller_id: str, channel_id: str) -> bool:
        return True


class DenyAllPermissions:
    """Denies every caller."""

    def is_allowed(self, caller_id: str, channel_id: str) -> bool:
        return False


class AdminPermissions:
    """
    Allows configured administrators.

    A caller is allowed when listed in ``admin_ids``, or when the command is
    sent from one of ``admin_channel_ids``.
    """

    def __init__(self, admin_ids: Iterable[str] = (), admin_channel_ids: Iterable[str] = ()):
        """
        Initialize checker.

        Args:
            admin_ids: User ids with permission everywhere
            admin_channel_ids: Channels where everyone has permission
        """
        self._admin_ids = frozenset(admin_ids)
        self._admin_channel_ids = frozenset(admin_channel_ids)

    @classmethod
    def from_settings(cls, settings: Optional[BotSettings] = None) -> "AdminPermissions":
        """Build the checker from bot settings."""
        settings = settings or get_settings().bot
        if not settings.admin_ids and not settings.admin_channel_ids:
            perm_log.warning("No admins configured, restricted commands are disabled")
        return cls(settings.admin_ids, settings.admin_channel_ids)

    def is_allowed(self, caller_id: str, channel_id: str) -> bool:
        return caller_id in self._admin_ids or channel_id in self._admin_channel_ids
