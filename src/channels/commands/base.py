"""
Base Command Module.

Defines the command interface and the helpers shared by all commands.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Protocol, Sequence, runtime_checkable


@runtime_checkable
class Command(Protocol):
    """
    Interface every bot command implements.

    Commands are plain classes exposing read-only metadata and an
    ``execute`` method. They return a ready-to-display string and report
    their own usage errors; the dispatcher only guards against faults.

    Attributes:
        name: Unique command name (matched case-insensitively)
        description: One-line description for the help listing
        usage: Usage text shown on argument errors
        requires_permission: Whether the caller must pass a permission check
    """

    name: str
    description: str
    usage: str
    requires_permission: bool

    def execute(self, args: Sequence[str], channel_id: str, caller_id: str) -> str:
        """
        Execute the command.

        Args:
            args: Tokenized arguments (quotes already removed)
            channel_id: Opaque channel identifier from the gateway
            caller_id: Opaque identifier of the user who sent the command

        Returns:
            Response message
        """
        ...


@dataclass(frozen=True)
class Invocation:
    """One parsed command line, bound to its channel and caller."""

    command_name: str
    args: tuple[str, ...]
    channel_id: str
    caller_id: str


# Sub-action handler: (args, channel_id, caller_id) -> response
ActionHandler = Callable[[Sequence[str], str, str], str]


@dataclass(frozen=True)
class Action:
    """Sub-action of a command, e.g. ``crear`` in ``!materia crear``."""

    name: str
    description: str
    usage: str
    handler: ActionHandler


def has_at_least(args: Sequence[str], n: int) -> bool:
    """Check that at least ``n`` arguments were given."""
    return len(args) >= n


def parse_mention(token: str) -> Optional[str]:
    """
    Extract a user id from a chat mention.

    Args:
        token: Raw token, e.g. '<@123>' or '<@!123>'

    Returns:
        The user id, or None if the token is not a mention
    """
    if not (token.startswith("<@") and token.endswith(">")) or len(token) < 4:
        return None

    user_id = token[2:-1]
    if user_id.startswith("!"):
        user_id = user_id[1:]

    return user_id or None
