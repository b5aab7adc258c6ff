"""
Command Dispatcher Module.

Turns a raw chat line into a command invocation and runs it.
"""

from typing import Optional

from loguru import logger

from src.channels.commands import formatting
from src.channels.commands.base import Invocation
from src.channels.commands.permissions import PermissionChecker
from src.channels.commands.registry import CommandRegistry, normalize_name
from src.channels.commands.tokenizer import tokenize

dispatch_log = logger.bind(module="Dispatcher")


class Dispatcher:
    """
    Resolves and executes commands for incoming chat lines.

    The dispatcher keeps no per-invocation state, so a single instance can
    serve concurrent callers. Every command line yields exactly one reply
    string; lines without the prefix yield None.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        permissions: PermissionChecker,
        prefix: str = "!",
        help_command: str = "ayuda",
    ):
        """
        Initialize dispatcher.

        Args:
            registry: Registry of available commands
            permissions: Checker consulted for restricted commands
            prefix: Literal marking a line as a command
            help_command: Command suggested when a name is unknown
        """
        if not prefix:
            raise ValueError("Command prefix must not be empty")

        self._registry = registry
        self._permissions = permissions
        self._prefix = prefix
        self._help_command = help_command

    def parse(self, text: str, channel_id: str, caller_id: str) -> Optional[Invocation]:
        """
        Parse a raw line into an invocation.

        Supports:
        - !command
        - !command arg "quoted arg" arg

        Args:
            text: Raw message text
            channel_id: Channel the message came from
            caller_id: User who sent the message

        Returns:
            Invocation, or None if the line is not a command
        """
        if not text:
            return None

        text = text.strip()
        if not text.startswith(self._prefix):
            return None

        # Split into command and remainder
        parts = text[len(self._prefix):].split(maxsplit=1)
        if not parts:
            return None

        command_name = normalize_name(parts[0])
        remainder = parts[1] if len(parts) > 1 else ""

        return Invocation(
            command_name=command_name,
            args=tuple(tokenize(remainder)),
            channel_id=channel_id,
            caller_id=caller_id,
        )

    def dispatch(self, text: str, channel_id: str, caller_id: str) -> Optional[str]:
        """
        Handle one raw chat line.

        Args:
            text: Raw message text
            channel_id: Channel the message came from
            caller_id: User who sent the message

        Returns:
            Reply to send back, or None if the line is not a command
        """
        invocation = self.parse(text, channel_id, caller_id)
        if invocation is None:
            return None

        return self.run(invocation)

    def run(self, invocation: Invocation) -> str:
        """
        Execute a parsed invocation.

        Unknown commands, permission denials and command faults are all
        returned as formatted error messages.
        """
        name = invocation.command_name
        dispatch_log.debug(
            f"Dispatch {name} {list(invocation.args)} "
            f"(channel={invocation.channel_id}, caller={invocation.caller_id})"
        )

        command = self._registry.lookup(name)
        if command is None:
            dispatch_log.info(f"Unknown command: {name}")
            return formatting.unknown_command(name, self._prefix, self._help_command)

        if command.requires_permission and not self._is_allowed(invocation):
            dispatch_log.warning(
                f"Permission denied: {invocation.caller_id} -> {name} "
                f"in {invocation.channel_id}"
            )
            return formatting.permission_denied(name)

        try:
            return command.execute(list(invocation.args), invocation.channel_id, invocation.caller_id)
        except Exception:
            dispatch_log.exception(f"Command {name} failed")
            return formatting.internal_error()

    def _is_allowed(self, invocation: Invocation) -> bool:
        """Consult the permission checker; a failing checker denies."""
        try:
            return self._permissions.is_allowed(invocation.caller_id, invocation.channel_id)
        except Exception:
            dispatch_log.exception(f"Permission check for {invocation.command_name} failed")
            return False
