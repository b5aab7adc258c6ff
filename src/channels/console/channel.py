"""
Console Channel Module.

Local gateway that reads commands from a text stream.
"""

import sys
from typing import Iterable, Optional, TextIO

from loguru import logger

from src.channels.base import BaseChannel
from src.channels.commands.dispatcher import Dispatcher
from src.channels.commands.welcome import WelcomeCommand

console_log = logger.bind(module="Console")


class ConsoleChannel(BaseChannel):
    """Channel that prints replies to a text stream."""

    service_name = "console"

    def __init__(
        self,
        dispatcher: Dispatcher,
        output: Optional[TextIO] = None,
        welcome: Optional[WelcomeCommand] = None,
    ):
        """
        Initialize console channel.

        Args:
            dispatcher: Command dispatcher
            output: Stream replies are written to (defaults to stdout)
            welcome: Command that builds the member-join greeting
        """
        super().__init__(dispatcher, welcome)
        self._output = output or sys.stdout

    def send_message(self, channel_id: str, message: str) -> bool:
        try:
            self._output.write(f"{message}\n")
            self._output.flush()
        except OSError as e:
            console_log.error(f"Failed to write reply: {e}")
            return False
        return True

    def serve(self, lines: Iterable[str], channel_id: str, user_id: str) -> int:
        """
        Dispatch every line from an iterable.

        Args:
            lines: Input lines, e.g. sys.stdin
            channel_id: Channel id attached to every line
            user_id: User id attached to every line

        Returns:
            Number of lines handled as commands
        """
        handled = 0
        for line in lines:
            if self.handle_message(channel_id, user_id, line.rstrip("\n")) is not None:
                handled += 1

        console_log.info(f"Input closed after {handled} commands")
        return handled
