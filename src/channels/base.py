"""
Base Channel Module.

Defines the base interface for chat gateways.
"""

from abc import ABC, abstractmethod
from typing import Optional

from loguru import logger

from src.channels.commands.dispatcher import Dispatcher
from src.channels.commands.welcome import WelcomeCommand


class BaseChannel(ABC):
    """
    Base class for chat gateways.

    Each platform adapter receives raw lines together with opaque channel
    and user ids, hands them to the dispatcher and delivers the reply.
    """

    # Channel identifier
    service_name: str = ""

    def __init__(self, dispatcher: Dispatcher, welcome: Optional[WelcomeCommand] = None):
        """
        Initialize channel.

        Args:
            dispatcher: Command dispatcher shared by all messages
            welcome: Command that builds the member-join greeting
        """
        self._dispatcher = dispatcher
        self._welcome = welcome

    @abstractmethod
    def send_message(self, channel_id: str, message: str) -> bool:
        """
        Send a message to a channel.

        Args:
            channel_id: Platform-specific channel ID
            message: Message to send

        Returns:
            True if sent successfully
        """
        pass

    def handle_message(self, channel_id: str, user_id: str, text: str) -> Optional[str]:
        """
        Handle an incoming message from a user.

        Args:
            channel_id: Platform-specific channel ID
            user_id: Platform-specific user ID
            text: Message text

        Returns:
            Reply that was sent, or None if the message was not a command
        """
        logger.debug(f"[{self.service_name}] {user_id}@{channel_id}: {text}")

        response = self._dispatcher.dispatch(text, channel_id, user_id)
        if response is None:
            return None

        if not self.send_message(channel_id, response):
            logger.warning(f"[{self.service_name}] Failed to deliver reply to {channel_id}")
        return response

    def handle_member_join(self, channel_id: str, user_id: str) -> Optional[str]:
        """
        Greet a member who just joined.

        Args:
            channel_id: Channel the greeting is sent to
            user_id: Platform-specific user ID of the new member

        Returns:
            Greeting that was sent, or None if no welcome is configured
        """
        if self._welcome is None:
            return None

        logger.info(f"[{self.service_name}] Member joined {channel_id}: {user_id}")
        message = self._welcome.welcome_message(user_id)
        if not self.send_message(channel_id, message):
            logger.warning(f"[{self.service_name}] Failed to deliver welcome to {channel_id}")
        return message
