"""
Chat Channels Module.

Gateways that feed chat lines to the command dispatcher.
"""

from src.channels.base import BaseChannel
from src.channels.console import ConsoleChannel

__all__ = [
    "BaseChannel",
    "ConsoleChannel",
]
