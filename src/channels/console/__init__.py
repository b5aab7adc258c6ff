"""
Console Channel Module.

Reads commands from stdin for local use.
"""

from src.channels.console.channel import ConsoleChannel

__all__ = [
    "ConsoleChannel",
]
