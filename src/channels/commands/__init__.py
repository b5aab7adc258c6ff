"""
Shared Commands Module.

Tokenizer, command registry, dispatcher and the built-in bot commands.
"""

from src.channels.commands.base import Action, Command, Invocation, has_at_least, parse_mention
from src.channels.commands.dispatcher import Dispatcher
from src.channels.commands.permissions import (
    AdminPermissions,
    AllowAllPermissions,
    DenyAllPermissions,
    PermissionChecker,
)
from src.channels.commands.registry import (
    ActionRegistry,
    CommandRegistry,
    DuplicateCommandError,
    build_registry,
)
from src.channels.commands.tokenizer import tokenize

__all__ = [
    "Action",
    "ActionRegistry",
    "AdminPermissions",
    "AllowAllPermissions",
    "Command",
    "CommandRegistry",
    "DenyAllPermissions",
    "Dispatcher",
    "DuplicateCommandError",
    "Invocation",
    "PermissionChecker",
    "build_registry",
    "has_at_least",
    "parse_mention",
    "tokenize",
]
