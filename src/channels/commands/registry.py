"""
Command Registry Module.

Central registry for all available commands and their sub-actions.
"""

from typing import TYPE_CHECKING, Generic, Iterator, Optional, TypeVar

from loguru import logger

from src.channels.commands.base import Action, Command

if TYPE_CHECKING:
    from config.settings import Settings
    from src.connections.memory import MemoryStore

registry_log = logger.bind(module="Registry")

T = TypeVar("T")


class DuplicateCommandError(ValueError):
    """Raised at startup when a name is registered twice or is empty."""


def normalize_name(name: str) -> str:
    """Normalize a command or action name for lookup."""
    return (name or "").strip().lower()


class Registry(Generic[T]):
    """
    Name -> item mapping keyed by the item's ``name`` attribute.

    Keys are lower-cased. Iteration follows registration order. The
    registry is filled once at startup and only read afterwards.
    """

    def __init__(self):
        self._items: dict[str, T] = {}

    def register(self, item: T) -> T:
        """
        Register an item under its normalized name.

        Args:
            item: Object with a ``name`` attribute

        Returns:
            The registered item

        Raises:
            DuplicateCommandError: If the name is empty or already registered
        """
        key = normalize_name(getattr(item, "name", ""))
        if not key:
            raise DuplicateCommandError(f"Cannot register {item!r} without a name")
        if key in self._items:
            raise DuplicateCommandError(f"'{key}' is already registered")

        self._items[key] = item
        return item

    def lookup(self, name: str) -> Optional[T]:
        """Exact, case-insensitive lookup. Returns None if not registered."""
        return self._items.get(normalize_name(name))

    def all(self) -> list[T]:
        """All items in registration order."""
        return list(self._items.values())

    def names(self) -> list[str]:
        """All normalized names in registration order."""
        return list(self._items)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_name(name) in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.all())


class CommandRegistry(Registry[Command]):
    """Registry of top-level bot commands."""

    def register(self, item: Command) -> Command:
        command = super().register(item)
        registry_log.debug(f"Registered command: {normalize_name(command.name)}")
        return command


class ActionRegistry(Registry[Action]):
    """Registry of sub-actions inside a single command."""

    def add(self, name: str, description: str, usage: str, handler) -> Action:
        """Build and register an Action in one call."""
        return self.register(Action(name=name, description=description, usage=usage, handler=handler))


def build_registry(
    store: "MemoryStore",
    settings: Optional["Settings"] = None,
) -> CommandRegistry:
    """
    Build the default command registry.

    Args:
        store: Shared memory store injected into every command
        settings: Application settings (defaults to the cached settings)

    Returns:
        Registry with all built-in commands
    """
    from config.settings import get_settings
    from src.channels.commands.help import HelpCommand
    from src.channels.commands.points import PointsCommand
    from src.channels.commands.subject import SubjectCommand
    from src.channels.commands.task import TaskCommand
    from src.channels.commands.teacher import TeacherCommand
    from src.channels.commands.welcome import WelcomeCommand
    from src.modules.members import MemberRepository
    from src.modules.subjects import SubjectRepository
    from src.modules.tasks import TaskRepository
    from src.modules.teachers import TeacherRepository

    settings = settings or get_settings()
    prefix = settings.bot.prefix

    members = MemberRepository(store)
    subjects = SubjectRepository(store)
    tasks = TaskRepository(store)
    teachers = TeacherRepository(store)

    registry = CommandRegistry()
    registry.register(HelpCommand(
        registry,
        prefix=prefix,
        name=settings.bot.help_command,
        bot_name=settings.bot.name,
    ))
    registry.register(WelcomeCommand(prefix=prefix))
    registry.register(TaskCommand(tasks, members, prefix=prefix))
    registry.register(SubjectCommand(subjects, tasks, prefix=prefix))
    registry.register(PointsCommand(members, prefix=prefix))
    registry.register(TeacherCommand(teachers, prefix=prefix))

    registry_log.info(f"Registered {len(registry)} commands: {', '.join(registry.names())}")
    return registry

