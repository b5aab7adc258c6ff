"""
Help Command Module.

Handles the !ayuda command - lists commands or shows one command's usage.
"""

from typing import TYPE_CHECKING, Sequence

from src.channels.commands import formatting
from src.channels.commands.base import has_at_least

if TYPE_CHECKING:
    from src.channels.commands.registry import CommandRegistry


class HelpCommand:
    """Help command - shows available commands and their usage."""

    description = "Muestra información sobre los comandos disponibles"
    requires_permission = False

    def __init__(
        self,
        registry: "CommandRegistry",
        prefix: str = "!",
        name: str = "ayuda",
        bot_name: str = "Bot Educativo",
    ):
        """
        Initialize help command.

        Args:
            registry: Registry the help text is built from
            prefix: Command prefix shown in examples
            name: Name this command is registered under
            bot_name: Bot name shown in the heading
        """
        self._registry = registry
        self._prefix = prefix
        self._bot_name = bot_name
        self.name = name
        self.usage = f"{prefix}{name} [comando]"

    def execute(self, args: Sequence[str], channel_id: str, caller_id: str) -> str:
        """
        Execute !ayuda.

        Args:
            args: Optional command name
            channel_id: Channel id (unused)
            caller_id: Caller id (unused)

        Returns:
            General help, or the usage of one command
        """
        if not has_at_least(args, 1):
            return self._general_help()

        return self._command_help(args[0])

    def _general_help(self) -> str:
        lines = [f"🤖 **{self._bot_name} - Comandos Disponibles**", ""]

        for command in self._registry.all():
            lock = " 🔒" if command.requires_permission else ""
            lines.append(f"• **{self._prefix}{command.name}**{lock} - {command.description}")

        lines.extend([
            "",
            f"💡 **Tip**: Usa `{self._prefix}{self.name} [comando]` "
            "para obtener ayuda específica de un comando.",
        ])
        return formatting.info("\n".join(lines))

    def _command_help(self, name: str) -> str:
        # Accept both "tarea" and "!tarea"
        if name.startswith(self._prefix):
            name = name[len(self._prefix):]

        command = self._registry.lookup(name)
        if command is None:
            return formatting.error(
                f"Comando '{name}' no encontrado. "
                f"Usa `{self._prefix}{self.name}` para ver todos los comandos."
            )

        lines = [
            f"📘 **Comando {self._prefix}{command.name}** - {command.description}",
            "",
            f"**Uso:**\n{command.usage}",
        ]
        if command.requires_permission:
            lines.extend(["", "🔒 Requiere permisos de administrador."])
        return formatting.info("\n".join(lines))
