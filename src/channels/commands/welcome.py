"""
Welcome Command Module.

Handles the !bienvenida command and the member-join welcome message.
"""

from typing import Sequence

from src.channels.commands import formatting
from src.channels.commands.base import has_at_least, parse_mention


class WelcomeCommand:
    """Welcome command - greets the caller or a mentioned user."""

    name = "bienvenida"
    description = "Envía un mensaje de bienvenida al usuario"
    requires_permission = False

    def __init__(self, prefix: str = "!"):
        self._prefix = prefix
        self.usage = f"{prefix}bienvenida [@usuario]"

    def execute(self, args: Sequence[str], channel_id: str, caller_id: str) -> str:
        """
        Execute !bienvenida.

        Args:
            args: Optional user mention
            channel_id: Channel id (unused)
            caller_id: Caller id, greeted when no mention is given

        Returns:
            Greeting message
        """
        target = caller_id

        if has_at_least(args, 1):
            target = parse_mention(args[0])
            if target is None:
                return formatting.error("Formato de mención incorrecto. Usa @usuario")

        return f"¡Bienvenido/a <@{target}>! Estamos felices de tenerte aquí."

    def welcome_message(self, user_id: str) -> str:
        """
        Build the full welcome message for a user who just joined.

        Args:
            user_id: Id of the new member

        Returns:
            Welcome text with an overview of the commands
        """
        p = self._prefix
        return "\n".join([
            "🎉 **¡Bienvenido/a al servidor educativo!** 🎉",
            "",
            f"Hola <@{user_id}>, estamos muy felices de tenerte aquí. "
            "Este servidor está diseñado para ayudarte a organizar tus estudios.",
            "",
            "📚 **COMANDOS DISPONIBLES:**",
            "",
            "**📖 Gestión de Materias:**",
            f'`{p}materia crear CODIGO "Nombre" ["Descripción"] ["Profesor"]` - Crear nueva materia',
            f"`{p}materia listar [activas|archivadas]` - Listar materias",
            f"`{p}materia tareas CODIGO` - Ver tareas de una materia",
            f"`{p}materia eliminar CODIGO` - Eliminar materia",
            "",
            "**📝 Gestión de Tareas:**",
            f'`{p}tarea crear "Título" ["Descripción"] [MATERIA]` - Crear nueva tarea',
            f"`{p}tarea listar [pendientes|completadas]` - Listar tareas",
            f"`{p}tarea completar NUMERO` - Completar tarea",
            "",
            "**🏆 Sistema de Progreso:**",
            f"`{p}puntos` - Ver tu progreso personal",
            f"`{p}puntos @usuario` - Ver progreso de otro usuario",
            "",
            "**❓ Ayuda:**",
            f"`{p}ayuda` - Ver ayuda general",
            f"`{p}ayuda [comando]` - Ayuda específica de un comando",
            "",
            "💡 **¡Consejos para empezar!**",
            f'1. Prueba crear tu primera materia: `{p}materia crear MAT101 "Matemáticas"`',
            f'2. Agrega una tarea: `{p}tarea crear "Estudiar capítulo 1" "" MAT101`',
            f"3. Ve tu progreso: `{p}puntos`",
            "",
            "🎓 **¡Que tengas un excelente aprendizaje!**",
        ])
