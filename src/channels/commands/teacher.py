"""
Teacher Command Module.

Handles the !docente command - manages the institution's teachers.
"""

from typing import Sequence

from src.channels.commands import formatting
from src.channels.commands.base import has_at_least
from src.channels.commands.registry import ActionRegistry
from src.modules.teachers import TeacherRepository


class TeacherCommand:
    """Teacher command - restricted to administrators."""

    name = "docente"
    description = "Comandos para gestionar a los docentes de la institución"
    requires_permission = True

    def __init__(self, teachers: TeacherRepository, prefix: str = "!"):
        self._teachers = teachers

        p = prefix
        self.actions = ActionRegistry()
        self.actions.add(
            "crear",
            "Registrar un docente",
            f'{p}docente crear "<nombre>" ["descripción"]',
            self._create,
        )
        self.actions.add("listar", "Ver docentes", f"{p}docente listar", self._list)
        self.actions.add(
            "eliminar",
            "Eliminar un docente",
            f"{p}docente eliminar <nombre>",
            self._delete,
        )

        self.usage = "\n".join(
            [f"{p}docente [{'|'.join(self.actions.names())}] [parámetros]", ""]
            + [f"• `{a.usage}` - {a.description}" for a in self.actions.all()]
            + ["", f'Ejemplo: `{p}docente crear "Juan Pérez" "Profesor de Matemáticas"`']
        )

    def execute(self, args: Sequence[str], channel_id: str, caller_id: str) -> str:
        if not has_at_least(args, 1):
            return formatting.error(
                "Debes especificar una acción: "
                + ", ".join(f"`{name}`" for name in self.actions.names())
            )

        action = self.actions.lookup(args[0])
        if action is None:
            return formatting.unknown_action(args[0].lower(), self.actions.names())

        return action.handler(args[1:], channel_id, caller_id)

    def _create(self, args: Sequence[str], channel_id: str, caller_id: str) -> str:
        if not has_at_least(args, 1):
            return formatting.usage_error(self.name, self.actions.lookup("crear").usage)

        description = args[1] if has_at_least(args, 2) else ""
        try:
            teacher = self._teachers.create(args[0], description)
        except ValueError as e:
            return formatting.error(str(e))

        lines = ["**Docente creado exitosamente**", "", f"👨‍🏫 **Nombre:** {teacher.name}"]
        if teacher.description:
            lines.append(f"📄 **Descripción:** {teacher.description}")
        return formatting.success("\n".join(lines))

    def _list(self, args: Sequence[str], channel_id: str, caller_id: str) -> str:
        teachers = self._teachers.list_all()
        if not teachers:
            return formatting.info("No hay docentes registrados.")

        lines = ["👨‍🏫 **Lista de Docentes**", ""]
        for i, teacher in enumerate(teachers, 1):
            suffix = f" - {teacher.description}" if teacher.description else ""
            lines.append(f"{i}. {teacher.name}{suffix}")
        return "\n".join(lines)

    def _delete(self, args: Sequence[str], channel_id: str, caller_id: str) -> str:
        if not has_at_least(args, 1):
            return formatting.usage_error(self.name, self.actions.lookup("eliminar").usage)

        # Unquoted names arrive split into several tokens
        name = " ".join(args)
        if not self._teachers.delete_by_name(name):
            return formatting.error(f"Docente no encontrado: **{name}**")

        return formatting.success(f"**Docente eliminado exitosamente**\n\n👨‍🏫 **Nombre:** {name}")
