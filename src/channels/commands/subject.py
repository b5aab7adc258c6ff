"""
Subject Command Module.

Handles the !materia command - create, list and delete academic subjects.
"""

from typing import Sequence

from src.channels.commands import formatting
from src.channels.commands.base import has_at_least
from src.channels.commands.registry import ActionRegistry
from src.modules.subjects import SubjectRepository
from src.modules.tasks import TaskRepository

# listar filters -> SubjectRepository.list_all(active=...)
LIST_FILTERS: dict[str, bool | None] = {
    "activas": True,
    "archivadas": False,
    "detalle": None,
    "todas": None,
}

TASK_FILTERS: dict[str, bool | None] = {
    "pendientes": False,
    "completadas": True,
    "todas": None,
}


class SubjectCommand:
    """Subject command - manages academic subjects."""

    name = "materia"
    description = "Permite crear, listar y gestionar materias académicas"
    requires_permission = False

    def __init__(self, subjects: SubjectRepository, tasks: TaskRepository, prefix: str = "!"):
        """
        Initialize subject command.

        Args:
            subjects: Subject repository
            tasks: Task repository, used to look up a subject's tasks
            prefix: Command prefix shown in usage texts
        """
        self._subjects = subjects
        self._tasks = tasks
        self._prefix = prefix

        p = prefix
        self.actions = ActionRegistry()
        self.actions.add(
            "crear",
            "Crear nueva materia",
            f'{p}materia crear CODIGO "Nombre" ["Descripción"] ["Profesor"]',
            self._create,
        )
        self.actions.add(
            "listar",
            "Ver materias existentes",
            f"{p}materia listar [activas|archivadas|detalle]",
            self._list,
        )
        self.actions.add(
            "eliminar",
            "Eliminar una materia",
            f"{p}materia eliminar CODIGO",
            self._delete,
        )
        self.actions.add(
            "tareas",
            "Ver tareas de una materia",
            f"{p}materia tareas CODIGO [pendientes|completadas]",
            self._subject_tasks,
        )

        self.usage = "\n".join(
            [f"{p}materia [{'|'.join(self.actions.names())}] [parámetros]", ""]
            + [f"• `{a.usage}` - {a.description}" for a in self.actions.all()]
            + ["", f'Ejemplo: `{p}materia crear MAT101 "Matemáticas" "Álgebra básica" "Dr. Juan Pérez"`']
        )

    def execute(self, args: Sequence[str], channel_id: str, caller_id: str) -> str:
        """
        Execute !materia.

        Args:
            args: Action followed by its parameters
            channel_id: Channel id
            caller_id: Member running the command

        Returns:
            Result of the selected action
        """
        if not has_at_least(args, 1):
            lines = ["⚠️ **Debes especificar una acción**", "", "**Acciones disponibles:**"]
            lines.extend(f"• `{a.usage}` - {a.description}" for a in self.actions.all())
            lines.extend(["", f"💡 Usa `{self._prefix}ayuda materia` para ver ejemplos detallados"])
            return formatting.error("\n".join(lines))

        action = self.actions.lookup(args[0])
        if action is None:
            return formatting.unknown_action(args[0].lower(), self.actions.names())

        return action.handler(args[1:], channel_id, caller_id)

    def _create(self, args: Sequence[str], channel_id: str, caller_id: str) -> str:
        if not has_at_least(args, 2):
            return formatting.usage_error(self.name, self.actions.lookup("crear").usage)

        code, name = args[0], args[1]
        description = args[2] if has_at_least(args, 3) else ""
        professor = args[3] if has_at_least(args, 4) else ""

        try:
            subject = self._subjects.create(
                code=code,
                name=name,
                creator_id=caller_id,
                description=description,
                professor=professor,
            )
        except ValueError as e:
            return formatting.error(str(e))

        return formatting.subject_created(subject)

    def _list(self, args: Sequence[str], channel_id: str, caller_id: str) -> str:
        selected = args[0].lower() if has_at_least(args, 1) else "todas"
        active = LIST_FILTERS.get(selected)

        subjects = self._subjects.list_all(active=active)
        if not subjects and self._subjects.count() > 0:
            return formatting.error(f"No hay materias con el filtro: {selected}")

        return formatting.subject_list(subjects, detailed=selected == "detalle")

    def _delete(self, args: Sequence[str], channel_id: str, caller_id: str) -> str:
        if not has_at_least(args, 1):
            return formatting.usage_error(self.name, self.actions.lookup("eliminar").usage)

        code = SubjectRepository.normalize_code(args[0])
        subject = self._subjects.find_by_code(code)
        if subject is None:
            return formatting.not_found("Materia", code)

        if subject.creator_id != caller_id:
            return formatting.error("Solo el creador puede eliminar la materia")

        task_count = self._tasks.count_by_subject(code)
        if task_count > 0:
            return formatting.error(f"La materia tiene {task_count} tareas. Elimínalas primero")

        self._subjects.delete(code)
        return formatting.success(f"Materia **{code}** eliminada")

    def _subject_tasks(self, args: Sequence[str], channel_id: str, caller_id: str) -> str:
        if not has_at_least(args, 1):
            return formatting.usage_error(self.name, self.actions.lookup("tareas").usage)

        code = SubjectRepository.normalize_code(args[0])
        subject = self._subjects.find_by_code(code)
        if subject is None:
            return formatting.not_found("Materia", code)

        completed = TASK_FILTERS.get(args[1].lower()) if has_at_least(args, 2) else None
        entries = self._tasks.list_numbered(completed=completed, subject=subject.code)
        return formatting.task_list(entries, heading=subject.full_name)
