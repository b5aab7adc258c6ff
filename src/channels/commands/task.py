"""
Task Command Module.

Handles the !tarea command - create, list and complete study tasks.
"""

from typing import Sequence

from loguru import logger

from src.channels.commands import formatting
from src.channels.commands.base import has_at_least
from src.channels.commands.registry import ActionRegistry
from src.modules.members import MemberRepository
from src.modules.subjects import SubjectRepository
from src.modules.tasks import TaskRepository
from src.modules.tasks.models import DEFAULT_SUBJECT

cmd_log = logger.bind(module="BotCommand")

LIST_FILTERS: dict[str, bool | None] = {
    "pendientes": False,
    "completadas": True,
    "todas": None,
}


class TaskCommand:
    """Task command - manages study tasks and awards points on completion."""

    name = "tarea"
    description = "Permite crear, listar y gestionar tareas de estudio"
    requires_permission = False

    def __init__(self, tasks: TaskRepository, members: MemberRepository, prefix: str = "!"):
        """
        Initialize task command.

        Args:
            tasks: Task repository
            members: Member repository, credited when a task is completed
            prefix: Command prefix shown in usage texts
        """
        self._tasks = tasks
        self._members = members

        p = prefix
        self.actions = ActionRegistry()
        self.actions.add(
            "crear",
            "Crear nueva tarea",
            f'{p}tarea crear "Título" ["Descripción"] [MATERIA]',
            self._create,
        )
        self.actions.add(
            "listar",
            "Ver tareas",
            f"{p}tarea listar [pendientes|completadas]",
            self._list,
        )
        self.actions.add(
            "completar",
            "Marcar tarea como completada",
            f"{p}tarea completar NUMERO",
            self._complete,
        )

        self.usage = "\n".join(
            [f"{p}tarea [{'|'.join(self.actions.names())}] [parámetros]", ""]
            + [f"• `{a.usage}` - {a.description}" for a in self.actions.all()]
            + ["", f'Ejemplo: `{p}tarea crear "Estudiar capítulo 5" "Revisar ejemplos" MAT101`']
        )

    def execute(self, args: Sequence[str], channel_id: str, caller_id: str) -> str:
        """
        Execute !tarea.

        Args:
            args: Action followed by its parameters
            channel_id: Channel id
            caller_id: Member running the command

        Returns:
            Result of the selected action
        """
        if not has_at_least(args, 1):
            return formatting.error(
                f"Debes especificar una acción: {', '.join(self.actions.names())}"
            )

        action = self.actions.lookup(args[0])
        if action is None:
            return formatting.unknown_action(args[0].lower(), self.actions.names())

        return action.handler(args[1:], channel_id, caller_id)

    def _create(self, args: Sequence[str], channel_id: str, caller_id: str) -> str:
        if not has_at_least(args, 1):
            return formatting.usage_error(self.name, self.actions.lookup("crear").usage)

        title = args[0]
        description = args[1] if has_at_least(args, 2) else ""
        subject = DEFAULT_SUBJECT
        if has_at_least(args, 3) and args[2].strip():
            subject = SubjectRepository.normalize_code(args[2])

        try:
            task = self._tasks.create(
                title=title,
                creator_id=caller_id,
                description=description,
                subject=subject,
            )
        except ValueError as e:
            return formatting.error(str(e))

        self._members.get_or_create(caller_id)
        return formatting.task_created(task)

    def _list(self, args: Sequence[str], channel_id: str, caller_id: str) -> str:
        completed = LIST_FILTERS.get(args[0].lower()) if has_at_least(args, 1) else None
        return formatting.task_list(self._tasks.list_numbered(completed=completed))

    def _complete(self, args: Sequence[str], channel_id: str, caller_id: str) -> str:
        if not has_at_least(args, 1):
            return formatting.usage_error(self.name, self.actions.lookup("completar").usage)

        try:
            position = int(args[0])
        except ValueError:
            return formatting.error("El número debe ser válido")

        total = self._tasks.count()
        if total == 0:
            return formatting.error("No hay tareas registradas")

        task, changed = self._tasks.complete_at(position)
        if task is None:
            return formatting.error(f"Número de tarea inválido (1-{total})")

        if not changed:
            return formatting.info("Esta tarea ya está completada")

        member = self._members.add_points(caller_id, task.reward, task.subject)
        cmd_log.info(f"{caller_id} completed task {position}: +{task.reward} pts ({member.points} total)")

        return formatting.success(f"🎉 ¡Tarea completada!\n+{task.reward} puntos\n\n{task}")
