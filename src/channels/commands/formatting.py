"""
Message Formatting Module.

Response envelopes shared by all commands.
"""

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from src.modules.subjects import Subject
    from src.modules.tasks import Task

SUCCESS_MARK = "✅"
ERROR_MARK = "❌"
INFO_MARK = "ℹ️"


def success(message: str) -> str:
    """Format a success message."""
    return f"{SUCCESS_MARK} {message}"


def error(message: str) -> str:
    """Format an error message."""
    return f"{ERROR_MARK} {message}"


def info(message: str) -> str:
    """Format an informational message."""
    return f"{INFO_MARK} {message}"


def usage_error(command: str, usage: str) -> str:
    """
    Format an argument error with the correct usage.

    Args:
        command: Command name, e.g. 'materia'
        usage: Correct usage text
    """
    return error(f"**Uso incorrecto de `{command}`**\nFormato: `{usage}`")


def not_found(kind: str, key: str) -> str:
    """Format a lookup miss, e.g. not_found('Materia', 'MAT101')."""
    return error(f"{kind} no encontrada: **{key}**")


def unknown_command(name: str, prefix: str = "!", help_command: str = "ayuda") -> str:
    """Format the reply for a command name that is not registered."""
    return error(
        f"Comando desconocido: `{prefix}{name}`\n"
        f"Usa `{prefix}{help_command}` para ver los comandos disponibles."
    )


def unknown_action(action: str, available: Sequence[str]) -> str:
    """Format the reply for a sub-action that does not exist."""
    options = ", ".join(f"`{name}`" for name in available)
    return error(f"**Acción no reconocida:** {action}\nAcciones disponibles: {options}")


def permission_denied(name: str) -> str:
    """Format the reply for a denied permission check."""
    return error(f"No tienes permisos para usar el comando `{name}`.")


def internal_error() -> str:
    """Format the reply for an unexpected command failure."""
    return error("Ocurrió un error al ejecutar el comando. Inténtalo de nuevo más tarde.")


def subject_created(subject: "Subject") -> str:
    """Format a newly created subject."""
    lines = [
        "**Materia creada exitosamente**",
        "",
        f"📖 **{subject.full_name}**",
    ]
    if subject.description:
        lines.append(f"📄 **Descripción:** {subject.description}")
    if subject.professor:
        lines.append(f"👨‍🏫 **Profesor:** {subject.professor}")
    return success("\n".join(lines))


def subject_list(subjects: Sequence["Subject"], detailed: bool = False) -> str:
    """Format a list of subjects."""
    if not subjects:
        return info("No hay materias registradas todavía.")

    lines = ["📚 **Materias**", ""]
    for i, subject in enumerate(subjects, 1):
        status = "" if subject.active else " (archivada)"
        lines.append(f"{i}. **{subject.full_name}**{status}")
        if detailed:
            if subject.description:
                lines.append(f"   📄 {subject.description}")
            if subject.professor:
                lines.append(f"   👨‍🏫 {subject.professor}")
    return "\n".join(lines)


def task_created(task: "Task") -> str:
    """Format a newly created task."""
    lines = [
        "**Tarea creada exitosamente**",
        "",
        f"📝 **{task.title}**",
        f"📖 **Materia:** {task.subject}",
    ]
    if task.description:
        lines.append(f"📄 **Descripción:** {task.description}")
    return success("\n".join(lines))


def task_list(entries: Sequence[tuple[int, "Task"]], heading: str | None = None) -> str:
    """
    Format a numbered list of tasks.

    Args:
        entries: (position, task) pairs; the position is what `completar` expects
        heading: Optional subject name for the title
    """
    title = f"📝 **Tareas de {heading}**" if heading else "📝 **Tareas**"
    if not entries:
        return info(f"{title}\n\nNo hay tareas registradas.")

    lines = [title, ""]
    for position, task in entries:
        lines.append(f"{position}. {task}")
    return "\n".join(lines)
