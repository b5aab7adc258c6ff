"""
Points Command Module.

Handles the !puntos command - shows a member's progress.
"""

from datetime import datetime
from typing import Optional, Sequence

from src.channels.commands import formatting
from src.channels.commands.base import has_at_least, parse_mention
from src.modules.members import Member, MemberRepository


class PointsCommand:
    """Points command - shows points, level and tips for a member."""

    name = "puntos"
    description = "Muestra el progreso y puntuación de un usuario"
    requires_permission = False

    def __init__(self, members: MemberRepository, prefix: str = "!"):
        self._members = members
        self.usage = f"{prefix}puntos [@usuario]"

    def execute(self, args: Sequence[str], channel_id: str, caller_id: str) -> str:
        """
        Execute !puntos.

        Args:
            args: Optional user mention
            channel_id: Channel id (unused)
            caller_id: Member running the command

        Returns:
            Progress summary of the caller or the mentioned member
        """
        target = caller_id

        if has_at_least(args, 1):
            target = parse_mention(args[0])
            if target is None:
                return formatting.error("Formato de mención incorrecto. Usa @usuario")

        if target == caller_id:
            member = self._members.get_or_create(caller_id)
        else:
            member = self._members.get(target)
            if member is None:
                return formatting.error("Usuario no encontrado o no ha usado el bot")

        return formatting.info(self.summary(member, is_caller=target == caller_id))

    def summary(self, member: Member, is_caller: bool, now: Optional[datetime] = None) -> str:
        """Build the full progress report for a member."""
        now = now or datetime.now()
        heading = "📊 **Tu Progreso Actual**" if is_caller else f"📊 **Progreso de {member.name}**"

        return "\n\n".join([
            heading,
            member.progress_summary(),
            self._detailed_stats(member, now),
            self._tips(member, now),
        ])

    @staticmethod
    def _detailed_stats(member: Member, now: datetime) -> str:
        lines = ["📈 **Estadísticas Detalladas:**"]

        if not member.points_by_subject or member.points == 0:
            lines.append("• Sin actividad por materias registrada")
        else:
            lines.append("• **Distribución por materias:**")
            for subject, points in member.points_by_subject.items():
                share = points / member.points * 100
                lines.append(f"  - {subject}: {points} pts ({share:.1f}%)")

        lines.append(f"• **Tiempo en el sistema:** {time_in_system(member.registered_at, now)}")
        return "\n".join(lines)

    @staticmethod
    def _tips(member: Member, now: datetime) -> str:
        lines = ["💡 **Consejos Personalizados:**"]

        if member.level == 1:
            lines.append("• ¡Bienvenido! Crea tu primera tarea para ganar puntos")
            lines.append("• Participa en los canales de materias para ganar experiencia")
        elif member.level < 5:
            lines.append("• ¡Vas bien! Completa más tareas para subir de nivel")
            lines.append("• Prueba ayudar a otros estudiantes para ganar puntos extra")
        elif member.level < 10:
            lines.append("• ¡Excelente progreso! Considera especializarte en tu materia favorita")
            lines.append("• Comparte recursos útiles con la comunidad")
        else:
            lines.append("• ¡Eres un veterano! Considera convertirte en mentor")
            lines.append("• Tu experiencia es valiosa para nuevos estudiantes")

        if not member.is_active(now):
            lines.append("• Te hemos extrañado, ¡vuelve pronto!")

        return "\n".join(lines)


def time_in_system(registered_at: datetime, now: datetime) -> str:
    """
    Describe how long ago a member registered.

    Examples:
        same day -> 'Menos de un día'
        1 day    -> '1 día'
        12 days  -> '12 días'
    """
    days = (now - registered_at).days
    if days <= 0:
        return "Menos de un día"
    if days == 1:
        return "1 día"
    return f"{days} días"
