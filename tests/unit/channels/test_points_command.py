"""
Unit tests for src/channels/commands/points.py
"""

import threading
from datetime import datetime, timedelta

import pytest

from src.channels.commands.points import PointsCommand, time_in_system
from src.modules.members import Member

# Import fixtures
pytest_plugins = ["tests.fixtures.commands"]


class TestExecute:
    """Tests for !puntos."""

    def test_own_points_registers_caller(self, run, members):
        response = run("!puntos")

        assert response.startswith("ℹ️")
        assert "Tu Progreso Actual" in response
        assert "Sin actividad por materias" in response
        assert members.get("user-1234567").name == "Usuario_user-1"

    def test_points_after_completing_task(self, run):
        run('!tarea crear "Estudiar" "" MAT101')
        run("!tarea completar 1")

        response = run("!puntos")

        assert "**Puntos:** 20" in response
        assert "MAT101: 20 pts (100.0%)" in response

    def test_mentioned_member(self, run, members):
        members.get_or_create("999")

        response = run("!puntos <@!999>")

        assert "Progreso de Usuario_999" in response

    def test_unknown_mentioned_member(self, run):
        assert "Usuario no encontrado" in run("!puntos <@555>")

    def test_bad_mention(self, run):
        assert "Formato de mención incorrecto" in run("!puntos juan")

    def test_report_while_points_are_awarded(self, members):
        command = PointsCommand(members)
        members.get_or_create("u1")
        done = threading.Event()

        def award():
            for i in range(2000):
                members.add_points("u1", 1, f"S{i}")
            done.set()

        writer = threading.Thread(target=award)
        writer.start()
        try:
            while not done.is_set():
                assert command.execute([], "ch", "u1").startswith("ℹ️")
        finally:
            writer.join()

        assert "**Puntos:** 2000" in command.execute([], "ch", "u1")


class TestSummary:
    """Tests for PointsCommand.summary."""

    @pytest.fixture
    def command(self, members):
        return PointsCommand(members)

    def test_level_tips(self, command):
        now = datetime.now()
        member = Member(id="1", name="Ana", points=450, last_activity=now)

        summary = command.summary(member, is_caller=False, now=now)

        assert "**Nivel:** 5" in summary
        assert "Excelente progreso" in summary
        assert "extrañado" not in summary

    def test_inactive_member(self, command):
        now = datetime.now()
        member = Member(id="1", name="Ana", last_activity=now - timedelta(days=30))

        assert "Te hemos extrañado" in command.summary(member, is_caller=True, now=now)


class TestTimeInSystem:
    """Tests for time_in_system."""

    def test_same_day(self):
        now = datetime.now()
        assert time_in_system(now - timedelta(hours=3), now) == "Menos de un día"

    def test_one_day(self):
        now = datetime.now()
        assert time_in_system(now - timedelta(days=1, hours=1), now) == "1 día"

    def test_many_days(self):
        now = datetime.now()
        assert time_in_system(now - timedelta(days=12), now) == "12 días"
