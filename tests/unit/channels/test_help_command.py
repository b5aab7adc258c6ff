"""
Unit tests for src/channels/commands/help.py and welcome.py
"""

from src.channels.commands.welcome import WelcomeCommand

# Import fixtures
pytest_plugins = ["tests.fixtures.commands"]


class TestHelp:
    """Tests for !ayuda."""

    def test_general_help_lists_registered_commands(self, run, registry):
        response = run("!ayuda")

        assert response.startswith("ℹ️")
        for command in registry.all():
            assert f"**!{command.name}**" in response

    def test_general_help_marks_restricted_commands(self, run):
        assert "**!docente** 🔒" in run("!ayuda")

    def test_command_help(self, run):
        response = run("!ayuda materia")

        assert "Comando !materia" in response
        assert "!materia crear CODIGO" in response

    def test_command_help_with_prefix(self, run):
        assert "Comando !tarea" in run("!ayuda !tarea")

    def test_unknown_command_help(self, run):
        response = run("!ayuda ranking")

        assert response.startswith("❌")
        assert "ranking" in response


class TestWelcome:
    """Tests for !bienvenida."""

    def test_welcome_caller(self, run):
        assert run("!bienvenida") == "¡Bienvenido/a <@user-1234567>! Estamos felices de tenerte aquí."

    def test_welcome_mentioned_user(self, run):
        assert "<@42>" in run("!bienvenida <@42>")

    def test_bad_mention(self, run):
        assert run("!bienvenida pepe").startswith("❌")

    def test_full_welcome_message(self):
        message = WelcomeCommand(prefix="?").welcome_message("42")

        assert "Hola <@42>" in message
        assert '`?materia crear CODIGO "Nombre"' in message
        assert "`?ayuda`" in message
