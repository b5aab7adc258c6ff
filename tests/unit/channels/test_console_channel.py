"""
Unit tests for src/channels/console/channel.py
"""

import io

from src.channels.console import ConsoleChannel

# Import fixtures
pytest_plugins = ["tests.fixtures.commands"]


class TestConsoleChannel:
    """Tests for ConsoleChannel."""

    def test_command_reply_is_written(self, dispatcher):
        output = io.StringIO()
        channel = ConsoleChannel(dispatcher, output=output)

        reply = channel.handle_message("general", "u1", "!bienvenida")

        assert reply is not None
        assert output.getvalue() == f"{reply}\n"

    def test_plain_text_is_ignored(self, dispatcher):
        output = io.StringIO()
        channel = ConsoleChannel(dispatcher, output=output)

        assert channel.handle_message("general", "u1", "hola") is None
        assert output.getvalue() == ""

    def test_serve_counts_commands(self, dispatcher):
        output = io.StringIO()
        channel = ConsoleChannel(dispatcher, output=output)
        lines = ['!tarea crear "Leer"\n', "charla\n", "!tarea listar\n", "!noexiste\n"]

        handled = channel.serve(lines, "general", "u1")

        assert handled == 3
        assert "Leer" in output.getvalue()
        assert "noexiste" in output.getvalue()

    def test_member_join_sends_welcome(self, dispatcher, registry):
        output = io.StringIO()
        channel = ConsoleChannel(dispatcher, output=output, welcome=registry.lookup("bienvenida"))

        message = channel.handle_member_join("general", "u42")

        assert message is not None
        assert "<@u42>" in message
        assert "!materia crear" in message
        assert output.getvalue() == f"{message}\n"

    def test_member_join_without_welcome(self, dispatcher):
        output = io.StringIO()
        channel = ConsoleChannel(dispatcher, output=output)

        assert channel.handle_member_join("general", "u42") is None
        assert output.getvalue() == ""
