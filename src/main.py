"""
Console entry point.

Runs the bot's command interpreter over stdin, one command per line.

Usage:
    python -m src.main --channel general --user 123456789
    python -m src.main --join --user 123456789
    echo '!ayuda' | python -m src.main
"""

import argparse
import sys

from dotenv import load_dotenv

# Load .env file at startup
load_dotenv()

from loguru import logger  # noqa: E402

from config.settings import get_settings  # noqa: E402
from src.channels.commands import AdminPermissions, Dispatcher, build_registry  # noqa: E402
from src.channels.console import ConsoleChannel  # noqa: E402
from src.connections.memory import MemoryStore  # noqa: E402


def configure_logging(level: str) -> None:
    """Configure loguru format with a default module."""
    logger.configure(extra={"module": "Bot"})
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{extra[module]: <14}</cyan> | <level>{message}</level>",
        level=level,
    )


def create_channel(store: MemoryStore | None = None) -> ConsoleChannel:
    """
    Wire the registry, permission checker, dispatcher and console channel from settings.

    Args:
        store: Memory store to share between commands (a new one by default)
    """
    settings = get_settings()
    registry = build_registry(store or MemoryStore(), settings)

    dispatcher = Dispatcher(
        registry,
        AdminPermissions.from_settings(settings.bot),
        prefix=settings.bot.prefix,
        help_command=settings.bot.help_command,
    )
    return ConsoleChannel(dispatcher, welcome=registry.lookup("bienvenida"))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Educational chat bot console")
    parser.add_argument("--channel", default="console", help="Channel id attached to every line")
    parser.add_argument("--user", default="local-user", help="User id attached to every line")
    parser.add_argument("--join", action="store_true", help="Greet the user as a new member before reading input")
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.log_level)
    log = logger.bind(module="App")

    channel = create_channel()
    log.info(f"{settings.bot.name} ready (prefix '{settings.bot.prefix}')")

    if args.join:
        channel.handle_member_join(args.channel, args.user)

    try:
        channel.serve(sys.stdin, args.channel, args.user)
    except KeyboardInterrupt:
        log.info("Interrupted")

    return 0


if __name__ == "__main__":
    sys.exit(main())
