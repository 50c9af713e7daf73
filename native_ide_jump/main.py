"""
Main entry point for native_ide_jump.
"""
import argparse
import logging
import shlex
import sys
from pathlib import Path
from typing import List, Optional

from .constants import APP_NAME, APP_VERSION, APP_DESCRIPTION, LOG_LEVELS


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description=APP_DESCRIPTION
    )

    parser.add_argument(
        "-v", "--version",
        action="version",
        version=f"{APP_NAME} {APP_VERSION}"
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to config file"
    )

    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (overrides the config file)"
    )

    parser.add_argument(
        "-c", "--command",
        type=str,
        help='Execute a single slash command, e.g. "/auto-jump App/View.swift 12"'
    )

    parser.add_argument(
        "name",
        nargs="?",
        help="Command to run (auto-jump, jump-to-xcode, jump-to-android-studio, classify, help)"
    )

    parser.add_argument(
        "args",
        nargs=argparse.REMAINDER,
        help="Command arguments: [file] [line]"
    )

    args = parser.parse_args(argv)
    if args.command and args.name:
        parser.error("use either -c/--command or a positional command, not both")
    return args


def setup_logging(level: str) -> None:
    """Configure stderr logging for the console script."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    from .config import get_config
    from .errors import ConfigError
    from .rich_ui import get_renderer

    renderer = get_renderer()

    try:
        config = get_config(Path(args.config).expanduser() if args.config else None)
    except ConfigError as e:
        renderer.print_error(str(e), title="Configuration error")
        return 1

    setup_logging(args.log_level or config.logging.level)

    from .command_system import CommandParser, get_command_registry
    from .host import TaskEnvironment

    if args.command:
        parsed = CommandParser().parse(args.command)
        cmd_name, cmd_args = parsed.command, parsed.args
    else:
        cmd_name = args.name or "help"
        cmd_args = shlex.join(args.args) if args.args else ""

    registry = get_command_registry()
    result = registry.execute(
        cmd_name or "help",
        cmd_args,
        host=TaskEnvironment(),
        registry=registry,
    )
    renderer.render_result(result)
    return 0 if result.is_success else 1


if __name__ == "__main__":
    sys.exit(main())
