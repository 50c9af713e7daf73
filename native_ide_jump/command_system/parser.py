"""
Command parser for native_ide_jump.
Parses slash commands and namespaced host commands into a name and arguments.
"""
import shlex
from dataclasses import dataclass
from typing import List, Optional

from ..constants import COMMAND_NAMESPACE, NAMESPACE_SEPARATOR, SLASH_PREFIX


@dataclass
class ParsedInput:
    """Result of parsing user input."""
    type: str  # 'command', 'empty'
    command: str = ""
    args: str = ""
    raw: str = ""


def strip_namespace(name: str) -> str:
    """Turn 'native-ide:auto-jump' into 'auto-jump'; other names pass through."""
    prefix = f"{COMMAND_NAMESPACE}{NAMESPACE_SEPARATOR}"
    if name.lower().startswith(prefix):
        return name[len(prefix):]
    return name


class CommandParser:
    """
    Parser for command input.

    Handles parsing of:
    - Slash commands (/auto-jump App/View.swift 12)
    - Namespaced host commands (native-ide:auto-jump App/View.swift 12)
    - Bare command names (auto-jump)
    """

    def parse(self, input_text: str) -> ParsedInput:
        """
        Parse input into a structured result.

        Args:
            input_text: Raw input

        Returns:
            ParsedInput with parsed components
        """
        text = input_text.strip()

        if not text:
            return ParsedInput(type="empty", raw=input_text)

        if text.startswith(SLASH_PREFIX):
            text = text[len(SLASH_PREFIX):]

        parts = text.split(maxsplit=1)
        command = strip_namespace(parts[0]).lower() if parts else ""
        args = parts[1] if len(parts) > 1 else ""

        if not command:
            return ParsedInput(type="empty", raw=input_text)

        return ParsedInput(
            type="command",
            command=command,
            args=args,
            raw=input_text
        )

    def parse_args(self, args: str) -> List[str]:
        """
        Split command arguments with shell quoting rules.

        Quoted arguments keep their spaces, so '"My App/View.swift" 3'
        yields two arguments. Backslashes are kept as typed so Windows
        paths survive.

        Args:
            args: Arguments string

        Returns:
            List of argument tokens
        """
        if not args:
            return []

        lexer = shlex.shlex(args, posix=True)
        lexer.whitespace_split = True
        lexer.escape = ""
        lexer.commenters = ""
        try:
            return list(lexer)
        except ValueError:
            return args.split()

    def check_args(self, tokens: List[str], max_count: int, usage: str) -> Optional[str]:
        """
        Validate positional tokens for a command.

        Returns:
            An error message, or None when the tokens are acceptable
        """
        for token in tokens:
            if token.startswith("--"):
                return f"Unknown option: {token}. Usage: {usage}"
        if len(tokens) > max_count:
            return f"Too many arguments. Usage: {usage}"
        return None
