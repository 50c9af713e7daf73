"""
Rich UI renderer for native_ide_jump.
Handles rendering of command results in the terminal.
"""
from typing import Optional

from rich.console import Console
from rich.markdown import Markdown
from rich.text import Text

from ..command_system import CommandResult

ERROR_ICON = "✗"


class RichRenderer:
    """
    Renderer for command output.
    Errors go to stderr, everything else to stdout.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
    ) -> None:
        """
        Initialize the Rich renderer.

        Args:
            console: Console for regular output
            error_console: Console for errors (stderr by default)
        """
        self._console = console or Console()
        self._error_console = error_console or Console(stderr=True)

    @property
    def console(self) -> Console:
        """Get the Rich console instance."""
        return self._console

    def print_markdown(self, content: str) -> None:
        """
        Print markdown content.

        Args:
            content: Markdown string
        """
        self._console.print(Markdown(content))

    def print_error(self, message: str, title: str = "Error") -> None:
        """
        Print an error message.

        Args:
            message: Error message
            title: Error title
        """
        self._error_console.print(f"[bold red]{ERROR_ICON} {title}[/bold red]")
        self._error_console.print(Text(message, style="red"))

    def render_result(self, result: CommandResult) -> None:
        """Print a command result in the style matching its status."""
        if result.is_error:
            self.print_error(result.message)
        elif result.message:
            self.print_markdown(result.message)


_renderer: Optional[RichRenderer] = None


def get_renderer() -> RichRenderer:
    """Get the global renderer instance."""
    global _renderer
    if _renderer is None:
        _renderer = RichRenderer()
    return _renderer
