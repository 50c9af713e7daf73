"""
Editor host adapters for native_ide_jump.

The host owns the workspace; this package only reads the active file and the
cursor line from it through the HostState interface.
"""
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Protocol, runtime_checkable

from .constants import ENV_ACTIVE_FILE, ENV_CURSOR_ROW
from .errors import HostStateError


@runtime_checkable
class HostState(Protocol):
    """Read-only view of the editor state needed for a jump."""

    def active_file_path(self) -> Optional[str]:
        """Path of the file in the active buffer, if any."""
        ...

    def cursor_line(self) -> Optional[int]:
        """Line of the first cursor, if any."""
        ...


@dataclass(frozen=True)
class EditorContext:
    """In-memory host state, used for explicit invocations and tests."""
    file_path: Optional[str] = None
    line: Optional[int] = None

    def active_file_path(self) -> Optional[str]:
        return self.file_path or None

    def cursor_line(self) -> Optional[int]:
        if self.line is None or self.line < 0:
            return None
        return self.line


class TaskEnvironment:
    """
    Host state taken from editor task variables.

    Editor tasks export the active buffer as ZED_FILE and the 1-based cursor
    row as ZED_ROW.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        """
        Initialize the adapter.

        Args:
            environ: Mapping to read from (defaults to os.environ)
        """
        self._environ = os.environ if environ is None else environ

    def active_file_path(self) -> Optional[str]:
        value = self._environ.get(ENV_ACTIVE_FILE, "").strip()
        return value or None

    def cursor_line(self) -> Optional[int]:
        value = self._environ.get(ENV_CURSOR_ROW, "").strip()
        if not (value.isascii() and value.isdigit()):
            return None
        return int(value)

    def __repr__(self) -> str:
        return f"<TaskEnvironment file={self.active_file_path()!r} line={self.cursor_line()!r}>"


def require_file_path(host: Optional[HostState]) -> str:
    """Return the active file path or raise HostStateError."""
    if host is None:
        raise HostStateError("No active workspace")
    file_path = host.active_file_path()
    if not file_path:
        raise HostStateError("No active buffer")
    return file_path


def require_cursor_line(host: Optional[HostState]) -> int:
    """Return the cursor line or raise HostStateError."""
    if host is None:
        raise HostStateError("No active workspace")
    line = host.cursor_line()
    if line is None:
        raise HostStateError("No cursor position")
    return line
