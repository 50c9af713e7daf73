"""
Jump dispatcher for native_ide_jump.

Resolves the file and line to open from explicit arguments and the editor
host, then hands them to the launcher. Three operations are exposed:
jump_to_xcode, jump_to_android_studio and auto_jump.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from .classifier import Platform, classify, extract_extension, supported_extensions_message
from .constants import DEFAULT_LINE
from .errors import UnsupportedExtensionError
from .host import HostState, require_cursor_line, require_file_path
from .io_handlers import ExitInfo
from .launcher import IDE, Launcher

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JumpRequest:
    """File and line for a single jump."""
    file_path: str
    line: int


@dataclass(frozen=True)
class JumpOutcome:
    """What was launched for a jump."""
    ide: IDE
    request: JumpRequest
    exit_info: ExitInfo

    @property
    def message(self) -> str:
        return f"Opened `{self.request.file_path}` at line {self.request.line} in {self.ide.display_name}"


def parse_line(value: Optional[str]) -> int:
    """
    Parse an explicit line argument as an unsigned integer.

    Anything that is not a plain run of ASCII digits falls back to line 1.
    """
    if value is None:
        return DEFAULT_LINE
    value = value.strip()
    if not (value.isascii() and value.isdigit()):
        return DEFAULT_LINE
    return int(value)


def resolve_request(
    host: Optional[HostState],
    file_path: Optional[str] = None,
    line: Optional[str] = None,
) -> JumpRequest:
    """
    Build the JumpRequest for one invocation.

    Args:
        host: Editor state used when arguments are missing
        file_path: Explicit file path argument
        line: Explicit line argument

    Returns:
        The resolved JumpRequest

    Raises:
        HostStateError: If the host cannot supply a missing value
    """
    explicit_path = file_path.strip() if file_path else ""

    if explicit_path:
        path = explicit_path
    else:
        path = require_file_path(host)

    if line is not None:
        resolved_line = parse_line(line)
    elif explicit_path:
        cursor = host.cursor_line() if host is not None else None
        resolved_line = DEFAULT_LINE if cursor is None else cursor
    else:
        resolved_line = require_cursor_line(host)

    return JumpRequest(file_path=path, line=resolved_line)


class Jumper:
    """Runs the jump operations against a launcher."""

    def __init__(self, launcher: Optional[Launcher] = None) -> None:
        self._launcher = launcher or Launcher()

    @property
    def launcher(self) -> Launcher:
        return self._launcher

    def _jump(self, ide: IDE, request: JumpRequest) -> JumpOutcome:
        exit_info = self._launcher.launch(ide, request.file_path, request.line)
        return JumpOutcome(ide=ide, request=request, exit_info=exit_info)

    def jump_to_xcode(
        self,
        host: Optional[HostState] = None,
        file_path: Optional[str] = None,
        line: Optional[str] = None,
    ) -> JumpOutcome:
        """Open the file in Xcode, whatever its type."""
        request = resolve_request(host, file_path, line)
        logger.debug("Jump to Xcode: %s:%d", request.file_path, request.line)
        return self._jump(IDE.XCODE, request)

    def jump_to_android_studio(
        self,
        host: Optional[HostState] = None,
        file_path: Optional[str] = None,
        line: Optional[str] = None,
    ) -> JumpOutcome:
        """Open the file in Android Studio, whatever its type."""
        request = resolve_request(host, file_path, line)
        logger.debug("Jump to Android Studio: %s:%d", request.file_path, request.line)
        return self._jump(IDE.ANDROID_STUDIO, request)

    def auto_jump(
        self,
        host: Optional[HostState] = None,
        file_path: Optional[str] = None,
        line: Optional[str] = None,
    ) -> JumpOutcome:
        """
        Open the file in the IDE matching its extension.

        Raises:
            UnsupportedExtensionError: If the extension is in neither table
        """
        request = resolve_request(host, file_path, line)
        platform = classify(request.file_path)
        logger.debug("Classified %s as %s", request.file_path, platform.value)

        if platform is Platform.IOS:
            return self._jump(IDE.XCODE, request)
        if platform is Platform.ANDROID:
            return self._jump(IDE.ANDROID_STUDIO, request)

        extension = extract_extension(request.file_path)
        shown = f".{extension}" if extension else "(no extension)"
        raise UnsupportedExtensionError(
            f"Unsupported file type: {shown}. Supported: {supported_extensions_message()}",
            extension=extension,
        )


_jumper: Optional[Jumper] = None


def get_jumper() -> Jumper:
    """Get the global jumper, wired to the configured binaries."""
    global _jumper
    if _jumper is None:
        from .config import get_config
        _jumper = Jumper(Launcher(config=get_config().launcher))
    return _jumper


def reset_jumper() -> None:
    """Drop the global jumper so the next call picks up new configuration."""
    global _jumper
    _jumper = None
