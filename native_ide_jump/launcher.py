"""
IDE launcher for native_ide_jump.
Builds the xed / studio command lines and runs them.
"""
import logging
from enum import Enum
from typing import List, Optional

from .config import LauncherConfig
from .constants import (
    ANDROID_STUDIO_BINARY,
    ANDROID_STUDIO_LINE_FLAG,
    XCODE_BINARY,
    XCODE_LINE_FLAG,
)
from .errors import ProcessFailedError, SpawnFailedError
from .io_handlers import ExitInfo, Runner, get_process_runner

logger = logging.getLogger(__name__)


class IDE(Enum):
    """Native IDEs that can be opened at a line."""
    XCODE = "xcode"
    ANDROID_STUDIO = "android-studio"

    @property
    def display_name(self) -> str:
        return "Xcode" if self is IDE.XCODE else "Android Studio"

    @property
    def default_binary(self) -> str:
        return XCODE_BINARY if self is IDE.XCODE else ANDROID_STUDIO_BINARY

    @property
    def line_flag(self) -> str:
        return XCODE_LINE_FLAG if self is IDE.XCODE else ANDROID_STUDIO_LINE_FLAG


class Launcher:
    """
    Opens a file at a line in a native IDE.

    Each launch spawns one process and waits for it; nothing is cached
    between launches.
    """

    def __init__(
        self,
        runner: Optional[Runner] = None,
        config: Optional[LauncherConfig] = None,
    ) -> None:
        """
        Initialize the launcher.

        Args:
            runner: Process runner (defaults to the global ProcessRunner)
            config: Binary overrides (defaults to xed and studio)
        """
        self._runner = runner or get_process_runner()
        self._config = config or LauncherConfig()

    def binary_for(self, ide: IDE) -> str:
        """Get the configured binary for an IDE."""
        if ide is IDE.XCODE:
            return self._config.xcode_binary
        return self._config.android_studio_binary

    def build_args(self, ide: IDE, file_path: str, line: int) -> List[str]:
        """Build the argument list passed to the IDE binary."""
        return [ide.line_flag, str(line), file_path]

    def build_command(self, ide: IDE, file_path: str, line: int) -> List[str]:
        """Build the full command line, binary first."""
        return [self.binary_for(ide), *self.build_args(ide, file_path, line)]

    def launch(self, ide: IDE, file_path: str, line: int) -> ExitInfo:
        """
        Run the IDE binary and wait for it to exit.

        Args:
            ide: Target IDE
            file_path: File to open
            line: Line to focus

        Returns:
            ExitInfo of the finished process

        Raises:
            SpawnFailedError: If the binary could not be started
            ProcessFailedError: If the binary exited with a non-zero status
        """
        binary = self.binary_for(ide)
        args = self.build_args(ide, file_path, line)
        logger.debug("Launching %s: %s %s", ide.display_name, binary, " ".join(args))

        try:
            exit_info = self._runner.run(binary, args)
        except OSError as e:
            logger.warning("Could not start %s: %s", binary, e)
            raise SpawnFailedError(f"Failed to execute {binary}: {e}", binary=binary) from e

        if not exit_info.success:
            logger.warning("%s exited with status %s", binary, exit_info.return_code)
            raise ProcessFailedError(
                f"{binary} failed: {exit_info.stderr}",
                binary=binary,
                return_code=exit_info.return_code,
                stderr=exit_info.stderr,
            )

        return exit_info
