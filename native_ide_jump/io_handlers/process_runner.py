"""
External process runner for native_ide_jump.
Runs an IDE binary with an argument list and waits for it to exit.
"""
import os
import subprocess
from dataclasses import dataclass
from typing import List, Optional, Protocol, Sequence


@dataclass
class ExitInfo:
    """Result of an external process execution."""
    return_code: int
    stdout: str = ""
    stderr: str = ""

    @property
    def success(self) -> bool:
        """Check if the process exited cleanly."""
        return self.return_code == 0


class Runner(Protocol):
    """Anything that can run a binary and report how it exited."""

    def run(self, binary: str, args: Sequence[str]) -> ExitInfo:
        ...


class ProcessRunner:
    """
    Runs external binaries without a shell.

    The argument list is passed straight to the OS, so file paths with
    spaces or shell metacharacters need no quoting. Failure to start the
    process surfaces as the OSError raised by subprocess.
    """

    def __init__(self, cwd: Optional[str] = None, env: Optional[dict] = None) -> None:
        """
        Initialize the runner.

        Args:
            cwd: Working directory for child processes
            env: Additional environment variables
        """
        self._cwd = cwd
        self._env = {**os.environ, **(env or {})}

    def build_argv(self, binary: str, args: Sequence[str]) -> List[str]:
        return [binary, *args]

    def run(self, binary: str, args: Sequence[str]) -> ExitInfo:
        """
        Run a binary synchronously and wait for it to exit.

        Args:
            binary: Executable name or path
            args: Arguments passed to the executable

        Returns:
            ExitInfo with the exit status and captured output

        Raises:
            OSError: If the process could not be started
        """
        result = subprocess.run(
            self.build_argv(binary, args),
            capture_output=True,
            text=True,
            errors="replace",
            cwd=self._cwd,
            env=self._env,
        )
        return ExitInfo(
            return_code=result.returncode,
            stdout=result.stdout.strip() if result.stdout else "",
            stderr=result.stderr.strip() if result.stderr else "",
        )


_runner: Optional[ProcessRunner] = None


def get_process_runner() -> ProcessRunner:
    """Get the global process runner instance."""
    global _runner
    if _runner is None:
        _runner = ProcessRunner()
    return _runner
