"""
Exception types for native_ide_jump.

Every failure of a jump is terminal for that invocation. Commands turn these
into error results; nothing is retried.
"""
from typing import Optional


class NativeIDEError(Exception):
    """Base exception for all native_ide_jump errors."""
    pass


class HostStateError(NativeIDEError):
    """Raised when the editor has no usable workspace, buffer, file or cursor."""
    pass


class ClassificationError(NativeIDEError):
    """Raised when a file cannot be mapped to a target IDE."""
    pass


class UnsupportedExtensionError(ClassificationError):
    """Raised when a file extension is in neither extension table."""

    def __init__(self, message: str, extension: str = "") -> None:
        self.extension = extension
        super().__init__(message)


class LaunchError(NativeIDEError):
    """Base exception for failures while running an IDE binary."""

    def __init__(self, message: str, binary: str = "") -> None:
        self.binary = binary
        super().__init__(message)


class SpawnFailedError(LaunchError):
    """Raised when the IDE binary could not be started at all."""
    pass


class ProcessFailedError(LaunchError):
    """Raised when the IDE binary ran but exited with a non-zero status."""

    def __init__(
        self,
        message: str,
        binary: str = "",
        return_code: Optional[int] = None,
        stderr: str = "",
    ) -> None:
        self.return_code = return_code
        self.stderr = stderr
        super().__init__(message, binary=binary)


class ConfigError(NativeIDEError):
    """Raised when configuration parsing or validation fails."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        self.path = path
        if path:
            message = f"{message} ({path})"
        super().__init__(message)
