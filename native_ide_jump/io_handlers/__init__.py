"""I/O handlers for native_ide_jump."""
from .process_runner import ExitInfo, ProcessRunner, Runner, get_process_runner

__all__ = ['ExitInfo', 'ProcessRunner', 'Runner', 'get_process_runner']
