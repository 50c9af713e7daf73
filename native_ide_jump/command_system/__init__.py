"""Command system for native_ide_jump."""
from .base import SlashCommand, CommandResult, CommandStatus
from .parser import CommandParser, ParsedInput, strip_namespace
from .registry import CommandRegistry, get_command_registry

__all__ = [
    'SlashCommand', 'CommandResult', 'CommandStatus',
    'CommandParser', 'ParsedInput', 'strip_namespace',
    'CommandRegistry', 'get_command_registry'
]
