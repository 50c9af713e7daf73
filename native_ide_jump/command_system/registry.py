"""
Command registry for native_ide_jump.
Handles command registration, discovery, and lookup.
"""
import importlib
import logging
import pkgutil
from pathlib import Path
from typing import Dict, List, Optional

from .base import SlashCommand, CommandResult
from .parser import strip_namespace

logger = logging.getLogger(__name__)


class CommandRegistry:
    """
    Registry for slash commands.

    Supports auto-discovery of commands from the commands package
    and dynamic registration of custom commands. Names are looked up
    with or without the host command namespace.
    """

    def __init__(self, discover: bool = True) -> None:
        self._commands: Dict[str, SlashCommand] = {}
        self._aliases: Dict[str, str] = {}
        if discover:
            self._discover_commands()

    def _discover_commands(self) -> None:
        """Auto-discover and register commands from the commands package."""
        from . import commands as commands_package

        package_path = Path(commands_package.__file__).parent

        for module_info in pkgutil.iter_modules([str(package_path)]):
            if module_info.name.startswith('_'):
                continue

            module = importlib.import_module(
                f".commands.{module_info.name}",
                package=__package__
            )

            for attr_name in dir(module):
                attr = getattr(module, attr_name)
                if (
                    isinstance(attr, type) and
                    issubclass(attr, SlashCommand) and
                    not getattr(attr, '__abstractmethods__', None) and
                    attr.__module__ == module.__name__ and
                    not attr_name.startswith('_')
                ):
                    self.register(attr())

        logger.debug("Discovered %d commands", len(self._commands))

    def register(self, command: SlashCommand) -> None:
        """
        Register a command.

        Args:
            command: Command instance to register
        """
        self._commands[command.name] = command

        for alias in command.aliases:
            self._aliases[alias] = command.name

    def unregister(self, name: str) -> bool:
        """
        Unregister a command.

        Args:
            name: Command name

        Returns:
            True if command was unregistered
        """
        if name in self._commands:
            command = self._commands[name]
            for alias in command.aliases:
                if alias in self._aliases:
                    del self._aliases[alias]
            del self._commands[name]
            return True
        return False

    def get(self, name: str) -> Optional[SlashCommand]:
        """
        Get a command by name or alias.

        Args:
            name: Command name or alias, optionally namespaced

        Returns:
            Command instance or None
        """
        name = strip_namespace(name.lstrip("/")).lower()

        if name in self._commands:
            return self._commands[name]

        if name in self._aliases:
            return self._commands[self._aliases[name]]

        return None

    def execute(self, name: str, args: str = "", **kwargs) -> CommandResult:
        """
        Execute a command by name.

        Args:
            name: Command name
            args: Command arguments
            **kwargs: Additional context

        Returns:
            CommandResult from execution
        """
        command = self.get(name)

        if command is None:
            return CommandResult.error(f"Unknown command: {name}")

        validation_error = command.validate_args(args)
        if validation_error:
            return CommandResult.error(validation_error)

        try:
            return command.run(args, **kwargs)
        except Exception as e:
            logger.exception("Command /%s raised", command.name)
            return CommandResult.error(f"Command error: {e}")

    def list_commands(self, include_hidden: bool = False) -> List[dict]:
        """
        List all registered commands.

        Args:
            include_hidden: Whether to include hidden commands

        Returns:
            List of command info dicts
        """
        commands = []
        for name, command in sorted(self._commands.items()):
            if command.hidden and not include_hidden:
                continue
            commands.append({
                "name": name,
                "description": command.description,
                "aliases": command.aliases,
                "usage": command.usage,
            })
        return commands

    def get_help(self, name: str) -> Optional[str]:
        """
        Get help text for a command.

        Args:
            name: Command name

        Returns:
            Help text or None
        """
        command = self.get(name)
        if command:
            return command.get_help()
        return None

    def has_command(self, name: str) -> bool:
        """Check if a command exists."""
        return self.get(name) is not None


_registry: Optional[CommandRegistry] = None


def get_command_registry() -> CommandRegistry:
    """Get the global command registry instance."""
    global _registry
    if _registry is None:
        _registry = CommandRegistry()
    return _registry
