"""Help command for native_ide_jump."""
from typing import Any

from ..base import SlashCommand, CommandResult
from ...classifier import supported_extensions_message
from ...constants import COMMAND_NAMESPACE, NAMESPACE_SEPARATOR


class HelpCommand(SlashCommand):
    """Display help information."""

    name = "help"
    description = "Show available commands"
    aliases = ["h", "?"]
    usage = "[command]"
    examples = ["/help", "/help auto-jump"]

    def run(self, args: str = "", **kwargs: Any) -> CommandResult:
        """Execute help command."""
        registry = kwargs.get("registry")
        if registry is None:
            from ..registry import get_command_registry
            registry = get_command_registry()

        if args.strip():
            command_name = args.strip().lstrip("/")
            help_text = registry.get_help(command_name)

            if help_text:
                return CommandResult.success(help_text)
            else:
                return CommandResult.error(f"Unknown command: {command_name}")

        commands = registry.list_commands()

        lines = ["**Available Commands:**", ""]
        for cmd in commands:
            lines.append(f"- `/{cmd['name']}` - {cmd['description']}")

        lines.extend([
            "",
            f"Commands can also be called as `{COMMAND_NAMESPACE}{NAMESPACE_SEPARATOR}<name>`.",
            "",
            f"Supported extensions: {supported_extensions_message()}",
        ])

        return CommandResult.success("\n".join(lines))
