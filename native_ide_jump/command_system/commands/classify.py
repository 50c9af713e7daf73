"""Classify command for native_ide_jump."""
from typing import Any, Optional

from ..base import SlashCommand, CommandResult
from ..parser import CommandParser
from ...classifier import Platform, classify, extract_extension, supported_extensions_message
from ...errors import NativeIDEError
from ...host import TaskEnvironment, require_file_path
from ...launcher import IDE

_TARGETS = {
    Platform.IOS: ("iOS", IDE.XCODE),
    Platform.ANDROID: ("Android", IDE.ANDROID_STUDIO),
}


class ClassifyCommand(SlashCommand):
    """Show which IDE a file would open in."""

    name = "classify"
    description = "Show which IDE auto-jump would use for a file"
    usage = "[file]"
    examples = ["/classify", "/classify app/build.gradle"]

    def __init__(self) -> None:
        super().__init__()
        self._parser = CommandParser()

    def validate_args(self, args: str) -> Optional[str]:
        return self._parser.check_args(
            self._parser.parse_args(args), 1, f"/{self.name} {self.usage}"
        )

    def run(self, args: str = "", **kwargs: Any) -> CommandResult:
        positional = self._parser.parse_args(args)
        file_path = positional[0] if positional else None
        if not file_path:
            host = kwargs.get("host")
            if host is None:
                host = TaskEnvironment()
            try:
                file_path = require_file_path(host)
            except NativeIDEError as e:
                return CommandResult.error(str(e))

        platform = classify(file_path)
        if platform is Platform.UNSUPPORTED:
            extension = extract_extension(file_path)
            shown = f".{extension}" if extension else "no extension"
            return CommandResult.success(
                f"`{file_path}` ({shown}) is not supported.\n\n"
                f"Supported: {supported_extensions_message()}",
                data=platform,
            )

        label, ide = _TARGETS[platform]
        return CommandResult.success(
            f"`{file_path}` is an {label} file and opens in {ide.display_name}",
            data=platform,
        )
