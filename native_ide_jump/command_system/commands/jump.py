"""Jump commands for native_ide_jump."""
from abc import abstractmethod
from typing import Any, Optional

from ..base import SlashCommand, CommandResult
from ..parser import CommandParser
from ...dispatcher import JumpOutcome, Jumper, get_jumper
from ...errors import NativeIDEError
from ...host import HostState, TaskEnvironment


class JumpCommand(SlashCommand):
    """
    Shared argument handling for the jump commands.

    Accepts an optional file path and line. Missing values come from the
    host passed as ``host=`` (the editor task environment by default).
    """

    usage = "[file] [line]"

    def __init__(self) -> None:
        super().__init__()
        self._parser = CommandParser()

    def validate_args(self, args: str) -> Optional[str]:
        return self._parser.check_args(
            self._parser.parse_args(args), 2, f"/{self.name} {self.usage}"
        )

    @abstractmethod
    def jump(
        self,
        jumper: Jumper,
        host: HostState,
        file_path: Optional[str],
        line: Optional[str],
    ) -> JumpOutcome:
        """Run the dispatcher operation behind this command."""
        pass

    def run(self, args: str = "", **kwargs: Any) -> CommandResult:
        positional = self._parser.parse_args(args)
        file_path = positional[0] if positional else None
        line = positional[1] if len(positional) > 1 else None

        host = kwargs.get("host")
        if host is None:
            host = TaskEnvironment()
        jumper = kwargs.get("jumper")
        if jumper is None:
            jumper = get_jumper()

        try:
            outcome = self.jump(jumper, host, file_path, line)
        except NativeIDEError as e:
            return CommandResult.error(str(e))

        return CommandResult.success(outcome.message, data=outcome)


class JumpToXcodeCommand(JumpCommand):
    """Open the current file in Xcode."""

    name = "jump-to-xcode"
    description = "Open the current file in Xcode at the cursor line"
    aliases = ["xcode"]
    examples = ["/jump-to-xcode", "/jump-to-xcode App/ViewController.swift 42"]

    def jump(self, jumper, host, file_path, line):
        return jumper.jump_to_xcode(host, file_path, line)


class JumpToAndroidStudioCommand(JumpCommand):
    """Open the current file in Android Studio."""

    name = "jump-to-android-studio"
    description = "Open the current file in Android Studio at the cursor line"
    aliases = ["studio"]
    examples = ["/jump-to-android-studio", "/jump-to-android-studio app/src/Main.kt 10"]

    def jump(self, jumper, host, file_path, line):
        return jumper.jump_to_android_studio(host, file_path, line)


class AutoJumpCommand(JumpCommand):
    """Open the current file in the IDE matching its type."""

    name = "auto-jump"
    description = "Open the current file in Xcode or Android Studio based on its extension"
    aliases = ["jump"]
    examples = ["/auto-jump", "/auto-jump app/src/Main.kt 10", '/jump "My App/View.swift" 3']

    def jump(self, jumper, host, file_path, line):
        return jumper.auto_jump(host, file_path, line)
