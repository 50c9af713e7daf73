"""Shared fixtures: a process runner that records calls instead of spawning IDEs."""
from typing import List, Optional, Sequence, Tuple

import pytest

from native_ide_jump.dispatcher import Jumper
from native_ide_jump.io_handlers import ExitInfo
from native_ide_jump.launcher import Launcher


class FakeRunner:
    """Records every (binary, args) pair and replies with a canned result."""

    def __init__(
        self,
        exit_info: Optional[ExitInfo] = None,
        error: Optional[OSError] = None,
    ) -> None:
        self.exit_info = exit_info or ExitInfo(return_code=0)
        self.error = error
        self.calls: List[Tuple[str, List[str]]] = []

    def run(self, binary: str, args: Sequence[str]) -> ExitInfo:
        self.calls.append((binary, list(args)))
        if self.error is not None:
            raise self.error
        return self.exit_info

    @property
    def command_lines(self) -> List[List[str]]:
        return [[binary, *args] for binary, args in self.calls]


@pytest.fixture
def runner_factory():
    """Build FakeRunner instances with a specific exit status or spawn error."""
    return FakeRunner


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def jumper(fake_runner: FakeRunner) -> Jumper:
    return Jumper(Launcher(runner=fake_runner))
