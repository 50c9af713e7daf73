"""
Tests for terminal rendering of command results.
"""

import io

from rich.console import Console

from native_ide_jump.command_system import CommandResult
from native_ide_jump.rich_ui import RichRenderer


def make_renderer():
    out, err = io.StringIO(), io.StringIO()
    renderer = RichRenderer(
        console=Console(file=out, width=200),
        error_console=Console(file=err, width=200),
    )
    return renderer, out, err


def test_success_goes_to_stdout():
    renderer, out, err = make_renderer()

    renderer.render_result(CommandResult.success("Opened `a.swift` at line 3 in Xcode"))

    assert "a.swift" in out.getvalue()
    assert "line 3 in Xcode" in out.getvalue()
    assert err.getvalue() == ""


def test_error_goes_to_stderr():
    renderer, out, err = make_renderer()

    renderer.render_result(CommandResult.error("xed failed: [file not found]"))

    assert out.getvalue() == ""
    assert "Error" in err.getvalue()
    assert "xed failed: [file not found]" in err.getvalue()


def test_empty_success_prints_nothing():
    renderer, out, err = make_renderer()

    renderer.render_result(CommandResult.success(""))

    assert out.getvalue() == ""
    assert err.getvalue() == ""
