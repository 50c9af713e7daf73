"""
Property-based tests for file classification.

Tests the extension tables and the classify() lookup using hypothesis.
"""

import allure
import pytest
from hypothesis import given, settings, strategies as st, assume

from native_ide_jump.classifier import (
    Platform,
    classify,
    extract_extension,
    format_extensions,
    supported_extensions_message,
)
from native_ide_jump.constants import ANDROID_EXTENSIONS, IOS_EXTENSIONS


KNOWN_EXTENSIONS = set(IOS_EXTENSIONS) | set(ANDROID_EXTENSIONS)


@st.composite
def random_case_strategy(draw, word):
    """Flip the case of each character of a word at random."""
    flags = draw(st.lists(st.booleans(), min_size=len(word), max_size=len(word)))
    return "".join(c.upper() if flag else c for c, flag in zip(word, flags))


@st.composite
def stem_strategy(draw):
    """Generate a relative path stem without dots."""
    parts = draw(st.lists(
        st.text(alphabet=st.sampled_from("abcdefghijklmnopqrstuvwxyz_-0123456789 "), min_size=1, max_size=12),
        min_size=1,
        max_size=4,
    ))
    return "/".join(parts)


@allure.feature("Classifier")
@allure.story("iOS extensions map to iOS")
@allure.severity(allure.severity_level.CRITICAL)
@settings(max_examples=100)
@given(data=st.data(), stem=stem_strategy())
def test_ios_extensions_classify_as_ios(data, stem):
    """Every iOS extension, in any letter case, classifies as IOS."""
    extension = data.draw(st.sampled_from(IOS_EXTENSIONS))
    cased = data.draw(random_case_strategy(extension))

    assert classify(f"{stem}.{cased}") is Platform.IOS, (
        f"Expected IOS for '{stem}.{cased}'"
    )


@allure.feature("Classifier")
@allure.story("Android extensions map to Android")
@allure.severity(allure.severity_level.CRITICAL)
@settings(max_examples=100)
@given(data=st.data(), stem=stem_strategy())
def test_android_extensions_classify_as_android(data, stem):
    """Every Android extension, in any letter case, classifies as ANDROID."""
    extension = data.draw(st.sampled_from(ANDROID_EXTENSIONS))
    cased = data.draw(random_case_strategy(extension))

    assert classify(f"{stem}.{cased}") is Platform.ANDROID, (
        f"Expected ANDROID for '{stem}.{cased}'"
    )


@allure.feature("Classifier")
@allure.story("Unknown extensions are unsupported")
@allure.severity(allure.severity_level.CRITICAL)
@settings(max_examples=100)
@given(
    stem=stem_strategy(),
    extension=st.text(alphabet=st.sampled_from("abcdefghijklmnopqrstuvwxyz0123456789"), min_size=1, max_size=8),
)
def test_unknown_extensions_classify_as_unsupported(stem, extension):
    """Any extension outside both tables classifies as UNSUPPORTED."""
    assume(extension.lower() not in KNOWN_EXTENSIONS)

    assert classify(f"{stem}.{extension}") is Platform.UNSUPPORTED


@allure.feature("Classifier")
@allure.story("Paths without extension are unsupported")
@allure.severity(allure.severity_level.NORMAL)
@settings(max_examples=50)
@given(stem=stem_strategy())
def test_paths_without_extension_are_unsupported(stem):
    """A path with no dot in its file name classifies as UNSUPPORTED."""
    assert classify(stem) is Platform.UNSUPPORTED
    assert extract_extension(stem) == ""


@allure.feature("Classifier")
@allure.story("Tables are disjoint")
@allure.severity(allure.severity_level.NORMAL)
def test_extension_tables_are_disjoint_and_lowercase():
    """No extension is in both tables, and entries carry no leading dot."""
    assert not set(IOS_EXTENSIONS) & set(ANDROID_EXTENSIONS)
    for extension in KNOWN_EXTENSIONS:
        assert extension == extension.lower()
        assert not extension.startswith(".")


@pytest.mark.parametrize("path, expected", [
    ("App/ViewController.swift", "swift"),
    ("project.pbxproj", "pbxproj"),
    ("app/src/Main.KT", "kt"),
    ("archive.tar.gz", "gz"),
    ("my.project/Makefile", ""),
    ("Podfile", ""),
    ("trailing.", ""),
    (".gitignore", "gitignore"),
    ("C:\\Users\\dev\\App\\AppDelegate.m", "m"),
])
def test_extract_extension(path, expected):
    assert extract_extension(path) == expected


@pytest.mark.parametrize("path, expected", [
    ("App/ViewController.swift", Platform.IOS),
    ("Sources/Bridge.h", Platform.IOS),
    ("App.xcodeproj/project.pbxproj", Platform.IOS),
    ("App/App.entitlements", Platform.IOS),
    ("app/src/Main.kt", Platform.ANDROID),
    ("app/build.gradle", Platform.ANDROID),
    ("app/src/main/AndroidManifest.xml", Platform.ANDROID),
    ("proguard-rules.pro", Platform.ANDROID),
    ("README.txt", Platform.UNSUPPORTED),
    ("my.ios.app/README", Platform.UNSUPPORTED),
    ("trailing.", Platform.UNSUPPORTED),
    ("", Platform.UNSUPPORTED),
])
def test_classify_examples(path, expected):
    assert classify(path) is expected


@allure.feature("Classifier")
@allure.story("Supported extension message")
@allure.severity(allure.severity_level.NORMAL)
def test_supported_extensions_message_lists_every_entry():
    """The guidance message names every entry of both tables, dotted."""
    message = supported_extensions_message()

    for extension in KNOWN_EXTENSIONS:
        assert f".{extension}" in message, f"Missing .{extension} in message"
    assert message.startswith(format_extensions(IOS_EXTENSIONS))
    assert "(iOS)" in message
    assert message.endswith("(Android)")
