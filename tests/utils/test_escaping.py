"""
Tests for the quoting helpers.
"""

import re
import shlex
import shutil
import subprocess

import pytest

from quicklauncher.utils.escaping import (
    escape_applescript_string,
    quote_cmd_path,
    quote_shell,
)

TRICKY = [
    "plain",
    "with space",
    'say "hi"',
    "it's",
    "both \"double\" and 'single'",
    "back\\slash",
    "$HOME `whoami` $(id)",
    "semi; rm -rf nothing && echo !bang",
    "trailing\\",
    "",
]


def unescape_applescript(literal: str) -> str:
    """Decode an AppleScript string literal body."""
    return re.sub(r"\\(.)", r"\1", literal)


class TestQuoteShell:
    @pytest.mark.parametrize("value", TRICKY)
    def test_shlex_round_trip(self, value):
        assert shlex.split(quote_shell(value)) == [value]

    @pytest.mark.skipif(shutil.which("sh") is None, reason="requires a POSIX shell")
    @pytest.mark.parametrize("value", TRICKY)
    def test_shell_round_trip(self, value):
        """The quoted form, re-parsed by a real shell, yields the original bytes."""
        out = subprocess.run(
            ["sh", "-c", f"printf %s {quote_shell(value)}"],
            capture_output=True,
            text=True,
            check=True,
        )
        assert out.stdout == value

    def test_single_quote_form(self):
        assert quote_shell("it's") == "'it'\\''s'"


class TestAppleScriptEscaping:
    def test_escapes_backslash_and_double_quote(self):
        assert escape_applescript_string('a\\b"c') == 'a\\\\b\\"c'

    @pytest.mark.parametrize("value", TRICKY)
    def test_two_layers_round_trip(self, value):
        """Outer literal decodes to the shell word, which decodes to the value."""
        layered = escape_applescript_string(quote_shell(value))
        assert shlex.split(unescape_applescript(layered)) == [value]


class TestQuoteCmdPath:
    def test_quotes_path_with_spaces(self):
        assert quote_cmd_path(r"C:\Users\A B\Temp") == '"C:\\Users\\A B\\Temp"'

    def test_drops_stray_quotes(self):
        assert quote_cmd_path('C:\\a"b') == '"C:\\ab"'
