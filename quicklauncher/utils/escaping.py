"""Quoting helpers for embedding user text in command lines.

Two nested contexts are involved on macOS: an AppleScript string literal that carries a
shell line for Terminal. Values are first quoted for the shell (``quote_shell``), then the
whole line is escaped for the literal (``escape_applescript_string``). Linux passes argv
lists directly, so only the shell layer applies there.
"""


def quote_shell(value: str) -> str:
    """Quote a value as one POSIX shell word.

    The value is wrapped in single quotes, so nothing inside is expanded. Embedded
    single quotes become ``'\\''`` (close, escaped quote, reopen).
    """
    return "'" + value.replace("'", "'\\''") + "'"


def escape_applescript_string(value: str) -> str:
    """Escape a value for use inside an AppleScript double-quoted literal."""
    return value.replace("\\", "\\\\").replace('"', '\\"')


def quote_cmd_path(path: str) -> str:
    """Quote a path for cmd.exe.

    Windows paths cannot contain double quotes, so any stray one is dropped rather
    than escaped; cmd.exe has no escape for a quote inside a quoted string.
    """
    return '"' + path.replace('"', "") + '"'
