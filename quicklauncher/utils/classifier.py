"""
Target classification: decide whether a raw string is a file, a folder, a URL or a
shell command.
"""

import os
import re
import stat

from quicklauncher.entities.Target import TargetKind

# scheme:// prefix, covers custom deep-link schemes (myapp://, vscode://, ...)
PROTOCOL_RE = re.compile(r"[a-z][a-z0-9+.-]*://", re.IGNORECASE)

# bare domain with optional port and path; anchored, never matches whitespace
BARE_DOMAIN_RE = re.compile(
    r"(?P<host>[a-z0-9]+(?:[-.][a-z0-9]+)*\.[a-z]{2,})(?::[0-9]{1,5})?(?:/\S*)?",
    re.IGNORECASE,
)


def _filesystem_kind(raw: str) -> TargetKind | None:
    try:
        mode = os.stat(raw).st_mode
    except (OSError, ValueError):
        return None
    if stat.S_ISDIR(mode):
        return TargetKind.FOLDER
    if stat.S_ISREG(mode):
        return TargetKind.FILE
    # sockets, devices, fifos
    return TargetKind.UNKNOWN


def is_url_shaped(raw: str) -> bool:
    return bool(PROTOCOL_RE.match(raw) or BARE_DOMAIN_RE.fullmatch(raw))


def classify(raw: object) -> TargetKind:
    """Classify a raw target string.

    The filesystem is consulted first, so an existing file named ``example.com`` is a
    FILE. Nothing is cached: the same string may classify differently later.

    Never raises; empty or non-string input is UNKNOWN.
    """
    if not isinstance(raw, str) or not raw:
        return TargetKind.UNKNOWN

    kind = _filesystem_kind(raw)
    if kind is not None:
        return kind

    if is_url_shaped(raw):
        return TargetKind.URL

    return TargetKind.COMMAND
