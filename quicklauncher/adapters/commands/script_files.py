"""
Temporary script files for multi-line commands.
"""

import os
import secrets
import time

from quicklauncher.exceptions import ScriptWriteError
from quicklauncher.utils.escaping import quote_shell

SCRIPT_PREFIX = "launcher-cmd-"


def unique_script_name(suffix: str) -> str:
    # nanosecond timestamp plus a random nonce: concurrent calls never share a name
    return f"{SCRIPT_PREFIX}{time.time_ns()}-{secrets.token_hex(4)}{suffix}"


def posix_script_body(workspace_dir: str, command_text: str) -> str:
    return f"#!/bin/bash\ncd {quote_shell(workspace_dir)}\n{command_text}"


def write_script(
    workspace_dir: str, content: str, suffix: str, executable: bool = False
) -> str:
    """
    Write a generated script into the workspace and return its absolute path.

    Args:
        workspace_dir: Existing workspace directory
        content: Full script text, written as-is
        suffix: File extension including the dot (".sh", ".bat")
        executable: Whether to mark the file 0755

    Raises:
        ScriptWriteError: If the file cannot be created or written
    """
    path = os.path.join(workspace_dir, unique_script_name(suffix))
    try:
        # "x" refuses to overwrite, so a collision fails loudly instead of clobbering
        with open(path, "x", encoding="utf-8", newline="") as f:
            f.write(content)
        if executable:
            os.chmod(path, 0o755)
    except OSError as e:
        raise ScriptWriteError(f"Cannot write script file {path}: {e}") from e
    return path
