"""
Linux terminal emulator launch templates.
"""

from dataclasses import dataclass

from quicklauncher.exceptions import ConfigurationError

SHELL_PLACEHOLDER = "{shell}"


@dataclass(frozen=True)
class TerminalCandidate:
    """One terminal emulator and the argv template used to run a shell line in it.

    Each template token is substituted on its own, so the shell line is never
    re-split or re-quoted after substitution.
    """

    name: str
    template: tuple[str, ...]

    @property
    def executable(self) -> str:
        return self.template[0]

    @property
    def command_template(self) -> str:
        return " ".join(self.template)

    def render(self, shell_line: str) -> list[str]:
        return [token.replace(SHELL_PLACEHOLDER, shell_line) for token in self.template]


# Priority order matters: the first one that starts wins.
KNOWN_TERMINALS: dict[str, TerminalCandidate] = {
    "gnome-terminal": TerminalCandidate(
        "gnome-terminal", ("gnome-terminal", "--", "bash", "-c", "{shell}; exec bash")
    ),
    "konsole": TerminalCandidate(
        "konsole", ("konsole", "--noclose", "-e", "bash", "-c", "{shell}")
    ),
    "xterm": TerminalCandidate("xterm", ("xterm", "-hold", "-e", "bash", "-c", "{shell}")),
    "x-terminal-emulator": TerminalCandidate(
        "x-terminal-emulator", ("x-terminal-emulator", "-e", "bash", "-c", "{shell}; exec bash")
    ),
}


def resolve_terminal_candidates(names: list[str]) -> list[TerminalCandidate]:
    """Build the ordered candidate list from configured terminal names.

    Raises:
        ConfigurationError: If a name is not a known terminal or the list is empty
    """
    candidates: list[TerminalCandidate] = []
    for name in names:
        key = name.strip().lower()
        if key not in KNOWN_TERMINALS:
            known = ", ".join(KNOWN_TERMINALS)
            raise ConfigurationError(f"Unknown terminal '{name}' (known: {known})")
        candidate = KNOWN_TERMINALS[key]
        if candidate not in candidates:
            candidates.append(candidate)
    if not candidates:
        raise ConfigurationError("At least one terminal candidate is required")
    return candidates
