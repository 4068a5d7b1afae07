import logging
from typing import Optional

from quicklauncher.entities.Target import Target, TargetKind
from quicklauncher.utils.classifier import classify


class ClassifyTargetUseCase:
    """Classify raw input, e.g. to pre-fill the type selector of an item form."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, raw: object) -> TargetKind:
        kind = classify(raw)
        self._logger.debug(f"Classified {raw!r} as {kind.value}")
        return kind

    def to_target(self, raw: object, display_name: Optional[str] = None) -> Target:
        """Classify and wrap into a Target. Non-string input becomes an UNKNOWN target."""
        kind = self.execute(raw)
        text = raw if isinstance(raw, str) else ""
        return Target(raw=text, kind=kind, display_name=display_name)
