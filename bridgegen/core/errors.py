"""
Error taxonomy for bridging header generation.

Every failure the core can produce is a ``BridgegenError`` subclass, so
entrypoints can catch one type, report the message and exit non-zero.
The core itself never prints or exits.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bridgegen.core.engine.batch import BatchReport


class BridgegenError(Exception):
    """Base class for every error raised by the generator."""

    def __init__(self, message: str, *, target: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        if self.target:
            return f"{self.target}: {self.message}"
        return self.message


class ConfigurationError(BridgegenError):
    """Configuration is missing, malformed, or insufficient to run."""


class PathResolutionError(BridgegenError):
    """A configured path cannot be canonicalized (it does not exist)."""


class NotADirectoryPathError(BridgegenError):
    """A resolved path exists but is not a directory."""


class InvalidPatternError(BridgegenError):
    """An ignore pattern does not compile as a regular expression."""


class EnumerationError(BridgegenError):
    """A directory walk cannot proceed (permissions, I/O failure)."""


class EncodingError(BridgegenError):
    """Generated content cannot be encoded as UTF-8."""


class WriteError(BridgegenError):
    """An output file cannot be written."""


class WritePhaseError(BridgegenError):
    """One or more output files failed to write.

    Files written for other targets before or after the failure stay on
    disk; ``report`` lists the outcome of every target.
    """

    def __init__(self, message: str, report: BatchReport) -> None:
        super().__init__(message)
        self.report = report

    @property
    def errors(self) -> list[WriteError]:
        return [o.error for o in self.report.outcomes if o.error is not None]
