"""Exception types for tix.

Malformed todo text never raises: anything that is not a header or a
context item is inert text.  The exceptions here cover the two
informational archive signals and configuration problems.
"""
from __future__ import annotations


class TixError(Exception):
    """Base class for all tix exceptions."""


class ArchiveNotice(TixError):
    """An informational signal from the archive extractor.

    These are not faults; callers surface ``str(notice)`` to the user
    and leave the document untouched.
    """


class NoDoneSection(ArchiveNotice):
    """Raised when a document has no ``Done:`` section to archive from."""

    def __init__(self) -> None:
        super().__init__("No Done section found")


class NothingToArchive(ArchiveNotice):
    """Raised when the ``Done:`` section holds only blank lines."""

    def __init__(self) -> None:
        super().__init__("No items to archive")


class ConfigError(TixError):
    """Raised when a configuration file cannot be loaded or is invalid.

    Parameters
    ----------
    message:
        Human-readable description of the problem.
    path:
        The configuration file involved, if any.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        prefix = f"{path}: " if path else ""
        super().__init__(f"{prefix}{message}")
        self.config_message = message
        self.path = path
