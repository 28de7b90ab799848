"""Custom exceptions for the melvis segment."""

from typing import Optional
from .domain import ValueSource


class MelvisError(Exception):
    """Base exception for melvis segment errors."""
    pass


class SourceUnavailableError(MelvisError):
    """Raised when a layer's file is missing, unreadable or unparseable."""

    def __init__(self, source: ValueSource, path: Optional[str], reason: str):
        msg = f"Source '{source.value}' unavailable at {path}: {reason}"
        super().__init__(msg)
        self.source = source
        self.path = path
        self.reason = reason


class WorkingDirectoryUnavailableError(MelvisError):
    """Raised when the current working directory cannot be determined."""
    pass
