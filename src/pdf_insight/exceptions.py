"""Exception types raised by pdf-insight."""

from __future__ import annotations


class InsightError(Exception):
    """Base exception for pdf-insight."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigError(InsightError):
    """Configuration file or value is invalid."""
