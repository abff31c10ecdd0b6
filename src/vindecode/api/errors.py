"""Exception hierarchy for vindecode."""

from __future__ import annotations


class VinDecodeError(Exception):
    """Base class for all vindecode errors."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class GatewayError(VinDecodeError):
    """The extended info service could not be reached or answered badly."""


class ConfigError(VinDecodeError):
    """Settings are missing or invalid."""
