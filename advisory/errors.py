"""Error taxonomy surfaced by the advisory pipeline."""
from __future__ import annotations


class AdvisoryError(Exception):
    """Base class for pipeline errors returned to callers."""


class InvalidInput(AdvisoryError, ValueError):
    """Raised for a blank district or an unsupported language selector."""


class DataNotFound(AdvisoryError):
    """No weather data is known for the requested district."""

    retryable = False

    def __init__(self, district: str) -> None:
        super().__init__(f"No weather data available for district {district!r}")
        self.district = district


class SourceUnavailable(AdvisoryError):
    """Every weather provider failed or timed out."""

    retryable = True

    def __init__(self, district: str, reason: str = "weather source unavailable") -> None:
        super().__init__(f"{reason} for district {district!r}")
        self.district = district
        self.reason = reason


__all__ = ["AdvisoryError", "DataNotFound", "InvalidInput", "SourceUnavailable"]
