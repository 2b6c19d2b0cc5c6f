"""Exceptions raised while scraping or analyzing vlr.gg data.

Every error is fatal for the operation that raised it. ``kind`` tells the
failure classes apart without isinstance checks.
"""

from typing import Any, Optional


class VctdError(Exception):
    """Base exception for vctd errors.

    Args:
        message: Error message
        url: Page that caused the error (optional)
        status_code: HTTP status code if applicable (optional)
        context: Extra details such as the game id or file path (optional)
    """

    kind = "error"

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.url = url
        self.status_code = status_code
        self.context = {k: v for k, v in (context or {}).items() if v is not None}

    def __str__(self) -> str:
        parts = [self.message]
        if self.url:
            parts.append(f"URL: {self.url}")
        if self.status_code is not None:
            parts.append(f"Status: {self.status_code}")
        if self.context:
            parts.append("Context: " + ", ".join(f"{k}={v}" for k, v in self.context.items()))
        return " | ".join(parts)


class NetworkError(VctdError):
    """Raised when a page cannot be fetched."""

    kind = "network"


class ScrapingError(VctdError):
    """Raised when a page does not have the expected structure."""

    kind = "scraping"


class ScoreParseError(ScrapingError):
    """Raised when a score element does not hold an unsigned integer."""

    kind = "score"


class DatasetError(VctdError):
    """Raised when a dataset cannot be read or written."""

    kind = "dataset"


class InvalidEventUrlError(VctdError):
    """Raised when an event URL does not point at vlr.gg."""

    kind = "input"
