"""Exception types raised by articleqa."""

from typing import Optional


class RAGError(Exception):
    """Base class for every error articleqa raises on purpose."""


class ConfigError(RAGError):
    """An environment setting could not be parsed."""


class FetchError(RAGError):
    """The article could not be downloaded."""

    def __init__(self, url: str, message: str, status: Optional[int] = None) -> None:
        self.url = url
        self.status = status
        detail = f"HTTP {status}: {message}" if status is not None else message
        super().__init__(f"failed to fetch {url} ({detail})")


class ParseError(RAGError):
    """The downloaded page could not be turned into text."""


class EmbeddingError(RAGError):
    """The embedding model failed or returned unusable vectors."""


class ModelError(RAGError):
    """The chat model call failed."""
