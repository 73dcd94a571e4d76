"""Centralized configuration management for articleqa."""

import os

from articleqa.errors import ConfigError

DEFAULT_ARTICLE_URL = "https://lilianweng.github.io/posts/2023-06-23-agent/"


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from e


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from e


class Config:
    """Settings read from environment variables at construction time.

    The process entry point builds one instance and passes it along;
    nothing in the package reads the environment on its own.
    """

    def __init__(self) -> None:
        # Source article
        self.article_url: str = os.environ.get("ARTICLE_URL", DEFAULT_ARTICLE_URL)
        self.content_selector: str = os.environ.get("CONTENT_SELECTOR", "p")
        self.fetch_timeout: float = _env_float("FETCH_TIMEOUT", 30.0)

        # Chunking and retrieval
        self.chunk_size: int = _env_int("CHUNK_SIZE", 1000)
        self.chunk_overlap: int = _env_int("CHUNK_OVERLAP", 200)
        self.chunk_strategy: str = os.environ.get("CHUNK_STRATEGY", "window").lower()
        self.retrieval_k: int = _env_int("RETRIEVAL_K", 4)

        # Ollama configuration
        self.ollama_base_url: str = os.environ.get("OLLAMA_BASE_URL", "http://localhost:11434")
        self.ollama_embed_model: str = os.environ.get("OLLAMA_EMBED_MODEL", "bge-m3")
        self.ollama_model: str = os.environ.get("OLLAMA_MODEL", "qwen3")
        self.temperature: float = _env_float("OLLAMA_TEMPERATURE", 0.0)
        self.embedding_backend: str = os.environ.get("EMBEDDING_BACKEND", "ollama").lower()

        self.log_level: str = os.environ.get("LOG_LEVEL", "WARNING").upper()
