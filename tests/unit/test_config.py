"""Unit tests for configuration."""

import os
from unittest.mock import patch

import pytest

from articleqa.config import DEFAULT_ARTICLE_URL, Config
from articleqa.errors import ConfigError


def test_config_defaults(monkeypatch):
    """Test default configuration values."""
    for name in ["ARTICLE_URL", "CONTENT_SELECTOR", "CHUNK_SIZE", "CHUNK_OVERLAP", "RETRIEVAL_K", "OLLAMA_MODEL", "EMBEDDING_BACKEND"]:
        monkeypatch.delenv(name, raising=False)

    config = Config()
    assert config.article_url == DEFAULT_ARTICLE_URL
    assert config.content_selector == "p"
    assert config.chunk_size == 1000
    assert config.chunk_overlap == 200
    assert config.chunk_strategy == "window"
    assert config.retrieval_k == 4
    assert config.embedding_backend == "ollama"
    assert config.temperature == 0.0


@patch.dict(
    os.environ,
    {
        "ARTICLE_URL": "https://example.com/post",
        "CONTENT_SELECTOR": "article p",
        "CHUNK_SIZE": "500",
        "CHUNK_OVERLAP": "50",
        "CHUNK_STRATEGY": "Recursive",
        "RETRIEVAL_K": "6",
        "OLLAMA_MODEL": "test-model",
        "OLLAMA_EMBED_MODEL": "test-embed",
        "OLLAMA_BASE_URL": "http://test:8080",
        "OLLAMA_TEMPERATURE": "0.3",
        "LOG_LEVEL": "debug",
    },
)
def test_config_env_vars():
    """Test configuration reads environment variables."""
    config = Config()

    assert config.article_url == "https://example.com/post"
    assert config.content_selector == "article p"
    assert config.chunk_size == 500
    assert config.chunk_overlap == 50
    assert config.chunk_strategy == "recursive"
    assert config.retrieval_k == 6
    assert config.ollama_model == "test-model"
    assert config.ollama_embed_model == "test-embed"
    assert config.ollama_base_url == "http://test:8080"
    assert config.temperature == 0.3
    assert config.log_level == "DEBUG"


def test_config_instances_are_independent(monkeypatch):
    """Each Config reflects the environment at construction time."""
    monkeypatch.setenv("RETRIEVAL_K", "2")
    first = Config()
    monkeypatch.setenv("RETRIEVAL_K", "8")
    second = Config()
    assert first is not second
    assert (first.retrieval_k, second.retrieval_k) == (2, 8)


@pytest.mark.parametrize("name,value", [("CHUNK_SIZE", "big"), ("RETRIEVAL_K", "4.5"), ("OLLAMA_TEMPERATURE", "warm")])
def test_config_rejects_bad_numbers(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigError, match=name):
        Config()


def test_config_blank_number_uses_default(monkeypatch):
    monkeypatch.setenv("CHUNK_SIZE", "  ")
    assert Config().chunk_size == 1000
