from __future__ import annotations

import hashlib
from typing import List

from langchain_core.embeddings import Embeddings
from langchain_ollama import OllamaEmbeddings

from articleqa.config import Config


class HashEmbedding(Embeddings):
    """Deterministic, lightweight embedding used for tests or when no model is present.

    It turns SHA256 digests into small float vectors, so equal texts always
    map to equal vectors and no server is needed.
    """

    def __init__(self, dim: int = 32):
        if not 0 < dim <= 32:
            raise ValueError("dim must be between 1 and 32")
        self.dim = dim

    def _embed(self, text: str) -> List[float]:
        h = hashlib.sha256(text.encode("utf-8")).digest()
        return [((b % 127) - 63) / 63.0 for b in h[: self.dim]]

    def embed_documents(self, texts: List[str]) -> List[List[float]]:
        return [self._embed(t) for t in texts]

    def embed_query(self, text: str) -> List[float]:
        return self._embed(text)


def get_embedder(config: Config) -> Embeddings:
    """Create the embedding function selected by `config.embedding_backend`.

    Returns OllamaEmbeddings for the configured model and server by default,
    or HashEmbedding when the backend is "hash".
    """
    if config.embedding_backend == "hash":
        return HashEmbedding()
    if config.embedding_backend != "ollama":
        raise ValueError(f"unknown embedding backend {config.embedding_backend!r}")
    return OllamaEmbeddings(model=config.ollama_embed_model, base_url=config.ollama_base_url)
