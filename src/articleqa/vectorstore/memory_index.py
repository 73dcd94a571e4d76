from __future__ import annotations

import logging
import math
import time
from typing import Iterable, List, Sequence, Tuple

from langchain_core.documents import Document
from langchain_core.embeddings import Embeddings

from articleqa.errors import EmbeddingError
from articleqa.utils import log_timing, log_with_prefix

logger = logging.getLogger(__name__)


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Cosine similarity of two equal-length vectors; 0.0 if either has zero norm."""
    dot = sum(x * y for x, y in zip(a, b))
    norm_a = math.sqrt(sum(x * x for x in a))
    norm_b = math.sqrt(sum(y * y for y in b))
    if norm_a == 0 or norm_b == 0:
        return 0.0
    return dot / (norm_a * norm_b)


class MemoryIndex:
    """In-process vector index over chunk Documents.

    All vectors come from the single `embedder` given at construction. The
    index lives for the lifetime of the process and is never persisted.

    Behavior:
    - `insert` is all-or-nothing: if embedding a batch fails, nothing from
      that batch is stored.
    - `search` ranks by cosine similarity, ties keep insertion order.
    """

    def __init__(self, embedder: Embeddings):
        self.embedder = embedder
        self._chunks: List[Document] = []
        self._vectors: List[List[float]] = []
        self._dim: int | None = None

    def __len__(self) -> int:
        return len(self._chunks)

    @property
    def chunks(self) -> List[Document]:
        """Stored chunks in insertion order."""
        return list(self._chunks)

    def _check_dim(self, vectors: List[List[float]], expected: int | None) -> int | None:
        for vec in vectors:
            if not vec:
                raise EmbeddingError("embedder returned an empty vector")
            if expected is None:
                expected = len(vec)
            if len(vec) != expected:
                raise EmbeddingError(f"embedding dimension mismatch: expected {expected}, got {len(vec)}")
        return expected

    def insert(self, chunks: Iterable[Document]) -> None:
        """Embed and store `chunks`, keeping their order."""
        batch = list(chunks)
        if not batch:
            return

        start = time.time()
        try:
            vectors = self.embedder.embed_documents([c.page_content for c in batch])
        except Exception as e:
            raise EmbeddingError(f"failed to embed {len(batch)} chunks: {e}") from e

        vectors = [list(v) for v in vectors]
        if len(vectors) != len(batch):
            raise EmbeddingError(f"embedder returned {len(vectors)} vectors for {len(batch)} chunks")
        dim = self._check_dim(vectors, self._dim)

        # Only touch state once the whole batch is known to be good.
        self._chunks.extend(batch)
        self._vectors.extend(vectors)
        self._dim = dim
        log_timing(logger, "index", start, f"Inserted {len(batch)} chunks (total {len(self._chunks)})")

    def search_with_scores(self, query: str, k: int = 4) -> List[Tuple[Document, float]]:
        """Return up to `k` (chunk, score) pairs ranked by descending similarity to `query`."""
        if isinstance(k, bool) or not isinstance(k, int) or k <= 0:
            raise ValueError("k must be a positive integer")
        if not self._chunks:
            log_with_prefix(logger, logging.DEBUG, "index", "Search on empty index")
            return []

        try:
            query_vec = list(self.embedder.embed_query(query))
        except Exception as e:
            raise EmbeddingError(f"failed to embed query: {e}") from e
        self._check_dim([query_vec], self._dim)

        scored = [(i, cosine_similarity(query_vec, vec)) for i, vec in enumerate(self._vectors)]
        # sorted() is stable, so equal scores stay in insertion order.
        ranked = sorted(scored, key=lambda item: item[1], reverse=True)[:k]
        return [(self._chunks[i], score) for i, score in ranked]

    def search(self, query: str, k: int = 4) -> List[Document]:
        """Return the `k` chunks most similar to `query`, or all chunks if fewer are stored."""
        return [doc for doc, _ in self.search_with_scores(query, k)]
