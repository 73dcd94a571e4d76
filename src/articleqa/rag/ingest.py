from __future__ import annotations

import logging
from typing import List

from langchain_core.documents import Document
from langchain_core.embeddings import Embeddings

from articleqa.config import Config
from articleqa.loaders import load_web_documents
from articleqa.rag.chunker import split_documents
from articleqa.utils import log_with_prefix
from articleqa.vectorstore.memory_index import MemoryIndex

logger = logging.getLogger(__name__)


async def load_chunks(config: Config, url: str | None = None, selector: str | None = None) -> List[Document]:
    """Fetch the article and split it into chunks using the chunking settings in `config`.

    `url` and `selector` override the configured article and selector.
    """
    url = url or config.article_url
    selector = selector or config.content_selector

    docs = await load_web_documents(url, selector=selector, timeout=config.fetch_timeout)
    log_with_prefix(logger, logging.INFO, "ingest", f"Loaded {len(docs)} documents from {url}")

    chunks = list(
        split_documents(docs, chunk_size=config.chunk_size, overlap=config.chunk_overlap, strategy=config.chunk_strategy)
    )
    log_with_prefix(logger, logging.INFO, "ingest", f"Split into {len(chunks)} chunks ({config.chunk_strategy})")
    return chunks


def build_index(chunks: List[Document], embedder: Embeddings) -> MemoryIndex:
    """Embed `chunks` into a fresh in-memory index. Raises EmbeddingError if any chunk fails."""
    index = MemoryIndex(embedder)
    index.insert(chunks)
    log_with_prefix(logger, logging.INFO, "ingest", f"Indexed {len(index)} chunks")
    return index
