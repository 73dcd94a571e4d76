"""Pytest configuration."""

import pytest
from langchain_core.documents import Document

from articleqa.rag.embeddings import HashEmbedding
from articleqa.vectorstore.memory_index import MemoryIndex

ARTICLE_HTML = """<html>
<head><title>LLM Powered Autonomous Agents</title></head>
<body>
<h1>Agents</h1>
<p>Planning breaks large tasks into smaller subgoals.<sup>1</sup></p>
<div class="nav">Home | About</div>
<p>Memory lets an agent retain and recall information over long contexts.</p>
<p>   </p>
<p>Tool use lets the agent call external APIs.</p>
</body>
</html>"""


@pytest.fixture
def article_html():
    return ARTICLE_HTML


@pytest.fixture
def sample_chunks():
    """Three small chunks from one source."""
    texts = [
        "Planning breaks large tasks into smaller subgoals.",
        "Memory lets an agent retain and recall information.",
        "Tool use lets the agent call external APIs.",
    ]
    return [
        Document(page_content=t, metadata={"source": "https://example.com/post", "chunk_index": i})
        for i, t in enumerate(texts)
    ]


@pytest.fixture
def hash_index(sample_chunks):
    """Index over the sample chunks using the deterministic hashing embedding."""
    index = MemoryIndex(HashEmbedding())
    index.insert(sample_chunks)
    return index
