from __future__ import annotations

from typing import Iterable, Iterator, List

from langchain_core.documents import Document

STRATEGIES = ("window", "recursive")


def _validate(chunk_size: int, overlap: int) -> None:
    if chunk_size <= 0:
        raise ValueError("chunk_size must be > 0")
    if overlap < 0:
        raise ValueError("overlap must be >= 0")
    if overlap >= chunk_size:
        raise ValueError("overlap must be smaller than chunk_size")


def _windows(text: str, chunk_size: int, overlap: int) -> Iterator[tuple[int, str]]:
    n = len(text)
    # Short text (including empty text) is always exactly one chunk.
    if n <= chunk_size:
        yield 0, text
        return

    start = 0
    step = chunk_size - overlap
    while True:
        end = min(start + chunk_size, n)
        yield start, text[start:end]
        if end == n:
            return
        start += step


def iter_chunks(text: str, chunk_size: int = 1000, overlap: int = 200) -> Iterator[str]:
    """Lazily yield `chunk_size`-character windows of `text`, each sharing `overlap` chars with the previous one.

    Simple character-based sliding window; the final window may be shorter.
    Parameters are checked before the first chunk is produced.
    """
    _validate(chunk_size, overlap)
    return (chunk for _, chunk in _windows(text, chunk_size, overlap))


def chunk_text(text: str, chunk_size: int = 1000, overlap: int = 200) -> List[str]:
    """Eager form of :func:`iter_chunks`."""
    return list(iter_chunks(text, chunk_size=chunk_size, overlap=overlap))


def _split_windowed(docs: Iterable[Document], chunk_size: int, overlap: int) -> Iterator[Document]:
    for doc in docs:
        for i, (offset, chunk) in enumerate(_windows(doc.page_content, chunk_size, overlap)):
            metadata = dict(doc.metadata)
            metadata["chunk_index"] = i
            metadata["start_index"] = offset
            yield Document(page_content=chunk, metadata=metadata)


def _split_recursive(docs: Iterable[Document], chunk_size: int, overlap: int) -> Iterator[Document]:
    from langchain_text_splitters import RecursiveCharacterTextSplitter

    splitter = RecursiveCharacterTextSplitter(chunk_size=chunk_size, chunk_overlap=overlap, add_start_index=True)
    for doc in docs:
        for i, chunk in enumerate(splitter.split_documents([doc])):
            chunk.metadata["chunk_index"] = i
            yield chunk


def split_documents(
    docs: Iterable[Document],
    chunk_size: int = 1000,
    overlap: int = 200,
    strategy: str = "window",
) -> Iterator[Document]:
    """Split documents into chunk Documents that inherit the source metadata.

    Every chunk gets `chunk_index` (its position within the source document)
    and `start_index` (its character offset into the source content).

    Args:
        docs: Documents to split.
        chunk_size: Maximum chunk length in characters.
        overlap: Characters shared by consecutive chunks.
        strategy: "window" for the fixed sliding window, "recursive" for
            LangChain's separator-aware RecursiveCharacterTextSplitter.

    Returns:
        A lazy iterator; calling the function again restarts from the first document.
    """
    _validate(chunk_size, overlap)
    if strategy == "window":
        return _split_windowed(docs, chunk_size, overlap)
    if strategy == "recursive":
        return _split_recursive(docs, chunk_size, overlap)
    raise ValueError(f"unknown chunking strategy {strategy!r}; expected one of {', '.join(STRATEGIES)}")
