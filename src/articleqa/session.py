"""Interactive console loop over a built index."""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

import click

from articleqa.errors import RAGError
from articleqa.pipeline import DEFAULT_K, answer_question
from articleqa.utils import log_with_prefix, preview
from articleqa.vectorstore.memory_index import MemoryIndex

logger = logging.getLogger(__name__)

PROMPT = '\nEnter your question (or "exit" to quit, "chunks" to see all chunks)'
EMPTY_INPUT_MESSAGE = "Please enter a valid question."


@dataclass
class Session:
    """Everything the loop needs, built once by the entry point."""

    index: MemoryIndex
    llm: Any
    k: int = DEFAULT_K
    source: str = ""


def _prompt_line() -> str:
    return click.prompt(PROMPT, default="", show_default=False, prompt_suffix=": ")


def print_banner(session: Session) -> None:
    click.echo("\nArticle QA is ready!")
    if session.source:
        click.echo(f"Article: {session.source}")
    click.echo(f"Indexed chunks: {len(session.index)}")
    click.echo("\nCommands:")
    click.echo("  - Ask any question about the article")
    click.echo("  - Type 'chunks' to see all document chunks")
    click.echo("  - Type 'exit' to quit")


def print_chunks(session: Session) -> None:
    chunks = session.index.chunks
    click.echo(f"\nAll {len(chunks)} chunks in the index:")
    for i, chunk in enumerate(chunks, 1):
        click.echo(f"\n=== Chunk {i} ===")
        click.echo(f"Length: {len(chunk.page_content)} characters")
        click.echo(f"Content: {preview(chunk.page_content, 200)}")
        click.echo(f"Metadata: {chunk.metadata}")


def handle_question(session: Session, question: str) -> bool:
    """Answer one question and print the result. Returns False if it failed."""
    try:
        result = answer_question(session.index, session.llm, question, k=session.k)
    except RAGError as e:
        log_with_prefix(
            logger, logging.ERROR, "session", f"Error processing question: {e}", exc_info=logger.isEnabledFor(logging.DEBUG)
        )
        click.echo(f"Error processing question: {e}", err=True)
        return False

    click.echo("\n=== RESULT ===")
    click.echo(f"Question: {result.question}")
    click.echo(f"Answer: {result.answer}")
    click.echo("==============")
    return True


def run_session(session: Session, read_line: Optional[Callable[[], str]] = None) -> None:
    """Read commands until "exit" or end of input.

    Each line is handled to completion before the next one is read.

    Args:
        session: Index, model and retrieval settings.
        read_line: Blocking line reader; defaults to a click prompt on stdin.
    """
    read_line = read_line or _prompt_line
    while True:
        try:
            line = read_line()
        except (click.Abort, EOFError):
            click.echo("\nGoodbye!")
            return

        command = line.strip()
        if command.lower() == "exit":
            click.echo("Goodbye!")
            return
        if command.lower() == "chunks":
            print_chunks(session)
            continue
        if not command:
            click.echo(EMPTY_INPUT_MESSAGE)
            continue

        handle_question(session, command)
