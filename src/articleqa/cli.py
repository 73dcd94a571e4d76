"""CLI for articleqa."""

import asyncio

import click
from dotenv import load_dotenv

from articleqa.config import Config
from articleqa.errors import RAGError
from articleqa.rag.embeddings import get_embedder
from articleqa.rag.generation import get_llm
from articleqa.rag.ingest import build_index, load_chunks
from articleqa.session import Session, handle_question, print_banner, run_session
from articleqa.utils import configure_logging, preview


def _load_config() -> Config:
    try:
        return Config()
    except RAGError as e:
        raise click.ClickException(str(e)) from e


def _build_session(config: Config, url, selector, k) -> Session:
    """Fetch, chunk and index the article. Startup failures exit with status 1."""
    url = url or config.article_url
    k = k if k is not None else config.retrieval_k
    if k <= 0:
        raise click.BadParameter("must be a positive integer", param_hint="--k")
    try:
        click.echo(f"Loading documents from {url}...")
        chunks = asyncio.run(load_chunks(config, url=url, selector=selector))
        click.echo(f"Split into {len(chunks)} chunks")

        click.echo("Adding chunks to the index...")
        index = build_index(chunks, get_embedder(config))
        click.echo("Chunks indexed successfully")
    except (RAGError, ValueError) as e:
        raise click.ClickException(str(e)) from e
    return Session(index=index, llm=get_llm(config), k=k, source=url)


url_option = click.option("--url", default=None, help="Article URL (default: $ARTICLE_URL)")
selector_option = click.option("--selector", default=None, help="CSS selector for article text (default: $CONTENT_SELECTOR)")
k_option = click.option("--k", type=int, default=None, help="Number of chunks to retrieve (default: $RETRIEVAL_K)")


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log pipeline steps at DEBUG level")
@click.pass_context
def cli(ctx, verbose):
    """Ask questions about a web article."""
    load_dotenv()
    config = _load_config()
    configure_logging("DEBUG" if verbose else config.log_level)
    ctx.obj = config


@cli.command()
@url_option
@selector_option
@k_option
@click.pass_obj
def chat(config, url, selector, k):
    """Index the article, then answer questions interactively."""
    session = _build_session(config, url, selector, k)
    print_banner(session)
    run_session(session)


@cli.command()
@url_option
@selector_option
@click.pass_obj
def ingest(config, url, selector):
    """Fetch and chunk the article and show a preview, without embedding."""
    url = url or config.article_url
    try:
        chunks = asyncio.run(load_chunks(config, url=url, selector=selector))
    except (RAGError, ValueError) as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Split {url} into {len(chunks)} chunks")
    for i, chunk in enumerate(chunks[:3], 1):
        click.echo(f"\nChunk {i}:")
        click.echo(f"Length: {len(chunk.page_content)} characters")
        click.echo(f"Preview: {preview(chunk.page_content, 100)}")


@cli.command()
@click.argument("question")
@url_option
@selector_option
@k_option
@click.pass_obj
def ask(config, question, url, selector, k):
    """Index the article and answer a single QUESTION."""
    if not question.strip():
        raise click.BadParameter("question must not be empty", param_hint="QUESTION")
    session = _build_session(config, url, selector, k)
    if not handle_question(session, question.strip()):
        raise SystemExit(1)


if __name__ == "__main__":
    cli()
