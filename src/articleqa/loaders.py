"""Document loaders for the RAG pipeline."""

import asyncio
import logging
import time
from typing import List

import aiohttp
from aiohttp import ClientTimeout
from langchain_core.documents import Document

from articleqa.errors import FetchError, ParseError
from articleqa.parser.html_parser import extract_selected_text, extract_title
from articleqa.utils import log_timing, log_with_prefix

logger = logging.getLogger(__name__)

USER_AGENT = "articleqa/0.1 (+https://github.com)"


async def fetch_html(url: str, timeout: float = 30.0) -> str:
    """Download `url` and return the decoded body.

    Raises:
        FetchError: on connection failure, timeout, or a non-2xx status.
        ParseError: if the body cannot be decoded as text.
    """
    headers = {"User-Agent": USER_AGENT}
    try:
        async with aiohttp.ClientSession(timeout=ClientTimeout(total=timeout), headers=headers) as session:
            async with session.get(url) as r:
                if not 200 <= r.status < 300:
                    raise FetchError(url, r.reason or "request failed", status=r.status)
                try:
                    return await r.text()
                except UnicodeDecodeError as e:
                    raise ParseError(f"could not decode response from {url}: {e}") from e
    except aiohttp.ClientError as e:
        raise FetchError(url, str(e) or type(e).__name__) from e
    except asyncio.TimeoutError as e:
        raise FetchError(url, f"timed out after {timeout}s") from e


async def load_web_documents(url: str, selector: str = "p", timeout: float = 30.0) -> List[Document]:
    """Fetch a web page and turn the text under `selector` into Documents.

    Args:
        url: Page to download.
        selector: CSS selector for the elements whose text is kept (default: paragraphs).
        timeout: Total request timeout in seconds.

    Returns:
        A single-element list holding the page text, with `source`, `selector`
        and (when present) `title` metadata.
    """
    start = time.time()
    log_with_prefix(logger, logging.INFO, "load", f"Fetching {url} (selector={selector!r})")

    html = await fetch_html(url, timeout=timeout)
    text = extract_selected_text(html, selector)

    metadata = {"source": url, "selector": selector}
    title = extract_title(html)
    if title:
        metadata["title"] = title

    log_timing(logger, "load", start, f"Extracted {len(text)} characters from {url}")
    return [Document(page_content=text, metadata=metadata)]
