"""Unit tests for loaders."""

import asyncio

import aiohttp
import pytest
from aioresponses import aioresponses

from articleqa.errors import FetchError, ParseError
from articleqa.loaders import fetch_html, load_web_documents

URL = "https://example.com/post"


@pytest.mark.asyncio
async def test_load_web_documents(article_html):
    with aioresponses() as m:
        m.get(URL, status=200, body=article_html, content_type="text/html; charset=utf-8")
        docs = await load_web_documents(URL, selector="p")

    assert len(docs) == 1
    doc = docs[0]
    assert doc.page_content.startswith("Planning breaks large tasks")
    assert doc.metadata == {"source": URL, "selector": "p", "title": "LLM Powered Autonomous Agents"}


@pytest.mark.asyncio
async def test_fetch_html_not_found():
    with aioresponses() as m:
        m.get(URL, status=404)
        with pytest.raises(FetchError) as excinfo:
            await fetch_html(URL)

    assert excinfo.value.status == 404
    assert excinfo.value.url == URL


@pytest.mark.asyncio
async def test_fetch_html_server_error():
    with aioresponses() as m:
        m.get(URL, status=503, body="down")
        with pytest.raises(FetchError, match="503"):
            await fetch_html(URL)


@pytest.mark.asyncio
async def test_load_web_documents_rejects_redirect_status():
    """A 3xx reply that was not followed is not article content."""
    with aioresponses() as m:
        m.get(URL, status=300, body="<p>Multiple choices page</p>", content_type="text/html; charset=utf-8")
        with pytest.raises(FetchError, match="300") as excinfo:
            await load_web_documents(URL)

    assert excinfo.value.status == 300


@pytest.mark.asyncio
async def test_fetch_html_undecodable_body():
    with aioresponses() as m:
        m.get(URL, status=200, body=b"<p>\xff\xfe caf\xe9</p>", content_type="text/html; charset=utf-8")
        with pytest.raises(ParseError, match="could not decode"):
            await fetch_html(URL)


@pytest.mark.asyncio
async def test_fetch_html_connection_error():
    with aioresponses() as m:
        m.get(URL, exception=aiohttp.ClientConnectionError("connection refused"))
        with pytest.raises(FetchError, match="connection refused") as excinfo:
            await fetch_html(URL)

    assert excinfo.value.status is None
    assert isinstance(excinfo.value.__cause__, aiohttp.ClientConnectionError)


@pytest.mark.asyncio
async def test_fetch_html_timeout():
    with aioresponses() as m:
        m.get(URL, exception=asyncio.TimeoutError())
        with pytest.raises(FetchError, match="timed out"):
            await fetch_html(URL, timeout=1)


@pytest.mark.asyncio
async def test_load_web_documents_without_matching_elements():
    with aioresponses() as m:
        m.get(URL, status=200, body="<html><body><div>no paragraphs</div></body></html>", content_type="text/html; charset=utf-8")
        with pytest.raises(ParseError):
            await load_web_documents(URL, selector="p")
