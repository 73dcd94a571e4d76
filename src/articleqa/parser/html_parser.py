from __future__ import annotations

from typing import List, Optional

from bs4 import BeautifulSoup
from soupsieve import SelectorSyntaxError

from articleqa.errors import ParseError


def extract_selected_text(html: str, selector: str) -> str:
    """Extract the text of every element matching a CSS `selector`.

    Each matched element contributes its stripped text; elements are joined
    by newlines in document order. Elements nested inside another match are
    still reported separately, so selectors like "p" are the usual choice.

    Raises:
        ParseError: if the selector is malformed or no element yields text.
    """
    soup = BeautifulSoup(html, "html.parser")
    try:
        nodes = soup.select(selector)
    except SelectorSyntaxError as e:
        raise ParseError(f"invalid selector {selector!r}: {e}") from e

    parts: List[str] = []
    for node in nodes:
        # Footnote markers and inline scripts add noise to the embedded text.
        for junk in node.select("sup, script, style"):
            junk.decompose()
        text = node.get_text(" ", strip=True)
        if text:
            parts.append(text)

    if not parts:
        raise ParseError(f"no text found for selector {selector!r}")
    return "\n".join(parts)


def extract_title(html: str) -> Optional[str]:
    """Return the page <title> text, or None when the page has none."""
    soup = BeautifulSoup(html, "html.parser")
    if soup.title and soup.title.string:
        return soup.title.string.strip() or None
    return None
