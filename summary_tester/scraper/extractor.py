"""Content extraction: isolates title, body text and excerpt from a page."""

from __future__ import annotations

import json
import logging
from typing import Callable

import trafilatura
from bs4 import BeautifulSoup

from summary_tester.scraper.errors import ExtractionError
from summary_tester.scraper.models import MainContent

logger = logging.getLogger(__name__)

# Signature every content extractor must satisfy; the pipeline accepts any
# callable of this shape so tests can plug in a deterministic stub.
ContentExtractor = Callable[[BeautifulSoup, str], MainContent]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _document_title(soup: BeautifulSoup) -> str:
    """Return the text of the ``<title>`` tag, or empty string."""
    if soup.title is None:
        return ""
    return soup.title.get_text(strip=True)


def _trafilatura_extract(html: str, url: str) -> dict:
    """Run trafilatura and return its JSON document as a dict (empty on miss)."""
    result = trafilatura.extract(
        html,
        url=url,
        output_format="json",
        with_metadata=True,
        include_comments=False,
        include_links=False,
        include_images=False,
        include_tables=True,
    )
    if not result:
        return {}
    return json.loads(result)


def _bs4_fallback(html: str) -> str:
    """Extract readable text using BeautifulSoup ``<main>``/``<article>`` heuristics.

    Block-level text is joined with newlines so the line-oriented text rules
    still see one paragraph per line.
    """
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(["head", "script", "style", "noscript", "template", "header"]):
        tag.decompose()
    container = soup.find("main") or soup.find("article") or soup.body or soup
    return container.get_text(separator="\n", strip=True)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_main_content(soup: BeautifulSoup, url: str) -> MainContent:
    """Extract the main article from an already-pruned document.

    Tries ``trafilatura`` first.  Falls back to a BeautifulSoup heuristic
    when trafilatura finds no dominant content block.  *soup* is serialised
    and never modified.

    Raises:
        ExtractionError: If neither strategy yields any text.
    """
    html = str(soup)
    data = _trafilatura_extract(html, url)

    text = (data.get("text") or "").strip()
    if not text:
        logger.debug("trafilatura found no content block in %s; using fallback", url)
        text = _bs4_fallback(html).strip()

    if not text:
        raise ExtractionError("Artikeltext konnte nicht extrahiert werden")

    return MainContent(
        title=(data.get("title") or _document_title(soup)).strip(),
        text=text,
        excerpt=(data.get("excerpt") or "").strip(),
    )
