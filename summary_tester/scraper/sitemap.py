"""News sitemap reader: lists current article URLs for the article picker."""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from typing import Any

import httpx

from summary_tester.config import settings
from summary_tester.scraper.fetcher import fetch_xml

# The sitemap mixes several XML namespaces, so plain regexes over each
# <url> block are more reliable than a namespace-aware parser here.
_LOC = re.compile(r"<loc>([^<]+)</loc>")
_TITLE = re.compile(r"<news:title>([^<]+)</news:title>")
_DATE = re.compile(r"<news:publication_date>([^<]+)</news:publication_date>")
_SKIP_TITLE = re.compile(r"live-ticker", re.IGNORECASE)

_MIN_TITLE_LENGTH = 10
_MAX_TITLE_LENGTH = 150


@dataclass
class FeedItem:
    url: str
    title: str
    date: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _shorten(title: str) -> str:
    if len(title) > _MAX_TITLE_LENGTH:
        return title[: _MAX_TITLE_LENGTH - 3] + "..."
    return title


def parse_sitemap(xml: str, limit: int) -> list[FeedItem]:
    """Return up to *limit* article entries from a news-sitemap document.

    Entries without a ``<loc>`` or ``<news:title>``, with titles shorter than
    ten characters, duplicate URLs and live tickers are skipped.
    """
    seen: set[str] = set()
    items: list[FeedItem] = []
    for block in xml.split("<url>")[1:]:
        if len(items) >= limit:
            break

        loc = _LOC.search(block)
        title_match = _TITLE.search(block)
        if not loc or not title_match:
            continue

        url = loc.group(1).strip()
        title = title_match.group(1).strip()
        if len(title) < _MIN_TITLE_LENGTH or url in seen or _SKIP_TITLE.search(title):
            continue
        seen.add(url)

        date = _DATE.search(block)
        items.append(
            FeedItem(url=url, title=_shorten(title), date=date.group(1).strip() if date else "")
        )
    return items


def fetch_feed(
    client: httpx.Client | None = None,
    limit: int | None = None,
) -> list[FeedItem]:
    """Fetch ``settings.feed_url`` and parse it with :func:`parse_sitemap`.

    Raises:
        FetchError: If the sitemap cannot be fetched.
    """
    xml = fetch_xml(settings.feed_url, client=client)
    return parse_sitemap(xml, limit if limit is not None else settings.feed_max_articles)
