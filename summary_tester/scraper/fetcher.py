"""HTTP fetcher for article pages and the news sitemap."""

from __future__ import annotations

import logging

import httpx

from summary_tester.config import settings
from summary_tester.scraper.errors import FetchError
from summary_tester.scraper.models import RawDocument

logger = logging.getLogger(__name__)

_HTML_ACCEPT = "text/html,application/xhtml+xml"
_XML_ACCEPT = "application/xml,text/xml"


def browser_headers(accept: str = _HTML_ACCEPT) -> dict[str, str]:
    """Return request headers that look like a desktop browser."""
    return {
        "User-Agent": settings.user_agent,
        "Accept": accept,
        "Accept-Language": settings.accept_language,
    }


def _get(url: str, accept: str, client: httpx.Client | None) -> httpx.Response:
    """GET *url*, translating transport errors and non-2xx into :class:`FetchError`."""
    try:
        if client is not None:
            response = client.get(url, headers=browser_headers(accept))
        else:
            with httpx.Client(
                headers=browser_headers(accept),
                timeout=settings.request_timeout,
                follow_redirects=True,
            ) as own_client:
                response = own_client.get(url)
    except httpx.HTTPError as exc:
        logger.warning("Fetching %s failed: %s", url, exc)
        raise FetchError(502, f"{type(exc).__name__}: {exc}") from exc

    if not response.is_success:
        logger.warning("Fetching %s returned HTTP %d", url, response.status_code)
        raise FetchError(response.status_code, response.reason_phrase)
    return response


def fetch_document(url: str, client: httpx.Client | None = None) -> RawDocument:
    """Fetch *url* and return a :class:`RawDocument`.

    No retries are made here; retry policy belongs to the caller.

    Args:
        url: Article URL.
        client: Optional pre-configured ``httpx.Client``.  When omitted a
            short-lived client with ``settings.request_timeout`` is used.

    Raises:
        FetchError: On transport errors (status 502) or any non-2xx status
            (status mirrored from the response).
    """
    response = _get(url, _HTML_ACCEPT, client)
    logger.info("Fetched %s (HTTP %d, %d bytes)", url, response.status_code, len(response.content))
    return RawDocument(url=url, html=response.text, status_code=response.status_code)


def fetch_xml(url: str, client: httpx.Client | None = None) -> str:
    """Fetch an XML document (e.g. a sitemap) and return its text."""
    return _get(url, _XML_ACCEPT, client).text
