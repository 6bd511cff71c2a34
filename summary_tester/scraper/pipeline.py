"""Article pipeline: fetch → prune → extract → clean → validate.

``extract_article`` is the single entry point used by the HTTP API, the CLI
and the worker.  It never raises for expected failures; instead it returns one
of the :data:`~summary_tester.scraper.models.PipelineOutcome` variants:

    Success(article)              full cleaned article
    FetchFailure(status, message) network error or non-2xx response
    ExtractionFailure(message)    page fetched, but no usable article body

There are no partial results and no retries.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from bs4 import BeautifulSoup

from summary_tester.config import settings
from summary_tester.scraper.cleaner import clean_text
from summary_tester.scraper.errors import ExtractionError, FetchError
from summary_tester.scraper.extractor import ContentExtractor, extract_main_content
from summary_tester.scraper.fetcher import fetch_document
from summary_tester.scraper.models import (
    ExtractedArticle,
    ExtractionFailure,
    FetchFailure,
    PipelineOutcome,
    RawDocument,
    Success,
)
from summary_tester.scraper.pruner import prune_document

logger = logging.getLogger(__name__)


def process_document(
    raw: RawDocument,
    extractor: ContentExtractor = extract_main_content,
    min_length: int = 0,
) -> PipelineOutcome:
    """Run the offline part of the pipeline on an already-fetched page."""
    soup = BeautifulSoup(raw.html, "html.parser")
    outcomes = prune_document(soup)
    failed = [o.selector for o in outcomes if not o.ok]
    if failed:
        logger.debug("Sanitizer rules skipped for %s: %s", raw.url, failed)

    try:
        content = extractor(soup, raw.url)
    except ExtractionError as exc:
        logger.warning("No article body in %s: %s", raw.url, exc)
        return ExtractionFailure(str(exc))

    text = clean_text(content.text)
    if not text:
        return ExtractionFailure("Artikeltext konnte nicht extrahiert werden")
    if len(text) < min_length:
        return ExtractionFailure(
            f"Artikeltext zu kurz ({len(text)} < {min_length} Zeichen)"
        )

    return Success(
        ExtractedArticle(
            title=content.title,
            text=text,
            excerpt=content.excerpt,
            length=len(text),
        )
    )


def extract_article(
    url: str,
    *,
    client: httpx.Client | None = None,
    extractor: ContentExtractor = extract_main_content,
    min_length: int | None = None,
) -> PipelineOutcome:
    """Fetch *url* and turn it into a cleaned article.

    Args:
        url: Article URL.
        client: Optional ``httpx.Client`` for the fetch.
        extractor: Content extractor; defaults to
            :func:`~summary_tester.scraper.extractor.extract_main_content`.
        min_length: Minimum length of the cleaned text.  Defaults to
            ``settings.min_article_length`` (0 disables the check).
    """
    try:
        raw = fetch_document(url, client=client)
    except FetchError as exc:
        return FetchFailure(status=exc.status, message=exc.message)

    if min_length is None:
        min_length = settings.min_article_length
    return process_document(raw, extractor=extractor, min_length=min_length)


def outcome_to_response(outcome: PipelineOutcome) -> tuple[int, dict[str, Any]]:
    """Map a pipeline outcome to an HTTP status code and JSON body."""
    if isinstance(outcome, Success):
        return 200, outcome.article.to_dict()
    if isinstance(outcome, FetchFailure):
        return outcome.status, {
            "error": f"Artikel konnte nicht geladen werden: {outcome.message}"
        }
    return 422, {"error": outcome.message}
