"""Scraper package: article fetch, pruning, extraction and cleanup."""

from summary_tester.scraper.cleaner import clean_text
from summary_tester.scraper.errors import ExtractionError, FetchError
from summary_tester.scraper.extractor import extract_main_content
from summary_tester.scraper.fetcher import fetch_document
from summary_tester.scraper.models import (
    ExtractedArticle,
    ExtractionFailure,
    FetchFailure,
    PipelineOutcome,
    RawDocument,
    Success,
)
from summary_tester.scraper.pipeline import extract_article, outcome_to_response
from summary_tester.scraper.pruner import prune_document

__all__ = [
    "clean_text",
    "extract_article",
    "extract_main_content",
    "fetch_document",
    "outcome_to_response",
    "prune_document",
    "ExtractedArticle",
    "ExtractionError",
    "ExtractionFailure",
    "FetchError",
    "FetchFailure",
    "PipelineOutcome",
    "RawDocument",
    "Success",
]
