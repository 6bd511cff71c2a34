"""Data models for the article pipeline."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Union


@dataclass
class RawDocument:
    """The raw HTTP response for a single article fetch."""

    url: str
    html: str
    status_code: int


@dataclass
class MainContent:
    """What the content extractor isolates from a pruned document."""

    title: str
    text: str
    excerpt: str


@dataclass
class ExtractedArticle:
    """A cleaned article, ready to be summarized."""

    title: str
    text: str
    excerpt: str
    length: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class RuleOutcome:
    """Result of applying one structural rule during pruning."""

    selector: str
    removed: int = 0
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


# ---------------------------------------------------------------------------
# Pipeline outcomes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Success:
    article: ExtractedArticle


@dataclass(frozen=True)
class FetchFailure:
    """Network error or non-2xx response from the article host."""

    status: int
    message: str


@dataclass(frozen=True)
class ExtractionFailure:
    """The page was fetched but held no usable article body."""

    message: str


PipelineOutcome = Union[Success, FetchFailure, ExtractionFailure]
