"""Article endpoints: cleaned article text and the news feed.

Routes
------
POST /api/fetch-article   Body: {"url": "https://..."}  → extract_article
GET  /api/feed                                          → fetch_feed
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from summary_tester.scraper.errors import FetchError
from summary_tester.scraper.pipeline import extract_article, outcome_to_response
from summary_tester.scraper.sitemap import fetch_feed

router = APIRouter()


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class FetchArticleRequest(BaseModel):
    url: str | None = None


class ArticleResponse(BaseModel):
    title: str
    text: str
    excerpt: str
    length: int


class FeedResponse(BaseModel):
    articles: list[dict[str, str]]
    count: int


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post(
    "/fetch-article",
    response_model=ArticleResponse,
    responses={422: {"description": "No article body found"}},
)
def fetch_article_endpoint(body: FetchArticleRequest) -> JSONResponse:
    """Fetch a URL and return its cleaned article text.

    Upstream HTTP errors are mirrored with their status code; pages without a
    usable article body yield 422.
    """
    if not body.url:
        raise HTTPException(status_code=400, detail="URL fehlt")

    status, payload = outcome_to_response(extract_article(body.url))
    return JSONResponse(status_code=status, content=payload)


@router.get("/feed", response_model=FeedResponse)
def feed_endpoint() -> Any:
    """Return the latest articles from the news sitemap."""
    try:
        items = fetch_feed()
    except FetchError as exc:
        return JSONResponse(
            status_code=exc.status,
            content={"error": f"News-Sitemap nicht erreichbar: {exc.message}"},
        )
    return {"articles": [item.to_dict() for item in items], "count": len(items)}
