"""Feedback endpoints.

Routes
------
POST /api/feedback   Body: {"articleTitle", "articleUrl", "promptName", "model",
                            "summary", "rating", "comment"} (all optional)
GET  /api/feedback   → every stored entry
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel

from summary_tester.notify import send_feedback_email
from summary_tester.store.feedback import FeedbackEntry, append_feedback, load_feedback

router = APIRouter()


class FeedbackRequest(BaseModel):
    articleTitle: str | None = None
    articleUrl: str | None = None
    promptName: str | None = None
    model: str | None = None
    summary: str | None = None
    rating: str | None = None
    comment: str | None = None


class FeedbackResponse(BaseModel):
    saved: bool
    emailSent: bool
    total: int


@router.post("/feedback", response_model=FeedbackResponse)
def post_feedback(body: FeedbackRequest) -> dict[str, Any]:
    """Store a rating and, when SMTP is configured, mail it to the team."""
    entry = FeedbackEntry(
        article_title=body.articleTitle or "",
        article_url=body.articleUrl or "",
        prompt_name=body.promptName or "",
        model=body.model or "",
        summary=body.summary or "",
        rating=body.rating or "",
        comment=body.comment or "",
    )
    total = append_feedback(entry)
    email_sent = send_feedback_email(entry)
    return {"saved": True, "emailSent": email_sent, "total": total}


@router.get("/feedback")
def get_feedback() -> list[dict[str, Any]]:
    return load_feedback()
