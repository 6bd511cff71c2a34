"""Summarization endpoint.

Routes
------
POST /api/summarize   Body: {"text", "system_prompt", "model"?, "max_tokens"?, "temperature"?}
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from summary_tester.llm.summarizer import summarize

router = APIRouter()


class SummarizeRequest(BaseModel):
    text: str | None = None
    system_prompt: str | None = None
    model: str | None = None
    max_tokens: int | None = None
    temperature: float | None = None


class SummarizeResponse(BaseModel):
    summary: str
    model: str
    usage: dict[str, int]


@router.post("/summarize", response_model=SummarizeResponse)
def summarize_endpoint(body: SummarizeRequest) -> dict[str, Any]:
    """Summarize an article text with the given system prompt and model."""
    if not body.text:
        raise HTTPException(status_code=400, detail="Text fehlt")
    if not body.system_prompt:
        raise HTTPException(status_code=400, detail="System Prompt fehlt")

    try:
        result = summarize(
            body.text,
            body.system_prompt,
            model=body.model,
            max_tokens=body.max_tokens,
            temperature=body.temperature,
        )
    except Exception as exc:
        raise HTTPException(status_code=502, detail=f"API Fehler: {exc}") from exc
    return result.to_dict()
