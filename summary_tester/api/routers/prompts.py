"""Prompt library endpoints.

Routes
------
GET  /api/prompts   → every stored prompt
POST /api/prompts   Body: {"name", "system_prompt", "model"?, "max_tokens"?, "temperature"?}
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from summary_tester.store.prompts import list_prompts, save_prompt

router = APIRouter()


class PromptRequest(BaseModel):
    name: str
    system_prompt: str
    model: str | None = None
    max_tokens: int | None = None
    temperature: float | None = None


@router.get("/prompts")
def list_prompts_endpoint() -> list[dict[str, Any]]:
    return list_prompts()


@router.post("/prompts")
def save_prompt_endpoint(body: PromptRequest) -> dict[str, str]:
    """Save a prompt; a prompt with the same slugged name is overwritten."""
    try:
        filename = save_prompt(
            body.name,
            body.system_prompt,
            model=body.model,
            max_tokens=body.max_tokens,
            temperature=body.temperature,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {"saved": filename}
