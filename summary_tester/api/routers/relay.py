"""Job relay endpoints for the out-of-band summarization worker.

Routes
------
POST /api/queue          Frontend submits a summarize request → {"id"}
GET  /api/pending        Worker claims all pending jobs
POST /api/result/{id}    Worker posts a result
GET  /api/result/{id}    Frontend polls for the result
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Request

from summary_tester.store.jobs import JobQueue

router = APIRouter()


def _queue(request: Request) -> JobQueue:
    return request.app.state.jobs


@router.post("/queue")
def submit_job(request: Request, payload: dict[str, Any] = Body(...)) -> dict[str, str]:
    return {"id": _queue(request).submit(payload)}


@router.get("/pending")
def claim_pending(request: Request) -> list[dict[str, Any]]:
    return _queue(request).claim_pending()


@router.post("/result/{job_id}")
def post_result(
    job_id: str, request: Request, payload: dict[str, Any] = Body(...)
) -> dict[str, bool]:
    # Results for expired jobs are accepted and dropped.
    _queue(request).complete(job_id, payload)
    return {"ok": True}


@router.get("/result/{job_id}")
def get_result(job_id: str, request: Request) -> dict[str, Any]:
    return _queue(request).poll(job_id)
