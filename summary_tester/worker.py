"""Relay worker: claims summarization jobs from the server and posts results.

Runs on a machine that can reach the LLM proxy.  Every tick it fetches
``{RELAY_URL}/api/pending``, summarizes each claimed job and posts either
``{summary, model, usage}`` or ``{error}`` to ``/api/result/{id}``.
"""

from __future__ import annotations

import logging
import time
from typing import Any

import httpx

from summary_tester.config import settings
from summary_tester.llm.summarizer import summarize

logger = logging.getLogger(__name__)


def process_job(job: dict[str, Any]) -> dict[str, Any]:
    """Summarize one relay job and return the result payload."""
    try:
        summary = summarize(
            job.get("text") or "",
            job.get("system_prompt") or "",
            model=job.get("model"),
            max_tokens=job.get("max_tokens"),
            temperature=job.get("temperature"),
        )
    except Exception as exc:  # noqa: BLE001
        logger.error("Job %s failed: %s", job.get("id"), exc)
        return {"error": f"Worker-Fehler: {exc}"}
    return summary.to_dict()


def poll_once(client: httpx.Client) -> int:
    """Process every pending job once; return how many were handled."""
    response = client.get(f"{settings.relay_url}/api/pending")
    response.raise_for_status()
    jobs = response.json()

    for job in jobs:
        logger.info("Job %s: %s...", job["id"], (job.get("text") or "")[:60])
        result = process_job(job)
        try:
            client.post(f"{settings.relay_url}/api/result/{job['id']}", json=result)
        except httpx.HTTPError as exc:
            logger.warning("Result for job %s could not be posted: %s", job["id"], exc)
    return len(jobs)


def run_worker(interval: float | None = None, max_ticks: int | None = None) -> None:
    """Poll the relay forever (or for *max_ticks* ticks)."""
    interval = settings.worker_poll_interval if interval is None else interval
    ticks = 0
    with httpx.Client(timeout=settings.llm_timeout) as client:
        while max_ticks is None or ticks < max_ticks:
            try:
                poll_once(client)
            except httpx.HTTPError as exc:
                # The relay may be asleep or redeploying; try again next tick.
                logger.warning("Relay %s unreachable: %s", settings.relay_url, exc)
            ticks += 1
            if max_ticks is None or ticks < max_ticks:
                time.sleep(interval)
