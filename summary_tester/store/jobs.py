"""In-memory job relay between the browser frontend and an out-of-band worker.

The hosted server cannot reach the LLM proxy itself, so the frontend submits
summarization requests here, a worker with proxy access claims them, and the
frontend polls for the result:

    submit → pending → (claim) processing → (complete) done → (poll) deleted

Jobs older than the TTL are dropped on the next access.
"""

from __future__ import annotations

import secrets
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Callable

from summary_tester.config import settings


@dataclass
class Job:
    request: dict[str, Any]
    status: str = "pending"
    result: dict[str, Any] | None = None
    created: float = field(default_factory=time.time)


class JobQueue:
    """Thread-safe store of relay jobs keyed by a short random id."""

    def __init__(
        self,
        ttl_seconds: float | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._jobs: dict[str, Job] = {}
        self._lock = threading.Lock()
        self._ttl = settings.job_ttl_seconds if ttl_seconds is None else ttl_seconds
        self._clock = clock

    def __len__(self) -> int:
        with self._lock:
            return len(self._jobs)

    def _purge(self) -> None:
        now = self._clock()
        expired = [jid for jid, job in self._jobs.items() if now - job.created > self._ttl]
        for jid in expired:
            del self._jobs[jid]

    def submit(self, request: dict[str, Any]) -> str:
        """Queue *request* and return its job id."""
        job_id = f"{int(self._clock() * 1000):x}{secrets.token_hex(3)}"
        with self._lock:
            self._purge()
            self._jobs[job_id] = Job(request=request, created=self._clock())
        return job_id

    def claim_pending(self) -> list[dict[str, Any]]:
        """Mark every pending job as processing and return them with their ids."""
        claimed = []
        with self._lock:
            self._purge()
            for job_id, job in self._jobs.items():
                if job.status == "pending":
                    job.status = "processing"
                    claimed.append({"id": job_id, **job.request})
        return claimed

    def complete(self, job_id: str, result: dict[str, Any]) -> bool:
        """Store *result* for *job_id*; ``False`` if the job is unknown."""
        with self._lock:
            job = self._jobs.get(job_id)
            if job is None:
                return False
            job.result = result
            job.status = "done"
            return True

    def poll(self, job_id: str) -> dict[str, Any]:
        """Return the job status; a finished job is handed out once, then deleted."""
        with self._lock:
            self._purge()
            job = self._jobs.get(job_id)
            if job is None:
                return {"status": "not_found"}
            if job.status == "done":
                del self._jobs[job_id]
                return {"status": "done", "result": job.result}
            return {"status": job.status}
