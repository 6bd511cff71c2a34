"""Feedback log: one JSON array of rated summaries."""

from __future__ import annotations

import json
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from summary_tester.config import settings

_LOCK = threading.Lock()


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class FeedbackEntry:
    """One rating of a generated summary.

    Stored with the camelCase keys the browser frontend sends and reads.
    """

    article_title: str = ""
    article_url: str = ""
    prompt_name: str = ""
    model: str = ""
    summary: str = ""
    rating: str = ""
    comment: str = ""
    timestamp: str = field(default_factory=_now_iso)

    def to_dict(self) -> dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "articleTitle": self.article_title,
            "articleUrl": self.article_url,
            "promptName": self.prompt_name,
            "model": self.model,
            "summary": self.summary,
            "rating": self.rating,
            "comment": self.comment,
        }

    @property
    def rating_label(self) -> str:
        return {"good": "Gut", "bad": "Schlecht"}.get(self.rating, "Neutral")


def load_feedback(path: Path | None = None) -> list[dict[str, Any]]:
    """Return all stored feedback entries (empty list if none yet)."""
    path = path or settings.feedback_file
    if not path.exists():
        return []
    return json.loads(path.read_text(encoding="utf-8"))


def append_feedback(entry: FeedbackEntry, path: Path | None = None) -> int:
    """Append *entry* to the log and return the new number of entries."""
    path = path or settings.feedback_file
    with _LOCK:
        entries = load_feedback(path)
        entries.append(entry.to_dict())
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(entries, indent=2, ensure_ascii=False), encoding="utf-8")
    return len(entries)
