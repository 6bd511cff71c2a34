"""Centralised settings for the Summary Tester.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(_ROOT / ".env", override=False)


def _default_feedback_file() -> Path:
    # Railway containers only allow writes below /tmp
    base = Path("/tmp") if os.environ.get("RAILWAY_ENVIRONMENT") else _ROOT
    return Path(os.environ.get("FEEDBACK_FILE", base / "feedback.json"))


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Article fetching
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "FETCH_USER_AGENT",
            "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36",
        )
    )
    accept_language: str = field(
        default_factory=lambda: os.environ.get("FETCH_ACCEPT_LANGUAGE", "de-DE,de;q=0.9")
    )
    min_article_length: int = field(
        default_factory=lambda: int(os.environ.get("MIN_ARTICLE_LENGTH", "0"))
    )

    # ------------------------------------------------------------------
    # News feed
    # ------------------------------------------------------------------
    feed_url: str = field(
        default_factory=lambda: os.environ.get(
            "FEED_URL", "https://www.bild.de/sitemap-news.xml"
        )
    )
    feed_max_articles: int = field(
        default_factory=lambda: int(os.environ.get("FEED_MAX_ARTICLES", "15"))
    )

    # ------------------------------------------------------------------
    # Summarization model
    # ------------------------------------------------------------------
    llm_base_url: str = field(
        default_factory=lambda: os.environ.get(
            "ANTHROPIC_BASE_URL", "https://api.anthropic.com"
        ).rstrip("/")
    )
    llm_api_key: str = field(
        default_factory=lambda: os.environ.get("ANTHROPIC_API_KEY", "")
    )
    default_model: str = field(
        default_factory=lambda: os.environ.get("DEFAULT_MODEL", "claude-sonnet-4")
    )
    llm_timeout: float = field(
        default_factory=lambda: float(os.environ.get("LLM_TIMEOUT", "120.0"))
    )

    # ------------------------------------------------------------------
    # Storage
    # ------------------------------------------------------------------
    prompts_dir: Path = field(
        default_factory=lambda: Path(os.environ.get("PROMPTS_DIR", _ROOT / "prompts"))
    )
    feedback_file: Path = field(default_factory=_default_feedback_file)

    # ------------------------------------------------------------------
    # Feedback mail
    # ------------------------------------------------------------------
    smtp_host: str = field(default_factory=lambda: os.environ.get("SMTP_HOST", ""))
    smtp_port: int = field(
        default_factory=lambda: int(os.environ.get("SMTP_PORT") or "587")
    )
    smtp_user: str = field(default_factory=lambda: os.environ.get("SMTP_USER", ""))
    smtp_pass: str = field(default_factory=lambda: os.environ.get("SMTP_PASS", ""))
    feedback_email: str = field(
        default_factory=lambda: os.environ.get("FEEDBACK_EMAIL", "")
    )

    # ------------------------------------------------------------------
    # Job relay / worker
    # ------------------------------------------------------------------
    job_ttl_seconds: float = field(
        default_factory=lambda: float(os.environ.get("JOB_TTL_SECONDS", "300"))
    )
    relay_url: str = field(
        default_factory=lambda: os.environ.get(
            "RELAY_URL", "http://localhost:3000"
        ).rstrip("/")
    )
    worker_poll_interval: float = field(
        default_factory=lambda: float(os.environ.get("WORKER_POLL_INTERVAL", "3.0"))
    )

    # ------------------------------------------------------------------
    # Server / logging
    # ------------------------------------------------------------------
    port: int = field(default_factory=lambda: int(os.environ.get("PORT", "3000")))
    log_level: str = field(default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO"))

    @property
    def mail_enabled(self) -> bool:
        """``True`` when SMTP host, sender and recipient are all configured."""
        return bool(self.smtp_host and self.smtp_user and self.feedback_email)


# Module-level singleton. Import this everywhere:
#   from summary_tester.config import settings
settings = Settings()
