"""E-mail notification for new summary feedback."""

from __future__ import annotations

import html
import logging
import smtplib
from datetime import datetime
from email.message import EmailMessage

from summary_tester.config import settings
from summary_tester.store.feedback import FeedbackEntry

logger = logging.getLogger(__name__)

_RATING_MARK = {"good": "&#9989;", "bad": "&#10060;"}


def _multiline(text: str) -> str:
    return html.escape(text).replace("\n", "<br>")


def render_feedback_html(entry: FeedbackEntry) -> str:
    """Return the HTML body of a feedback mail."""
    mark = _RATING_MARK.get(entry.rating, "&#9898;")
    link_text = html.escape(entry.article_title or entry.article_url)
    comment = ""
    if entry.comment:
        comment = (
            '<div style="margin-top:16px;padding-top:16px;border-top:1px solid #eee;">'
            '<div style="font-size:11px;text-transform:uppercase;color:#999;">Kommentar</div>'
            '<div style="background:#fff8e1;border-left:4px solid #f9a825;padding:12px 16px;">'
            f"{_multiline(entry.comment)}</div></div>"
        )
    return (
        '<div style="font-family:-apple-system,sans-serif;max-width:600px;margin:0 auto;">'
        '<div style="background:#c41e1e;color:#fff;padding:16px 20px;font-weight:900;">'
        "Summary Tester - Feedback</div>"
        '<div style="padding:20px;border:1px solid #e0e0e0;">'
        '<table style="width:100%;font-size:14px;">'
        f"<tr><td>Bewertung</td><td><b>{mark} {entry.rating_label}</b></td></tr>"
        f'<tr><td>Artikel</td><td><a href="{html.escape(entry.article_url, quote=True)}">'
        f"{link_text}</a></td></tr>"
        f"<tr><td>Prompt</td><td>{html.escape(entry.prompt_name)}</td></tr>"
        f"<tr><td>Modell</td><td>{html.escape(entry.model)}</td></tr>"
        "</table>"
        '<div style="margin-top:16px;padding-top:16px;border-top:1px solid #eee;">'
        '<div style="font-size:11px;text-transform:uppercase;color:#999;">Zusammenfassung</div>'
        '<div style="background:#f8f8f8;border-left:4px solid #c41e1e;padding:12px 16px;">'
        f"{_multiline(entry.summary)}</div></div>"
        f"{comment}"
        f'<div style="margin-top:20px;font-size:11px;color:#bbb;">'
        f"{datetime.now():%d.%m.%Y %H:%M} | Summary Tester</div>"
        "</div></div>"
    )


def send_feedback_email(entry: FeedbackEntry) -> bool:
    """Mail *entry* to ``settings.feedback_email``.

    Returns ``False`` without sending when SMTP is not configured, and also
    when sending fails (the failure is logged); feedback storage never depends
    on mail delivery.
    """
    if not settings.mail_enabled:
        return False

    message = EmailMessage()
    message["From"] = settings.smtp_user
    message["To"] = settings.feedback_email
    message["Subject"] = (
        f"Summary Feedback: {entry.rating_label} - {entry.article_title[:60]}"
    )
    message.set_content("Dieses Feedback wird als HTML angezeigt.")
    message.add_alternative(render_feedback_html(entry), subtype="html")

    try:
        with smtplib.SMTP(settings.smtp_host, settings.smtp_port, timeout=30) as smtp:
            smtp.ehlo()
            if smtp.has_extn("starttls"):
                smtp.starttls()
            smtp.login(settings.smtp_user, settings.smtp_pass)
            smtp.send_message(message)
    except (smtplib.SMTPException, OSError) as exc:
        logger.error("Feedback mail could not be sent: %s", exc)
        return False
    return True
