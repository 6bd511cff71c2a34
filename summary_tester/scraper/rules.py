"""Sanitizer rule sets for article pages.

Two ordered, immutable rule sets are defined here and shared by every
pipeline entry point:

``DEFAULT_SANITIZER_RULES``
    CSS selectors whose matches are deleted from the parsed page *before*
    content extraction (audio players, paywalls, share bars, cookie banners,
    navigation, ...).

``DEFAULT_STRIP_RULES``
    Regular expressions deleted from the extracted plain text *after*
    extraction (consent boilerplate, paywall prompts, photo credits,
    timestamps, ...).  The order is significant: the full paywall prompts are
    removed before the bare brand mention, and multi-sentence consent blocks
    before the short labels they contain.

The patterns target the German wording used by BILD article pages.
"""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class SanitizerRule:
    """A structural removal rule: every element matching ``selector`` is deleted."""

    selector: str


@dataclass(frozen=True)
class TextStripRule:
    """A text rewrite rule, applied to all occurrences of ``pattern``."""

    name: str
    pattern: re.Pattern[str]
    replacement: str = ""

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


def _strip(name: str, pattern: str, flags: int = 0) -> TextStripRule:
    return TextStripRule(name=name, pattern=re.compile(pattern, flags))


_I = re.IGNORECASE
_IS = re.IGNORECASE | re.DOTALL


# ---------------------------------------------------------------------------
# Structural rules (applied to the DOM before extraction)
# ---------------------------------------------------------------------------
DEFAULT_SANITIZER_RULES: tuple[SanitizerRule, ...] = tuple(
    SanitizerRule(selector)
    for selector in (
        '[class*="TTS"]',
        '[class*="tts"]',
        '[class*="audio-player"]',
        '[class*="paywall"]',
        '[class*="Paywall"]',
        '[class*="newsletter"]',
        '[class*="Newsletter"]',
        '[class*="social-bar"]',
        '[class*="share"]',
        '[class*="related"]',
        '[class*="teaser"]',
        '[class*="ad-"]',
        '[class*="Ad-"]',
        '[class*="cookie"]',
        '[class*="consent"]',
        '[class*="navigation"]',
        '[class*="breadcrumb"]',
        '[data-component="TTS"]',
        "aside",
        "nav",
        "footer",
    )
)


# ---------------------------------------------------------------------------
# Text rules (applied to the extracted plain text, in this order)
# ---------------------------------------------------------------------------
_STANDALONE_LINES = (
    ("line-share", "Teilen"),
    ("line-comments", "Kommentare"),
    ("line-recommendations", "Empfehlungen"),
    ("line-also-interesting", r"Auch\s*interessant"),
    ("line-read-also", r"Lesen\s*Sie\s*auch"),
    ("line-deals", r"BILD\s*Deals"),
    ("line-newsletter", "Newsletter"),
)

DEFAULT_STRIP_RULES: tuple[TextStripRule, ...] = (
    _strip("tts-skip", r"TTS-Player\s*[uü]berspringen\s*", _I),
    _strip("continue-reading", r"Artikel\s*weiterlesen\s*", _I),
    _strip("read-article", r"Artikel\s*lesen\s*", _I),
    _strip("paywall-continue", r"Weiterlesen\s*mit\s*BILDplus\s*", _I),
    _strip("paywall-read-now", r"Jetzt\s*mit\s*BILDplus\s*lesen\s*", _I),
    # Compounds such as "BILDplus-Abo" are real words and stay.
    _strip("paywall-brand", r"BILDplus(?![-\w])\s*"),
    _strip("photo-credit", r"Foto:\s*[^\n]{0,60}(?:\n|\Z)"),
    _strip("source-credit", r"Quelle:\s*BILD\s*", _I),
    _strip("video-more", r"Mehr\s*zum\s*Video\s*anzeigen\s*", _I),
    _strip(
        "video-consent",
        r"Wir\s*haben\s*personalisierte\s*Videos\s*f[uü]r\s*dich!.*?(?:Zustimmung\.|\Z)",
        _IS,
    ),
    _strip(
        "third-party-consent",
        r"Um\s*mit\s*Inhalten\s*von\s*Drittanbietern\s*zu\s*interagieren.*?(?:Zustimmung\.|\Z)",
        _IS,
    ),
    _strip("consent-needed", r"brauchen\s*wir\s*deine\s*Zustimmung\.\s*", _I),
    _strip("activate-external", r"Aktiviere\s*externe\s*Inhalte.*?(?:\.\s|\Z)", _I),
    _strip("external-label", r"Externer\s*Inhalt\s*", _I),
    _strip("agree", r"Ich\s*bin\s*damit\s*einverstanden.*?(?:\.\s|\Z)", _I),
    _strip("privacy-label", r"Datenschutzerkl[aä]rung\s*", _I),
    _strip(
        "more-info",
        r"Mehr\s*Informationen\s*dazu\s*findest\s*du\s*in\s*unserer\s*",
        _I,
    ),
    _strip(
        "embedded-content",
        r"Um\s*eingebettete\s*Inhalte\s*anzuzeigen.*?(?:DSGVO\)\.?\s*(?=Mit)|\Z)",
        _IS,
    ),
    _strip(
        "switch-click",
        r"Mit\s*dem\s*Klick\s*auf\s*den\s*Schalter.*?(?:Tracking\s*und\s*Cookies|einverstanden)",
        _IS,
    ),
    _strip("revoke-tracking", r"Widerruf\s*Tracking\s*und\s*Cookies\s*", _I),
    _strip(
        "third-country",
        r"Dabei\s*k[oö]nnen\s*Daten\s*in\s*Drittl[aä]nder.*?(?:\.\s|\Z)",
        _I,
    ),
    *(
        _strip(name, rf"^\s*{label}\s*$", re.MULTILINE)
        for name, label in _STANDALONE_LINES
    ),
    _strip("timestamp", r"\d{2}\.\d{2}\.\d{4}\s*-\s*\d{2}:\d{2}\s*Uhr\s*"),
)
