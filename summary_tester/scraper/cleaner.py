"""Text cleanup: strips site boilerplate from extracted article text."""

from __future__ import annotations

import re
from typing import Sequence

from summary_tester.scraper.rules import DEFAULT_STRIP_RULES, TextStripRule

# Two or more blank lines, including lines holding only spaces or tabs.
_BLANK_RUNS = re.compile(r"\n\s*\n\s*\n+")


def _clean_once(text: str, rules: Sequence[TextStripRule]) -> str:
    text = text.strip()
    for rule in rules:
        text = rule.apply(text)
    return _BLANK_RUNS.sub("\n\n", text).strip()


def clean_text(text: str, rules: Sequence[TextStripRule] = DEFAULT_STRIP_RULES) -> str:
    """Return *text* with every strip rule applied and blank-line runs collapsed.

    A single pass can join two fragments into a new match (removing a prompt
    that sat between them), so passes repeat until the text is stable.  All
    rules delete, hence every pass either shortens the text or changes nothing
    and the loop terminates.  The result never has surrounding whitespace or
    more than one consecutive blank line, and cleaning it again is a no-op.
    """
    cleaned = _clean_once(text, rules)
    while True:
        again = _clean_once(cleaned, rules)
        if again == cleaned:
            return cleaned
        cleaned = again
