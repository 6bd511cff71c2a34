"""DOM pruning: deletes known-noise subtrees before content extraction."""

from __future__ import annotations

import logging
from typing import Iterable

from bs4 import BeautifulSoup

from summary_tester.scraper.models import RuleOutcome
from summary_tester.scraper.rules import DEFAULT_SANITIZER_RULES, SanitizerRule

logger = logging.getLogger(__name__)


def _apply_rule(soup: BeautifulSoup, rule: SanitizerRule) -> RuleOutcome:
    """Delete every element matching *rule* and report how many went."""
    try:
        matches = soup.select(rule.selector)
        removed = 0
        for element in matches:
            # Nested matches die with an ancestor removed earlier in this loop.
            if element.decomposed:
                continue
            element.decompose()
            removed += 1
    except Exception as exc:  # noqa: BLE001
        logger.debug("Skipping sanitizer rule %r: %s", rule.selector, exc)
        return RuleOutcome(selector=rule.selector, error=str(exc) or type(exc).__name__)
    return RuleOutcome(selector=rule.selector, removed=removed)


def prune_document(
    soup: BeautifulSoup,
    rules: Iterable[SanitizerRule] = DEFAULT_SANITIZER_RULES,
) -> list[RuleOutcome]:
    """Remove every element matching any of *rules* from *soup*, in order.

    Pruning is best-effort: a rule that fails (for instance an invalid
    selector) is recorded in its :class:`RuleOutcome` and the remaining rules
    still run.  The document is mutated in place.

    Returns:
        One :class:`RuleOutcome` per rule, in rule order.
    """
    return [_apply_rule(soup, rule) for rule in rules]
