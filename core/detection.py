"""
core/detection.py

Keyword-based topic and mode detection.

Both detectors lower-case the input and walk an ordered rule table, returning the result of the first
rule whose keywords occur as a substring. The tables are tuples on purpose: their order is the
tie-break when a text matches more than one rule, and adding a topic or mode is a data change here,
not a code change.
"""

from typing import Optional, Sequence, Tuple, TypeVar

from shared.models import Mode, Topic

T = TypeVar("T")

TOPIC_RULES: Tuple[Tuple[Tuple[str, ...], Topic], ...] = (
    (("derivative", "derivatives"), Topic.DERIVATIVES),
    (("integral", "integration"), Topic.INTEGRALS),
    (("limit", "limits"), Topic.LIMITS),
    (("matrix", "matrices", "linear algebra"), Topic.LINEAR_ALGEBRA),
    (("probability", "stats", "statistics"), Topic.STATISTICS),
)

# explain > practice > summary when several keywords appear in the same text.
MODE_RULES: Tuple[Tuple[Tuple[str, ...], Mode], ...] = (
    (("explain",), Mode.EXPLAIN),
    (("practice", "questions"), Mode.PRACTICE),
    (("summary", "summarize", "notes"), Mode.SUMMARY),
)


def match_first(text, rules: Sequence[Tuple[Tuple[str, ...], T]]) -> Optional[T]:
    """
    Return the result of the first rule with a keyword contained in `text`.

    Non-string input never raises; it simply matches nothing.

    Args:
        text: Text to scan. Compared case-insensitively.
        rules: Ordered (keywords, result) pairs.

    Returns:
        The matching rule's result, or None when no keyword occurs in the text.
    """
    if not isinstance(text, str):
        return None
    lowered = text.lower()
    for keywords, result in rules:
        if any(keyword in lowered for keyword in keywords):
            return result
    return None


def detect_topic(text: str) -> Optional[Topic]:
    """Detect the study topic mentioned in `text`, or None."""
    return match_first(text, TOPIC_RULES)


def detect_mode(text: str) -> Optional[Mode]:
    """Detect the requested interaction mode in `text`, or None."""
    return match_first(text, MODE_RULES)
