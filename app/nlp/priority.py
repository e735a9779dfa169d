from __future__ import annotations

import re

from ..models import Priority
from ..utils.text import cut_span

PRIORITY_PAT = re.compile(
    r"\b(p[1-4]|priority\s+[1-4]|urgent|critical|high\s+priority)\b",
    re.IGNORECASE,
)

# exact token -> level; keys are lower-cased with single spaces
PRIORITY_TOKENS: dict[str, Priority] = {
    "p1": Priority.P1,
    "priority 1": Priority.P1,
    "urgent": Priority.P1,
    "critical": Priority.P1,
    "p2": Priority.P2,
    "priority 2": Priority.P2,
    "high priority": Priority.P2,
    "p3": Priority.P3,
    "priority 3": Priority.P3,
    "p4": Priority.P4,
    "priority 4": Priority.P4,
}


def _level(token: str) -> Priority:
    return PRIORITY_TOKENS.get(" ".join(token.lower().split()), Priority.default())


def find_priority(text: str) -> tuple[Priority, str]:
    """Return (priority, text without the matched cue). Defaults to P3."""
    match = PRIORITY_PAT.search(text)
    if not match:
        return Priority.default(), text
    return _level(match.group(1)), cut_span(text, match)


def extract_priority(text: str) -> Priority:
    return find_priority(text)[0]
