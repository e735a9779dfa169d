from __future__ import annotations

import re

from .dates import WEEKDAYS

_NAME = r"[A-Z][a-z]+"
_WORD = re.compile(r"\S+")

# Names must be Title-Case; only the trigger words ignore case.
# The flag says which end of a multi-word capture touches the cue word.
ASSIGNEE_PATTERNS: tuple[tuple[re.Pattern, bool], ...] = (
    # "for Sarah", "assigned to Bob Smith": cue before the name
    (re.compile(rf"\b(?i:assign(?:ed)?\s+to|for|with|by|to)\s+({_NAME}(?:\s+{_NAME})*)\b"), False),
    # "Aman should": cue after the name
    (re.compile(rf"\b({_NAME}(?:\s+{_NAME})*)\s+(?i:should|needs\s+to|must|will)\b"), True),
    # "Aman by": only the name is removed
    (re.compile(rf"\b({_NAME})\b(?=\s+(?i:by|before|on|at)\b)"), False),
)

NOT_A_NAME = frozenset(
    (*WEEKDAYS, "today", "tomorrow", "morning", "afternoon", "evening", "night", "am", "pm")
)


def _name_words(match: re.Match, cue_after: bool) -> list[re.Match]:
    """Words of the captured name next to the cue, stopping at the first day or time word."""
    words = list(_WORD.finditer(match.group(1)))
    if cue_after:
        words.reverse()
    kept = []
    for word in words:
        if word.group(0).lower() in NOT_A_NAME:
            break
        kept.append(word)
    if cue_after:
        kept.reverse()
    return kept


def find_assignee(text: str) -> tuple[str, str]:
    """Return (assignee, text without the matched span); assignee is "" when none is found.

    Day and time words caught inside a multi-word name ("with Bob Friday")
    are left in the text for the date step.
    """
    for pattern, cue_after in ASSIGNEE_PATTERNS:
        match = pattern.search(text)
        if not match:
            continue
        kept = _name_words(match, cue_after)
        if not kept:
            continue
        offset = match.start(1)
        name_start, name_end = offset + kept[0].start(), offset + kept[-1].end()
        if cue_after:
            start, end = name_start, match.end()
        else:
            start, end = match.start(), name_end
        return text[name_start:name_end], text[:start] + text[end:]
    return "", text


def extract_assignee(text: str) -> str:
    return find_assignee(text)[0]
