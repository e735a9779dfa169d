from __future__ import annotations

import logging
import re
from datetime import datetime

from ..schemas import ParsedTask
from ..utils.clock import local_now
from ..utils.text import collapse_ws, split_sentences
from .dates import TRANSCRIPT_DATE_RULES, resolve_datetime
from .priority import extract_priority

logger = logging.getLogger(__name__)

_NAME = r"\b([A-Z]\w*)"
_ACTION_VERBS = (
    r"take\s+(?:care\s+of\s+)?|do\s+|handle\s+|work\s+on\s+|complete\s+|finish\s+"
    r"|review\s+|prepare\s+|create\s+|update\s+|fix\s+"
)
_DUE = r"(?:\s+(?i:by)\s+(.+?))?$"
# the comma-free run after the cue must reach " by " or the end of the sentence
_REACHABLE = r"(?=[^,]*(?:\s(?i:by)\s|$))"
# longer sentences are not read as assignments; keeps matching linear in transcript length
MAX_SENTENCE_LENGTH = 1000

# (pattern, name group, task group, due group)
ASSIGNMENT_PATTERNS: tuple[tuple[re.Pattern, int, int, int], ...] = (
    # "Aman you please take care of the deck by friday"
    (re.compile(rf"{_NAME}\s+(?i:you\s+)?(?i:please\s+)?(?i:{_ACTION_VERBS}){_REACHABLE}([^,]+?){_DUE}"), 1, 2, 3),
    # "Rajeev needs to send the invoice by 5pm"
    (re.compile(rf"{_NAME}\s+(?i:needs\s+to|should|must|will)\s+{_REACHABLE}([^,]+?){_DUE}"), 1, 2, 3),
    # "assign the audit to Priya by monday"
    (re.compile(rf"\b(?i:assign|give)\s+{_REACHABLE}([^,]+?)\s+(?i:to)\s+{_NAME}{_DUE}"), 2, 1, 3),
)

_LEADING_ARTICLE = re.compile(r"^(?:the|a|an)\s+", re.IGNORECASE)
FILLER_PHRASES = frozenset({"it", "this", "that", "you", "me", "us"})


def clean_task_phrase(phrase: str) -> str:
    return collapse_ws(_LEADING_ARTICLE.sub("", phrase.strip()))


def _is_vague(phrase: str) -> bool:
    return len(phrase) < 3 or phrase.lower() in FILLER_PHRASES


def _task_from_sentence(sentence: str, now: datetime) -> ParsedTask | None:
    if len(sentence) > MAX_SENTENCE_LENGTH:
        logger.debug("Skipping %d-char sentence", len(sentence))
        return None
    for pattern, name_group, task_group, due_group in ASSIGNMENT_PATTERNS:
        match = pattern.search(sentence)
        if not match:
            continue
        title = clean_task_phrase(match.group(task_group))
        if _is_vague(title):
            logger.debug("Skipping vague task phrase %r in %r", title, sentence)
            continue
        due_phrase = match.group(due_group)
        priority = extract_priority(sentence)
        logger.debug("Task %r for %s, %s priority", title, match.group(name_group), priority.label)
        return ParsedTask(
            title=title,
            assignee=match.group(name_group),
            due_date=resolve_datetime(due_phrase.strip(), now, TRANSCRIPT_DATE_RULES) if due_phrase else None,
            priority=priority,
        )
    return None


def parse_meeting_minutes(transcript: str, now: datetime | None = None) -> list[ParsedTask]:
    """
    Pull delegated action items out of a meeting transcript.

    Each sentence gives at most one task, in the order they appear.
    Sentences that do not read as an assignment are skipped.
    """
    now = now or local_now()
    tasks: list[ParsedTask] = []
    for sentence in split_sentences(transcript):
        task = _task_from_sentence(sentence, now)
        if task is not None:
            tasks.append(task)
    logger.debug("Extracted %d task(s) from transcript", len(tasks))
    return tasks
