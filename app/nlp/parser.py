from __future__ import annotations

import logging
from datetime import datetime

from ..schemas import ParsedTask
from ..utils.clock import local_now
from ..utils.text import collapse_ws, strip_trailing_connector
from .assignee import find_assignee
from .dates import QUICK_TASK_DATE_RULES, combine, extract_clock_time, match_date
from .priority import find_priority

logger = logging.getLogger(__name__)


def parse_quick_task(text: str, now: datetime | None = None) -> ParsedTask:
    """
    Parse one imperative sentence into a task.

    Steps run in a fixed order and each one removes what it matched, so
    later steps only see the remaining text:
    - priority: P1..P4, "priority N", urgent/critical, high priority
    - assignee: "for Aman", "Aman should ...", "Aman by ..."
    - clock time: "11pm", "9:30 am"
    - date: tomorrow, today, (next) weekday, "20th june", "6/20[/25]"
    Whatever is left becomes the title; the raw input is used if nothing is.
    """
    now = now or local_now()
    work = text.strip()

    priority, work = find_priority(work)
    assignee, work = find_assignee(work)
    clock, work = extract_clock_time(work)
    day, work = match_date(work, now, QUICK_TASK_DATE_RULES)

    # a bare time without a date never becomes a due date
    due = combine(day, clock, now) if day else None

    title = strip_trailing_connector(collapse_ws(work)).strip(" ,;")
    logger.debug(
        "Parsed %r -> title=%r assignee=%r due=%s priority=%s (%s)",
        text,
        title,
        assignee,
        due,
        priority.value,
        priority.label,
    )

    return ParsedTask(
        title=title or text,
        assignee=assignee,
        due_date=due,
        priority=priority,
    )
