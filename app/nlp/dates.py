"""
Rule-based resolution of English date/time phrases against a fixed "now".

Only local wall-clock arithmetic is done here: results carry whatever
tzinfo ``now`` carries (usually none) and no zone conversion takes place.
"""
from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from ..utils.text import cut_span

logger = logging.getLogger(__name__)

# index matches date.weekday()
WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")
MONTHS = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)
_WEEKDAY_ALT = "|".join(WEEKDAYS)
_MONTH_ALT = "|".join(MONTHS)

CONNECTOR_PAT = re.compile(r"\b(?:by|before|on|at|this|next|the)\b", re.IGNORECASE)
CLOCK_PAT = re.compile(r"\b(1[0-2]|0?\d)(?::([0-5]\d))?\s*(am|pm)\b", re.IGNORECASE)


@dataclass(frozen=True)
class DateRule:
    name: str
    pattern: re.Pattern
    handler: Callable[[re.Match, datetime], date]


def _tomorrow(match: re.Match, now: datetime) -> date:
    return now.date() + timedelta(days=1)


def _today(match: re.Match, now: datetime) -> date:
    return now.date()


def _weekday(match: re.Match, now: datetime) -> date:
    target = WEEKDAYS.index(match.group("weekday").lower())
    # same weekday as today means a week from now, never today
    days = (target - now.weekday()) % 7 or 7
    return now.date() + timedelta(days=days)


def _day_of_month(match: re.Match, now: datetime) -> date:
    day = int(match.group("day"))
    month = MONTHS.index(match.group("month").lower()) + 1
    candidate = datetime(now.year, month, day, tzinfo=now.tzinfo)
    if candidate < now:
        candidate = candidate.replace(year=now.year + 1)
    return candidate.date()


def _numeric(match: re.Match, now: datetime) -> date:
    month = int(match.group("month"))
    day = int(match.group("day"))
    year = int(match.group("year")) if match.group("year") else now.year
    if year < 100:
        year += 2000
    return date(year, month, day)


_TOMORROW = DateRule("tomorrow", re.compile(r"\btomorrow\b", re.IGNORECASE), _tomorrow)
_NEXT_WEEKDAY = DateRule(
    "next_weekday",
    re.compile(rf"\bnext\s+(?P<weekday>{_WEEKDAY_ALT})\b", re.IGNORECASE),
    _weekday,
)
_WEEKDAY = DateRule("weekday", re.compile(rf"\b(?P<weekday>{_WEEKDAY_ALT})\b", re.IGNORECASE), _weekday)
_DAY_OF_MONTH = DateRule(
    "day_of_month",
    re.compile(rf"\b(?P<day>\d{{1,2}})\s*(?:st|nd|rd|th)?\s*(?P<month>{_MONTH_ALT})\b", re.IGNORECASE),
    _day_of_month,
)

QUICK_TASK_DATE_RULES: tuple[DateRule, ...] = (
    _TOMORROW,
    DateRule("today", re.compile(r"\btoday\b", re.IGNORECASE), _today),
    _NEXT_WEEKDAY,
    _WEEKDAY,
    _DAY_OF_MONTH,
    DateRule(
        "numeric",
        re.compile(r"\b(?P<month>\d{1,2})/(?P<day>\d{1,2})(?:/(?P<year>\d{2,4}))?\b"),
        _numeric,
    ),
)

TRANSCRIPT_DATE_RULES: tuple[DateRule, ...] = (
    _TOMORROW,
    DateRule("today", re.compile(r"\b(?:today|tonight)\b", re.IGNORECASE), _today),
    _WEEKDAY,
    _DAY_OF_MONTH,
)


def extract_clock_time(text: str) -> tuple[time | None, str]:
    """Find an "H[:MM] am|pm" expression; return it as a 24h time plus the text without it."""
    match = CLOCK_PAT.search(text)
    if not match:
        return None, text
    hour = int(match.group(1))
    minute = int(match.group(2)) if match.group(2) else 0
    meridiem = match.group(3).lower()
    if meridiem == "pm" and hour != 12:
        hour += 12
    if meridiem == "am" and hour == 12:
        hour = 0
    return time(hour, minute), cut_span(text, match)


def match_date(text: str, now: datetime, rules: tuple[DateRule, ...]) -> tuple[date | None, str]:
    """
    Try each rule in order; the first one that matches and yields a real
    calendar date wins. Returns (date, text without the matched span).
    """
    for rule in rules:
        match = rule.pattern.search(text)
        if not match:
            continue
        try:
            day = rule.handler(match, now)
        except (ValueError, OverflowError):
            # impossible day/month, or past date.max
            logger.debug("Date rule %s matched %r but it is not a calendar date", rule.name, match.group(0))
            continue
        return day, cut_span(text, match)
    return None, text


def combine(day: date, clock: time | None, now: datetime) -> datetime:
    clock = clock or time(0, 0)
    return datetime(day.year, day.month, day.day, clock.hour, clock.minute, tzinfo=now.tzinfo)


def resolve_datetime(
    fragment: str, now: datetime, rules: tuple[DateRule, ...] = TRANSCRIPT_DATE_RULES
) -> datetime | None:
    """
    Resolve a phrase like "by 10pm tomorrow" or "20th june" to a datetime.

    A clock time without a date yields None.
    """
    text = CONNECTOR_PAT.sub(" ", fragment.lower())
    clock, text = extract_clock_time(text)
    day, _ = match_date(text, now, rules)
    if day is None:
        return None
    return combine(day, clock, now)
