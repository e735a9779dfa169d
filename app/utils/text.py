import re

_WS_RE = re.compile(r"\s+")
_SENTENCE_END_RE = re.compile(r"[.!?]+")
_TRAILING_CONNECTOR_RE = re.compile(r"\b(?:by|before|on|at|for|with|to|and|or)\s*$", re.IGNORECASE)


def collapse_ws(text: str) -> str:
    return _WS_RE.sub(" ", text).strip()


def cut_span(text: str, match: re.Match) -> str:
    """Remove a regex match from the string it was found in."""
    return text[: match.start()] + text[match.end() :]


def strip_trailing_connector(text: str) -> str:
    # only one connector is dropped: "report for and" -> "report for"
    return _TRAILING_CONNECTOR_RE.sub("", text).strip()


def split_sentences(text: str) -> list[str]:
    parts = _SENTENCE_END_RE.split(text)
    return [p.strip() for p in parts if p.strip()]
