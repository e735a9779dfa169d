from datetime import datetime

from pydantic import BaseModel, Field

from .config import settings
from .models import Priority


class ParsedTask(BaseModel):
    title: str
    assignee: str = ""  # empty means unspecified
    due_date: datetime | None = None
    priority: Priority = Priority.P3

    @classmethod
    def passthrough(cls, text: str) -> "ParsedTask":
        """Degraded record for callers whose own parsing path failed."""
        return cls(title=text)


class IngestIn(BaseModel):
    text: str = Field(..., max_length=settings.max_text_length)
    # pins "today" for relative dates; defaults to the service clock
    now: datetime | None = None


class TranscriptOut(BaseModel):
    count: int
    tasks: list[ParsedTask]
