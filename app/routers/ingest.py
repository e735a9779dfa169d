from fastapi import APIRouter

from ..nlp.meeting import parse_meeting_minutes
from ..nlp.parser import parse_quick_task
from ..schemas import IngestIn, ParsedTask, TranscriptOut
from ..utils.clock import local_now

router = APIRouter()


@router.post("", response_model=ParsedTask)
def ingest(payload: IngestIn):
    return parse_quick_task(payload.text, now=payload.now or local_now())


@router.post("/transcript", response_model=TranscriptOut)
def ingest_transcript(payload: IngestIn):
    tasks = parse_meeting_minutes(payload.text, now=payload.now or local_now())
    return TranscriptOut(count=len(tasks), tasks=tasks)
