import pytest

from app.models import Priority
from app.nlp.priority import extract_priority, find_priority


@pytest.mark.parametrize(
    "text, expected",
    [
        ("P1 review doc", Priority.P1),
        ("this is high priority", Priority.P2),
        ("p4 cleanup", Priority.P4),
        ("priority 1 budget sign-off", Priority.P1),
        ("priority 2 vendor contracts", Priority.P2),
        ("priority   4 tidy wiki", Priority.P4),
        ("priority 3 retro notes", Priority.P3),
        ("Fix login, urgent", Priority.P1),
        ("CRITICAL outage follow-up", Priority.P1),
        ("p3 water plants", Priority.P3),
    ],
)
def test_priority_cues(text, expected):
    assert extract_priority(text) == expected


def test_priority_defaults_to_p3():
    assert extract_priority("Buy milk") == Priority.P3
    assert extract_priority("") == Priority.P3
    # cue must be a whole word
    assert extract_priority("ship sp1 build") == Priority.P3


def test_first_cue_wins():
    assert extract_priority("p4 unless it turns urgent") == Priority.P4


def test_find_priority_strips_token():
    priority, rest = find_priority("P1 review doc")
    assert priority == Priority.P1
    assert rest == " review doc"

    priority, rest = find_priority("Buy milk")
    assert priority == Priority.P3
    assert rest == "Buy milk"


def test_priority_label_and_default():
    assert Priority.P1.label == "urgent"
    assert Priority.P4.label == "low"
    assert Priority.default() == Priority.P3
