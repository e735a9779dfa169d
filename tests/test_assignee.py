from app.nlp.assignee import extract_assignee, find_assignee


def test_trigger_preposition_before_name():
    assert extract_assignee("Send the report to Sarah") == "Sarah"
    assert extract_assignee("Book a call with Rahul") == "Rahul"


def test_assigned_to_takes_multi_word_names():
    name, rest = find_assignee("Review PR assigned to Bob Smith")
    assert name == "Bob Smith"
    assert rest == "Review PR "


def test_name_before_obligation_verb():
    name, rest = find_assignee("Aman should deploy the build")
    assert name == "Aman"
    assert rest == " deploy the build"


def test_name_before_temporal_preposition_keeps_preposition():
    name, rest = find_assignee("Finish landing page Aman by 11pm")
    assert name == "Aman"
    assert rest == "Finish landing page  by 11pm"


def test_day_words_are_not_names():
    assert extract_assignee("Submit report by Friday") == ""
    assert extract_assignee("Dinner plans for Tomorrow") == ""


def test_lowercase_words_are_not_names():
    assert extract_assignee("email john by friday") == ""
    assert extract_assignee("") == ""


def test_bare_assign_to_trigger():
    name, rest = find_assignee("Ship build assign to Omar")
    assert name == "Omar"
    assert rest == "Ship build "


def test_day_word_after_name_is_left_in_text():
    name, rest = find_assignee("Meet with Bob Friday")
    assert name == "Bob"
    assert rest == "Meet  Friday"

    name, rest = find_assignee("Friday Aman should deploy")
    assert name == "Aman"
    assert rest == "Friday  deploy"
