from liftlog.core.logbook import default_state
from liftlog.core.records import (
    Profile, SetRecord, TrainingState, coerce_session, coerce_sets, coerce_state, sort_sessions_desc,
)
from liftlog.schemas.backup import StateDocument

def test_state_document_round_trips():
    state = default_state()
    again = coerce_state(StateDocument.from_state(state).model_dump(mode="json"))
    assert again == state

def test_malformed_documents_become_empty():
    for doc in (None, "x", 42, [], {"sessions": "nope"}, {"sessions": [1, "two", None]}):
        state = coerce_state(doc)
        assert state.sessions == ()
        assert state.version == 2

def test_older_camel_case_export_is_accepted():
    doc = {
        "version": 2,
        "profile": {"name": "Brian", "device": "phone-only"},
        "sessions": [{
            "id": "sess_a1", "date": "2026-01-02", "dayKey": "upper1", "notes": "Baseline",
            "items": {"fly_machine": {"exerciseId": "fly_machine",
                                      "sets": [{"weight": 118, "reps": 6, "rir": 2, "note": ""}]}},
        }],
    }
    (s,) = coerce_state(doc).sessions
    assert s.day_key == "upper1"
    assert s.seq is None
    assert s.items["fly_machine"].primary == SetRecord(weight=118, reps=6, rir=2)

def test_invalid_sets_and_empty_entries_are_dropped():
    sets = coerce_sets([
        {"weight": 100, "reps": 5, "rir": "x"},
        {"weight": 100, "reps": 0},
        "garbage",
        {"weight": "NaN", "reps": 5},
    ])
    assert sets == (SetRecord(weight=100, reps=5, rir=None),)

    s = coerce_session({"date": "2026-01-02", "day_key": "lower1", "items": {"leg_press_angled": {"sets": []}}})
    assert s.items == {}
    assert s.id.startswith("sess_")

def test_profile_from_document_falls_back_to_given_profile():
    state = coerce_state({"profile": {"name": ""}, "sessions": []}, profile=Profile(name="Sam", device="tablet"))
    assert state.profile == Profile(name="Sam", device="tablet")
    assert coerce_state({}, profile=Profile(name="Sam")).profile.name == "Sam"

def test_sort_sessions_desc():
    state = default_state()
    upper, lower = state.sessions
    # same date: upper1 carries the higher seq, so it ranks as the latest
    assert sort_sessions_desc(state.sessions) == [upper, lower]
    assert sort_sessions_desc([]) == []
    assert isinstance(TrainingState().sessions, tuple)

def test_repeated_session_ids_are_made_unique():
    doc = StateDocument.from_state(default_state()).model_dump(mode="json")
    doc["sessions"][1]["id"] = doc["sessions"][0]["id"]
    first, second = coerce_state(doc).sessions
    assert first.id == "sess_baseline_upper1"
    assert second.id.startswith("sess_") and second.id != first.id
    # only the id changes
    assert (second.date, second.day_key, second.seq) == ("2026-01-02", "lower1", 1)
