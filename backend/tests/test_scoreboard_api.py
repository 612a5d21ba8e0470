from fastapi.testclient import TestClient
from liftlog.core.logbook import default_state
from liftlog.db import SessionLocal
from liftlog.main import app, prepare_store
from liftlog.repositories.session_repo import SessionRepository

client = TestClient(app)

def seed_baseline():
    with SessionLocal() as db:
        SessionRepository(db).save(default_state().sessions)

def test_catalog():
    body = client.get("/catalog").json()
    assert [e["id"] for e in body["exercises"]][:2] == ["fly_machine", "high_row_cs"]
    assert len(body["exercises"]) == 10
    assert {d["key"] for d in body["days"]} == {"upper1", "lower1"}
    curl = next(e for e in body["exercises"] if e["id"] == "leg_curl_single_alt")
    assert curl["per_leg"] is True and curl["rep_label"] == "6–10/leg"

def test_scoreboard_rows():
    seed_baseline()
    rows = client.get("/scoreboard").json()
    assert len(rows) == 10
    by_id = {r["exercise"]["id"]: r for r in rows}

    fly = by_id["fly_machine"]
    assert fly["last"] == "118lb × 6 @RIR 2 • 2026-01-02"
    assert fly["prev"] == "—"
    assert fly["change"] == "Baseline"
    assert fly["target"]["mode"] == "add_rep"
    assert fly["target"]["next_weight"] == 118
    assert fly["target"]["target_reps"] == 7
    assert fly["target"]["instruction"] == "Same weight: 118lb — +1 rep (aim 7), keep RIR ~2–2."
    assert [w["weight"] for w in fly["warmups"]] == [65, 95]
    assert fly["rest"] == "60–90 sec before top set"

    lat = by_id["lat_pulldown"]
    assert lat["target"]["mode"] == "baseline"
    assert lat["warmups"] == []

def test_scoreboard_change_after_new_log():
    seed_baseline()
    client.post("/sessions", json={
        "date": "2026-01-09", "day_key": "upper1",
        "items": {"high_row_cs": {"sets": [{"weight": 82.5, "reps": 5, "rir": 1}]}},
    })
    row = {r["exercise"]["id"]: r for r in client.get("/scoreboard").json()}["high_row_cs"]
    assert row["change"] == "+2.5kg"
    assert row["last_date"] == "2026-01-09"
    assert row["prev"] == "80kg × 5 @RIR 1 • 2026-01-02"

def test_log_template():
    seed_baseline()
    body = client.get("/log/lower1").json()
    assert body["day"]["name"] == "Lower 1"
    assert body["date"] == "2026-01-10"
    press = body["entries"][0]
    assert press["exercise"]["id"] == "leg_press_angled"
    assert press["sets"][0]["weight"] == 160
    assert len(press["sets"]) == 2
    assert press["rest"] == "2–3 min before top set"

def test_warmup_endpoint():
    body = client.get("/exercises/leg_press_angled/warmup", params={"weight": 170}).json()
    assert [s["weight"] for s in body["sets"]] == [90, 120, 140, 160]
    assert body["rest"] == "2–3 min before top set"
    assert client.get("/exercises/fly_machine/warmup", params={"weight": 0}).json()["sets"] == []

def test_trend_endpoint():
    seed_baseline()
    body = client.get("/exercises/leg_press_angled/trend").json()
    assert body["unit"] == "kg"
    assert body["points"] == [{"date": "2026-01-02", "reps": 5, "weight": 160}]

def test_analytics():
    seed_baseline()
    client.post("/sessions", json={
        "date": "2026-01-09", "day_key": "upper1",
        "items": {"fly_machine": {"sets": [{"weight": 118, "reps": 7, "rir": 2}]}},
    })
    body = client.get("/analytics").json()
    assert body["total_count"] == 3
    assert body["last_date"] == "2026-01-09"
    assert body["days_since_last"] == 1
    assert body["sessions_in_last_7_days"] == 1
    assert body["streak"] == 1
    assert body["next_up"] == "lower1"
    assert body["next_up_label"] == "Lower 1"
    assert body["last_session_label"] == "2026-01-09 • Upper 1"

def test_analytics_empty_store():
    body = client.get("/analytics").json()
    assert body["total_count"] == 0
    assert body["last_date"] is None
    assert body["days_since_last"] is None
    assert body["streak"] == 0
    assert body["next_up"] == "upper1"

def test_prepare_store_seeds_only_when_empty(monkeypatch):
    from liftlog.settings import get_settings
    monkeypatch.setattr(get_settings(), "SEED_BASELINE", True)
    prepare_store()
    prepare_store()
    with SessionLocal() as db:
        assert SessionRepository(db).count() == 2

def test_analytics_after_seeding_points_at_lower_day():
    seed_baseline()
    body = client.get("/analytics").json()
    assert body["last_session_label"] == "2026-01-02 • Upper 1"
    assert body["next_up"] == "lower1"
    assert body["days_since_last"] == 8
    assert body["streak"] == 1
