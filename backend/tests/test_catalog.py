import dataclasses
import pytest
from liftlog.core.catalog import (
    DEFAULT_CATALOG, Catalog, DayKey, Exercise, MovementClass, TrainingDay, WeightUnit,
)

def test_catalog_order_is_upper_then_lower():
    ids = DEFAULT_CATALOG.ordered_ids()
    assert ids == [
        "fly_machine", "high_row_cs", "lat_pulldown", "shoulder_press_u1",
        "pushdown_3pulley", "preacher_curl_machine",
        "leg_press_angled", "leg_curl_single_alt", "leg_ext_single_alt", "calf_press_leg_press",
    ]
    assert [ex.id for ex in DEFAULT_CATALOG] == ids

def test_catalog_rows():
    fly = DEFAULT_CATALOG.get("fly_machine")
    assert (fly.sets, fly.rep_min, fly.rep_max, fly.target_rir) == (2, 5, 10, 2)
    assert fly.movement is MovementClass.isolation and fly.unit is WeightUnit.lb and fly.increment == 5

    press = DEFAULT_CATALOG.get("leg_press_angled")
    assert (press.rep_min, press.rep_max, press.increment) == (4, 8, 10)
    assert press.is_compound

    curl = DEFAULT_CATALOG.get("leg_curl_single_alt")
    assert curl.per_leg and curl.rep_label == "6–10/leg"
    assert DEFAULT_CATALOG.get("nope") is None

def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        DEFAULT_CATALOG.exercises_by_id["x"] = None
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CATALOG.get("fly_machine").increment = 10

def test_day_lookup():
    assert DEFAULT_CATALOG.day("lower1").key is DayKey.lower1
    assert DEFAULT_CATALOG.day("push") is None
    assert DEFAULT_CATALOG.day_label("upper1") == "Upper 1"
    assert DEFAULT_CATALOG.day_label("") == "—"

def test_step_falls_back_by_unit():
    lb = Exercise("a", "A", 1, 5, 10, 2, MovementClass.isolation, WeightUnit.lb, 0)
    kg = Exercise("b", "B", 1, 5, 10, 2, MovementClass.isolation, WeightUnit.kg, -1)
    assert lb.step == 5
    assert kg.step == 2.5

def test_build_rejects_unknown_day_members():
    ex = Exercise("a", "A", 1, 5, 10, 2, MovementClass.compound, WeightUnit.kg, 2.5)
    with pytest.raises(ValueError):
        Catalog.build([ex], [TrainingDay(DayKey.upper1, "U", "", ("a", "b"))])
    with pytest.raises(ValueError):
        Catalog.build([ex, ex], [])
