from liftlog.core.catalog import DEFAULT_CATALOG, Exercise, MovementClass, WeightUnit
from liftlog.core.warmup import plan, rest_guidance

LEG_PRESS = DEFAULT_CATALOG.get("leg_press_angled")   # compound, step 10
FLY = DEFAULT_CATALOG.get("fly_machine")              # isolation, step 5 lb
CALF = DEFAULT_CATALOG.get("calf_press_leg_press")    # isolation, step 10

def weights(sets):
    return [s.weight for s in sets]

def test_compound_ramp_170():
    sets = plan(LEG_PRESS, 170)
    assert weights(sets) == [90, 120, 140, 160]
    assert [s.reps for s in sets] == ["8", "4–5", "1–2", "1"]
    assert sets[0].note == "~50%"
    assert sets[-1].note.startswith("Optional primer")

def test_isolation_ramp():
    sets = plan(FLY, 118)
    assert weights(sets) == [65, 95]
    assert [s.reps for s in sets] == ["8–10", "3–5"]
    assert [s.note for s in sets] == ["~50–60%", "~75–85%"]

def test_no_working_weight_no_ramp():
    assert plan(LEG_PRESS, 0) == []
    assert plan(LEG_PRESS, -20) == []
    assert plan(FLY, "") == []
    assert plan(FLY, None) == []

def test_coarse_step_collapses_stages():
    # 5.5 and 8 both round to one step of 10
    assert weights(plan(CALF, 10)) == [10]
    assert weights(plan(LEG_PRESS, 20)) == [10, 20]

def test_stages_strictly_increase():
    for ex in DEFAULT_CATALOG:
        for w in range(1, 400, 7):
            ws = weights(plan(ex, w))
            assert ws, (ex.id, w)
            assert all(a < b for a, b in zip(ws, ws[1:])), (ex.id, w, ws)
            assert all(x >= ex.step for x in ws)

def test_unset_increment_uses_unit_step():
    ex = Exercise("x", "X", 1, 5, 10, 2, MovementClass.compound, WeightUnit.lb, 0)
    assert weights(plan(ex, 100)) == [50, 70, 85, 95]

def test_rest_guidance():
    assert rest_guidance(MovementClass.compound) == "2–3 min before top set"
    assert rest_guidance(MovementClass.isolation) == "60–90 sec before top set"
    assert rest_guidance("compound") == "2–3 min before top set"
