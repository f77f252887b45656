import pytest

from conftest import raw_plan
from taskplan.planning.normalizer import (
    DESCRIPTION_PLACEHOLDER,
    PlanValidationError,
    normalize_plan,
)


@pytest.mark.parametrize("n_steps, expected", [(5, 5), (6, 6), (7, 7), (9, 7), (20, 7)])
def test_steps_renumbered_and_truncated(n_steps, expected):
    plan = normalize_plan(raw_plan(n_steps), "fallback goal")
    assert [s.step for s in plan.steps] == list(range(1, expected + 1))
    assert plan.steps[-1].title == f"Title {expected}"


def test_source_step_numbers_are_discarded():
    raw = raw_plan(5)
    for s, number in zip(raw["steps"], [9, 9, "x", None, -3]):
        s["step"] = number
    plan = normalize_plan(raw, "g")
    assert [s.step for s in plan.steps] == [1, 2, 3, 4, 5]


@pytest.mark.parametrize("n_steps", [0, 1, 4])
def test_fewer_than_five_steps_fails(n_steps):
    with pytest.raises(PlanValidationError):
        normalize_plan(raw_plan(n_steps), "g")


def test_non_object_steps_are_filtered_before_counting():
    raw = raw_plan(4)
    raw["steps"] += ["a string", 7, None, True]
    with pytest.raises(PlanValidationError):
        normalize_plan(raw, "g")


def test_array_steps_count_as_blank_steps():
    plan = normalize_plan({"steps": [[], [], ["x"], [], []]}, "g")
    assert [s.step for s in plan.steps] == [1, 2, 3, 4, 5]
    assert plan.steps[2].title == "Step 3"
    assert plan.steps[2].description == DESCRIPTION_PLACEHOLDER


def test_positions_follow_the_filtered_list():
    raw = raw_plan(5)
    raw["steps"].insert(1, "noise")
    raw["steps"][3]["title"] = "  "
    plan = normalize_plan(raw, "g")
    assert len(plan.steps) == 5
    assert plan.steps[2].title == "Step 3"


@pytest.mark.parametrize("steps", [None, "steps", {"title": "x"}, 12])
def test_non_array_steps_fail(steps):
    with pytest.raises(PlanValidationError):
        normalize_plan(raw_plan(steps=steps), "g")


@pytest.mark.parametrize("raw", [None, [], "plan", 3])
def test_non_object_plan_fails(raw):
    with pytest.raises(PlanValidationError):
        normalize_plan(raw, "g")


def test_blank_or_missing_title_and_description_fall_back():
    raw = raw_plan(5)
    raw["steps"][0] = {}
    raw["steps"][1] = {"title": "   ", "description": ""}
    raw["steps"][2] = {"title": 42, "description": ["no"]}
    plan = normalize_plan(raw, "g")
    for idx in range(3):
        assert plan.steps[idx].title == f"Step {idx + 1}"
        assert plan.steps[idx].description == DESCRIPTION_PLACEHOLDER


def test_title_and_description_are_trimmed():
    raw = raw_plan(5)
    raw["steps"][0] = {"title": "  Record pilot  ", "description": "\tBuy a mic.\n"}
    plan = normalize_plan(raw, "g")
    assert plan.steps[0].title == "Record pilot"
    assert plan.steps[0].description == "Buy a mic."


@pytest.mark.parametrize("goal", [None, "", "   ", 5, ["goal"]])
def test_goal_falls_back_to_request_goal(goal):
    plan = normalize_plan(raw_plan(goal=goal), "Launch a podcast")
    assert plan.goal == "Launch a podcast"


def test_model_goal_kept_when_present():
    plan = normalize_plan(raw_plan(goal="Ship a weekly show"), "Launch a podcast")
    assert plan.goal == "Ship a weekly show"


def test_assumptions_and_risks_drop_bad_entries():
    raw = raw_plan(assumptions=["ok", "", "  ", 3, None, {"a": 1}, "also ok"], risks=[False, "risk"])
    plan = normalize_plan(raw, "g")
    assert plan.assumptions == ["ok", "also ok"]
    assert plan.risks == ["risk"]


@pytest.mark.parametrize("value", [None, "one assumption", {"a": "b"}, 1])
def test_non_array_assumptions_and_risks_are_empty(value):
    plan = normalize_plan(raw_plan(assumptions=value, risks=value), "g")
    assert plan.assumptions == []
    assert plan.risks == []


def test_missing_optional_fields():
    plan = normalize_plan({"steps": raw_plan(6)["steps"]}, "Launch a podcast")
    assert plan.goal == "Launch a podcast"
    assert plan.assumptions == []
    assert plan.risks == []
    assert len(plan.steps) == 6
