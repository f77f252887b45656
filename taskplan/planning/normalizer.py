"""
Turns the model's raw JSON into a trusted Plan.
What it does:
- Keeps the model's goal only when it is a non-blank string
- Drops non-string / blank assumptions and risks
- Keeps object-like steps (objects or arrays), fills blank titles/descriptions, renumbers 1..N
- Rejects plans with fewer than 5 usable steps, truncates to 7

And, the main purpose:
Never trust the model output; coerce every field before building a Plan.
"""


from typing import Any, List

from taskplan.llm.schemas import MAX_STEPS, MIN_STEPS, Plan, PlanStep

DESCRIPTION_PLACEHOLDER = "Add a short, actionable description."


class PlanValidationError(ValueError):
    pass


def _clean_str(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def _string_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str) and item.strip()]


def _normalize_steps(value: Any) -> List[PlanStep]:
    # JSON arrays count as object-like entries; they just carry no fields
    candidates = [s for s in value if isinstance(s, (dict, list))] if isinstance(value, list) else []
    steps = []
    for position, raw in enumerate(candidates, start=1):
        if not isinstance(raw, dict):
            raw = {}
        steps.append(
            PlanStep(
                step=position,
                title=_clean_str(raw.get("title")) or f"Step {position}",
                description=_clean_str(raw.get("description")) or DESCRIPTION_PLACEHOLDER,
            )
        )
    return steps


def normalize_plan(raw: Any, fallback_goal: str) -> Plan:
    if not isinstance(raw, dict):
        raise PlanValidationError("Invalid plan format.")

    goal = raw.get("goal")
    if not (isinstance(goal, str) and goal.strip()):
        goal = fallback_goal

    steps = _normalize_steps(raw.get("steps"))
    if len(steps) < MIN_STEPS:
        raise PlanValidationError(
            f"Plan must include {MIN_STEPS}-{MAX_STEPS} steps (got {len(steps)} usable)."
        )

    return Plan(
        goal=goal,
        assumptions=_string_list(raw.get("assumptions")),
        steps=steps[:MAX_STEPS],
        risks=_string_list(raw.get("risks")),
    )
