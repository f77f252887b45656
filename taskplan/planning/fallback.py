from taskplan.llm.schemas import Plan, PlanStep

FALLBACK_ASSUMPTION = "This plan is a placeholder because AI_API_KEY is not set."

_FALLBACK_STEPS = [
    ("Clarify the goal and success criteria", "Define what success looks like in one sentence."),
    ("Identify the minimum viable steps", "List the smallest set of actions that create value."),
    ("Validate inputs and constraints", "Confirm resources, timelines, and dependencies."),
    ("Execute and verify progress", "Deliver each step and check results quickly."),
    ("Review and iterate", "Capture learnings and refine the plan for next time."),
]


def fallback_plan(goal: str) -> Plan:
    """Fixed plan served when no model key is configured (no network)."""
    return Plan(
        goal=goal,
        assumptions=[FALLBACK_ASSUMPTION],
        steps=[
            PlanStep(step=idx, title=title, description=description)
            for idx, (title, description) in enumerate(_FALLBACK_STEPS, start=1)
        ],
        risks=[],
    )
