"""
Creates the plan for a goal.
What it does:
- Returns the fixed fallback plan when no AI_API_KEY is configured
- Otherwise sends the goal to the model with the planner prompt
- Normalizes the model's JSON into a Plan

And, the main purpose:
Convert a goal into a 5-7 step plan, one model call per request.
"""


import httpx
from typing import Optional

from taskplan.core.config import Settings
from taskplan.core.logging import get_logger
from taskplan.llm.prompts import PLANNER_SYSTEM
from taskplan.llm.router import llm_json
from taskplan.llm.schemas import Plan
from taskplan.planning.fallback import fallback_plan
from taskplan.planning.normalizer import normalize_plan

log = get_logger("planning.service")

MIN_GOAL_LENGTH = 3


def clean_goal(value) -> str:
    """Coerce a submitted goal to a trimmed string (None/empty -> "")."""
    return str(value or "").strip()


def is_valid_goal(goal: str) -> bool:
    return len(goal) >= MIN_GOAL_LENGTH


async def generate_plan(
    settings: Settings,
    goal: str,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Plan:
    if not settings.has_model:
        return fallback_plan(goal)

    raw = await llm_json(settings, PLANNER_SYSTEM, goal, transport=transport)
    plan = normalize_plan(raw, goal)
    log.info(f"plan generated: model={settings.AI_MODEL} steps={len(plan.steps)}")
    return plan
