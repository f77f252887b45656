"""
FastAPI routes for the plan service.
What it provides:
- Health check
- Generate plan endpoint

And, the main purpose:
Expose plan generation over HTTP with {plan} / {error} bodies.
"""


from typing import Optional

import httpx
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from taskplan.api.deps import get_llm_transport, get_settings
from taskplan.api.types import (
    GENERATION_FAILED,
    GOAL_TOO_SHORT,
    ErrorResponse,
    GeneratePlanRequest,
    HealthResponse,
    PlanResponse,
)
from taskplan.core.config import Settings
from taskplan.core.logging import get_logger
from taskplan.planning.service import clean_goal, generate_plan, is_valid_goal

log = get_logger("api.routes")

router = APIRouter()


async def _read_request(request: Request) -> GeneratePlanRequest:
    try:
        body = await request.json()
    except ValueError:
        body = None
    if not isinstance(body, dict):
        return GeneratePlanRequest()
    return GeneratePlanRequest.model_validate(body)


@router.get("/health", response_model=HealthResponse)
async def api_health():
    return {"status": "ok"}


@router.post(
    "/api/generate-plan",
    response_model=PlanResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def api_generate_plan(
    request: Request,
    settings: Settings = Depends(get_settings),
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_llm_transport),
):
    req = await _read_request(request)
    goal = clean_goal(req.goal)
    if not is_valid_goal(goal):
        return JSONResponse(status_code=400, content={"error": GOAL_TOO_SHORT})

    try:
        plan = await generate_plan(settings, goal, transport=transport)
    except Exception:
        log.exception("Plan generation failed")
        return JSONResponse(status_code=500, content={"error": GENERATION_FAILED})

    return {"plan": plan.model_dump()}
