"""
API request and response schemas.
What it defines:
- Input payload
- Response formats

And, the main purpose:
Document the wire shapes of the plan endpoint.
"""


from typing import Any, Optional

from pydantic import BaseModel, Field

from taskplan.llm.schemas import Plan

GOAL_TOO_SHORT = "Please provide a clearer goal."
GENERATION_FAILED = "Failed to generate plan. Try again."


class GeneratePlanRequest(BaseModel):
    goal: Optional[Any] = Field(None, description="Free-text goal, at least 3 characters once trimmed")


class PlanResponse(BaseModel):
    plan: Plan


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str = "ok"
