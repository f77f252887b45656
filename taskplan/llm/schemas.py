from pydantic import BaseModel, Field, field_validator
from typing import List

MIN_STEPS = 5
MAX_STEPS = 7


class PlanStep(BaseModel):
    step: int = Field(..., ge=1, description="1-based position in the plan")
    title: str = Field(..., min_length=1, description="Short step title")
    description: str = Field(..., min_length=1, description="Short actionable description")


class Plan(BaseModel):
    goal: str = Field(..., min_length=1)
    assumptions: List[str] = []
    steps: List[PlanStep] = Field(..., min_length=MIN_STEPS, max_length=MAX_STEPS)
    risks: List[str] = []

    @field_validator("steps")
    @classmethod
    def _contiguous(cls, steps: List[PlanStep]) -> List[PlanStep]:
        numbers = [s.step for s in steps]
        if numbers != list(range(1, len(steps) + 1)):
            raise ValueError(f"step numbers must run 1..{len(steps)}, got {numbers}")
        return steps
