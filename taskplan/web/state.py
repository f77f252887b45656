"""
State of the plan page.
What it holds:
- The goal text as typed
- The current plan (or none)
- The in-flight flag
- The last error message

And, the main purpose:
One submit sets exactly one of plan / error and always clears in-flight.
"""


from dataclasses import dataclass
from typing import Optional

from taskplan.llm.schemas import Plan
from taskplan.planning.service import is_valid_goal

CLEARER_GOAL = "Please enter a clearer goal."
GENERIC_ERROR = "Something went wrong."


@dataclass
class PlanView:
    goal: str = ""
    plan: Optional[Plan] = None
    loading: bool = False
    error: str = ""

    @staticmethod
    def validate_goal(goal: str) -> str:
        """Empty string when the goal may be sent, else the message to show."""
        return "" if is_valid_goal(goal.strip()) else CLEARER_GOAL

    def begin(self, goal: str) -> bool:
        """Start a submit. Returns False (and sets error) for goals under 3 chars."""
        self.goal = goal
        self.plan = None
        self.error = self.validate_goal(goal)
        if self.error:
            return False
        self.loading = True
        return True

    def succeed(self, plan: Plan) -> None:
        self.plan = plan
        self.loading = False

    def fail(self, message: str = "") -> None:
        self.error = message or GENERIC_ERROR
        self.loading = False

    @property
    def status(self) -> str:
        return "Ready" if self.plan else "Waiting"

    @property
    def is_empty(self) -> bool:
        return not self.loading and self.plan is None and not self.error
