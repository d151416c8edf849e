"""Nutrition calculator models."""

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, Field

from fitness_planner.domain.models import NutritionGoals

ActivityLevel = Literal["sedentary", "light", "moderate", "active", "very-active"]
GoalDirection = Literal["lose", "maintain", "gain"]


class NutritionInputs(BaseModel):
    """Body measurements and goal used to compute nutrition targets."""

    age: int = Field(gt=0, le=120)
    gender: str
    weight_kg: float = Field(gt=0)
    height_cm: float = Field(gt=0)
    activity: ActivityLevel
    goal: GoalDirection


@dataclass(frozen=True)
class NutritionCalculation:
    """Computed energy expenditure and macro goals."""

    bmr: int
    tdee: int
    goals: NutritionGoals
