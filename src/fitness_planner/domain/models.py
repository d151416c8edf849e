"""Domain models for fitness planner users."""

from dataclasses import dataclass, field
from uuid import UUID


@dataclass(frozen=True)
class NutritionGoals:
    """Daily macro targets stored on a user profile."""

    calories: int
    protein_g: int
    carbs_g: int
    fats_g: int


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: UUID
    nutrition_goals: NutritionGoals | None = None
    dietary_type: str = "vegetarian"
    activity_level: str = ""
    goals: list[str] = field(default_factory=list)
    fitness_level: str | None = None
    primary_workout_goal: str | None = None
    equipment: list[str] = field(default_factory=list)
    workout_duration_min: int = 0
    preferred_time: str = ""
    current_diet_plan_id: UUID | None = None
    current_workout_plan_id: UUID | None = None
