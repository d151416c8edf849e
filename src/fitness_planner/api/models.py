"""Pydantic request models for the HTTP API."""

from uuid import UUID

from pydantic import BaseModel, Field


class PreferencesUpdate(BaseModel):
    """Profile preference fields a user may change."""

    dietary_type: str | None = None
    activity_level: str | None = None
    goals: list[str] | None = None
    fitness_level: str | None = None
    primary_workout_goal: str | None = None
    equipment: list[str] | None = None
    workout_duration_min: int | None = Field(default=None, ge=0)
    preferred_time: str | None = None


class DietGenerateRequest(BaseModel):
    """Diet plan generation payload."""

    duration_days: int | None = Field(default=None, ge=1)
    preferences: dict[str, object] = Field(default_factory=dict)


class SwapDishRequest(BaseModel):
    """Dish swap payload."""

    day_index: int
    meal_type: str
    old_item_id: UUID
    new_item_id: UUID


class WorkoutGenerateRequest(BaseModel):
    """Workout plan generation payload."""

    fitness_level: str | None = None
    primary_goal: str | None = None
    duration_days: int | None = Field(default=None, ge=1)
    workouts_per_week: int = Field(default=3, ge=1, le=7)


class CompleteWorkoutRequest(BaseModel):
    """Workout completion payload."""

    plan_id: UUID
    day_index: int
