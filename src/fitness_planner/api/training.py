"""Workout plan and exercise catalog endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, HTTPException, Request, status

from fitness_planner.api.models import CompleteWorkoutRequest, WorkoutGenerateRequest
from fitness_planner.api.serializers import (
    serialize_exercise,
    serialize_workout_plan,
)
from fitness_planner.domain.workout import WorkoutRequest

if TYPE_CHECKING:
    from fitness_planner.containers import AppContainer

router = APIRouter(tags=["training"])


@router.post("/users/{user_id}/training/generate")
async def generate_workout_plan(
    user_id: UUID, payload: WorkoutGenerateRequest, request: Request
) -> dict[str, object]:
    """Generate a new workout plan and make it current."""
    container: AppContainer = request.app.state.container
    max_days = container.settings.max_plan_days
    if payload.duration_days is not None and payload.duration_days > max_days:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Plans are limited to {max_days} days",
        )
    plan = container.workout_plan_service.generate(
        user_id,
        WorkoutRequest(
            fitness_level=payload.fitness_level,
            primary_goal=payload.primary_goal,
            duration_days=payload.duration_days,
            workouts_per_week=payload.workouts_per_week,
        ),
    )
    return {"ok": True, "workout_plan": serialize_workout_plan(plan)}


@router.get("/users/{user_id}/training/current")
async def current_workout_plan(user_id: UUID, request: Request) -> dict[str, object]:
    """Return the user's current workout plan or null."""
    container: AppContainer = request.app.state.container
    plan = container.workout_plan_service.get_current(user_id)
    return {
        "ok": True,
        "workout_plan": serialize_workout_plan(plan) if plan else None,
    }


@router.get("/users/{user_id}/training/plans")
async def list_workout_plans(user_id: UUID, request: Request) -> dict[str, object]:
    """Return the user's workout plan history."""
    container: AppContainer = request.app.state.container
    plans = container.workout_plan_service.list_plans(user_id)
    return {"ok": True, "plans": [serialize_workout_plan(plan) for plan in plans]}


@router.post("/users/{user_id}/training/complete")
async def complete_workout(
    user_id: UUID, payload: CompleteWorkoutRequest, request: Request
) -> dict[str, object]:
    """Mark a workout day as completed."""
    container: AppContainer = request.app.state.container
    plan = container.workout_plan_service.complete_day(
        user_id, payload.plan_id, payload.day_index
    )
    return {"ok": True, "workout_plan": serialize_workout_plan(plan)}


@router.get("/training/exercises/{category}")
async def list_exercises(category: str, request: Request) -> dict[str, object]:
    """Return exercises of a category; "all" returns the whole catalog."""
    container: AppContainer = request.app.state.container
    exercises = container.catalog_service.list_exercises(category)
    return {"ok": True, "exercises": [serialize_exercise(item) for item in exercises]}


@router.get("/training/exercise/{exercise_id}")
async def exercise_detail(exercise_id: UUID, request: Request) -> dict[str, object]:
    """Return a single exercise."""
    container: AppContainer = request.app.state.container
    exercise = container.catalog_service.get_exercise(exercise_id)
    return {"ok": True, "exercise": serialize_exercise(exercise)}
