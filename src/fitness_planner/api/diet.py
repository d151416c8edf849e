"""Nutrition and diet plan endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, HTTPException, Request, status

from fitness_planner.api.models import DietGenerateRequest, SwapDishRequest
from fitness_planner.api.serializers import (
    serialize_calculation,
    serialize_diet_plan,
    serialize_dish,
    serialize_goals,
)
from fitness_planner.domain.diet import SwapRequest
from fitness_planner.domain.nutrition import NutritionInputs

if TYPE_CHECKING:
    from fitness_planner.containers import AppContainer

router = APIRouter(tags=["diet"])


@router.post("/users/{user_id}/nutrition/calculate")
async def calculate_nutrition(
    user_id: UUID, inputs: NutritionInputs, request: Request
) -> dict[str, object]:
    """Compute and store the user's nutrition goals."""
    container: AppContainer = request.app.state.container
    calculation = container.nutrition_service.calculate(user_id, inputs)
    return {"ok": True, "nutrition": serialize_calculation(calculation)}


@router.get("/users/{user_id}/nutrition")
async def nutrition_goals(user_id: UUID, request: Request) -> dict[str, object]:
    """Return the stored nutrition goals or null."""
    container: AppContainer = request.app.state.container
    goals = container.nutrition_service.get_goals(user_id)
    return {"ok": True, "nutrition_goals": serialize_goals(goals) if goals else None}


@router.post("/users/{user_id}/diet/generate")
async def generate_diet_plan(
    user_id: UUID, payload: DietGenerateRequest, request: Request
) -> dict[str, object]:
    """Generate a new diet plan and make it current."""
    container: AppContainer = request.app.state.container
    max_days = container.settings.max_plan_days
    if payload.duration_days is not None and payload.duration_days > max_days:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Plans are limited to {max_days} days",
        )
    plan = container.diet_plan_service.generate(
        user_id,
        duration_days=payload.duration_days,
        preferences=payload.preferences,
    )
    return {"ok": True, "diet_plan": serialize_diet_plan(plan)}


@router.get("/users/{user_id}/diet/current")
async def current_diet_plan(user_id: UUID, request: Request) -> dict[str, object]:
    """Return the user's current diet plan or null."""
    container: AppContainer = request.app.state.container
    plan = container.diet_plan_service.get_current(user_id)
    return {"ok": True, "diet_plan": serialize_diet_plan(plan) if plan else None}


@router.get("/users/{user_id}/diet/plans")
async def list_diet_plans(user_id: UUID, request: Request) -> dict[str, object]:
    """Return the user's diet plan history."""
    container: AppContainer = request.app.state.container
    plans = container.diet_plan_service.list_plans(user_id)
    return {"ok": True, "plans": [serialize_diet_plan(plan) for plan in plans]}


@router.post("/users/{user_id}/diet/swap")
async def swap_dish(
    user_id: UUID, payload: SwapDishRequest, request: Request
) -> dict[str, object]:
    """Swap one dish in the current plan."""
    container: AppContainer = request.app.state.container
    plan = container.diet_plan_service.swap_dish(
        user_id,
        SwapRequest(
            day_index=payload.day_index,
            meal_type=payload.meal_type,
            old_item_id=payload.old_item_id,
            new_item_id=payload.new_item_id,
        ),
    )
    return {"ok": True, "diet_plan": serialize_diet_plan(plan)}


@router.get("/users/{user_id}/diet/dishes/{category}")
async def swap_candidates(
    user_id: UUID, category: str, request: Request
) -> dict[str, object]:
    """Return dishes of a category the user may swap in."""
    container: AppContainer = request.app.state.container
    dishes = container.diet_plan_service.list_swap_candidates(user_id, category)
    return {"ok": True, "dishes": [serialize_dish(dish) for dish in dishes]}


@router.get("/diet/dish/{dish_id}")
async def dish_detail(dish_id: UUID, request: Request) -> dict[str, object]:
    """Return a single dish with its recipe details."""
    container: AppContainer = request.app.state.container
    dish = container.catalog_service.get_dish(dish_id)
    return {"ok": True, "dish": serialize_dish(dish)}
