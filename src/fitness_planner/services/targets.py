"""Derive per-slot targets from stored user goals."""

import math
from dataclasses import dataclass

from fitness_planner.domain.diet import DietTargets, MealTarget
from fitness_planner.domain.errors import (
    InvalidDurationError,
    MissingPrerequisiteError,
)
from fitness_planner.domain.models import NutritionGoals, UserRecord
from fitness_planner.domain.workout import LevelProfile, WorkoutTargets


@dataclass(frozen=True)
class MealShare:
    """Percent of the daily calories and protein assigned to a meal."""

    calories_pct: int
    protein_pct: int


MEAL_DISTRIBUTION: dict[str, MealShare] = {
    "breakfast": MealShare(calories_pct=20, protein_pct=25),
    "lunch": MealShare(calories_pct=35, protein_pct=35),
    "dinner": MealShare(calories_pct=30, protein_pct=25),
    "snack": MealShare(calories_pct=15, protein_pct=15),
}

GOAL_CATEGORIES: dict[str, frozenset[str]] = {
    "weight-loss": frozenset({"cardio", "hiit"}),
    "muscle-gain": frozenset({"strength"}),
    "strength": frozenset({"strength"}),
    "flexibility": frozenset({"flexibility", "yoga", "pilates"}),
    "endurance": frozenset({"cardio", "sports"}),
}

LEVEL_PROFILES: dict[str, LevelProfile] = {
    "beginner": LevelProfile(exercises_per_day=4, sets=2, reps="8-10"),
    "intermediate": LevelProfile(exercises_per_day=5, sets=3, reps="10-12"),
    "advanced": LevelProfile(exercises_per_day=6, sets=4, reps="12-15"),
}

EQUIPMENT_MAP: dict[str, str] = {
    "bodyweight": "bodyweight",
    "free-weights": "dumbbells",
    "machines": "machine",
    "resistance-bands": "resistance-bands",
}

ALWAYS_ALLOWED_EQUIPMENT = frozenset({"bodyweight", "none"})

DEFAULT_LEVEL = "beginner"
DEFAULT_GOAL = "general-fitness"


def round_half_up(value: float) -> int:
    """Round to the nearest whole unit with halves rounded up."""
    return math.floor(value + 0.5)


def resolve_duration(requested: int | None, default: int) -> int:
    """Return the plan length in days, using the default when none is given."""
    days = default if requested is None else requested
    if days < 1:
        raise InvalidDurationError(f"Plans must last at least one day, got {days}")
    return days


def derive_diet_targets(goals: NutritionGoals | None) -> DietTargets:
    """Split daily nutrition goals into per-meal targets.

    Each meal is rounded independently, so the meal targets may drift from the
    daily totals by a unit or two.
    """
    if goals is None or not goals.calories:
        raise MissingPrerequisiteError(
            "Nutrition goals are not set; calculate nutrition needs first"
        )
    meals = {
        meal: MealTarget(
            calories=round_half_up(goals.calories * share.calories_pct / 100),
            protein_g=round_half_up(goals.protein_g * share.protein_pct / 100),
        )
        for meal, share in MEAL_DISTRIBUTION.items()
    }
    return DietTargets(daily=goals, meals=meals)


def resolve_fitness_level(user: UserRecord, requested: str | None = None) -> str:
    """Pick the fitness level from the request, the profile or activity."""
    for level in (requested, user.fitness_level):
        if level in LEVEL_PROFILES:
            return level
    if not user.activity_level:
        return DEFAULT_LEVEL
    if user.activity_level in {"sedentary", "light"}:
        return "beginner"
    if user.activity_level == "moderate":
        return "intermediate"
    return "advanced"


def resolve_primary_goal(user: UserRecord, requested: str | None = None) -> str:
    """Pick the primary goal from the request, the profile or the goals list."""
    if requested:
        return requested
    if user.primary_workout_goal:
        return user.primary_workout_goal
    if user.goals:
        return user.goals[0]
    return DEFAULT_GOAL


def map_equipment(preferences: list[str]) -> frozenset[str] | None:
    """Translate profile equipment preferences into catalog equipment tags."""
    if not preferences:
        return None
    mapped = {EQUIPMENT_MAP.get(item, "bodyweight") for item in preferences}
    return frozenset(mapped | ALWAYS_ALLOWED_EQUIPMENT)


def derive_workout_targets(
    user: UserRecord,
    fitness_level: str | None = None,
    primary_goal: str | None = None,
    workouts_per_week: int = 3,
) -> WorkoutTargets:
    """Build workout targets, falling back to profile defaults when unset."""
    level = resolve_fitness_level(user, fitness_level)
    goal = resolve_primary_goal(user, primary_goal)
    return WorkoutTargets(
        fitness_level=level,
        primary_goal=goal,
        categories=GOAL_CATEGORIES.get(goal),
        volume=LEVEL_PROFILES[level],
        workouts_per_week=max(workouts_per_week, 1),
        equipment=map_equipment(user.equipment),
    )
