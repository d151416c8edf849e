"""Narrow the catalog to items eligible for a slot."""

from collections.abc import Iterable

from fitness_planner.domain.catalog import Dish, Exercise
from fitness_planner.domain.workout import WorkoutTargets

EXERCISE_CANDIDATE_LIMIT = 50


def admits_dish(dish: Dish, dietary_type: str) -> bool:
    """Return True when a dish fits the user's dietary type."""
    if dietary_type == "vegetarian":
        return dish.dietary_type != "non-vegetarian"
    return True


def filter_dishes(
    dishes: Iterable[Dish], category: str, dietary_type: str
) -> list[Dish]:
    """Return dishes for a meal category that fit the dietary type.

    Falls back to every dish of the category when the dietary filter leaves
    nothing.
    """
    in_category = [dish for dish in dishes if dish.category == category]
    admitted = [dish for dish in in_category if admits_dish(dish, dietary_type)]
    return admitted or in_category


def filter_exercises(
    exercises: Iterable[Exercise],
    targets: WorkoutTargets,
    limit: int = EXERCISE_CANDIDATE_LIMIT,
) -> list[Exercise]:
    """Return active exercises matching level, goal categories and equipment."""
    eligible: list[Exercise] = []
    for exercise in exercises:
        if not exercise.is_active:
            continue
        if exercise.difficulty != targets.fitness_level:
            continue
        categories = targets.categories
        if categories is not None and exercise.category not in categories:
            continue
        equipment = targets.equipment
        if equipment is not None and exercise.equipment not in equipment:
            continue
        eligible.append(exercise)
        if len(eligible) >= limit:
            break
    return eligible
