"""Tests for slot aggregation."""

from datetime import date

from fitness_planner.domain.workout import ExerciseSet
from fitness_planner.services.aggregation import (
    build_daily_meals,
    build_daily_workout,
    rest_day,
    sum_dishes,
)
from tests.conftest import make_dish, make_exercise, single_meal_catalog


def test_sum_dishes_adds_every_macro() -> None:
    totals = sum_dishes(single_meal_catalog())

    assert totals.calories == 2000
    assert totals.protein_g == 145
    assert totals.carbs_g == 200
    assert totals.fats_g == 53


def test_sum_dishes_empty() -> None:
    assert sum_dishes([]).calories == 0


def test_build_daily_meals_counts_every_snack() -> None:
    breakfast, lunch, dinner, snack = single_meal_catalog()
    extra = make_dish("Fruit", "snack", 100, 2)

    day = build_daily_meals(
        date(2024, 1, 1), breakfast, lunch, dinner, snacks=[snack, extra]
    )

    assert day.totals.calories == 2100
    assert day.totals.protein_g == 147
    assert day.dishes == [breakfast, lunch, dinner, snack, extra]


def test_build_daily_workout_uses_exercise_values() -> None:
    run = make_exercise("Run", duration_min=20, calories_burned_per_min=10)
    entry = ExerciseSet(exercise=run, sets=1, reps="1", duration_min=20)

    workout = build_daily_workout(date(2024, 1, 1), "cardio", [entry])

    assert workout.total_duration_min == 20
    assert workout.estimated_calories == 200


def test_build_daily_workout_applies_defaults() -> None:
    squat = make_exercise("Squat")
    entries = [
        ExerciseSet(exercise=squat, sets=2, reps="8-10"),
        ExerciseSet(exercise=squat, sets=2, reps="8-10"),
    ]

    workout = build_daily_workout(date(2024, 1, 1), "strength", entries)

    assert workout.total_duration_min == 60
    assert workout.estimated_calories == 300


def test_build_daily_workout_rounds_calories() -> None:
    plank = make_exercise("Plank", duration_min=3, calories_burned_per_min=2.5)
    entry = ExerciseSet(exercise=plank, sets=1, reps="1", duration_min=3)

    workout = build_daily_workout(date(2024, 1, 1), "full-body", [entry])

    assert workout.estimated_calories == 8


def test_rest_day_is_empty() -> None:
    workout = rest_day(date(2024, 1, 2))

    assert workout.workout_type == "rest"
    assert workout.exercises == []
    assert workout.estimated_calories == 0
