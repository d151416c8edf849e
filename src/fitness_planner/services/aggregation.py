"""Sum chosen items into slot totals."""

from datetime import date

from fitness_planner.domain.catalog import Dish
from fitness_planner.domain.diet import DailyMeals, MacroTotals
from fitness_planner.domain.workout import DailyWorkout, ExerciseSet
from fitness_planner.services.targets import round_half_up

DEFAULT_EXERCISE_DURATION_MIN = 30
DEFAULT_CALORIES_PER_MIN = 5


def sum_dishes(dishes: list[Dish]) -> MacroTotals:
    """Sum the macros of a list of dishes."""
    total = MacroTotals(0.0, 0.0, 0.0, 0.0)
    for dish in dishes:
        total = MacroTotals(
            calories=total.calories + dish.calories,
            protein_g=total.protein_g + dish.protein_g,
            carbs_g=total.carbs_g + dish.carbs_g,
            fats_g=total.fats_g + dish.fats_g,
        )
    return total


def build_daily_meals(
    day: date, breakfast: Dish, lunch: Dish, dinner: Dish, snacks: list[Dish]
) -> DailyMeals:
    """Assemble a day of meals with totals computed from its dishes."""
    return DailyMeals(
        day=day,
        breakfast=breakfast,
        lunch=lunch,
        dinner=dinner,
        snacks=list(snacks),
        totals=sum_dishes([breakfast, lunch, dinner, *snacks]),
    )


def build_daily_workout(
    day: date, workout_type: str, exercises: list[ExerciseSet]
) -> DailyWorkout:
    """Assemble a workout day with duration and calorie estimates."""
    total_duration = 0.0
    estimated_calories = 0.0
    for entry in exercises:
        duration = entry.duration_min or DEFAULT_EXERCISE_DURATION_MIN
        rate = entry.exercise.calories_burned_per_min or DEFAULT_CALORIES_PER_MIN
        total_duration += duration
        estimated_calories += rate * duration
    return DailyWorkout(
        day=day,
        workout_type=workout_type,
        exercises=list(exercises),
        total_duration_min=total_duration,
        estimated_calories=round_half_up(estimated_calories),
    )


def rest_day(day: date) -> DailyWorkout:
    """Return an empty rest day."""
    return DailyWorkout(
        day=day,
        workout_type="rest",
        exercises=[],
        total_duration_min=0,
        estimated_calories=0,
    )
