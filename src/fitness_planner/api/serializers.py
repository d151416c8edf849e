"""JSON serialization of domain objects for API responses."""

from dataclasses import asdict

from fitness_planner.domain.catalog import Dish, Exercise
from fitness_planner.domain.diet import DailyMeals, DietPlan, MacroTotals
from fitness_planner.domain.models import NutritionGoals, UserRecord
from fitness_planner.domain.nutrition import NutritionCalculation
from fitness_planner.domain.workout import DailyWorkout, WorkoutPlan


def serialize_dish(dish: Dish) -> dict[str, object]:
    """Serialize a catalog dish."""
    payload = asdict(dish)
    payload["id"] = str(dish.id)
    return payload


def serialize_exercise(exercise: Exercise) -> dict[str, object]:
    """Serialize a catalog exercise."""
    payload = asdict(exercise)
    payload["id"] = str(exercise.id)
    return payload


def serialize_totals(totals: MacroTotals) -> dict[str, float]:
    """Serialize summed macros."""
    return {
        "calories": totals.calories,
        "protein_g": totals.protein_g,
        "carbs_g": totals.carbs_g,
        "fats_g": totals.fats_g,
    }


def serialize_daily_meals(day: DailyMeals) -> dict[str, object]:
    """Serialize one day of a diet plan."""
    return {
        "date": day.day.isoformat(),
        "breakfast": serialize_dish(day.breakfast),
        "lunch": serialize_dish(day.lunch),
        "dinner": serialize_dish(day.dinner),
        "snacks": [serialize_dish(snack) for snack in day.snacks],
        "totals": serialize_totals(day.totals),
    }


def serialize_diet_plan(plan: DietPlan) -> dict[str, object]:
    """Serialize a diet plan with its days and rolled-up totals."""
    return {
        "id": str(plan.id),
        "user_id": str(plan.user_id),
        "name": plan.name,
        "start_date": plan.start_date.isoformat(),
        "end_date": plan.end_date.isoformat(),
        "targets": serialize_goals(plan.targets),
        "days": [serialize_daily_meals(day) for day in plan.days],
        "totals": serialize_totals(plan.totals),
        "preferences": plan.preferences,
        "is_active": plan.is_active,
        "created_at": plan.created_at.isoformat() if plan.created_at else None,
    }


def serialize_daily_workout(day: DailyWorkout) -> dict[str, object]:
    """Serialize one day of a workout plan."""
    return {
        "date": day.day.isoformat(),
        "workout_type": day.workout_type,
        "exercises": [
            {
                "exercise": serialize_exercise(entry.exercise),
                "sets": entry.sets,
                "reps": entry.reps,
                "weight_kg": entry.weight_kg,
                "duration_min": entry.duration_min,
                "rest_seconds": entry.rest_seconds,
                "notes": entry.notes,
            }
            for entry in day.exercises
        ],
        "total_duration_min": day.total_duration_min,
        "estimated_calories": day.estimated_calories,
        "completed": day.completed,
        "completed_at": day.completed_at.isoformat() if day.completed_at else None,
    }


def serialize_workout_plan(plan: WorkoutPlan) -> dict[str, object]:
    """Serialize a workout plan with its days and progress."""
    return {
        "id": str(plan.id),
        "user_id": str(plan.user_id),
        "name": plan.name,
        "fitness_level": plan.fitness_level,
        "primary_goal": plan.primary_goal,
        "start_date": plan.start_date.isoformat(),
        "end_date": plan.end_date.isoformat(),
        "duration_days": plan.duration_days,
        "workouts_per_week": plan.workouts_per_week,
        "days": [serialize_daily_workout(day) for day in plan.days],
        "preferences": plan.preferences,
        "progress": asdict(plan.progress),
        "is_active": plan.is_active,
        "created_at": plan.created_at.isoformat() if plan.created_at else None,
    }


def serialize_goals(goals: NutritionGoals) -> dict[str, int]:
    """Serialize daily nutrition goals."""
    return {
        "calories": goals.calories,
        "protein_g": goals.protein_g,
        "carbs_g": goals.carbs_g,
        "fats_g": goals.fats_g,
    }


def serialize_user(user: UserRecord) -> dict[str, object]:
    """Serialize a user profile."""
    return {
        "id": str(user.id),
        "nutrition_goals": serialize_goals(user.nutrition_goals)
        if user.nutrition_goals
        else None,
        "dietary_type": user.dietary_type,
        "activity_level": user.activity_level,
        "goals": list(user.goals),
        "fitness_level": user.fitness_level,
        "primary_workout_goal": user.primary_workout_goal,
        "equipment": list(user.equipment),
        "workout_duration_min": user.workout_duration_min,
        "preferred_time": user.preferred_time,
    }


def serialize_calculation(calculation: NutritionCalculation) -> dict[str, object]:
    """Serialize a nutrition calculation."""
    return {
        "bmr": calculation.bmr,
        "tdee": calculation.tdee,
        **serialize_goals(calculation.goals),
    }
