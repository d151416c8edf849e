"""Supabase repository for workout plans."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from fitness_planner.adapters.supabase_catalog_repository import (
    exercise_snapshot,
    parse_exercise,
)
from fitness_planner.domain.workout import (
    DailyWorkout,
    ExerciseSet,
    WorkoutPlan,
    WorkoutProgress,
)
from fitness_planner.services.workout_plans import WorkoutPlanRepository


@dataclass
class SupabaseWorkoutPlanRepository(WorkoutPlanRepository):
    """Supabase implementation for workout plans."""

    client: Client

    def create_plan(self, plan: WorkoutPlan) -> WorkoutPlan:
        """Insert a plan row and return the stored plan."""
        response = self.client.table("workout_plans").insert(_plan_row(plan)).execute()
        if not response.data:
            raise RuntimeError("Failed to create workout plan")
        return _parse_plan(response.data[0])

    def get_plan(self, plan_id: UUID) -> WorkoutPlan | None:
        """Return a plan by id."""
        response = (
            self.client.table("workout_plans")
            .select("*")
            .eq("id", str(plan_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_plan(response.data[0])

    def list_plans(self, user_id: UUID) -> list[WorkoutPlan]:
        """Return a user's plans, newest first."""
        response = (
            self.client.table("workout_plans")
            .select("*")
            .eq("user_id", str(user_id))
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_plan(row) for row in response.data or []]

    def update_progress(
        self, plan_id: UUID, days: list[DailyWorkout], progress: WorkoutProgress
    ) -> None:
        """Overwrite the day list and progress counters."""
        self.client.table("workout_plans").update(
            {
                "daily_workouts": [_day_row(day) for day in days],
                "progress": _progress_row(progress),
            }
        ).eq("id", str(plan_id)).execute()


def _plan_row(plan: WorkoutPlan) -> dict[str, object]:
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
        "daily_workouts": [_day_row(day) for day in plan.days],
        "preferences": plan.preferences,
        "progress": _progress_row(plan.progress),
        "is_active": plan.is_active,
        "created_at": plan.created_at.isoformat() if plan.created_at else None,
    }


def _progress_row(progress: WorkoutProgress) -> dict[str, int]:
    return {
        "total_workouts_completed": progress.total_workouts_completed,
        "total_calories_burned": progress.total_calories_burned,
        "current_streak": progress.current_streak,
        "longest_streak": progress.longest_streak,
    }


def _day_row(day: DailyWorkout) -> dict[str, object]:
    return {
        "date": day.day.isoformat(),
        "workout_type": day.workout_type,
        "exercises": [
            {
                "exercise": exercise_snapshot(entry.exercise),
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


def _parse_day(row: dict[str, object]) -> DailyWorkout:
    completed_raw = row.get("completed_at")
    return DailyWorkout(
        day=date.fromisoformat(str(row["date"])),
        workout_type=str(row.get("workout_type", "rest")),
        exercises=[
            ExerciseSet(
                exercise=parse_exercise(entry["exercise"]),
                sets=int(entry.get("sets", 0)),
                reps=str(entry.get("reps", "")),
                weight_kg=float(entry.get("weight_kg") or 0.0),
                duration_min=float(entry.get("duration_min") or 0.0),
                rest_seconds=int(entry.get("rest_seconds") or 60),
                notes=str(entry.get("notes") or ""),
            )
            for entry in row.get("exercises") or []
        ],
        total_duration_min=float(row.get("total_duration_min", 0.0)),
        estimated_calories=int(row.get("estimated_calories", 0)),
        completed=bool(row.get("completed", False)),
        completed_at=datetime.fromisoformat(completed_raw)
        if isinstance(completed_raw, str) and completed_raw
        else None,
    )


def _parse_plan(row: dict[str, object]) -> WorkoutPlan:
    created_raw = row.get("created_at")
    progress = row.get("progress") or {}
    return WorkoutPlan(
        id=UUID(row["id"]),
        user_id=UUID(row["user_id"]),
        name=str(row.get("name", "")),
        fitness_level=str(row.get("fitness_level", "")),
        primary_goal=str(row.get("primary_goal", "")),
        start_date=date.fromisoformat(str(row["start_date"])),
        end_date=date.fromisoformat(str(row["end_date"])),
        duration_days=int(row.get("duration_days", 0)),
        workouts_per_week=int(row.get("workouts_per_week", 3)),
        days=[_parse_day(day) for day in row.get("daily_workouts") or []],
        preferences=row.get("preferences") or {},
        progress=WorkoutProgress(
            total_workouts_completed=int(progress.get("total_workouts_completed", 0)),
            total_calories_burned=int(progress.get("total_calories_burned", 0)),
            current_streak=int(progress.get("current_streak", 0)),
            longest_streak=int(progress.get("longest_streak", 0)),
        ),
        is_active=bool(row.get("is_active", True)),
        created_at=datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else None,
    )
