"""Domain models for workout plans."""

from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID

from fitness_planner.domain.catalog import Exercise


@dataclass(frozen=True)
class LevelProfile:
    """Volume prescription for a fitness level."""

    exercises_per_day: int
    sets: int
    reps: str


@dataclass(frozen=True)
class WorkoutTargets:
    """Categorical targets derived from a user's fitness profile."""

    fitness_level: str
    primary_goal: str
    categories: frozenset[str] | None
    volume: LevelProfile
    workouts_per_week: int
    equipment: frozenset[str] | None


@dataclass(frozen=True)
class ExerciseSet:
    """An exercise prescribed within a workout day."""

    exercise: Exercise
    sets: int
    reps: str
    weight_kg: float = 0.0
    duration_min: float = 0.0
    rest_seconds: int = 60
    notes: str = ""


@dataclass(frozen=True)
class DailyWorkout:
    """One day of a workout plan."""

    day: date
    workout_type: str
    exercises: list[ExerciseSet]
    total_duration_min: float
    estimated_calories: int
    completed: bool = False
    completed_at: datetime | None = None


@dataclass(frozen=True)
class WorkoutProgress:
    """Completion counters for a workout plan."""

    total_workouts_completed: int = 0
    total_calories_burned: int = 0
    current_streak: int = 0
    longest_streak: int = 0


@dataclass(frozen=True)
class WorkoutRequest:
    """Parameters for generating a workout plan."""

    fitness_level: str | None = None
    primary_goal: str | None = None
    duration_days: int | None = None
    workouts_per_week: int = 3


@dataclass(frozen=True)
class WorkoutPlan:
    """Generated workout plan owned by one user."""

    id: UUID
    user_id: UUID
    name: str
    fitness_level: str
    primary_goal: str
    start_date: date
    end_date: date
    duration_days: int
    workouts_per_week: int
    days: list[DailyWorkout]
    preferences: dict[str, object]
    progress: WorkoutProgress = field(default_factory=WorkoutProgress)
    is_active: bool = True
    created_at: datetime | None = None
