"""Workout plan generation and progress tracking."""

import logging
import math
from dataclasses import dataclass, replace
from datetime import UTC, date, datetime, timedelta
from typing import Protocol
from uuid import UUID, uuid4

from fitness_planner.domain.errors import (
    InvalidIndexError,
    NoCandidatesError,
    PlanNotFoundError,
)
from fitness_planner.domain.workout import (
    DailyWorkout,
    ExerciseSet,
    WorkoutPlan,
    WorkoutProgress,
    WorkoutRequest,
    WorkoutTargets,
)
from fitness_planner.services.aggregation import build_daily_workout, rest_day
from fitness_planner.services.allocator import SlotAllocator
from fitness_planner.services.cache import PlanCache
from fitness_planner.services.candidates import (
    EXERCISE_CANDIDATE_LIMIT,
    filter_exercises,
)
from fitness_planner.services.catalog import CatalogService
from fitness_planner.services.targets import (
    derive_workout_targets,
    resolve_duration,
)
from fitness_planner.services.users import UserService

DEFAULT_WORKOUT_DURATION_MIN = 45
DEFAULT_PREFERRED_TIME = "morning"
DEFAULT_REST_SECONDS = 60

_CACHE_KIND = "workout"

_logger = logging.getLogger(__name__)


class WorkoutPlanRepository(Protocol):
    """Persistence interface for workout plans."""

    def create_plan(self, plan: WorkoutPlan) -> WorkoutPlan:
        """Persist a whole plan and return it."""

    def get_plan(self, plan_id: UUID) -> WorkoutPlan | None:
        """Return a plan by id, if present."""

    def list_plans(self, user_id: UUID) -> list[WorkoutPlan]:
        """Return a user's plans, newest first."""

    def update_progress(
        self, plan_id: UUID, days: list[DailyWorkout], progress: WorkoutProgress
    ) -> None:
        """Overwrite the day list and progress counters of a plan."""


def workout_type_for_day(index: int, days: int, targets: WorkoutTargets) -> str:
    """Return the workout type scheduled on a day, or "rest"."""
    interval = math.ceil(days / targets.workouts_per_week)
    if index % interval != 0:
        return "rest"
    goal = targets.primary_goal
    if goal == "weight-loss":
        return "cardio" if index % 2 == 0 else "hiit"
    if goal in {"muscle-gain", "strength"}:
        return "strength"
    if goal == "flexibility":
        return "flexibility"
    return "full-body"


@dataclass
class WorkoutPlanService:
    """Generate workout plans and record completed days."""

    user_service: UserService
    catalog_service: CatalogService
    repository: WorkoutPlanRepository
    allocator: SlotAllocator
    cache: PlanCache
    default_duration_days: int = 7
    candidate_limit: int = EXERCISE_CANDIDATE_LIMIT

    def generate(
        self,
        user_id: UUID,
        request: WorkoutRequest | None = None,
        start: date | None = None,
    ) -> WorkoutPlan:
        """Generate, persist and activate a new workout plan for a user."""
        request = request or WorkoutRequest()
        days = resolve_duration(request.duration_days, self.default_duration_days)
        user = self.user_service.get_user(user_id)
        targets = derive_workout_targets(
            user,
            fitness_level=request.fitness_level,
            primary_goal=request.primary_goal,
            workouts_per_week=request.workouts_per_week,
        )
        candidates = filter_exercises(
            self.catalog_service.list_exercises(), targets, limit=self.candidate_limit
        )
        if not candidates:
            raise NoCandidatesError(
                f"No exercises available for {targets.fitness_level} "
                f"{targets.primary_goal}"
            )

        start_date = start or datetime.now(tz=UTC).date()
        daily: list[DailyWorkout] = []
        for offset in range(days):
            day = start_date + timedelta(days=offset)
            workout_type = workout_type_for_day(offset, days, targets)
            if workout_type == "rest":
                daily.append(rest_day(day))
                continue
            exercise_sets = [
                ExerciseSet(
                    exercise=exercise,
                    sets=targets.volume.sets,
                    reps=targets.volume.reps,
                    duration_min=exercise.duration_min or 0,
                    rest_seconds=DEFAULT_REST_SECONDS,
                )
                for exercise in self.allocator.select_exercises(
                    candidates, targets.volume.exercises_per_day
                )
            ]
            daily.append(build_daily_workout(day, workout_type, exercise_sets))

        plan = WorkoutPlan(
            id=uuid4(),
            user_id=user_id,
            name=f"My {days}-Day {targets.primary_goal.capitalize()} Plan",
            fitness_level=targets.fitness_level,
            primary_goal=targets.primary_goal,
            start_date=start_date,
            end_date=start_date + timedelta(days=days - 1),
            duration_days=days,
            workouts_per_week=targets.workouts_per_week,
            days=daily,
            preferences={
                "equipment": list(user.equipment),
                "workout_duration_min": user.workout_duration_min
                or DEFAULT_WORKOUT_DURATION_MIN,
                "preferred_time": user.preferred_time or DEFAULT_PREFERRED_TIME,
            },
            created_at=datetime.now(tz=UTC),
        )
        saved = self.repository.create_plan(plan)
        self.user_service.repository.set_current_workout_plan(user_id, saved.id)
        self.cache.invalidate(_CACHE_KIND, user_id)
        _logger.info(
            "Workout plan generated: user_id=%s plan_id=%s level=%s goal=%s",
            user_id,
            saved.id,
            targets.fitness_level,
            targets.primary_goal,
        )
        return saved

    def get_current(self, user_id: UUID) -> WorkoutPlan | None:
        """Return the user's current plan, if any."""
        cached = self.cache.get(_CACHE_KIND, user_id)
        if isinstance(cached, WorkoutPlan):
            return cached
        user = self.user_service.get_user(user_id)
        if user.current_workout_plan_id is None:
            return None
        plan = self.repository.get_plan(user.current_workout_plan_id)
        if plan is not None:
            self.cache.put(_CACHE_KIND, user_id, plan)
        return plan

    def list_plans(self, user_id: UUID) -> list[WorkoutPlan]:
        """Return every plan generated for the user, newest first."""
        return self.repository.list_plans(user_id)

    def complete_day(self, user_id: UUID, plan_id: UUID, day_index: int) -> WorkoutPlan:
        """Mark a day completed and update the plan's progress counters."""
        plan = self.repository.get_plan(plan_id)
        if plan is None or plan.user_id != user_id:
            raise PlanNotFoundError("Workout plan not found")
        if not 0 <= day_index < len(plan.days):
            raise InvalidIndexError(f"Invalid day index {day_index}")
        workout = plan.days[day_index]
        if workout.completed:
            return plan

        days = list(plan.days)
        days[day_index] = replace(
            workout, completed=True, completed_at=datetime.now(tz=UTC)
        )
        streak = plan.progress.current_streak + 1
        progress = WorkoutProgress(
            total_workouts_completed=plan.progress.total_workouts_completed + 1,
            total_calories_burned=plan.progress.total_calories_burned
            + workout.estimated_calories,
            current_streak=streak,
            longest_streak=max(streak, plan.progress.longest_streak),
        )
        self.repository.update_progress(plan.id, days, progress)
        self.cache.invalidate(_CACHE_KIND, user_id)
        _logger.info(
            "Workout day completed: plan_id=%s day=%s streak=%s",
            plan.id,
            day_index,
            streak,
        )
        return replace(plan, days=days, progress=progress)
