"""User profile business logic."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from fitness_planner.domain.errors import PlanNotFoundError
from fitness_planner.domain.models import NutritionGoals, UserRecord

PREFERENCE_FIELDS = frozenset(
    {
        "dietary_type",
        "activity_level",
        "goals",
        "fitness_level",
        "primary_workout_goal",
        "equipment",
        "workout_duration_min",
        "preferred_time",
    }
)


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user, if present."""

    def update_preferences(
        self, user_id: UUID, payload: dict[str, object]
    ) -> UserRecord:
        """Update profile preferences and return the user."""

    def set_nutrition_goals(self, user_id: UUID, goals: NutritionGoals) -> None:
        """Store the user's daily nutrition goals."""

    def set_current_diet_plan(self, user_id: UUID, plan_id: UUID) -> None:
        """Point the user at their current diet plan."""

    def set_current_workout_plan(self, user_id: UUID, plan_id: UUID) -> None:
        """Point the user at their current workout plan."""


@dataclass
class UserService:
    """Application service for user profile actions."""

    repository: UserRepository

    def get_user(self, user_id: UUID) -> UserRecord:
        """Return the user or raise when unknown."""
        user = self.repository.get_user(user_id)
        if user is None:
            raise PlanNotFoundError(f"User {user_id} not found")
        return user

    def update_preferences(
        self, user_id: UUID, payload: dict[str, object]
    ) -> UserRecord:
        """Update the known preference fields, ignoring anything else."""
        self.get_user(user_id)
        cleaned = {
            key: value for key, value in payload.items() if key in PREFERENCE_FIELDS
        }
        return self.repository.update_preferences(user_id, cleaned)
