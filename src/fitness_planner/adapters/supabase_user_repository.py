"""Supabase-backed user repository."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from fitness_planner.domain.models import NutritionGoals, UserRecord
from fitness_planner.services.users import UserRepository

_USER_COLUMNS = (
    "id, target_calories, target_protein_g, target_carbs_g, target_fats_g, "
    "dietary_type, activity_level, goals, fitness_level, primary_workout_goal, "
    "equipment, workout_duration_min, preferred_time, current_diet_plan_id, "
    "current_workout_plan_id"
)


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user row, if present."""
        response = (
            self.client.table("users")
            .select(_USER_COLUMNS)
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_user(response.data[0])

    def update_preferences(
        self, user_id: UUID, payload: dict[str, object]
    ) -> UserRecord:
        """Update profile preference columns and return the user."""
        response = (
            self.client.table("users")
            .update({**payload, "updated_at": datetime.now(tz=UTC).isoformat()})
            .eq("id", str(user_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update user preferences")
        return _parse_user(response.data[0])

    def set_nutrition_goals(self, user_id: UUID, goals: NutritionGoals) -> None:
        """Store nutrition goal columns on the user row."""
        self.client.table("users").update(
            {
                "target_calories": goals.calories,
                "target_protein_g": goals.protein_g,
                "target_carbs_g": goals.carbs_g,
                "target_fats_g": goals.fats_g,
            }
        ).eq("id", str(user_id)).execute()

    def set_current_diet_plan(self, user_id: UUID, plan_id: UUID) -> None:
        """Move the current diet plan pointer."""
        self.client.table("users").update(
            {"current_diet_plan_id": str(plan_id)}
        ).eq("id", str(user_id)).execute()

    def set_current_workout_plan(self, user_id: UUID, plan_id: UUID) -> None:
        """Move the current workout plan pointer."""
        self.client.table("users").update(
            {"current_workout_plan_id": str(plan_id)}
        ).eq("id", str(user_id)).execute()


def _parse_user(row: dict[str, object]) -> UserRecord:
    goals = None
    if row.get("target_calories"):
        goals = NutritionGoals(
            calories=int(row["target_calories"]),
            protein_g=int(row.get("target_protein_g") or 0),
            carbs_g=int(row.get("target_carbs_g") or 0),
            fats_g=int(row.get("target_fats_g") or 0),
        )
    return UserRecord(
        id=UUID(row["id"]),
        nutrition_goals=goals,
        dietary_type=str(row.get("dietary_type") or "vegetarian"),
        activity_level=str(row.get("activity_level") or ""),
        goals=list(row.get("goals") or []),
        fitness_level=row.get("fitness_level"),
        primary_workout_goal=row.get("primary_workout_goal"),
        equipment=list(row.get("equipment") or []),
        workout_duration_min=int(row.get("workout_duration_min") or 0),
        preferred_time=str(row.get("preferred_time") or ""),
        current_diet_plan_id=_parse_optional_uuid(row.get("current_diet_plan_id")),
        current_workout_plan_id=_parse_optional_uuid(
            row.get("current_workout_plan_id")
        ),
    )


def _parse_optional_uuid(value: object) -> UUID | None:
    if isinstance(value, str) and value:
        return UUID(value)
    return None
