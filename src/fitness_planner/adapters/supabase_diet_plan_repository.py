"""Supabase repository for diet plans."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from fitness_planner.adapters.supabase_catalog_repository import (
    dish_snapshot,
    parse_dish,
)
from fitness_planner.domain.diet import DailyMeals, DietPlan, MacroTotals
from fitness_planner.domain.models import NutritionGoals
from fitness_planner.services.diet_plans import DietPlanRepository


@dataclass
class SupabaseDietPlanRepository(DietPlanRepository):
    """Supabase implementation for diet plans.

    Days are stored as a JSON array on the plan row, so a plan is written by a
    single insert.
    """

    client: Client

    def create_plan(self, plan: DietPlan) -> DietPlan:
        """Insert a plan row and return the stored plan."""
        response = self.client.table("diet_plans").insert(_plan_row(plan)).execute()
        if not response.data:
            raise RuntimeError("Failed to create diet plan")
        return _parse_plan(response.data[0])

    def get_plan(self, plan_id: UUID) -> DietPlan | None:
        """Return a plan by id."""
        response = (
            self.client.table("diet_plans")
            .select("*")
            .eq("id", str(plan_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_plan(response.data[0])

    def list_plans(self, user_id: UUID) -> list[DietPlan]:
        """Return a user's plans, newest first."""
        response = (
            self.client.table("diet_plans")
            .select("*")
            .eq("user_id", str(user_id))
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_plan(row) for row in response.data or []]

    def update_days(self, plan_id: UUID, days: list[DailyMeals]) -> None:
        """Overwrite the stored day list."""
        self.client.table("diet_plans").update(
            {"daily_plans": [_day_row(day) for day in days]}
        ).eq("id", str(plan_id)).execute()


def _plan_row(plan: DietPlan) -> dict[str, object]:
    return {
        "id": str(plan.id),
        "user_id": str(plan.user_id),
        "name": plan.name,
        "start_date": plan.start_date.isoformat(),
        "end_date": plan.end_date.isoformat(),
        "target_calories": plan.targets.calories,
        "target_protein_g": plan.targets.protein_g,
        "target_carbs_g": plan.targets.carbs_g,
        "target_fats_g": plan.targets.fats_g,
        "daily_plans": [_day_row(day) for day in plan.days],
        "preferences": plan.preferences,
        "is_active": plan.is_active,
        "created_at": plan.created_at.isoformat() if plan.created_at else None,
    }


def _day_row(day: DailyMeals) -> dict[str, object]:
    return {
        "date": day.day.isoformat(),
        "breakfast": dish_snapshot(day.breakfast),
        "lunch": dish_snapshot(day.lunch),
        "dinner": dish_snapshot(day.dinner),
        "snacks": [dish_snapshot(snack) for snack in day.snacks],
        "total_calories": day.totals.calories,
        "total_protein_g": day.totals.protein_g,
        "total_carbs_g": day.totals.carbs_g,
        "total_fats_g": day.totals.fats_g,
    }


def _parse_day(row: dict[str, object]) -> DailyMeals:
    return DailyMeals(
        day=date.fromisoformat(str(row["date"])),
        breakfast=parse_dish(row["breakfast"]),
        lunch=parse_dish(row["lunch"]),
        dinner=parse_dish(row["dinner"]),
        snacks=[parse_dish(snack) for snack in row.get("snacks") or []],
        totals=MacroTotals(
            calories=float(row.get("total_calories", 0.0)),
            protein_g=float(row.get("total_protein_g", 0.0)),
            carbs_g=float(row.get("total_carbs_g", 0.0)),
            fats_g=float(row.get("total_fats_g", 0.0)),
        ),
    )


def _parse_plan(row: dict[str, object]) -> DietPlan:
    created_raw = row.get("created_at")
    return DietPlan(
        id=UUID(row["id"]),
        user_id=UUID(row["user_id"]),
        name=str(row.get("name", "")),
        start_date=date.fromisoformat(str(row["start_date"])),
        end_date=date.fromisoformat(str(row["end_date"])),
        targets=NutritionGoals(
            calories=int(row.get("target_calories", 0)),
            protein_g=int(row.get("target_protein_g", 0)),
            carbs_g=int(row.get("target_carbs_g", 0)),
            fats_g=int(row.get("target_fats_g", 0)),
        ),
        days=[_parse_day(day) for day in row.get("daily_plans") or []],
        preferences=row.get("preferences") or {},
        is_active=bool(row.get("is_active", True)),
        created_at=datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else None,
    )
