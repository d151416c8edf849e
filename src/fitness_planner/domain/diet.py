"""Domain models for diet plans."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from fitness_planner.domain.catalog import Dish
from fitness_planner.domain.models import NutritionGoals


@dataclass(frozen=True)
class MacroTotals:
    """Summed macros for a slot or plan."""

    calories: float
    protein_g: float
    carbs_g: float
    fats_g: float


@dataclass(frozen=True)
class MealTarget:
    """Calorie and protein target for a single meal."""

    calories: int
    protein_g: int


@dataclass(frozen=True)
class DietTargets:
    """Per-meal targets derived from daily nutrition goals."""

    daily: NutritionGoals
    meals: dict[str, MealTarget]


@dataclass(frozen=True)
class DailyMeals:
    """Dishes chosen for one day and their summed macros."""

    day: date
    breakfast: Dish
    lunch: Dish
    dinner: Dish
    snacks: list[Dish]
    totals: MacroTotals

    @property
    def dishes(self) -> list[Dish]:
        """Return main dishes followed by snacks."""
        return [self.breakfast, self.lunch, self.dinner, *self.snacks]


@dataclass(frozen=True)
class DietPlan:
    """Generated diet plan owned by one user."""

    id: UUID
    user_id: UUID
    name: str
    start_date: date
    end_date: date
    targets: NutritionGoals
    days: list[DailyMeals]
    preferences: dict[str, object]
    is_active: bool = True
    created_at: datetime | None = None

    @property
    def totals(self) -> MacroTotals:
        """Roll up day totals across the whole plan."""
        return MacroTotals(
            calories=sum(day.totals.calories for day in self.days),
            protein_g=sum(day.totals.protein_g for day in self.days),
            carbs_g=sum(day.totals.carbs_g for day in self.days),
            fats_g=sum(day.totals.fats_g for day in self.days),
        )


@dataclass(frozen=True)
class SwapRequest:
    """Replace one dish in a day of the current plan."""

    day_index: int
    meal_type: str
    old_item_id: UUID
    new_item_id: UUID
