"""Diet plan generation and mutation."""

import logging
from dataclasses import dataclass, replace
from datetime import UTC, date, datetime, timedelta
from typing import Protocol
from uuid import UUID, uuid4

from fitness_planner.domain.catalog import MEAL_CATEGORIES, Dish
from fitness_planner.domain.diet import DailyMeals, DietPlan, SwapRequest
from fitness_planner.domain.errors import (
    InvalidIndexError,
    NoCandidatesError,
    PlanNotFoundError,
)
from fitness_planner.services.aggregation import build_daily_meals
from fitness_planner.services.allocator import SlotAllocator
from fitness_planner.services.cache import PlanCache
from fitness_planner.services.candidates import admits_dish, filter_dishes
from fitness_planner.services.catalog import CatalogService
from fitness_planner.services.targets import derive_diet_targets, resolve_duration
from fitness_planner.services.users import UserService

_MAIN_MEALS = ("breakfast", "lunch", "dinner")

_CACHE_KIND = "diet"

_logger = logging.getLogger(__name__)


class DietPlanRepository(Protocol):
    """Persistence interface for diet plans."""

    def create_plan(self, plan: DietPlan) -> DietPlan:
        """Persist a whole plan and return it."""

    def get_plan(self, plan_id: UUID) -> DietPlan | None:
        """Return a plan by id, if present."""

    def list_plans(self, user_id: UUID) -> list[DietPlan]:
        """Return a user's plans, newest first."""

    def update_days(self, plan_id: UUID, days: list[DailyMeals]) -> None:
        """Overwrite the day list of a plan."""


@dataclass
class DietPlanService:
    """Generate diet plans and apply dish swaps."""

    user_service: UserService
    catalog_service: CatalogService
    repository: DietPlanRepository
    allocator: SlotAllocator
    cache: PlanCache
    default_duration_days: int = 7

    def generate(
        self,
        user_id: UUID,
        duration_days: int | None = None,
        preferences: dict[str, object] | None = None,
        start: date | None = None,
    ) -> DietPlan:
        """Generate, persist and activate a new diet plan for a user."""
        days = resolve_duration(duration_days, self.default_duration_days)
        user = self.user_service.get_user(user_id)
        targets = derive_diet_targets(user.nutrition_goals)

        dishes = self.catalog_service.list_dishes()
        if not dishes:
            raise NoCandidatesError("No dishes available in the catalog")
        pools = {
            meal: filter_dishes(dishes, meal, user.dietary_type)
            for meal in MEAL_CATEGORIES
        }
        missing = [meal for meal, pool in pools.items() if not pool]
        if missing:
            raise NoCandidatesError(f"No dishes available for: {', '.join(missing)}")

        start_date = start or datetime.now(tz=UTC).date()
        daily: list[DailyMeals] = []
        for offset in range(days):
            picks = {
                meal: self.allocator.select_dish(pools[meal], targets.meals[meal])
                for meal in MEAL_CATEGORIES
            }
            daily.append(
                build_daily_meals(
                    start_date + timedelta(days=offset),
                    breakfast=picks["breakfast"],
                    lunch=picks["lunch"],
                    dinner=picks["dinner"],
                    snacks=[picks["snack"]],
                )
            )

        plan = DietPlan(
            id=uuid4(),
            user_id=user_id,
            name=f"My {days}-Day Diet Plan",
            start_date=start_date,
            end_date=start_date + timedelta(days=days - 1),
            targets=targets.daily,
            days=daily,
            preferences=preferences or {},
            created_at=datetime.now(tz=UTC),
        )
        saved = self.repository.create_plan(plan)
        self.user_service.repository.set_current_diet_plan(user_id, saved.id)
        self.cache.invalidate(_CACHE_KIND, user_id)
        _logger.info(
            "Diet plan generated: user_id=%s plan_id=%s days=%s",
            user_id,
            saved.id,
            days,
        )
        return saved

    def get_current(self, user_id: UUID) -> DietPlan | None:
        """Return the user's current plan, if any."""
        cached = self.cache.get(_CACHE_KIND, user_id)
        if isinstance(cached, DietPlan):
            return cached
        user = self.user_service.get_user(user_id)
        if user.current_diet_plan_id is None:
            return None
        plan = self.repository.get_plan(user.current_diet_plan_id)
        if plan is not None:
            self.cache.put(_CACHE_KIND, user_id, plan)
        return plan

    def list_plans(self, user_id: UUID) -> list[DietPlan]:
        """Return every plan generated for the user, newest first."""
        return self.repository.list_plans(user_id)

    def swap_dish(self, user_id: UUID, request: SwapRequest) -> DietPlan:
        """Replace one dish in the current plan and refresh that day's totals."""
        plan = self._require_current(user_id)
        if not 0 <= request.day_index < len(plan.days):
            raise InvalidIndexError(f"Invalid day index {request.day_index}")
        new_dish = self.catalog_service.get_dish(request.new_item_id)

        days = list(plan.days)
        days[request.day_index] = _swap_in_day(
            days[request.day_index], request, new_dish
        )
        self.repository.update_days(plan.id, days)
        self.cache.invalidate(_CACHE_KIND, user_id)
        _logger.info(
            "Diet dish swapped: plan_id=%s day=%s meal=%s dish_id=%s",
            plan.id,
            request.day_index,
            request.meal_type,
            new_dish.id,
        )
        return replace(plan, days=days)

    def list_swap_candidates(self, user_id: UUID, category: str) -> list[Dish]:
        """Return dishes of a meal category that fit the user's diet."""
        if category not in MEAL_CATEGORIES:
            raise InvalidIndexError(f"Unknown meal category {category}")
        user = self.user_service.get_user(user_id)
        return [
            dish
            for dish in self.catalog_service.list_dishes(category)
            if admits_dish(dish, user.dietary_type)
        ]

    def _require_current(self, user_id: UUID) -> DietPlan:
        user = self.user_service.get_user(user_id)
        if user.current_diet_plan_id is None:
            raise PlanNotFoundError("No active diet plan found")
        plan = self.repository.get_plan(user.current_diet_plan_id)
        if plan is None:
            raise PlanNotFoundError("Diet plan not found")
        return plan


def _swap_in_day(day: DailyMeals, request: SwapRequest, new_dish: Dish) -> DailyMeals:
    meals = {
        "breakfast": day.breakfast,
        "lunch": day.lunch,
        "dinner": day.dinner,
    }
    snacks = list(day.snacks)
    if request.meal_type in _MAIN_MEALS:
        meals[request.meal_type] = new_dish
    elif request.meal_type == "snack":
        position = next(
            (
                index
                for index, snack in enumerate(snacks)
                if snack.id == request.old_item_id
            ),
            None,
        )
        if position is None:
            raise InvalidIndexError(f"Snack {request.old_item_id} not in this day")
        snacks[position] = new_dish
    else:
        raise InvalidIndexError(f"Unknown meal type {request.meal_type}")
    return build_daily_meals(day.day, snacks=snacks, **meals)
