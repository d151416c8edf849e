"""Dependency container wiring for the application."""

import random
from dataclasses import dataclass

from supabase import create_client

from fitness_planner.adapters.supabase_catalog_repository import (
    SupabaseCatalogRepository,
)
from fitness_planner.adapters.supabase_diet_plan_repository import (
    SupabaseDietPlanRepository,
)
from fitness_planner.adapters.supabase_user_repository import SupabaseUserRepository
from fitness_planner.adapters.supabase_workout_plan_repository import (
    SupabaseWorkoutPlanRepository,
)
from fitness_planner.config import Settings
from fitness_planner.services.allocator import SlotAllocator
from fitness_planner.services.cache import InMemoryPlanCache
from fitness_planner.services.catalog import CatalogService
from fitness_planner.services.diet_plans import DietPlanService
from fitness_planner.services.nutrition import NutritionService
from fitness_planner.services.users import UserService
from fitness_planner.services.workout_plans import WorkoutPlanService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    catalog_service: CatalogService
    nutrition_service: NutritionService
    diet_plan_service: DietPlanService
    workout_plan_service: WorkoutPlanService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_service = UserService(SupabaseUserRepository(supabase_client))
    catalog_service = CatalogService(SupabaseCatalogRepository(supabase_client))
    allocator = SlotAllocator(
        rng=random.Random(resolved_settings.random_seed),
        max_attempts=resolved_settings.match_max_attempts,
        good_enough_score=resolved_settings.match_good_enough_score,
        protein_weight=resolved_settings.match_protein_weight,
    )
    cache = InMemoryPlanCache(ttl_seconds=resolved_settings.current_plan_ttl_seconds)
    diet_plan_service = DietPlanService(
        user_service=user_service,
        catalog_service=catalog_service,
        repository=SupabaseDietPlanRepository(supabase_client),
        allocator=allocator,
        cache=cache,
        default_duration_days=resolved_settings.default_plan_days,
    )
    workout_plan_service = WorkoutPlanService(
        user_service=user_service,
        catalog_service=catalog_service,
        repository=SupabaseWorkoutPlanRepository(supabase_client),
        allocator=allocator,
        cache=cache,
        default_duration_days=resolved_settings.default_plan_days,
        candidate_limit=resolved_settings.exercise_candidate_limit,
    )
    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        catalog_service=catalog_service,
        nutrition_service=NutritionService(user_service),
        diet_plan_service=diet_plan_service,
        workout_plan_service=workout_plan_service,
    )
