"""Tests for Supabase adapter implementations."""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from uuid import uuid4

import pytest

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
from fitness_planner.domain.diet import DietPlan
from fitness_planner.domain.models import NutritionGoals
from fitness_planner.domain.workout import (
    ExerciseSet,
    WorkoutPlan,
    WorkoutProgress,
)
from fitness_planner.services.aggregation import (
    build_daily_meals,
    build_daily_workout,
    rest_day,
)
from tests.conftest import make_exercise, single_meal_catalog


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {"select": [], "insert": [], "update": []}
    )
    echo_writes: bool = False
    last_payload: object | None = None
    last_filters: list[tuple[str, object]] = field(default_factory=list)
    last_order: tuple[str, bool] | None = None

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def select(self, *_args) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "select"
        return self

    def insert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "insert"
        self.last_payload = payload
        return self

    def update(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "update"
        self.last_payload = payload
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def order(self, column: str, desc: bool = False) -> "FakeTable":
        self.last_order = (column, desc)
        return self

    def execute(self) -> FakeResponse:
        action = getattr(self, "_action", "select")
        queue = self.response_queue.get(action, [])
        if queue:
            return FakeResponse(data=queue.pop(0))
        if self.echo_writes and action in {"insert", "update"}:
            return FakeResponse(data=[self.last_payload])
        return FakeResponse(data=[])


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def _diet_plan() -> DietPlan:
    breakfast, lunch, dinner, snack = single_meal_catalog()
    start = date(2024, 5, 1)
    return DietPlan(
        id=uuid4(),
        user_id=uuid4(),
        name="My 2-Day Diet Plan",
        start_date=start,
        end_date=date(2024, 5, 2),
        targets=NutritionGoals(calories=2000, protein_g=150, carbs_g=200, fats_g=60),
        days=[
            build_daily_meals(start, breakfast, lunch, dinner, [snack]),
            build_daily_meals(date(2024, 5, 2), breakfast, lunch, dinner, [snack]),
        ],
        preferences={"spice": "mild"},
        created_at=datetime(2024, 5, 1, 8, 30, tzinfo=UTC),
    )


def _workout_plan() -> WorkoutPlan:
    run = make_exercise("Run", category="cardio", duration_min=20)
    squat = make_exercise("Squat", calories_burned_per_min=7.5)
    start = date(2024, 5, 6)
    return WorkoutPlan(
        id=uuid4(),
        user_id=uuid4(),
        name="My 2-Day Endurance Plan",
        fitness_level="beginner",
        primary_goal="endurance",
        start_date=start,
        end_date=date(2024, 5, 7),
        duration_days=2,
        workouts_per_week=1,
        days=[
            build_daily_workout(
                start,
                "full-body",
                [
                    ExerciseSet(exercise=run, sets=2, reps="8-10", duration_min=20),
                    ExerciseSet(exercise=squat, sets=2, reps="8-10"),
                ],
            ),
            rest_day(date(2024, 5, 7)),
        ],
        preferences={"equipment": [], "preferred_time": "morning"},
        created_at=datetime(2024, 5, 6, 7, 0, tzinfo=UTC),
    )


def test_supabase_user_repository_parses_profile() -> None:
    client = FakeSupabaseClient()
    users_table = client.table("users")
    user_id = uuid4()
    plan_id = uuid4()
    users_table.queue(
        "select",
        [
            {
                "id": str(user_id),
                "target_calories": 2200,
                "target_protein_g": 140,
                "target_carbs_g": 250,
                "target_fats_g": 70,
                "dietary_type": "vegan",
                "activity_level": "moderate",
                "goals": ["muscle-gain"],
                "fitness_level": None,
                "equipment": ["free-weights"],
                "current_diet_plan_id": str(plan_id),
                "current_workout_plan_id": None,
            }
        ],
    )

    user = SupabaseUserRepository(client).get_user(user_id)

    assert user is not None
    assert user.nutrition_goals == NutritionGoals(2200, 140, 250, 70)
    assert user.dietary_type == "vegan"
    assert user.goals == ["muscle-gain"]
    assert user.current_diet_plan_id == plan_id
    assert user.current_workout_plan_id is None
    assert ("id", str(user_id)) in users_table.last_filters


def test_supabase_user_repository_without_goals() -> None:
    client = FakeSupabaseClient()
    client.table("users").queue("select", [{"id": str(uuid4())}])

    user = SupabaseUserRepository(client).get_user(uuid4())

    assert user is not None
    assert user.nutrition_goals is None
    assert user.dietary_type == "vegetarian"


def test_supabase_user_repository_missing_user() -> None:
    assert SupabaseUserRepository(FakeSupabaseClient()).get_user(uuid4()) is None


def test_supabase_user_repository_writes() -> None:
    client = FakeSupabaseClient()
    users_table = client.table("users")
    repository = SupabaseUserRepository(client)
    user_id = uuid4()
    plan_id = uuid4()

    repository.set_nutrition_goals(user_id, NutritionGoals(1800, 120, 200, 50))
    assert users_table.last_payload == {
        "target_calories": 1800,
        "target_protein_g": 120,
        "target_carbs_g": 200,
        "target_fats_g": 50,
    }

    repository.set_current_workout_plan(user_id, plan_id)
    assert users_table.last_payload == {"current_workout_plan_id": str(plan_id)}

    with pytest.raises(RuntimeError):
        repository.update_preferences(user_id, {"dietary_type": "vegan"})
    assert isinstance(users_table.last_payload, dict)
    assert "updated_at" in users_table.last_payload


def test_supabase_catalog_repository_parses_rows() -> None:
    client = FakeSupabaseClient()
    dishes_table = client.table("dishes")
    exercises_table = client.table("exercises")
    dish_id = uuid4()
    dishes_table.queue(
        "select",
        [
            {
                "id": str(dish_id),
                "name": "Chole",
                "category": "lunch",
                "calories": 620,
                "protein_g": 24,
                "carbs_g": 80,
                "fats_g": 18,
                "dietary_type": None,
                "ingredients": ["chickpeas", "onion"],
            }
        ],
    )
    exercises_table.queue(
        "select",
        [
            {
                "id": str(uuid4()),
                "name": "Plank",
                "category": "strength",
                "difficulty": "beginner",
                "equipment": None,
                "duration_min": None,
                "calories_burned_per_min": 4,
            }
        ],
    )
    repository = SupabaseCatalogRepository(client)

    dishes = repository.list_dishes()
    exercises = repository.list_exercises()

    assert dishes[0].id == dish_id
    assert dishes[0].calories == 620.0
    assert dishes[0].dietary_type == "vegetarian"
    assert dishes[0].ingredients == ["chickpeas", "onion"]
    assert dishes_table.last_order == ("name", False)
    assert exercises[0].equipment == "none"
    assert exercises[0].duration_min is None
    assert exercises[0].calories_burned_per_min == 4.0
    assert repository.get_dish(uuid4()) is None


def test_supabase_diet_plan_repository_roundtrip() -> None:
    client = FakeSupabaseClient()
    plans_table = client.table("diet_plans")
    plans_table.echo_writes = True
    repository = SupabaseDietPlanRepository(client)
    plan = _diet_plan()

    stored = repository.create_plan(plan)

    assert stored == plan
    payload = plans_table.last_payload
    assert isinstance(payload, dict)
    assert payload["daily_plans"][0]["total_calories"] == 2000
    assert payload["daily_plans"][0]["lunch"]["name"] == "Dal Rice"

    plans_table.queue("select", [payload])
    assert repository.get_plan(plan.id) == plan


def test_supabase_diet_plan_repository_create_failure() -> None:
    repository = SupabaseDietPlanRepository(FakeSupabaseClient())

    with pytest.raises(RuntimeError):
        repository.create_plan(_diet_plan())


def test_supabase_diet_plan_repository_lists_newest_first() -> None:
    client = FakeSupabaseClient()
    plans_table = client.table("diet_plans")
    user_id = uuid4()

    assert SupabaseDietPlanRepository(client).list_plans(user_id) == []
    assert plans_table.last_order == ("created_at", True)
    assert ("user_id", str(user_id)) in plans_table.last_filters


def test_supabase_diet_plan_repository_update_days() -> None:
    client = FakeSupabaseClient()
    plans_table = client.table("diet_plans")
    plan = _diet_plan()

    SupabaseDietPlanRepository(client).update_days(plan.id, plan.days[:1])

    assert isinstance(plans_table.last_payload, dict)
    assert len(plans_table.last_payload["daily_plans"]) == 1
    assert ("id", str(plan.id)) in plans_table.last_filters


def test_supabase_workout_plan_repository_roundtrip() -> None:
    client = FakeSupabaseClient()
    plans_table = client.table("workout_plans")
    plans_table.echo_writes = True
    repository = SupabaseWorkoutPlanRepository(client)
    plan = _workout_plan()

    stored = repository.create_plan(plan)

    assert stored == plan
    assert stored.days[0].estimated_calories == 325
    assert stored.days[0].total_duration_min == 50
    assert stored.days[0].exercises[0].exercise.duration_min == 20.0


def test_supabase_workout_plan_repository_update_progress() -> None:
    client = FakeSupabaseClient()
    plans_table = client.table("workout_plans")
    plan = _workout_plan()
    progress = WorkoutProgress(
        total_workouts_completed=1,
        total_calories_burned=325,
        current_streak=1,
        longest_streak=1,
    )

    SupabaseWorkoutPlanRepository(client).update_progress(
        plan.id, plan.days, progress
    )

    payload = plans_table.last_payload
    assert isinstance(payload, dict)
    assert payload["progress"]["total_calories_burned"] == 325
    assert [day["workout_type"] for day in payload["daily_workouts"]] == [
        "full-body",
        "rest",
    ]


def test_supabase_workout_plan_repository_missing_plan() -> None:
    repository = SupabaseWorkoutPlanRepository(FakeSupabaseClient())

    assert repository.get_plan(uuid4()) is None
