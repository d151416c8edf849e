"""Supabase implementation for the dish and exercise catalog."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from fitness_planner.domain.catalog import Dish, Exercise
from fitness_planner.services.catalog import CatalogRepository


@dataclass
class SupabaseCatalogRepository(CatalogRepository):
    """Supabase-backed repository for catalog reference data."""

    client: Client

    def list_dishes(self) -> list[Dish]:
        """Return every dish in the catalog."""
        response = self.client.table("dishes").select("*").order("name").execute()
        return [parse_dish(row) for row in response.data or []]

    def get_dish(self, dish_id: UUID) -> Dish | None:
        """Return a dish by id, if present."""
        response = (
            self.client.table("dishes")
            .select("*")
            .eq("id", str(dish_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_dish(response.data[0])

    def list_exercises(self) -> list[Exercise]:
        """Return every exercise in the catalog."""
        response = self.client.table("exercises").select("*").order("name").execute()
        return [parse_exercise(row) for row in response.data or []]

    def get_exercise(self, exercise_id: UUID) -> Exercise | None:
        """Return an exercise by id, if present."""
        response = (
            self.client.table("exercises")
            .select("*")
            .eq("id", str(exercise_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_exercise(response.data[0])


def parse_dish(row: dict[str, object]) -> Dish:
    """Parse a dish row or plan snapshot into a domain model."""
    return Dish(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        category=str(row.get("category", "")),
        calories=float(row.get("calories", 0.0)),
        protein_g=float(row.get("protein_g", 0.0)),
        carbs_g=float(row.get("carbs_g", 0.0)),
        fats_g=float(row.get("fats_g", 0.0)),
        dietary_type=str(row.get("dietary_type") or "vegetarian"),
        fiber_g=float(row.get("fiber_g") or 0.0),
        description=str(row.get("description") or ""),
        ingredients=list(row.get("ingredients") or []),
        instructions=str(row.get("instructions") or ""),
        prep_time_min=int(row.get("prep_time_min") or 0),
        cook_time_min=int(row.get("cook_time_min") or 0),
        servings=int(row.get("servings") or 1),
        tags=list(row.get("tags") or []),
        dish_type=str(row.get("dish_type") or "general"),
        cuisine_type=str(row.get("cuisine_type") or "international"),
    )


def dish_snapshot(dish: Dish) -> dict[str, object]:
    """Serialize a dish for storage inside a plan."""
    return {
        "id": str(dish.id),
        "name": dish.name,
        "category": dish.category,
        "calories": dish.calories,
        "protein_g": dish.protein_g,
        "carbs_g": dish.carbs_g,
        "fats_g": dish.fats_g,
        "dietary_type": dish.dietary_type,
        "fiber_g": dish.fiber_g,
        "description": dish.description,
        "ingredients": list(dish.ingredients),
        "instructions": dish.instructions,
        "prep_time_min": dish.prep_time_min,
        "cook_time_min": dish.cook_time_min,
        "servings": dish.servings,
        "tags": list(dish.tags),
        "dish_type": dish.dish_type,
        "cuisine_type": dish.cuisine_type,
    }


def parse_exercise(row: dict[str, object]) -> Exercise:
    """Parse an exercise row or plan snapshot into a domain model."""
    duration = row.get("duration_min")
    rate = row.get("calories_burned_per_min")
    return Exercise(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        category=str(row.get("category", "")),
        difficulty=str(row.get("difficulty", "")),
        equipment=str(row.get("equipment") or "none"),
        muscle_groups=list(row.get("muscle_groups") or []),
        duration_min=float(duration) if isinstance(duration, int | float) else None,
        calories_burned_per_min=float(rate) if isinstance(rate, int | float) else None,
        is_active=bool(row.get("is_active", True)),
        description=str(row.get("description") or ""),
        instructions=list(row.get("instructions") or []),
    )


def exercise_snapshot(exercise: Exercise) -> dict[str, object]:
    """Serialize an exercise for storage inside a plan."""
    return {
        "id": str(exercise.id),
        "name": exercise.name,
        "category": exercise.category,
        "difficulty": exercise.difficulty,
        "equipment": exercise.equipment,
        "muscle_groups": list(exercise.muscle_groups),
        "duration_min": exercise.duration_min,
        "calories_burned_per_min": exercise.calories_burned_per_min,
        "is_active": exercise.is_active,
        "description": exercise.description,
        "instructions": list(exercise.instructions),
    }
