"""Read access to the dish and exercise catalog."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from fitness_planner.domain.catalog import Dish, Exercise
from fitness_planner.domain.errors import PlanNotFoundError


class CatalogRepository(Protocol):
    """Persistence interface for catalog reference data."""

    def list_dishes(self) -> list[Dish]:
        """Return every dish in the catalog."""

    def get_dish(self, dish_id: UUID) -> Dish | None:
        """Return a dish by id, if present."""

    def list_exercises(self) -> list[Exercise]:
        """Return every exercise in the catalog."""

    def get_exercise(self, exercise_id: UUID) -> Exercise | None:
        """Return an exercise by id, if present."""


@dataclass
class CatalogService:
    """Application service for catalog lookups."""

    repository: CatalogRepository

    def list_dishes(self, category: str | None = None) -> list[Dish]:
        """Return dishes, optionally limited to one meal category."""
        dishes = self.repository.list_dishes()
        if category is None:
            return dishes
        return [dish for dish in dishes if dish.category == category]

    def get_dish(self, dish_id: UUID) -> Dish:
        """Return a dish or raise when unknown."""
        dish = self.repository.get_dish(dish_id)
        if dish is None:
            raise PlanNotFoundError(f"Dish {dish_id} not found")
        return dish

    def list_exercises(self, category: str | None = None) -> list[Exercise]:
        """Return exercises; a missing category or "all" means no filter."""
        exercises = self.repository.list_exercises()
        if not category or category == "all":
            return exercises
        return [exercise for exercise in exercises if exercise.category == category]

    def get_exercise(self, exercise_id: UUID) -> Exercise:
        """Return an exercise or raise when unknown."""
        exercise = self.repository.get_exercise(exercise_id)
        if exercise is None:
            raise PlanNotFoundError(f"Exercise {exercise_id} not found")
        return exercise
