"""Domain models for the dish and exercise catalog."""

from dataclasses import dataclass, field
from uuid import UUID

MEAL_CATEGORIES = ("breakfast", "lunch", "dinner", "snack")


@dataclass(frozen=True)
class Dish:
    """A catalog dish with its macros per serving."""

    id: UUID
    name: str
    category: str
    calories: float
    protein_g: float
    carbs_g: float
    fats_g: float
    dietary_type: str = "vegetarian"
    fiber_g: float = 0.0
    description: str = ""
    ingredients: list[str] = field(default_factory=list)
    instructions: str = ""
    prep_time_min: int = 0
    cook_time_min: int = 0
    servings: int = 1
    tags: list[str] = field(default_factory=list)
    dish_type: str = "general"
    cuisine_type: str = "international"


@dataclass(frozen=True)
class Exercise:
    """A catalog exercise."""

    id: UUID
    name: str
    category: str
    difficulty: str
    equipment: str = "none"
    muscle_groups: list[str] = field(default_factory=list)
    duration_min: float | None = None
    calories_burned_per_min: float | None = None
    is_active: bool = True
    description: str = ""
    instructions: list[str] = field(default_factory=list)
