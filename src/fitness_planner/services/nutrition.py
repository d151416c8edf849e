"""Nutrition goal calculator."""

import logging
from dataclasses import dataclass
from uuid import UUID

from fitness_planner.domain.models import NutritionGoals
from fitness_planner.domain.nutrition import NutritionCalculation, NutritionInputs
from fitness_planner.services.targets import round_half_up
from fitness_planner.services.users import UserService

_ACTIVITY_MULTIPLIERS = {
    "sedentary": 1.2,
    "light": 1.375,
    "moderate": 1.55,
    "active": 1.725,
    "very-active": 1.9,
}

_GOAL_ADJUSTMENTS = {
    "lose": -500,
    "maintain": 0,
    "gain": 300,
}

_FAT_CALORIE_SHARE = 0.25
_KCAL_PER_G_PROTEIN = 4
_KCAL_PER_G_CARBS = 4
_KCAL_PER_G_FAT = 9

_logger = logging.getLogger(__name__)


def calculate_goals(inputs: NutritionInputs) -> NutritionCalculation:
    """Compute BMR, TDEE and daily macro goals (Mifflin-St Jeor)."""
    bmr = 10 * inputs.weight_kg + 6.25 * inputs.height_cm - 5 * inputs.age
    bmr += 5 if inputs.gender == "male" else -161
    tdee = bmr * _ACTIVITY_MULTIPLIERS[inputs.activity]
    target_calories = tdee + _GOAL_ADJUSTMENTS[inputs.goal]

    if inputs.goal == "gain":
        protein_per_kg = 2.0
    elif inputs.activity in {"active", "very-active"}:
        protein_per_kg = 1.6
    else:
        protein_per_kg = 1.2

    protein_g = round_half_up(inputs.weight_kg * protein_per_kg)
    fats_g = round_half_up(target_calories * _FAT_CALORIE_SHARE / _KCAL_PER_G_FAT)
    carbs_g = round_half_up(
        (
            target_calories
            - protein_g * _KCAL_PER_G_PROTEIN
            - fats_g * _KCAL_PER_G_FAT
        )
        / _KCAL_PER_G_CARBS
    )
    return NutritionCalculation(
        bmr=round_half_up(bmr),
        tdee=round_half_up(tdee),
        goals=NutritionGoals(
            calories=round_half_up(target_calories),
            protein_g=protein_g,
            carbs_g=carbs_g,
            fats_g=fats_g,
        ),
    )


@dataclass
class NutritionService:
    """Compute and store a user's nutrition goals."""

    user_service: UserService

    def calculate(self, user_id: UUID, inputs: NutritionInputs) -> NutritionCalculation:
        """Compute goals from measurements and persist them on the user."""
        self.user_service.get_user(user_id)
        calculation = calculate_goals(inputs)
        self.user_service.repository.set_nutrition_goals(user_id, calculation.goals)
        _logger.info(
            "Nutrition goals stored: user_id=%s calories=%s protein_g=%s",
            user_id,
            calculation.goals.calories,
            calculation.goals.protein_g,
        )
        return calculation

    def get_goals(self, user_id: UUID) -> NutritionGoals | None:
        """Return stored goals, if any."""
        return self.user_service.get_user(user_id).nutrition_goals
