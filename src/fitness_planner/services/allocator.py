"""Slot allocation for diet and workout plans."""

import random
from collections.abc import Sequence
from dataclasses import dataclass, field

from fitness_planner.domain.catalog import Dish, Exercise
from fitness_planner.domain.diet import MealTarget
from fitness_planner.domain.errors import NoCandidatesError


@dataclass
class SlotAllocator:
    """Pick catalog items for plan slots with a bounded randomized search."""

    rng: random.Random = field(default_factory=random.Random)
    max_attempts: int = 20
    good_enough_score: float = 50.0
    protein_weight: float = 2.0

    def score(self, dish: Dish, target: MealTarget) -> float:
        """Return the weighted deviation of a dish from a meal target."""
        return abs(dish.calories - target.calories) + self.protein_weight * abs(
            dish.protein_g - target.protein_g
        )

    def select_dish(self, candidates: Sequence[Dish], target: MealTarget) -> Dish:
        """Return the closest dish found in a bounded number of random draws.

        Starts from the first candidate and replaces it only on a strictly
        lower score. Stops early on the first draw scoring below the
        good-enough threshold.
        """
        if not candidates:
            raise NoCandidatesError("No dishes available for this meal")
        best = candidates[0]
        best_score = self.score(best, target)
        for _ in range(min(self.max_attempts, len(candidates))):
            candidate = self.rng.choice(candidates)
            candidate_score = self.score(candidate, target)
            if candidate_score < best_score:
                best = candidate
                best_score = candidate_score
            if candidate_score < self.good_enough_score:
                break
        return best

    def select_exercises(
        self, candidates: Sequence[Exercise], count: int
    ) -> list[Exercise]:
        """Draw exercises uniformly with replacement.

        The number of draws never exceeds the number of candidates.
        """
        if not candidates:
            raise NoCandidatesError("No exercises available for this workout")
        draws = min(count, len(candidates))
        return [self.rng.choice(candidates) for _ in range(draws)]
