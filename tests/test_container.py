"""Tests for container wiring."""

from fitness_planner.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.diet_plan_service is not None
    assert container.workout_plan_service is not None
    assert container.nutrition_service.user_service is container.user_service


def test_build_container_shares_allocator_between_plan_services(settings) -> None:
    container = build_container(settings)

    assert (
        container.diet_plan_service.allocator
        is container.workout_plan_service.allocator
    )
    assert container.workout_plan_service.candidate_limit == 50
    assert container.workout_plan_service.default_duration_days == 7
