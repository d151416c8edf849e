"""ASGI entrypoint for the fitness planner API."""

from fitness_planner.api.app import create_app
from fitness_planner.containers import build_container

app = create_app(build_container())
