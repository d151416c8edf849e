"""Short-lived cache for users' current plans."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Protocol
from uuid import UUID


class PlanCache(Protocol):
    """Cache of the current plan per user and plan kind."""

    def get(self, kind: str, user_id: UUID) -> object | None:
        """Return the cached plan if present and not expired."""

    def put(self, kind: str, user_id: UUID, plan: object) -> None:
        """Cache a user's current plan."""

    def invalidate(self, kind: str, user_id: UUID) -> None:
        """Forget a user's cached plan."""


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class InMemoryPlanCache(PlanCache):
    """Process-local plan cache with a fixed TTL."""

    ttl_seconds: int = 300
    clock: Callable[[], datetime] = _utcnow
    _entries: dict[tuple[str, UUID], tuple[object, datetime]] = field(
        default_factory=dict
    )

    def get(self, kind: str, user_id: UUID) -> object | None:
        """Return the cached plan, dropping it once expired."""
        entry = self._entries.get((kind, user_id))
        if entry is None:
            return None
        plan, expires_at = entry
        if self.clock() >= expires_at:
            del self._entries[(kind, user_id)]
            return None
        return plan

    def put(self, kind: str, user_id: UUID, plan: object) -> None:
        """Cache a plan until the TTL elapses."""
        expires_at = self.clock() + timedelta(seconds=self.ttl_seconds)
        self._entries[(kind, user_id)] = (plan, expires_at)

    def invalidate(self, kind: str, user_id: UUID) -> None:
        """Forget a cached plan if present."""
        self._entries.pop((kind, user_id), None)
