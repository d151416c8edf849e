"""Errors raised by plan generation and plan mutations."""


class PlanError(Exception):
    """Base class for plan errors surfaced to callers."""


class MissingPrerequisiteError(PlanError):
    """Required upstream data, such as nutrition goals, is absent."""


class NoCandidatesError(PlanError):
    """No catalog item is eligible for a slot."""


class InvalidIndexError(PlanError):
    """A day index, meal type or item id does not exist in the plan."""


class PlanNotFoundError(PlanError):
    """A user, plan or catalog item could not be found."""


class InvalidDurationError(PlanError):
    """A plan was requested for fewer than one day."""
