"""Application services."""

from .ruleset_service import RuleSetService

__all__ = ["RuleSetService"]
