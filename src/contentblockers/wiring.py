"""Composition root.

Call ``build_ruleset_service()`` to get a service configured from the
environment. No ad-hoc construction elsewhere.
"""

from __future__ import annotations

import logging

from .config.runtime import RuntimeSettings, get_settings
from .services.ruleset_service import RuleSetService


def build_ruleset_service(
    settings: RuntimeSettings | None = None,
    logger: logging.Logger | None = None,
) -> RuleSetService:
    """Construct a RuleSetService from settings (environment by default)."""
    settings = settings or get_settings()
    return RuleSetService(settings=settings, logger=logger)
