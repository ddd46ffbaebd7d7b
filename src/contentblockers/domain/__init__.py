"""Domain layer: rule models, canonical ordering and subsumption."""

from .errors import (
    MalformedPayloadError,
    MissingRequiredFieldError,
    RuleCodecError,
    UnknownVariantError,
)
from .ordering import compare_rules, rule_sort_key, sort_rules
from .rules import (
    Action,
    ActionType,
    ContentBlockingRule,
    IfDomain,
    IfTopURL,
    LoadType,
    ResourceType,
    Trigger,
    UnlessDomain,
    UnlessTopURL,
    URLSelection,
)
from .subsumption import RedundantRule, find_redundant_rules, is_superset

__all__ = [
    "Action",
    "ActionType",
    "ContentBlockingRule",
    "IfDomain",
    "IfTopURL",
    "LoadType",
    "ResourceType",
    "Trigger",
    "UnlessDomain",
    "UnlessTopURL",
    "URLSelection",
    "compare_rules",
    "rule_sort_key",
    "sort_rules",
    "RedundantRule",
    "find_redundant_rules",
    "is_superset",
    "MalformedPayloadError",
    "MissingRequiredFieldError",
    "RuleCodecError",
    "UnknownVariantError",
]
