"""Content blocking rule models, canonical ordering and JSON codec."""

from .codec import decode_rule, decode_rules, dumps_rules, encode_rule, encode_rules, loads_rules
from .domain import (
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
    compare_rules,
    is_superset,
    sort_rules,
)

__version__ = "0.1.0"
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
    "compare_rules",
    "is_superset",
    "sort_rules",
    "decode_rule",
    "decode_rules",
    "dumps_rules",
    "encode_rule",
    "encode_rules",
    "loads_rules",
]
