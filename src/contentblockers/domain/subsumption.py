"""Rule subsumption: does one rule match everything another rule matches?

The check is structural and conservative. It only recognises a superset
when the wider rule drops or widens constraints; it never reasons about
what a URL pattern or a domain list actually matches.
"""

from __future__ import annotations

from typing import Iterable

from pydantic import BaseModel, Field

from .rules import ContentBlockingRule, Trigger


class RedundantRule(BaseModel):
    """A rule whose matches are already covered by another rule in the set."""

    index: int = Field(..., description="Position of the covered rule")
    rule: ContentBlockingRule = Field(..., description="The covered rule")
    covered_by: int = Field(..., description="Position of the first rule covering it")


def _covers_set(wide, narrow) -> bool:
    if wide is None:
        return True
    if narrow is None:
        return False
    return set(narrow) <= set(wide)


def _covers_value(wide, narrow) -> bool:
    if wide is None:
        return True
    return wide == narrow


def trigger_is_superset(wide: Trigger, narrow: Trigger) -> bool:
    """True if ``wide`` matches every request ``narrow`` matches."""
    if wide.url_filter != narrow.url_filter:
        return False
    return (
        _covers_set(wide.resource_types, narrow.resource_types)
        and _covers_set(wide.load_types, narrow.load_types)
        and _covers_value(wide.url_filter_is_case_sensitive, narrow.url_filter_is_case_sensitive)
        and _covers_value(wide.url_selection, narrow.url_selection)
    )


def is_superset(wide: ContentBlockingRule, narrow: ContentBlockingRule) -> bool:
    """True if ``wide`` has the same action and a trigger covering ``narrow``'s.

    Rules with different actions are never comparable.
    """
    if wide.action != narrow.action:
        return False
    return trigger_is_superset(wide.trigger, narrow.trigger)


def find_redundant_rules(rules: Iterable[ContentBlockingRule]) -> list[RedundantRule]:
    """Report every rule covered by some other rule of the set.

    Of two identical rules only the later one is reported, so one copy
    always remains uncovered. Nothing is removed from the input.
    """
    items = list(rules)
    found: list[RedundantRule] = []
    for i, narrow in enumerate(items):
        for j, wide in enumerate(items):
            if i == j or not is_superset(wide, narrow):
                continue
            if j > i and wide == narrow:
                continue
            found.append(RedundantRule(index=i, rule=narrow, covered_by=j))
            break
    return found
