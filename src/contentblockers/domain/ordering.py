"""Canonical ordering of content blocking rules.

Sorting puts rules with the same action next to each other, keeps
``ignore-previous-rules`` after every other action type, and, inside an
action group, puts less specific triggers ahead of more specific ones.

Each ordering below is a three-way comparison returning a negative
number, zero or a positive number. They are kept local to rule values
and are not installed as operators on builtin types.
"""

from __future__ import annotations

from enum import Enum
from functools import cmp_to_key
from typing import Callable, Iterable, Sequence, TypeVar

from .rules import Action, ActionType, ContentBlockingRule, Trigger, URLSelection

T = TypeVar("T")

Comparison = Callable[[T, T], int]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def compare_str(left: str, right: str) -> int:
    """Lexicographic order by code point."""
    return (left > right) - (left < right)


def compare_bool(left: bool, right: bool) -> int:
    """``False`` sorts before ``True``."""
    return int(left) - int(right)


def compare_tags(left: Enum, right: Enum) -> int:
    """Alphabetic order of the enum's wire tags."""
    return compare_str(left.value, right.value)


def compare_optional(left: T | None, right: T | None, compare: Comparison) -> int:
    """Absent sorts before present; present values use ``compare``."""
    if left is None and right is None:
        return 0
    if left is None:
        return -1
    if right is None:
        return 1
    return compare(left, right)


def compare_sequences(left: Sequence[T], right: Sequence[T], compare: Comparison) -> int:
    """Element-wise order; a proper prefix sorts first."""
    for a, b in zip(left, right):
        result = compare(a, b)
        if result:
            return result
    return _sign(len(left) - len(right))


def compare_action_types(left: ActionType, right: ActionType) -> int:
    """Alphabetic, except ``ignore-previous-rules`` is always greatest."""
    if left is right:
        return 0
    if left is ActionType.ignore_previous_rules:
        return 1
    if right is ActionType.ignore_previous_rules:
        return -1
    return compare_tags(left, right)


def compare_url_selections(left: URLSelection, right: URLSelection) -> int:
    """Variant rank first; patterns only break ties within one variant."""
    if left.rank != right.rank:
        return _sign(left.rank - right.rank)
    return compare_sequences(left.patterns, right.patterns, compare_str)


def compare_actions(left: Action, right: Action) -> int:
    return compare_action_types(left.type, right.type) or compare_optional(
        left.selector, right.selector, compare_str
    )


def _compare_tag_lists(left, right) -> int:
    return compare_sequences(left, right, compare_tags)


def compare_triggers(left: Trigger, right: Trigger) -> int:
    """Field by field: filter, load types, selection, resource types, case sensitivity."""
    return (
        compare_str(left.url_filter, right.url_filter)
        or compare_optional(left.load_types, right.load_types, _compare_tag_lists)
        or compare_optional(left.url_selection, right.url_selection, compare_url_selections)
        or compare_optional(left.resource_types, right.resource_types, _compare_tag_lists)
        or compare_optional(
            left.url_filter_is_case_sensitive,
            right.url_filter_is_case_sensitive,
            compare_bool,
        )
    )


def compare_rules(left: ContentBlockingRule, right: ContentBlockingRule) -> int:
    """Total order over rules: action first, then trigger."""
    return compare_actions(left.action, right.action) or compare_triggers(
        left.trigger, right.trigger
    )


rule_sort_key = cmp_to_key(compare_rules)


def sort_rules(rules: Iterable[ContentBlockingRule]) -> list[ContentBlockingRule]:
    """Return ``rules`` in canonical order (stable for ties)."""
    return sorted(rules, key=rule_sort_key)
