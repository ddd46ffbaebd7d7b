"""Rule model tests: value equality, hashing and variant identity."""

import pytest
from pydantic import ValidationError

from contentblockers.domain.rules import (
    Action,
    ActionType,
    ContentBlockingRule,
    IfDomain,
    IfTopURL,
    LoadType,
    ResourceType,
    Trigger,
    UnlessDomain,
)


def _make_rule(url_filter: str = "*.", **trigger_kwargs) -> ContentBlockingRule:
    return ContentBlockingRule(
        trigger=Trigger(url_filter=url_filter, **trigger_kwargs),
        action=Action(type=ActionType.block),
    )


class TestRuleEquality:
    """Rules are plain values."""

    def test_identical_rules_are_equal(self):
        assert _make_rule() == _make_rule()

    def test_equal_rules_hash_identically(self):
        a = _make_rule(load_types=[LoadType.third_party], url_selection=IfDomain(patterns=["*a.com"]))
        b = _make_rule(load_types=[LoadType.third_party], url_selection=IfDomain(patterns=["*a.com"]))
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_nested_collections_take_part_in_equality(self):
        assert _make_rule(resource_types=[ResourceType.script]) != _make_rule(
            resource_types=[ResourceType.script, ResourceType.image]
        )

    def test_selection_variant_identity_matters(self):
        a = _make_rule(url_selection=IfDomain(patterns=["*a.com"]))
        b = _make_rule(url_selection=UnlessDomain(patterns=["*a.com"]))
        assert a != b

    def test_absent_and_false_case_sensitivity_differ(self):
        assert _make_rule() != _make_rule(url_filter_is_case_sensitive=False)

    def test_rules_are_frozen(self):
        rule = _make_rule()
        with pytest.raises(ValidationError):
            rule.action = Action(type=ActionType.make_https)


class TestRuleConstruction:
    """Construction coerces types but does not judge semantics."""

    def test_list_fields_are_stored_as_tuples_in_order(self):
        trigger = Trigger(url_filter="x", resource_types=["script", "image"])
        assert trigger.resource_types == (ResourceType.script, ResourceType.image)

    def test_duplicates_and_empty_lists_are_accepted(self):
        trigger = Trigger(url_filter="x", load_types=[], resource_types=["popup", "popup"])
        assert trigger.load_types == ()
        assert trigger.resource_types == (ResourceType.popup, ResourceType.popup)

    def test_selector_on_non_hiding_action_is_accepted(self):
        action = Action(type=ActionType.block, selector=".ad")
        assert action.selector == ".ad"
        assert action.has_consistent_selector is False

    def test_css_display_none_helper(self):
        action = Action.css_display_none(".big-fat-ad")
        assert action.type is ActionType.css_display_none
        assert action.has_consistent_selector is True

    def test_hiding_action_without_selector_is_inconsistent(self):
        assert Action(type=ActionType.css_display_none).has_consistent_selector is False

    def test_selection_variants_expose_wire_key(self):
        assert IfDomain(patterns=["a"]).key == "if-domain"
        assert IfTopURL(patterns=["a"]).key == "if-top-url"

    def test_url_filter_is_required(self):
        with pytest.raises(ValidationError):
            Trigger()
