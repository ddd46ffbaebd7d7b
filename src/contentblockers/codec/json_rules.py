"""JSON codec for content blocking rule sets.

Wire shape of one rule::

    {
      "trigger": {
        "url-filter": "<pattern>",
        "url-filter-is-case-sensitive": true,
        "resource-type": ["script", "image"],
        "load-type": ["third-party"],
        "if-domain": ["*example.com"]
      },
      "action": {"type": "block"}
    }

Absent optional fields are omitted, never written as ``null``. Unknown keys
are ignored on decode. Model field names such as ``url_filter`` are not wire keys
and count as unknown. Of the four selection keys the first present one in
the order ``if-domain``, ``unless-domain``, ``if-top-url``, ``unless-top-url``
decides the variant; the others are ignored.
"""

from __future__ import annotations

import json
from typing import Any, Iterable

from pydantic import ValidationError

from ..domain.errors import (
    MalformedPayloadError,
    MissingRequiredFieldError,
    RuleCodecError,
    UnknownVariantError,
)
from ..domain.ordering import sort_rules
from ..domain.rules import WIRE_CONTEXT_KEY, ContentBlockingRule

# Discriminator and wrapper locations pydantic adds to error paths
_INTERNAL_LOCS = {"url_selection", "kind", "patterns"}


def encode_rule(rule: ContentBlockingRule) -> dict[str, Any]:
    """Convert a rule to its JSON-ready wire mapping."""
    return rule.model_dump(mode="json", by_alias=True, exclude_none=True)


def encode_rules(rules: Iterable[ContentBlockingRule], *, canonical: bool = True) -> list[dict[str, Any]]:
    """Encode a rule set, sorting it into canonical order first unless told not to."""
    ordered = sort_rules(rules) if canonical else list(rules)
    return [encode_rule(rule) for rule in ordered]


def dumps_rules(
    rules: Iterable[ContentBlockingRule],
    *,
    indent: int | None = None,
    canonical: bool = True,
    ensure_ascii: bool = False,
) -> str:
    """Serialize a rule set to JSON text."""
    return json.dumps(
        encode_rules(rules, canonical=canonical),
        indent=indent,
        ensure_ascii=ensure_ascii,
    )


def decode_rule(payload: Any) -> ContentBlockingRule:
    """Build a rule from its wire mapping.

    Raises
    ------
    MissingRequiredFieldError
        ``trigger``, ``action``, ``url-filter`` or ``type`` is absent.
    UnknownVariantError
        An action, resource or load type tag is not recognised.
    MalformedPayloadError
        A value has the wrong JSON type.
    """
    try:
        return ContentBlockingRule.model_validate(payload, context={WIRE_CONTEXT_KEY: True})
    except ValidationError as exc:
        raise _translate(exc) from exc


def decode_rules(payload: Any) -> list[ContentBlockingRule]:
    """Decode a JSON array of rules, preserving document order."""
    if not isinstance(payload, list):
        raise MalformedPayloadError(f"expected an array of rules, got {type(payload).__name__}")
    rules: list[ContentBlockingRule] = []
    for index, item in enumerate(payload):
        try:
            rules.append(decode_rule(item))
        except RuleCodecError as exc:
            raise type(exc)(exc.message, (index, *exc.path)) from exc.__cause__
    return rules


def loads_rules(text: str | bytes) -> list[ContentBlockingRule]:
    """Parse JSON text holding a rule array."""
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedPayloadError(f"invalid JSON: {exc.msg} at line {exc.lineno} column {exc.colno}") from exc
    except UnicodeDecodeError as exc:
        raise MalformedPayloadError(f"invalid {exc.encoding} text at byte {exc.start}") from exc
    return decode_rules(payload)


def _wire_path(loc: tuple[str | int, ...]) -> tuple[str | int, ...]:
    """Map a pydantic error location back to the keys used in the document.

    Selection errors are located under their variant tag, which is already
    the wire key (``trigger.if-domain[0]``).
    """
    return tuple(part for part in loc if part not in _INTERNAL_LOCS)


def _translate(exc: ValidationError) -> RuleCodecError:
    error = exc.errors(include_url=False)[0]
    kind = error["type"]
    path = _wire_path(tuple(error["loc"]))
    if kind == "missing":
        return MissingRequiredFieldError("required field is missing", path)
    if kind == "enum":
        return UnknownVariantError(f"unknown value {error.get('input')!r}", path)
    return MalformedPayloadError(error["msg"], path)
