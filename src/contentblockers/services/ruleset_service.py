"""RuleSetService: canonical encoding, decoding and redundancy analysis of rule sets."""

from __future__ import annotations

import logging
import time
from typing import Any, Iterable

from ..codec.json_rules import decode_rules, dumps_rules, encode_rules, loads_rules
from ..config.runtime import RuntimeSettings, get_settings
from ..domain.errors import RuleCodecError
from ..domain.ordering import sort_rules
from ..domain.rules import ContentBlockingRule
from ..domain.subsumption import RedundantRule, find_redundant_rules, is_superset
from ..observability import get_logger, log_operation


class RuleSetService:
    """Front door for callers holding a rule set.

    Stateless apart from settings; safe to share between threads.
    """

    def __init__(
        self,
        settings: RuntimeSettings | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._logger = logger or get_logger()

    @property
    def settings(self) -> RuntimeSettings:
        return self._settings

    def canonicalize(self, rules: Iterable[ContentBlockingRule]) -> list[ContentBlockingRule]:
        """Return the rules in canonical order."""
        start = time.perf_counter()
        ordered = sort_rules(rules)
        self._record("canonicalize", len(ordered), start)
        return ordered

    def to_document(self, rules: Iterable[ContentBlockingRule]) -> list[dict[str, Any]]:
        """Encode to a JSON-ready list, in canonical order unless disabled in settings."""
        start = time.perf_counter()
        document = encode_rules(rules, canonical=self._settings.canonical_order)
        self._record("encode", len(document), start)
        return document

    def to_json(self, rules: Iterable[ContentBlockingRule]) -> str:
        """Encode to JSON text using the configured layout."""
        start = time.perf_counter()
        items = list(rules)
        text = dumps_rules(
            items,
            indent=self._settings.json_indent,
            canonical=self._settings.canonical_order,
            ensure_ascii=self._settings.ensure_ascii,
        )
        self._record("encode_json", len(items), start)
        return text

    def from_document(self, payload: Any) -> list[ContentBlockingRule]:
        """Decode a JSON-ready list of rule mappings."""
        start = time.perf_counter()
        try:
            rules = decode_rules(payload)
        except RuleCodecError as exc:
            self._record("decode", 0, start, error=str(exc))
            raise
        self._record("decode", len(rules), start)
        return rules

    def from_json(self, text: str | bytes) -> list[ContentBlockingRule]:
        """Decode JSON text holding a rule array."""
        start = time.perf_counter()
        try:
            rules = loads_rules(text)
        except RuleCodecError as exc:
            self._record("decode_json", 0, start, error=str(exc))
            raise
        self._record("decode_json", len(rules), start)
        return rules

    def is_superset(self, wide: ContentBlockingRule, narrow: ContentBlockingRule) -> bool:
        return is_superset(wide, narrow)

    def redundant(self, rules: Iterable[ContentBlockingRule]) -> list[RedundantRule]:
        """List rules already covered by another rule of the set."""
        start = time.perf_counter()
        items = list(rules)
        found = find_redundant_rules(items)
        self._record("redundant", len(items), start, extra={"redundant_count": len(found)})
        return found

    def _record(
        self,
        operation: str,
        rule_count: int,
        start: float,
        error: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        if not self._settings.log_operations:
            return
        latency_ms = (time.perf_counter() - start) * 1000
        log_operation(
            operation,
            rule_count,
            latency_ms,
            error=error,
            extra=extra,
            logger=self._logger,
        )
