"""Content blocking rule models.

A rule pairs a :class:`Trigger` (when to match) with an :class:`Action`
(what to do). All models are frozen, so rules compare and hash by value.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, ClassVar, Literal, Union

from pydantic import (
    BaseModel,
    Field,
    SerializationInfo,
    StrictBool,
    StrictStr,
    ValidationInfo,
    model_serializer,
    model_validator,
)


class ActionType(str, Enum):
    """Action applied when a trigger matches."""

    block = "block"
    block_cookies = "block-cookies"
    css_display_none = "css-display-none"
    ignore_previous_rules = "ignore-previous-rules"
    make_https = "make-https"


class ResourceType(str, Enum):
    """How the browser intends to use the resource."""

    document = "document"
    image = "image"
    style_sheet = "style-sheet"
    script = "script"
    font = "font"
    raw = "raw"  # any untyped load
    svg_document = "svg-document"
    media = "media"
    popup = "popup"


class LoadType(str, Enum):
    """Whether the resource comes from the main page's origin."""

    first_party = "first-party"
    third_party = "third-party"


class _URLSelectionBase(BaseModel):
    """Shared shape of the four URL selection variants.

    ``key`` is the sibling key used on the wire, ``rank`` the variant's
    position in the canonical order.
    """

    model_config = {"frozen": True}

    key: ClassVar[str]
    rank: ClassVar[int]

    patterns: tuple[StrictStr, ...] = Field(..., description="Domain or URL patterns")


class UnlessDomain(_URLSelectionBase):
    """Act on any site except the listed domains."""

    key: ClassVar[str] = "unless-domain"
    rank: ClassVar[int] = 0
    kind: Literal["unless-domain"] = "unless-domain"


class IfDomain(_URLSelectionBase):
    """Limit the action to the listed domains."""

    key: ClassVar[str] = "if-domain"
    rank: ClassVar[int] = 1
    kind: Literal["if-domain"] = "if-domain"


class UnlessTopURL(_URLSelectionBase):
    """Act on any main document URL except the listed patterns."""

    key: ClassVar[str] = "unless-top-url"
    rank: ClassVar[int] = 2
    kind: Literal["unless-top-url"] = "unless-top-url"


class IfTopURL(_URLSelectionBase):
    """Limit the action to main document URLs matching the listed patterns."""

    key: ClassVar[str] = "if-top-url"
    rank: ClassVar[int] = 3
    kind: Literal["if-top-url"] = "if-top-url"


URLSelection = Annotated[
    Union[IfDomain, UnlessDomain, IfTopURL, UnlessTopURL],
    Field(discriminator="kind"),
]

# Decode precedence: the first key present in a trigger object wins.
URL_SELECTION_VARIANTS: tuple[type[_URLSelectionBase], ...] = (
    IfDomain,
    UnlessDomain,
    IfTopURL,
    UnlessTopURL,
)
URL_SELECTION_KEYS: tuple[str, ...] = tuple(v.key for v in URL_SELECTION_VARIANTS)

# Validation context flag set by the JSON codec: input uses wire keys only
WIRE_CONTEXT_KEY = "wire"


class Action(BaseModel):
    """The effect applied to the page or request."""

    model_config = {"frozen": True}

    type: ActionType = Field(..., description="Action type tag")
    selector: StrictStr | None = Field(
        default=None,
        description="CSS selector list; only meaningful for css-display-none",
    )

    @classmethod
    def css_display_none(cls, selector: str) -> Action:
        """Build an element-hiding action for ``selector``."""
        return cls(type=ActionType.css_display_none, selector=selector)

    @property
    def has_consistent_selector(self) -> bool:
        """True when a selector is present exactly for css-display-none."""
        return (self.selector is not None) == (self.type is ActionType.css_display_none)


class Trigger(BaseModel):
    """The match condition of a rule.

    Every optional field narrows the match; ``None`` means unrestricted.
    On the wire ``url_selection`` is not an object of its own but one of
    four sibling keys (``if-domain``, ``unless-domain``, ``if-top-url``,
    ``unless-top-url``) inside the trigger.
    """

    model_config = {"frozen": True, "populate_by_name": True}

    url_filter: StrictStr = Field(..., alias="url-filter", description="URL pattern")
    url_filter_is_case_sensitive: StrictBool | None = Field(
        default=None,
        alias="url-filter-is-case-sensitive",
        description="Case sensitivity of url_filter; absent means not case sensitive",
    )
    resource_types: tuple[ResourceType, ...] | None = Field(
        default=None,
        alias="resource-type",
        description="Resource types to match; absent matches all",
    )
    load_types: tuple[LoadType, ...] | None = Field(
        default=None,
        alias="load-type",
        description="Load types to match; absent matches both",
    )
    url_selection: URLSelection | None = Field(
        default=None,
        exclude=True,
        description="Domain or top-URL restriction",
    )

    @model_validator(mode="before")
    @classmethod
    def _lift_url_selection(cls, data, info: ValidationInfo):
        if not isinstance(data, dict):
            return data
        if info.context and info.context.get(WIRE_CONTEXT_KEY):
            # Only hyphenated keys exist on the wire; field names are unknown keys there
            data = {k: v for k, v in data.items() if k not in cls.model_fields}
        elif "url_selection" in data:
            return data
        for variant in URL_SELECTION_VARIANTS:
            if variant.key not in data:
                continue
            lifted = {k: v for k, v in data.items() if k not in URL_SELECTION_KEYS}
            # An explicit null still wins the lookup and leaves the selection unset
            if data[variant.key] is not None:
                lifted["url_selection"] = {"kind": variant.key, "patterns": data[variant.key]}
            return lifted
        return data

    @model_serializer(mode="wrap")
    def _flatten_url_selection(self, handler, info: SerializationInfo):
        data = handler(self)
        if self.url_selection is not None:
            patterns = list(self.url_selection.patterns)
            if info.by_alias:
                data[self.url_selection.key] = patterns
            else:
                data["url_selection"] = {"kind": self.url_selection.kind, "patterns": patterns}
        return data


class ContentBlockingRule(BaseModel):
    """A trigger and the action it fires."""

    model_config = {"frozen": True}

    trigger: Trigger
    action: Action
