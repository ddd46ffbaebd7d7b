"""Decode errors for content blocking rule documents.

Encoding never fails for a constructed rule; every failure here is raised
while turning a JSON document back into models.
"""

from __future__ import annotations

from typing import Sequence


class RuleCodecError(ValueError):
    """Base error for rule documents that cannot be decoded."""

    def __init__(self, message: str, path: Sequence[str | int] = ()) -> None:
        self.path = tuple(path)
        self.message = message
        super().__init__(f"{format_path(self.path)}: {message}" if self.path else message)


class MissingRequiredFieldError(RuleCodecError):
    """Raised when a required key such as ``url-filter`` or ``type`` is absent."""


class UnknownVariantError(RuleCodecError):
    """Raised when an enumerated tag is not one of the known values."""


class MalformedPayloadError(RuleCodecError):
    """Raised when a value has the wrong JSON shape or the text is not JSON."""


def format_path(path: Sequence[str | int]) -> str:
    """Render ``("trigger", "url-filter")`` as ``trigger.url-filter`` and indices as ``[0]``."""
    out = ""
    for part in path:
        if isinstance(part, int):
            out += f"[{part}]"
        else:
            out += f".{part}" if out else str(part)
    return out
