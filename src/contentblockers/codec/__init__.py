"""Wire codecs for rule sets."""

from .json_rules import (
    decode_rule,
    decode_rules,
    dumps_rules,
    encode_rule,
    encode_rules,
    loads_rules,
)

__all__ = [
    "decode_rule",
    "decode_rules",
    "dumps_rules",
    "encode_rule",
    "encode_rules",
    "loads_rules",
]
