"""
Pack two unsigned 64-bit decimal identifiers into one UUID-shaped string.

The host uses this to merge a user id and a message id into a single key:
`high` fills the first 16 hex digits and `low` the last 16.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from hostkit.domain.errors import ValidationError

_U64_LIMIT = 1 << 64
_HEX_RE = re.compile(r"^[0-9a-fA-F]{32}$")


@dataclass(frozen=True, slots=True)
class DecodedId:
    high: str
    low: str

    def as_dict(self) -> dict[str, str]:
        return {"high": self.high, "low": self.low}


def _parse_u64(text: str, *, name: str) -> int:
    if not isinstance(text, str) or not text.isascii() or not text.isdigit():
        raise ValidationError(f"{name} must be a decimal integer string, got {text!r}")
    value = int(text)
    if value >= _U64_LIMIT:
        raise ValidationError(f"{name} does not fit in 64 bits: {text}")
    return value


class UUIDConverter:
    @staticmethod
    def encode(high: str, low: str) -> str:
        combined = f"{_parse_u64(high, name='high'):016x}{_parse_u64(low, name='low'):016x}"
        return (
            f"{combined[:8]}-{combined[8:12]}-{combined[12:16]}-{combined[16:20]}-{combined[20:]}"
        )

    @staticmethod
    def decode(uuid: str) -> DecodedId:
        hex_digits = uuid.replace("-", "")
        if not _HEX_RE.match(hex_digits):
            raise ValidationError(f"Not a 32-digit hex UUID: {uuid!r}")
        return DecodedId(
            high=str(int(hex_digits[:16], 16)),
            low=str(int(hex_digits[16:], 16)),
        )
