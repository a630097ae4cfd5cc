from __future__ import annotations

from hostkit.domain.services.compare import is_equal
from hostkit.domain.services.ids import DecodedId, UUIDConverter
from hostkit.domain.services.text import is_null, is_numeric, truncate_strings

__all__ = [
    "DecodedId",
    "UUIDConverter",
    "is_equal",
    "is_null",
    "is_numeric",
    "truncate_strings",
]
