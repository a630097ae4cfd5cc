from __future__ import annotations

from collections.abc import Mapping, Sequence


def _is_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def is_equal(left: object, right: object, /) -> bool:
    """
    Deep structural equality.

    Mappings compare by key set and per-key value, ignoring insertion order.
    Sequences (other than strings and bytes) compare element-wise by position.
    Everything else falls back to `==`. `None` only equals `None`.
    """
    if left is right:
        return True
    if left is None or right is None:
        return False

    match left, right:
        case Mapping(), Mapping():
            if len(left) != len(right):
                return False
            for key, value in left.items():
                if key not in right or not is_equal(value, right[key]):
                    return False
            return True
        case _ if _is_sequence(left) and _is_sequence(right):
            if len(left) != len(right):  # type: ignore[arg-type]
                return False
            return all(is_equal(a, b) for a, b in zip(left, right, strict=True))  # type: ignore[call-overload]
        case _:
            if isinstance(left, Mapping) or isinstance(right, Mapping):
                return False
            if _is_sequence(left) or _is_sequence(right):
                return False
            return bool(left == right)
