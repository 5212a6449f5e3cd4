"""Runtime type test for objects that may be absent."""

from __future__ import annotations

from typing import Any


def is_type_of(obj: Any, cls: type) -> bool:
    """Return True if obj is present and an instance of cls."""
    if obj is None:
        return False
    return isinstance(obj, cls)