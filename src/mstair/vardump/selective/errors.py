# File: src/mstair/vardump/selective/errors.py
"""
Exceptions raised while dumping.
"""

from __future__ import annotations

from typing import Any


__all__ = [
    "UnsupportedValueKind",
]


class UnsupportedValueKind(TypeError):
    """Raised when a value is none of: container, object, int, str, None, True, False."""

    value: Any
    """The rejected value."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Value type not supported: {value!r}")


# End of file: src/mstair/vardump/selective/errors.py
