# File: src/mstair/vardump/selective/value_kind.py
"""
Classification of dumpable values.

Every value maps to exactly one `KindT`, decided once by `Kind.of()`. The
dumper matches on the kind instead of re-testing types at each step.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from decimal import Decimal
from fractions import Fraction
from typing import Any, Final


__all__ = [
    "BUFFER_LIKE_TYPES",
    "Kind",
    "KindT",
    "UNSUPPORTED_TYPES",
]

BUFFER_LIKE_TYPES: Final[tuple[type, ...]] = (bytes, bytearray, memoryview)
UNSUPPORTED_TYPES: Final[tuple[type, ...]] = (
    float,
    complex,
    Decimal,
    Fraction,
    set,
    frozenset,
    *BUFFER_LIKE_TYPES,
)


class KindT:
    """A named value category, compared by identity."""

    __slots__ = ("name",)

    name: str
    """Name of the kind, used for debugging and display."""

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return self.name


class Kind:
    """Static namespace for all defined KindT value categories."""

    CONTAINER = KindT("CONTAINER")
    OBJECT = KindT("OBJECT")
    INT = KindT("INT")
    STR = KindT("STR")
    NULL = KindT("NULL")
    TRUE = KindT("TRUE")
    FALSE = KindT("FALSE")
    UNSUPPORTED = KindT("UNSUPPORTED")

    @classmethod
    def all(cls) -> list[KindT]:
        """Return all KindT constants defined on the class, in declaration order."""
        return [
            v
            for k, v in vars(cls).items()
            if isinstance(v, KindT) and not k.startswith("_") and k.isupper()
        ]

    @classmethod
    def of(cls, value: Any) -> KindT:
        """
        Return the kind of `value`.

        :param value: Any Python value.
        :return KindT: The single category the dumper renders `value` as.
        """
        if isinstance(value, Mapping):
            return cls.CONTAINER
        if isinstance(value, Sequence) and not isinstance(value, (str, *BUFFER_LIKE_TYPES)):
            return cls.CONTAINER
        if value is None:
            return cls.NULL
        if value is True:
            return cls.TRUE
        if value is False:
            return cls.FALSE
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.INT
        if isinstance(value, str):
            return cls.STR
        if isinstance(value, UNSUPPORTED_TYPES):
            return cls.UNSUPPORTED
        return cls.OBJECT


# End of file: src/mstair/vardump/selective/value_kind.py
