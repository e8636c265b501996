# File: src/mstair/vardump/selective/test_value_kind.py

import enum
from collections import OrderedDict
from decimal import Decimal
from fractions import Fraction
from types import SimpleNamespace
from typing import Any

import pytest

from mstair.vardump.selective.value_kind import Kind, KindT


class Color(enum.Enum):
    RED = 1


class Level(enum.IntEnum):
    HIGH = 3


@pytest.mark.unit
@pytest.mark.parametrize(
    ("value", "kind"),
    [
        ([], Kind.CONTAINER),
        ((1, 2), Kind.CONTAINER),
        ({"a": 1}, Kind.CONTAINER),
        (OrderedDict(), Kind.CONTAINER),
        (range(3), Kind.CONTAINER),
        (SimpleNamespace(), Kind.OBJECT),
        (object(), Kind.OBJECT),
        (Color.RED, Kind.OBJECT),
        (0, Kind.INT),
        (-7, Kind.INT),
        (Level.HIGH, Kind.INT),
        ("", Kind.STR),
        (None, Kind.NULL),
        (True, Kind.TRUE),
        (False, Kind.FALSE),
        (1.0, Kind.UNSUPPORTED),
        (complex(0, 1), Kind.UNSUPPORTED),
        (Decimal("1.5"), Kind.UNSUPPORTED),
        (Fraction(1, 3), Kind.UNSUPPORTED),
        (b"x", Kind.UNSUPPORTED),
        (bytearray(b"x"), Kind.UNSUPPORTED),
        (memoryview(b"x"), Kind.UNSUPPORTED),
        ({1}, Kind.UNSUPPORTED),
        (frozenset(), Kind.UNSUPPORTED),
    ],
)
def test_kind_of(value: Any, kind: KindT) -> None:
    assert Kind.of(value) is kind


@pytest.mark.unit
def test_kinds_are_distinct_named_tags() -> None:
    kinds = Kind.all()
    assert [repr(kind) for kind in kinds] == [
        "CONTAINER",
        "OBJECT",
        "INT",
        "STR",
        "NULL",
        "TRUE",
        "FALSE",
        "UNSUPPORTED",
    ]
    assert len({id(kind) for kind in kinds}) == len(kinds)
    assert Kind.INT != KindT("INT")
