# File: src/mstair/vardump/selective/property_reflection.py
"""
Enumeration of an object's instance properties across its inheritance chain.

Instance state lives in two places: the instance `__dict__` and the `__slots__`
declared by each class of the MRO. Private attributes are stored under their
name-mangled form (`_Owner__name`); they are reported under the declared name
with the rank of the owning class, so that a private attribute redeclared by a
subclass shadows the ancestor's one instead of appearing twice.

A class object has no instance properties; its namespace is a `mappingproxy`
of class attributes, not per-instance state.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from operator import attrgetter
from typing import Any


__all__ = [
    "InstanceProperty",
    "enumerate_instance_properties",
]

_NON_STATE_SLOTS = frozenset({"__dict__", "__weakref__"})


@dataclass(frozen=True, slots=True)
class InstanceProperty:
    """One named piece of instance state."""

    name: str
    """Declared name, with any private-name mangling removed."""

    value: Any
    """Current value on the instance."""

    declaring_rank: int
    """0 for the runtime type, 1 for its parent, and so on along the MRO."""


def enumerate_instance_properties(obj: object) -> list[InstanceProperty]:
    """
    Return every instance property of `obj`, most-derived declaration first, one per name.

    Properties are ordered by declaring rank; within a rank the discovery order
    (instance `__dict__` insertion order, then slot declaration order) is kept.

    :param obj: Any object.
    :return list[InstanceProperty]: Deduplicated properties.
    """
    discovered = sorted(_discover_properties(obj), key=attrgetter("declaring_rank"))
    by_name: dict[str, InstanceProperty] = {}
    for prop in discovered:
        by_name.setdefault(prop.name, prop)
    return list(by_name.values())


def _ancestor_chain(typ: type) -> list[type]:
    return [cls for cls in typ.__mro__ if cls is not object]


def _discover_properties(obj: object) -> Iterator[InstanceProperty]:
    if isinstance(obj, type):
        # Class namespaces are not instance state
        return
    chain = _ancestor_chain(type(obj))

    instance_dict = getattr(obj, "__dict__", None)
    if isinstance(instance_dict, dict):
        for attr_name, value in instance_dict.items():
            if isinstance(attr_name, str):
                name, rank = _declared_name_and_rank(attr_name, chain)
                yield InstanceProperty(name, value, rank)

    for rank, cls in enumerate(chain):
        for slot in _declared_slots(cls):
            attr_name = _mangled(slot, cls)
            descriptor = cls.__dict__.get(attr_name)
            if descriptor is None:
                continue
            try:
                value = descriptor.__get__(obj, type(obj))
            except AttributeError:
                # Unset slot
                continue
            yield InstanceProperty(_declared_name_and_rank(attr_name, chain)[0], value, rank)


def _declared_slots(cls: type) -> list[str]:
    slots = cls.__dict__.get("__slots__", ())
    if isinstance(slots, str):
        slots = (slots,)
    return [slot for slot in slots if slot not in _NON_STATE_SLOTS]


def _mangled(name: str, cls: type) -> str:
    owner = cls.__name__.lstrip("_")
    if owner and name.startswith("__") and not name.endswith("__"):
        return f"_{owner}{name}"
    return name


def _declared_name_and_rank(attr_name: str, chain: list[type]) -> tuple[str, int]:
    """Undo private-name mangling; unmangled names belong to the runtime type."""
    for rank, cls in enumerate(chain):
        owner = cls.__name__.lstrip("_")
        if not owner:
            continue
        prefix = f"_{owner}__"
        if attr_name.startswith(prefix) and len(attr_name) > len(prefix):
            return attr_name[len(prefix) :], rank
    return attr_name, 0


# End of file: src/mstair/vardump/selective/property_reflection.py
