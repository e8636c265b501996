# File: src/mstair/vardump/selective/dumper_config.py
"""
Filtering rules for SelectiveVarDumper.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Final, TypeAlias


__all__ = [
    "TypeIdentifier",
    "VarDumperConfig",
]

TypeIdentifier: TypeAlias = type | str
"""A class, or its fully qualified name (`module.QualName`)."""

_OPTION_ALIASES: Final[dict[str, str]] = {
    "include_properties": "include_properties",
    "includeProperties": "include_properties",
    "skip_properties": "skip_properties",
    "skipProperties": "skip_properties",
    "skip_objects_of_type": "skip_objects_of_type",
    "skipObjectsOfType": "skip_objects_of_type",
}


def _as_tuple(values: Iterable[Any] | str | type) -> tuple[Any, ...]:
    if isinstance(values, (str, type)):
        return (values,)
    return tuple(values)


@dataclass(frozen=True, slots=True)
class VarDumperConfig:
    """
    Immutable bundle of the three filtering rules.

    Empty tuples mean "no restriction". No validation is performed: a name may be
    both included and skipped, in which case it is skipped.
    """

    include_properties: tuple[str, ...] = field(default=())
    """If non-empty, only properties with these names are dumped, for every object."""

    skip_properties: tuple[str, ...] = field(default=())
    """Properties with these names are never dumped."""

    skip_objects_of_type: tuple[TypeIdentifier, ...] = field(default=())
    """Container elements whose exact type is listed here are left out of the container."""

    def __post_init__(self) -> None:
        # Frozen: normalize through object.__setattr__
        object.__setattr__(self, "include_properties", _as_tuple(self.include_properties))
        object.__setattr__(self, "skip_properties", _as_tuple(self.skip_properties))
        object.__setattr__(self, "skip_objects_of_type", _as_tuple(self.skip_objects_of_type))

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> VarDumperConfig:
        """
        Build a config from a mapping of option names.

        Accepts `include_properties`, `skip_properties` and `skip_objects_of_type`,
        in snake_case or camelCase.

        :param options: Option name to list of values.
        :raises ValueError: If any option name is not recognized.
        """
        unknown = sorted(k for k in options if k not in _OPTION_ALIASES)
        if unknown:
            raise ValueError(f"Invalid option names for VarDumperConfig: {unknown}")
        kwargs: dict[str, Any] = {_OPTION_ALIASES[k]: v for k, v in options.items()}
        return cls(**kwargs)


# End of file: src/mstair/vardump/selective/dumper_config.py
