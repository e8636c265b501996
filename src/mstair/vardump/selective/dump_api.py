# File: src/mstair/vardump/selective/dump_api.py
"""
One-shot entry point for selective dumping.

`selective_dumps()` is to SelectiveVarDumper what `json.dumps()` is to
`json.JSONEncoder`: build the configuration from keyword arguments and render
a single value.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from mstair.vardump.selective.dumper_config import TypeIdentifier, VarDumperConfig
from mstair.vardump.selective.selective_var_dumper import SelectiveVarDumper


__all__ = [
    "selective_dumps",
]


def selective_dumps(
    value: Any,
    *,
    include_properties: Iterable[str] = (),
    skip_properties: Iterable[str] = (),
    skip_objects_of_type: Iterable[TypeIdentifier] = (),
    config: VarDumperConfig | None = None,
) -> str:
    """
    Render `value` with the given filtering rules.

    Args:
        value: The value to render.
        include_properties: If non-empty, the only property names dumped.
        skip_properties: Property names never dumped.
        skip_objects_of_type: Classes (or qualified names) elided from containers.
        config: A prebuilt config; mutually exclusive with the three lists above.

    Returns:
        str: The rendering of `value`.

    Raises:
        ValueError: If `config` is combined with any of the filtering lists.
        UnsupportedValueKind: If `value` holds a value that cannot be rendered.
    """
    filters = VarDumperConfig(
        include_properties=include_properties,
        skip_properties=skip_properties,
        skip_objects_of_type=skip_objects_of_type,
    )
    if config is None:
        config = filters
    elif filters != VarDumperConfig():
        raise ValueError("Pass either config or filtering lists, not both")
    return SelectiveVarDumper(config).dump(value)


# End of file: src/mstair/vardump/selective/dump_api.py
