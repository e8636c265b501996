# File: src/mstair/vardump/selective/selective_var_dumper.py
"""
Deterministic, var_dump-style rendering of Python values with property filtering.

Output grammar (L is the indentation level, two spaces per level):

    null | true | false | 42 | "text"
    array(<count>) {
      [<key at L>] => <value at L+1>
    }
    object(<type name>) {
      ["<property>"] => <value at L+1>
    }

Empty containers and objects without dumpable properties render as the header alone.
Strings are quoted but never escaped; the output is for reading, not parsing.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from mstair.vardump.selective.dumper_config import VarDumperConfig
from mstair.vardump.selective.errors import UnsupportedValueKind
from mstair.vardump.selective.property_reflection import enumerate_instance_properties
from mstair.vardump.selective.type_names import abbreviate_type_name, qualified_type_name
from mstair.vardump.selective.value_kind import Kind
from mstair.vardump.xlogging.logger_factory import create_logger


__all__ = [
    "SelectiveVarDumper",
]

LOG = create_logger(__name__)

INDENT = "  "


class SelectiveVarDumper:
    """
    Render values to text, honoring the filtering rules of a VarDumperConfig.

    The dumper holds no state besides its config and can be reused for any
    number of `dump()` calls.
    """

    config: VarDumperConfig
    """Filtering rules, fixed for the lifetime of the dumper."""

    def __init__(self, config: VarDumperConfig | None = None) -> None:
        self.config = config if config is not None else VarDumperConfig()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.config!r})"

    def dump(self, value: Any) -> str:
        """
        Return the text rendering of `value`.

        :param value: The value to render.
        :return str: The rendering, starting at indentation level 0.
        :raises UnsupportedValueKind: If `value` contains a float, bytes, set or similar.
        """
        return self._dump_value(value, 0)

    def _dump_value(self, value: Any, level: int) -> str:
        kind = Kind.of(value)
        if kind is Kind.CONTAINER:
            return self._dump_container(value, level)
        if kind is Kind.OBJECT:
            return self._dump_object(value, level)
        if kind is Kind.INT:
            return int.__repr__(value)
        if kind is Kind.STR:
            return '"' + str.__str__(value) + '"'
        if kind is Kind.NULL:
            return "null"
        if kind is Kind.TRUE:
            return "true"
        if kind is Kind.FALSE:
            return "false"
        LOG.debug("Rejecting %s value at level %d", type(value).__name__, level)
        raise UnsupportedValueKind(value)

    def _dump_container(self, container: Any, level: int) -> str:
        items = self._clean_up_container(container)
        return f"array({len(items)})" + self._dump_block(items, level)

    def _dump_object(self, obj: object, level: int) -> str:
        type_name = qualified_type_name(type(obj))
        header_name = abbreviate_type_name(type_name)
        if header_name != type_name:
            LOG.trace("Abbreviated %s to %s", type_name, header_name)

        items = [
            (prop.name, prop.value)
            for prop in enumerate_instance_properties(obj)
            if not self._should_property_be_skipped(prop.name)
        ]
        return f"object({header_name})" + self._dump_block(items, level)

    def _dump_block(self, items: list[tuple[Any, Any]], level: int) -> str:
        """Render the ` {...}` block shared by containers and objects, or "" when empty."""
        if not items:
            return ""
        chunks: list[str] = [" {\n"]
        for key, value in items:
            chunks.append(INDENT * (level + 1))
            chunks.append("[" + self._dump_value(key, level) + "]")
            chunks.append(" => ")
            chunks.append(self._dump_value(value, level + 1))
            chunks.append("\n")
        chunks.append(INDENT * level + "}")
        return "".join(chunks)

    def _clean_up_container(self, container: Any) -> list[tuple[Any, Any]]:
        """
        Drop elements whose exact type is skipped, then renumber integer-keyed items.

        Only this container's own elements are inspected; nested containers are
        cleaned when they are dumped.
        """
        pairs: Iterable[tuple[Any, Any]] = (
            container.items() if isinstance(container, Mapping) else enumerate(container)
        )
        kept = [(key, value) for key, value in pairs if not self._is_skipped_object(value)]

        if all(isinstance(key, int) and not isinstance(key, bool) for key, _ in kept):
            return [(index, value) for index, (_, value) in enumerate(kept)]
        return kept

    def _is_skipped_object(self, value: Any) -> bool:
        skipped_types = self.config.skip_objects_of_type
        if not skipped_types or Kind.of(value) is not Kind.OBJECT:
            return False
        typ = type(value)
        if typ in skipped_types or qualified_type_name(typ) in skipped_types:
            LOG.debug("Eliding %s element", qualified_type_name(typ))
            return True
        return False

    def _should_property_be_skipped(self, property_name: str) -> bool:
        include_properties = self.config.include_properties
        if include_properties and property_name not in include_properties:
            return True
        return property_name in self.config.skip_properties


# End of file: src/mstair/vardump/selective/selective_var_dumper.py
