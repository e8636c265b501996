# File: src/mstair/vardump/selective/type_names.py
"""
Qualified type names as they appear in `object(...)` headers.
"""

from __future__ import annotations

from typing import Final


__all__ = [
    "ELLIPSIS_SEGMENT",
    "MAX_TYPE_NAME_SEGMENTS",
    "abbreviate_type_name",
    "qualified_type_name",
]

ELLIPSIS_SEGMENT: Final[str] = "..."
MAX_TYPE_NAME_SEGMENTS: Final[int] = 4
TYPE_NAME_SEPARATOR: Final[str] = "."


def qualified_type_name(typ: type) -> str:
    """
    Return the fully qualified name of `typ` as `module.QualName`.

    Built-in types are reported by their bare name (`object`, not `builtins.object`).
    """
    module = getattr(typ, "__module__", None)
    qualname = getattr(typ, "__qualname__", typ.__name__)
    if not module or module == "builtins":
        return qualname
    return f"{module}{TYPE_NAME_SEPARATOR}{qualname}"


def abbreviate_type_name(name: str, separator: str = TYPE_NAME_SEPARATOR) -> str:
    """
    Collapse the middle segments of a long qualified name into a single ellipsis segment.

    >>> abbreviate_type_name("acme.billing.invoices.models.Invoice")
    'acme.....Invoice'
    >>> abbreviate_type_name("acme.models.Invoice")
    'acme.models.Invoice'
    """
    parts = name.split(separator)
    if len(parts) > MAX_TYPE_NAME_SEGMENTS:
        return separator.join((parts[0], ELLIPSIS_SEGMENT, parts[-1]))
    return name


# End of file: src/mstair/vardump/selective/type_names.py
