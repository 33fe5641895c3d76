# schemaorg_ld/typematch.py
from __future__ import annotations

from typing import Any, Iterable

from .context import is_schemaorg_element


def matches_type(element: Any, type_name: str) -> bool:
    """
    Case-insensitive exact match of a schema.org element's @type.

    @type may be a string or an array; non-string array entries are ignored.
    Anything that is not a schema.org element never matches.
    """
    if not isinstance(type_name, str) or not is_schemaorg_element(element):
        return False
    wanted = type_name.lower()
    declared = element.get("@type")
    if isinstance(declared, str):
        return declared.lower() == wanted
    if isinstance(declared, list):
        return any(isinstance(t, str) and t.lower() == wanted for t in declared)
    return False


def matches_any_type(element: Any, type_names: Iterable[str]) -> bool:
    return any(matches_type(element, name) for name in type_names)


def is_schemaorg_object_type(value: Any, *type_names: str) -> bool:
    """True if value is a schema.org object of at least one of type_names."""
    return matches_any_type(value, type_names)
