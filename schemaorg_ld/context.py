# schemaorg_ld/context.py
from __future__ import annotations

from typing import Any

DEFAULT_CONTEXT = "https://schema.org"

# Lowercased spellings of the schema.org vocabulary accepted in @context.
SCHEMA_ORG_CONTEXTS = frozenset({
    "https://schema.org",
    "https://schema.org/",
    "http://schema.org",
    "http://schema.org/",
})


def is_schemaorg_element(value: Any) -> bool:
    """True when value is a JSON object whose string @context names schema.org."""
    if not isinstance(value, dict):
        return False
    context = value.get("@context")
    if not isinstance(context, str):
        return False
    return context.lower() in SCHEMA_ORG_CONTEXTS
