"""
Find schema.org JSON-LD objects in HTML pages and parsed JSON.

    >>> from schemaorg_ld import resolve_objects_from_html, to_list
    >>> products = to_list(resolve_objects_from_html(html, "Product"))
"""
from .context import DEFAULT_CONTEXT, SCHEMA_ORG_CONTEXTS, is_schemaorg_element
from .errors import InvalidDocumentError, InvalidJsonError, JsonLdError
from .models import HtmlDocument, JsonKind, json_kind
from .parsers import find_ldjson_blocks
from .resolve import (
    resolve_objects,
    resolve_objects_from_html,
    resolve_objects_from_json,
    resolve_objects_from_json_text,
    to_list,
)
from .typematch import is_schemaorg_object_type, matches_any_type, matches_type

__all__ = [
    "DEFAULT_CONTEXT",
    "SCHEMA_ORG_CONTEXTS",
    "HtmlDocument",
    "InvalidDocumentError",
    "InvalidJsonError",
    "JsonKind",
    "JsonLdError",
    "find_ldjson_blocks",
    "is_schemaorg_element",
    "is_schemaorg_object_type",
    "json_kind",
    "matches_any_type",
    "matches_type",
    "resolve_objects",
    "resolve_objects_from_html",
    "resolve_objects_from_json",
    "resolve_objects_from_json_text",
    "to_list",
]
