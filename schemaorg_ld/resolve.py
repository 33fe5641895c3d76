# schemaorg_ld/resolve.py
"""
Resolve JSON values into the schema.org objects they contain.

Traversal is pre-order and left to right, so objects come out in document
order. Every sequence here is a generator; nothing is collected unless the
caller asks for it (see to_list).
"""
from __future__ import annotations

import json
from typing import Any, Dict, Iterable, Iterator, List, Optional, TypeVar, Union

from .context import is_schemaorg_element
from .errors import InvalidJsonError
from .graph import flatten_graph, is_graph_container
from .models import HtmlDocument, JsonKind, json_kind
from .parsers.ldjson_blocks import find_ldjson_blocks
from .typematch import matches_any_type

T = TypeVar("T")


def _iter_objects(value: Any) -> Iterator[Dict[str, Any]]:
    kind = json_kind(value)
    if kind is JsonKind.OBJECT:
        if is_graph_container(value):
            for child in flatten_graph(value):
                yield from _iter_objects(child)
        elif is_schemaorg_element(value):
            yield value
    elif kind is JsonKind.ARRAY:
        for item in value:
            yield from _iter_objects(item)
    # NULL, BOOLEAN, NUMBER and STRING hold no objects


def _filtered(objects: Iterable[Dict[str, Any]], type_names: tuple) -> Iterator[Dict[str, Any]]:
    for obj in objects:
        if matches_any_type(obj, type_names):
            yield obj


def resolve_objects(value: Any, *type_names: str) -> Iterator[Dict[str, Any]]:
    """
    Yield the schema.org objects contained in a parsed JSON value.

    Graph containers are flattened (recursively), arrays are walked in order
    and a plain schema.org object yields itself. When type_names are given,
    only objects whose @type matches one of them are yielded.
    """
    objects = _iter_objects(value)
    if not type_names:
        return objects
    return _filtered(objects, type_names)


resolve_objects_from_json = resolve_objects


def resolve_objects_from_json_text(text: Union[str, bytes], *type_names: str) -> Iterator[Dict[str, Any]]:
    """Parse raw JSON text and resolve it; malformed text raises InvalidJsonError."""
    try:
        value = json.loads(text)
    except (TypeError, ValueError) as ex:
        raise InvalidJsonError(f"cannot parse JSON input: {ex}") from ex
    return resolve_objects(value, *type_names)


def resolve_objects_from_html(
    html: Union[HtmlDocument, str, bytes],
    *type_names: str,
    parser: Optional[str] = None,
) -> Iterator[Dict[str, Any]]:
    """
    Yield the schema.org objects embedded in a page's ld+json script blocks.

    Raises InvalidDocumentError right away if html cannot be loaded at all.
    """
    blocks = find_ldjson_blocks(html, parser)
    return _from_blocks(blocks, type_names)


def _from_blocks(blocks: Iterable[Any], type_names: tuple) -> Iterator[Dict[str, Any]]:
    for block in blocks:
        yield from resolve_objects(block, *type_names)


def to_list(sequence: Iterable[T]) -> List[T]:
    return list(sequence)
