# schemaorg_ld/graph.py
"""
@graph containers: a schema.org object that bundles several nodes under one
@context. Children may omit @context, in which case they inherit the
container's.
"""
from __future__ import annotations

from typing import Any, Dict, Iterator

from .context import DEFAULT_CONTEXT, is_schemaorg_element


def is_graph_container(value: Any) -> bool:
    return is_schemaorg_element(value) and isinstance(value.get("@graph"), (list, dict))


def ensure_context(child: Any, context: str) -> Any:
    """
    Return child with an @context, copying it if one has to be added.

    The parsed tree is shared between traversal branches and must not be
    written to. Non-object children are returned as they are.
    """
    if not isinstance(child, dict) or "@context" in child:
        return child
    out: Dict[str, Any] = dict(child)
    out["@context"] = context
    return out


def flatten_graph(container: Dict[str, Any]) -> Iterator[Any]:
    """
    Yield the children of a graph container in document order.

    Not recursive: a child that is itself a container comes out as-is and is
    expanded by the resolver.
    """
    if not is_graph_container(container):
        return
    context = container.get("@context") or DEFAULT_CONTEXT
    graph = container["@graph"]
    if isinstance(graph, list):
        for child in graph:
            yield ensure_context(child, context)
    else:
        yield ensure_context(graph, context)
