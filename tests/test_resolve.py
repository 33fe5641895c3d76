import copy

import pytest

from schemaorg_ld import (
    InvalidJsonError,
    resolve_objects,
    resolve_objects_from_json,
    resolve_objects_from_json_text,
    to_list,
)
from schemaorg_ld.models import JsonKind, json_kind

CTX = "https://schema.org"


def _names(objects):
    return [o.get("name") for o in objects]


@pytest.mark.parametrize("value", [None, True, 0, 1.5, "https://schema.org", [], {}])
def test_scalars_and_empties_yield_nothing(value):
    assert to_list(resolve_objects(value)) == []


def test_object_without_context_yields_nothing():
    assert to_list(resolve_objects({"@type": "Product", "name": "x"})) == []


def test_plain_object_yields_itself():
    obj = {"@context": CTX, "@type": "Product", "name": "x"}
    out = to_list(resolve_objects(obj))
    assert out == [obj]
    assert out[0] is obj


def test_array_keeps_order_and_drops_non_schemaorg():
    x = {"@context": CTX, "@type": "Thing", "name": "X"}
    y = {"@context": CTX, "@type": "Thing", "name": "Y"}
    z = {"@context": "http://schema.org/", "@type": "Thing", "name": "Z"}
    value = [x, {"name": "junk"}, "s", y, None, [z], 3]
    assert _names(resolve_objects(value)) == ["X", "Y", "Z"]


def test_graph_injects_context_for_children_missing_it():
    a = {"@type": "Person", "name": "A"}
    b = {"@context": "http://schema.org", "@type": "Person", "name": "B"}
    container = {"@context": CTX, "@graph": [a, b]}
    out = to_list(resolve_objects(container))
    assert out == [dict(a, **{"@context": CTX}), b]
    assert "@context" not in a


def test_graph_child_with_foreign_context_is_dropped():
    container = {"@context": CTX, "@graph": [
        {"@context": "https://example.com", "@type": "Person", "name": "A"},
        {"@type": "Person", "name": "B"},
    ]}
    assert _names(resolve_objects(container)) == ["B"]


def test_container_itself_is_not_yielded():
    container = {"@context": CTX, "@type": "WebPage", "@graph": [{"@type": "Person"}]}
    out = to_list(resolve_objects(container))
    assert len(out) == 1
    assert out[0]["@type"] == "Person"


def test_nested_graphs_and_arrays(json_doc):
    value = json_doc("jsonld004.json")
    out = to_list(resolve_objects_from_json(value))
    assert _names(out) == ["Northwind", "Ann Smith", "Bob Jones", "Northwind"]
    assert [o["@type"] for o in out] == ["Organization", "Person", "Person", "WebSite"]
    assert all(o["@context"] == CTX for o in out)


def test_graph_of_arrays_is_walked():
    container = {"@context": CTX, "@graph": [[{"@context": CTX, "@type": "Thing", "name": "deep"}]]}
    assert _names(resolve_objects(container)) == ["deep"]


def test_resolution_is_repeatable_and_does_not_mutate(json_doc):
    value = json_doc("jsonld004.json")
    before = copy.deepcopy(value)
    first = to_list(resolve_objects(value))
    second = to_list(resolve_objects(value))
    assert first == second
    assert value == before


def test_filter_by_type(json_doc):
    value = json_doc("jsonld005.json")
    assert to_list(resolve_objects(value, "Product")) == []
    groups = to_list(resolve_objects(value, "ProductGroup"))
    assert len(groups) == 1
    assert groups[0]["productGroupID"] == "WS-1"


def test_filter_by_several_types_keeps_order(json_doc):
    value = json_doc("jsonld004.json")
    out = to_list(resolve_objects(value, "website", "Organization"))
    assert [o["@type"] for o in out] == ["Organization", "WebSite"]


def test_graph_people_and_orgs(json_doc):
    value = json_doc("jsonld006.json")
    persons = to_list(resolve_objects(value, "Person"))
    orgs = to_list(resolve_objects(value, "Organization"))
    assert len(persons) == 1
    assert len(persons) == len(orgs)


def test_multi_typed_object(json_doc):
    value = json_doc("jsonld007.json")
    assert _names(resolve_objects(value, "Person")) == ["Sole Trader"]
    assert _names(resolve_objects(value, "organization")) == ["Sole Trader"]


def test_resolution_is_lazy():
    items = [{"@context": CTX, "@type": "Thing", "name": str(i)} for i in range(3)]
    stream = resolve_objects(items)
    assert next(stream)["name"] == "0"
    # nothing past the first item has been visited yet
    items.append({"@context": CTX, "@type": "Thing", "name": "late"})
    assert _names(stream) == ["1", "2", "late"]


def test_json_text_entry_point():
    text = '{"@context": "https://schema.org", "@graph": [{"@type": "Person", "name": "A"}]}'
    assert _names(resolve_objects_from_json_text(text)) == ["A"]
    assert _names(resolve_objects_from_json_text(text, "Organization")) == []


@pytest.mark.parametrize("text", ["", "{", "{'@type': 'x'}", None])
def test_json_text_malformed_raises_at_call_time(text):
    with pytest.raises(InvalidJsonError):
        resolve_objects_from_json_text(text)


def test_json_kind():
    assert json_kind(None) is JsonKind.NULL
    assert json_kind(False) is JsonKind.BOOLEAN
    assert json_kind(1) is JsonKind.NUMBER
    assert json_kind(1.0) is JsonKind.NUMBER
    assert json_kind("") is JsonKind.STRING
    assert json_kind([]) is JsonKind.ARRAY
    assert json_kind({}) is JsonKind.OBJECT
    with pytest.raises(TypeError):
        json_kind({1, 2})
