import pytest

from parcel_graph.graph import EntityGraph, file_ref, relationship_id


def test_indexed_ids_count_per_kind_in_insertion_order():
    graph = EntityGraph()
    assert graph.add("layout", {}) == "layout_1"
    assert graph.add("tax", {}) == "tax_1"
    assert graph.add("layout", {}) == "layout_2"
    assert graph.ids_of("layout") == ["layout_1", "layout_2"]
    assert graph.kind_of("tax_1") == "tax"


def test_singletons_use_bare_kind_and_are_unique():
    graph = EntityGraph()
    assert graph.add("property", {"parcel_identifier": "1"}, indexed=False) == "property"
    with pytest.raises(ValueError):
        graph.add("property", {}, indexed=False)


def test_relate_uses_file_references():
    graph = EntityGraph()
    graph.add("property", {}, indexed=False)
    graph.add("tax", {})
    rel_id = graph.relate("property", "tax_1")
    assert rel_id == "relationship_property_has_tax_1"
    assert graph.relationships[rel_id] == {
        "from": {"/": "./property.json"},
        "to": {"/": "./tax_1.json"},
    }


def test_relate_requires_both_endpoints():
    graph = EntityGraph()
    graph.add("property", {}, indexed=False)
    with pytest.raises(KeyError):
        graph.relate("property", "tax_9")


def test_documents_and_counts():
    graph = EntityGraph()
    graph.add("property", {"a": 1}, indexed=False)
    graph.add("layout", {"b": 2})
    graph.relate("property", "layout_1")
    assert graph.file_names() == [
        "property.json",
        "layout_1.json",
        "relationship_property_has_layout_1.json",
    ]
    assert graph.documents()["layout_1.json"] == {"b": 2}
    assert graph.entity_counts() == {"property": 1, "layout": 1}


def test_helpers():
    assert file_ref("deed_2") == {"/": "./deed_2.json"}
    assert relationship_id("deed_2", "file_2") == "relationship_deed_2_has_file_2"
