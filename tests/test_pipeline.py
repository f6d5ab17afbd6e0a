import json

import pytest

from parcel_graph import ParcelRunResult, run_parcel
from parcel_graph.adapters.pasco import PascoAdapter
from parcel_graph.bundle import ParcelBundle
from parcel_graph.feature_flags import FeatureFlags
from parcel_graph.pipeline import build_graph
from parcel_graph.seeds import ParcelSeeds


def _flags(**overrides):
    values = dict(strict_enums=True, emit_error_file=False, dedupe_owners=True, link_sale_owners=True)
    values.update(overrides)
    return FeatureFlags(**values)


@pytest.fixture
def pasco_bundle(pasco_html):
    return PascoAdapter().extract(pasco_html)


def test_pasco_graph_entities(pasco_bundle):
    graph = build_graph(pasco_bundle)
    assert list(graph.entities) == [
        "property",
        "address",
        "mailing_address",
        "lot",
        "tax_1",
        "sales_history_1",
        "deed_1",
        "file_1",
        "sales_history_2",
        "deed_2",
        "file_2",
    ] + [f"layout_{i}" for i in range(1, 11)] + [
        "structure_1",
        "utility_1",
        "person_1",
        "person_2",
    ]


def test_pasco_graph_relationships(pasco_bundle):
    graph = build_graph(pasco_bundle)
    expected = {
        "relationship_property_has_address",
        "relationship_property_has_lot",
        "relationship_property_has_tax_1",
        "relationship_property_has_sales_history_1",
        "relationship_sales_history_1_has_deed_1",
        "relationship_deed_1_has_file_1",
        "relationship_property_has_sales_history_2",
        "relationship_sales_history_2_has_deed_2",
        "relationship_deed_2_has_file_2",
        "relationship_property_has_layout_1",
        "relationship_layout_1_has_structure_1",
        "relationship_layout_1_has_utility_1",
        "relationship_person_1_has_mailing_address",
        "relationship_person_2_has_mailing_address",
        "relationship_sales_history_1_has_person_1",
        "relationship_sales_history_1_has_person_2",
    }
    expected |= {f"relationship_layout_1_has_layout_{i}" for i in range(2, 11)}
    assert set(graph.relationships) == expected


def test_pasco_graph_entity_values(pasco_bundle):
    graph = build_graph(pasco_bundle)
    prop = graph.entities["property"]
    assert prop["parcel_identifier"] == "17-26-16-0060-00000-1150"
    assert prop["property_type"] == "Building"
    assert prop["structure_form"] == "SingleFamilyDetached"
    assert prop["subdivision"] == "EMBASSY HILLS UNIT 5"
    assert prop["request_identifier"] == "17-26-16-0060-00000-1150"

    assert graph.entities["lot"]["lot_type"] == "LessThanOrEqualToOneQuarterAcre"
    assert graph.entities["file_1"]["document_type"] == "ConveyanceDeedWarrantyDeed"
    assert graph.entities["file_1"]["file_format"] is None
    assert graph.entities["file_2"]["document_type"] == "ConveyanceDeedQuitClaimDeed"
    assert graph.entities["deed_2"]["instrument_number"] == "2004041187"

    people = [graph.entities["person_1"], graph.entities["person_2"]]
    assert [(p["first_name"], p["middle_name"], p["last_name"]) for p in people] == [
        ("John", "A", "Doe"),
        ("Jane", None, "Doe"),
    ]


def test_layout_numbering(pasco_bundle):
    graph = build_graph(pasco_bundle)
    building = graph.entities["layout_1"]
    assert building["space_type"] == "Building"
    assert building["space_type_index"] == "1"
    assert building["building_number"] == 1
    rooms = [graph.entities[f"layout_{i}"] for i in range(2, 11)]
    assert all(r["building_number"] == 1 for r in rooms)
    baths = [r["space_type_index"] for r in rooms if r["space_type"] == "Full Bathroom"]
    assert baths == ["1.1", "1.2"]
    assert rooms[0]["space_type_index"] == "1.1"


def _owner_bundle():
    owner = {"type": "person", "first_name": "ANN", "last_name": "LEE"}
    return ParcelBundle(
        parcel_id="9",
        classification="01",
        mailing_address={"unnormalized_address": "1 MAIN ST, TAMPA FL 33601"},
        sales=[
            {"ownership_transfer_date": "2015-01-01", "purchase_price_amount": 1.0},
            {"ownership_transfer_date": "2020-05-01", "purchase_price_amount": 2.0},
        ],
        owners_by_date={"current": [owner], "2015-01-01": [dict(owner)]},
    )


def test_owners_are_deduplicated_across_dates():
    graph = build_graph(_owner_bundle(), flags=_flags())
    assert graph.ids_of("person") == ["person_1"]
    assert "relationship_person_1_has_mailing_address" in graph.relationships
    # "current" links to the latest sale, the dated group to its own sale.
    assert "relationship_sales_history_2_has_person_1" in graph.relationships
    assert "relationship_sales_history_1_has_person_1" in graph.relationships


def test_owner_dedupe_can_be_disabled():
    graph = build_graph(_owner_bundle(), flags=_flags(dedupe_owners=False))
    assert graph.ids_of("person") == ["person_1", "person_2"]
    assert "relationship_sales_history_1_has_person_2" in graph.relationships


def test_sale_owner_links_can_be_disabled():
    graph = build_graph(_owner_bundle(), flags=_flags(link_sale_owners=False))
    assert not [r for r in graph.relationships if r.startswith("relationship_sales_history")]
    assert "relationship_person_1_has_mailing_address" in graph.relationships


def test_seeds_replace_extracted_layouts(pasco_bundle):
    seeds = ParcelSeeds(
        layouts=[{"space_type": "Building"}, {"space_type": "Kitchen", "parent_index": 0}]
    )
    graph = build_graph(pasco_bundle, seeds=seeds)
    assert graph.ids_of("layout") == ["layout_1", "layout_2"]
    assert graph.entities["layout_2"]["space_type"] == "Kitchen"
    assert "relationship_layout_1_has_layout_2" in graph.relationships


def test_records_without_buildings_link_to_property():
    bundle = ParcelBundle(
        parcel_id="3",
        structures=[{}, {}],
        utilities=[{}],
        layouts=[{"space_type": "Kitchen"}],
    )
    graph = build_graph(bundle, flags=_flags())
    assert {
        "relationship_property_has_structure_1",
        "relationship_property_has_structure_2",
        "relationship_property_has_utility_1",
        "relationship_property_has_layout_1",
    } <= set(graph.relationships)
    assert graph.entities["layout_1"]["space_type_index"] == "1"


def test_run_parcel_result(pasco_bundle, tmp_path):
    result = run_parcel(pasco_bundle, tmp_path)
    assert isinstance(result, ParcelRunResult)
    assert result.entity_counts["layout"] == 10
    assert result.relationship_count == 25
    assert len(result.files_written) == 50
    payload = result.to_dict()
    assert payload["parcel_id"] == "17-26-16-0060-00000-1150"
    assert payload["dry_run"] is False
    assert sorted(payload) == [
        "dry_run",
        "entity_counts",
        "files_removed",
        "files_written",
        "output_dir",
        "parcel_id",
        "relationship_count",
        "warnings",
    ]
    json.dumps(payload)

    rel = json.loads((tmp_path / "relationship_deed_1_has_file_1.json").read_text(encoding="utf-8"))
    assert rel == {"from": {"/": "./deed_1.json"}, "to": {"/": "./file_1.json"}}


def test_seeded_building_numbers_are_written_as_integers():
    bundle = ParcelBundle(
        parcel_id="5",
        layouts=[
            {"space_type": "Building", "building_number": 1},
            {"space_type": "Building", "building_number": 2},
        ],
    )
    seeds = ParcelSeeds(structures=[{"building_number": "2"}], utilities=[{"building_number": "2"}])
    graph = build_graph(bundle, seeds=seeds, flags=_flags())
    assert graph.entities["structure_1"]["building_number"] == 2
    assert graph.entities["utility_1"]["building_number"] == 2
    assert "relationship_layout_2_has_structure_1" in graph.relationships
    assert "relationship_layout_2_has_utility_1" in graph.relationships
