import json
from pathlib import Path

import pytest
from jsonschema import ValidationError, validate

from parcel_graph.bundle import ParcelBundle
from parcel_graph.errors import UnmappedClassificationError
from parcel_graph.graph import EntityGraph
from parcel_graph.materialize import (
    STAGING_PREFIX,
    is_managed,
    materialize,
    stale_files,
    write_error_file,
)
from parcel_graph.pipeline import run_parcel


SCHEMA = Path(__file__).resolve().parent / "schemas" / "relationship.json"


def _bundle(**overrides):
    fields = dict(
        parcel_id="P-1",
        classification="01",
        structures=[{"number_of_stories": 1}, {"number_of_stories": 2}],
        taxes=[{"tax_year": 2024, "property_market_value_amount": 1000.0}],
    )
    fields.update(overrides)
    return ParcelBundle(**fields)


def _snapshot(directory: Path):
    return {p.name: p.read_bytes() for p in sorted(directory.iterdir()) if p.is_file()}


@pytest.mark.parametrize(
    "name, managed",
    [
        ("structure_1.json", True),
        ("sales_history_12.json", True),
        ("relationship_property_has_tax_1.json", True),
        ("error.json", True),
        ("property.json", False),
        ("address.json", False),
        ("structure_x.json", False),
        ("notes.txt", False),
    ],
)
def test_is_managed(name, managed):
    assert is_managed(name) is managed


def test_stale_structure_files_are_purged(tmp_path):
    run_parcel(_bundle(), tmp_path)
    assert (tmp_path / "structure_2.json").exists()
    assert (tmp_path / "relationship_property_has_structure_2.json").exists()

    result = run_parcel(_bundle(structures=[{"number_of_stories": 1}]), tmp_path)

    assert not (tmp_path / "structure_2.json").exists()
    assert not (tmp_path / "relationship_property_has_structure_2.json").exists()
    assert (tmp_path / "structure_1.json").exists()
    assert sorted(result.files_removed) == [
        "relationship_property_has_structure_2.json",
        "structure_2.json",
    ]


def test_rerun_is_byte_identical(tmp_path):
    run_parcel(_bundle(), tmp_path)
    first = _snapshot(tmp_path)
    result = run_parcel(_bundle(), tmp_path)
    assert _snapshot(tmp_path) == first
    assert result.files_removed == []


def test_unmanaged_files_survive(tmp_path):
    (tmp_path / "notes.txt").write_text("keep me", encoding="utf-8")
    (tmp_path / "property_seed.json").write_text("{}", encoding="utf-8")
    run_parcel(_bundle(), tmp_path)
    assert (tmp_path / "notes.txt").read_text(encoding="utf-8") == "keep me"
    assert (tmp_path / "property_seed.json").exists()


def test_failed_build_leaves_directory_untouched(tmp_path):
    run_parcel(_bundle(), tmp_path)
    before = _snapshot(tmp_path)
    with pytest.raises(UnmappedClassificationError):
        run_parcel(_bundle(classification="999999", structures=[]), tmp_path)
    assert _snapshot(tmp_path) == before


def test_stale_error_file_is_removed_on_success(tmp_path):
    write_error_file(tmp_path, {"type": "error", "message": "x", "path": "Property.y"})
    result = run_parcel(_bundle(), tmp_path)
    assert not (tmp_path / "error.json").exists()
    assert "error.json" in result.files_removed


def test_dry_run_touches_nothing(tmp_path):
    out = tmp_path / "parcel"
    result = run_parcel(_bundle(), out, dry_run=True)
    assert not out.exists()
    assert result.dry_run is True
    assert "structure_2.json" in result.files_written

    out.mkdir()
    (out / "structure_9.json").write_text("{}", encoding="utf-8")
    result = run_parcel(_bundle(), out, dry_run=True)
    assert (out / "structure_9.json").exists()
    assert result.files_removed == ["structure_9.json"]
    assert sorted(p.name for p in out.iterdir()) == ["structure_9.json"]


def test_no_staging_directory_left_behind(tmp_path):
    run_parcel(_bundle(), tmp_path)
    assert [p for p in tmp_path.iterdir() if p.is_dir()] == []



def test_interrupted_staging_directory_is_swept(tmp_path):
    orphan = tmp_path / (STAGING_PREFIX + "abc123")
    orphan.mkdir()
    (orphan / "structure_1.json").write_text("{}", encoding="utf-8")
    keep = tmp_path / "notes"
    keep.mkdir()
    run_parcel(_bundle(), tmp_path)
    assert not orphan.exists()
    assert keep.is_dir()
    assert [p.name for p in tmp_path.iterdir() if p.is_dir()] == ["notes"]


def test_dry_run_leaves_staging_leftovers_alone(tmp_path):
    orphan = tmp_path / (STAGING_PREFIX + "abc123")
    orphan.mkdir()
    run_parcel(_bundle(), tmp_path, dry_run=True)
    assert orphan.is_dir()

def test_relationship_files_match_schema(tmp_path):
    schema = json.loads(SCHEMA.read_text(encoding="utf-8"))
    run_parcel(_bundle(), tmp_path)
    rel_files = sorted(tmp_path.glob("relationship_*.json"))
    assert rel_files
    for path in rel_files:
        validate(instance=json.loads(path.read_text(encoding="utf-8")), schema=schema)
        # Every reference resolves to a file in the same directory.
        payload = json.loads(path.read_text(encoding="utf-8"))
        for end in ("from", "to"):
            assert (tmp_path / payload[end]["/"][2:]).exists()


def test_schema_rejects_bare_ids():
    schema = json.loads(SCHEMA.read_text(encoding="utf-8"))
    with pytest.raises(ValidationError):
        validate(instance={"from": "property", "to": "tax_1"}, schema=schema)


def test_entities_render_every_attribute_as_null(tmp_path):
    run_parcel(_bundle(), tmp_path)
    structure = json.loads((tmp_path / "structure_1.json").read_text(encoding="utf-8"))
    assert structure["number_of_stories"] == 1
    assert "roof_design_type" in structure
    assert structure["roof_design_type"] is None


def test_materialize_graph_directly(tmp_path):
    graph = EntityGraph()
    graph.add("property", {"parcel_identifier": "1"}, indexed=False)
    graph.add("tax", {"tax_year": 2024})
    graph.relate("property", "tax_1")
    report = materialize(graph, tmp_path / "out")
    assert report.written == graph.file_names()
    assert stale_files(tmp_path / "out", report.written) == []
    assert stale_files(tmp_path / "missing", []) == []
