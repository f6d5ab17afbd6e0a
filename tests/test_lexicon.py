import pytest

from parcel_graph.errors import UnknownCountyError
from parcel_graph.lexicon import (
    ClassificationMapping,
    Lexicon,
    classification_lookup_keys,
    normalize_classification_key,
)
from parcel_graph.lexicons import available_lexicons, get_lexicon


SINGLE_FAMILY = {
    "property_type": "Building",
    "property_usage_type": "Residential",
    "ownership_estate_type": "FeeSimple",
    "structure_form": "SingleFamilyDetached",
    "build_status": "Improved",
}


def test_normalize_classification_key():
    assert normalize_classification_key("  01 Single-Family ") == "01_single_family"
    assert normalize_classification_key("__") == ""
    assert normalize_classification_key(None) == ""


def test_lookup_keys_order():
    keys = classification_lookup_keys("1 - Single Family")
    assert keys[0] == "1_single_family"
    assert keys[1:3] == ["01", "1"]
    assert "00001" in keys
    assert keys[-1] == "single_family"


@pytest.mark.parametrize(
    "raw",
    ["01", "1", "01 Single Family", "Single Family", "00100", "00100-Single Family", "  01  "],
)
def test_florida_dor_single_family_aliases(raw):
    mapping = get_lexicon("florida_dor").resolve(raw)
    assert mapping is not None
    assert mapping.to_dict() == SINGLE_FAMILY


def test_unregistered_code_resolves_to_none():
    lexicon = get_lexicon("florida_dor")
    assert lexicon.resolve("999999") is None
    assert "999999" not in lexicon
    assert lexicon.resolve("") is None
    assert lexicon.resolve(None) is None


def test_mobile_home_is_manufactured_home():
    mapping = get_lexicon("florida_dor").resolve("02 Mobile Homes")
    assert mapping.to_dict()["property_type"] == "ManufacturedHome"
    assert mapping.to_dict()["structure_form"] == "MobileHome"


def test_vacant_codes_have_no_structure_form():
    mapping = get_lexicon("florida_dor").resolve("00")
    assert mapping.to_dict()["property_type"] == "LandParcel"
    assert mapping.to_dict()["build_status"] == "VacantLand"
    assert mapping.to_dict()["structure_form"] is None


def test_register_conflict_raises():
    lexicon = Lexicon("test")
    lexicon.register("01", ["Single Family"], ClassificationMapping("Building", "Residential"))
    # Same mapping again is fine.
    lexicon.register("01", ["Single Family"], ClassificationMapping("Building", "Residential"))
    with pytest.raises(ValueError):
        lexicon.register("77", ["Single Family"], ClassificationMapping("Unit", "Residential"))


def test_mapping_rejects_values_outside_vocabulary():
    with pytest.raises(ValueError):
        ClassificationMapping("Castle", "Residential")


def test_registry_names_and_unknown():
    assert "florida_dor" in available_lexicons()
    assert "pasco" in available_lexicons()
    assert get_lexicon("Pasco").resolve("01") == get_lexicon("florida_dor").resolve("01")
    with pytest.raises(UnknownCountyError):
        get_lexicon("atlantis")


def test_every_dor_code_resolves():
    lexicon = get_lexicon("florida_dor")
    for code in range(100):
        assert lexicon.resolve(f"{code:02d}") is not None, code


@pytest.mark.parametrize("raw", ["Office 2 Story", "Warehouse 1 Bay", "Duplex 2 units"])
def test_digits_inside_a_label_are_not_codes(raw):
    assert get_lexicon("florida_dor").resolve(raw) is None


def test_numeric_dash_part_is_not_a_code_key():
    keys = classification_lookup_keys("Office - 2")
    assert "2" not in keys
    assert "02" not in keys
    assert classification_lookup_keys("02 - Mobile Homes")[1:3] == ["02", "2"]


def test_label_with_inner_digits_fails_property_build():
    from parcel_graph.builders import build_property
    from parcel_graph.bundle import ParcelBundle
    from parcel_graph.errors import UnmappedClassificationError

    bundle = ParcelBundle(parcel_id="X2", classification="Office 2 Story")
    with pytest.raises(UnmappedClassificationError):
        build_property(bundle, get_lexicon("florida_dor"))
