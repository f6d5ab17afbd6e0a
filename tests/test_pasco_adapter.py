import pytest

from parcel_graph.adapters import get_adapter, supported_counties
from parcel_graph.adapters.extract import (
    instrument_from_url,
    parse_book_page,
    parse_currency,
    parse_iso_date,
    parse_month_year,
    parse_situs_address,
    to_float,
    to_int,
)
from parcel_graph.adapters.pasco import (
    DEED_TYPES,
    EXTERIOR_WALL,
    FEATURE_SPACES,
    PascoAdapter,
    keyword_lookup,
)
from parcel_graph.errors import ExtractionError, UnknownCountyError


def test_registry_lookup_is_forgiving():
    assert isinstance(get_adapter(" pasco "), PascoAdapter)
    assert supported_counties() == ["Pasco"]
    with pytest.raises(UnknownCountyError):
        get_adapter("atlantis")


def test_extract_core_facts(pasco_html):
    bundle = PascoAdapter().extract(pasco_html)
    assert bundle.parcel_id == "17-26-16-0060-00000-1150"
    assert bundle.county == "Pasco"
    assert bundle.classification == "00100-Single Family"
    assert bundle.property_fields == {
        "property_structure_built_year": 1985,
        "livable_floor_area": "1344",
        "property_legal_description_text": "EMBASSY HILLS UNIT 5 PB 11 PG 42 LOT 1150",
        "zoning": "MF1",
    }


def test_extract_addresses_and_owner_line(pasco_html):
    bundle = PascoAdapter().extract(pasco_html)
    assert bundle.address == {
        "unnormalized_address": "3310 WINDFIELD DRIVE, HOLIDAY, FL 34691",
        "street_number": "3310",
        "street_pre_directional_text": None,
        "street_name": "WINDFIELD",
        "street_suffix_type": "Dr",
        "street_post_directional_text": None,
        "city_name": "HOLIDAY",
        "state_code": "FL",
        "postal_code": "34691",
        "county_name": "Pasco",
    }
    assert bundle.owner_names == ["DOE JOHN A & JANE"]
    assert bundle.mailing_address == {
        "unnormalized_address": "3310 WINDFIELD DR, HOLIDAY FL 34691-1234"
    }


def test_extract_lot_and_taxes(pasco_html):
    bundle = PascoAdapter().extract(pasco_html)
    assert bundle.lot == {
        "lot_area_sqft": 7800,
        "lot_size_acre": 0.18,
        "driveway_material": "Concrete",
        "fencing_type": "ChainLink",
    }
    assert bundle.taxes == [
        {
            "tax_year": 2024,
            "property_market_value_amount": 215430.0,
            "property_land_amount": 48000.0,
            "property_building_amount": 167430.0,
            "property_assessed_value_amount": 142118.0,
            "property_taxable_value_amount": 92118.0,
        }
    ]


def test_extract_sales(pasco_html):
    sales = PascoAdapter().extract(pasco_html).sales
    assert len(sales) == 2
    assert sales[0] == {
        "ownership_transfer_date": "2019-06-01",
        "purchase_price_amount": 235000.0,
        "deed_type": "Warranty Deed",
        "book": "9932",
        "page": "1786",
        "instrument_number": "2019093811",
        "document_url": "https://app.pascoclerk.com/AppGateway/ShowDocument.aspx?instrument=2019093811&type=OR",
    }
    assert sales[1]["ownership_transfer_date"] == "2004-03-01"
    assert sales[1]["deed_type"] == "Quitclaim Deed"
    assert sales[1]["purchase_price_amount"] == 100.0
    assert (sales[1]["book"], sales[1]["page"]) == ("5802", "0361")


def test_extract_structure_and_utility(pasco_html):
    bundle = PascoAdapter().extract(pasco_html)
    [structure] = bundle.structures
    assert structure["exterior_wall_material_primary"] == "Concrete Block"
    assert structure["exterior_wall_material_secondary"] == "Stucco Accent"
    assert structure["primary_framing_material"] == "Concrete Block"
    assert structure["roof_design_type"] == "Combination"
    assert structure["roof_covering_material"] == "3-Tab Asphalt Shingle"
    assert structure["roof_material_type"] == "Shingle"
    assert structure["interior_wall_surface_material_primary"] == "Drywall"
    assert structure["flooring_material_primary"] == "Carpet"
    assert structure["flooring_material_secondary"] == "Ceramic Tile"
    assert structure["number_of_stories"] == 1
    assert structure["finished_base_area"] == 1344

    assert bundle.utilities == [
        {
            "building_number": 1,
            "cooling_system_type": "CentralAir",
            "heating_system_type": "Central",
            "heating_fuel_type": "Electric",
            "solar_panel_present": False,
        }
    ]


def test_extract_layouts(pasco_html):
    layouts = PascoAdapter().extract(pasco_html).layouts
    building = layouts[0]
    assert building["space_type"] == "Building"
    assert building["total_area_sq_ft"] == 2036.0
    assert building["livable_area_sq_ft"] == 1344.0
    rooms = layouts[1:]
    assert [r["space_type"] for r in rooms] == [
        "Living Area",
        "Attached Garage",
        "Open Porch",
        "Screened Porch",
        "Outdoor Pool",
        "Screen Enclosure (Custom)",
        "Full Bathroom",
        "Full Bathroom",
        "Half Bathroom / Powder Room",
    ]
    assert all(r["parent_index"] == 0 for r in rooms)
    assert [r["space_index"] for r in rooms] == list(range(1, 10))
    assert rooms[3]["is_exterior"] is True
    assert rooms[4]["size_square_feet"] == 450.0


def test_card_mismatch_is_rejected(pasco_html):
    html = pasco_html.replace(
        '<span id="lblTotalCards">1</span>', '<span id="lblTotalCards">2</span>'
    )
    with pytest.raises(ExtractionError) as excinfo:
        PascoAdapter().extract(html)
    assert excinfo.value.to_dict() == {
        "type": "error",
        "message": "Expected to process the last card but current card (1) != total cards (2).",
        "path": "Property.building_card",
    }


def test_missing_parcel_id_is_rejected():
    with pytest.raises(ExtractionError) as excinfo:
        PascoAdapter().extract("<html><body><p>Not found</p></body></html>")
    assert excinfo.value.path == "Property.parcel_identifier"


def test_sparse_page_yields_empty_collections():
    html = '<html><body><span id="lblParcelID">01-02-03</span></body></html>'
    bundle = PascoAdapter().extract(html)
    assert bundle.parcel_id == "01-02-03"
    assert bundle.classification is None
    assert bundle.address is None
    assert bundle.lot is None
    assert bundle.sales == []
    assert bundle.taxes == []
    assert bundle.structures == []
    assert bundle.utilities == []
    assert bundle.layouts == []
    assert bundle.owner_names == []


@pytest.mark.parametrize(
    "text, table, expected",
    [
        ("03 CONC BLOCK", EXTERIOR_WALL, "Concrete Block"),
        ("FRAME STUCCO", EXTERIOR_WALL, "Stucco"),
        ("SPECIAL WARRANTY DEED", DEED_TYPES, "Special Warranty Deed"),
        ("CERTIFICATE OF TITLE", DEED_TYPES, None),
        ("SCRN POOL ENCL", FEATURE_SPACES, "Screen Enclosure (Custom)"),
        ("", DEED_TYPES, None),
    ],
)
def test_keyword_lookup(text, table, expected):
    assert keyword_lookup(text, table) == expected


def test_extract_helpers():
    assert parse_currency("$1,234") == 1234.0
    assert parse_currency("n/a") is None
    assert to_int("7,800 SF") == 7800
    assert to_float(" 0.18 ") == 0.18
    assert to_float("--") is None
    assert parse_month_year("6/2019") == "2019-06-01"
    assert parse_month_year("13/2019") is None
    assert parse_iso_date("06/14/2019") == "2019-06-14"
    assert parse_iso_date("garbage") is None
    assert parse_book_page("9932 / 1786") == ("9932", "1786")
    assert parse_book_page("9932") == (None, None)
    assert instrument_from_url("https://x.test/Show.aspx?type=OR&instrument=2019%2D1") == "2019-1"
    assert instrument_from_url(None) is None


def test_parse_situs_address_directionals():
    parsed = parse_situs_address("100 N MAIN ST SW, DADE CITY, FL 33525")
    assert parsed["street_pre_directional_text"] == "N"
    assert parsed["street_name"] == "MAIN"
    assert parsed["street_suffix_type"] == "St"
    assert parsed["street_post_directional_text"] == "SW"
    assert parse_situs_address("100 MAIN ST") is None
