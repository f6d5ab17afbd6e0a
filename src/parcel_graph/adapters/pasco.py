"""Pasco County Property Appraiser parcel pages.

The parcel detail page is an ASP.NET form: scalar facts sit in ``#lbl*``
spans and repeating facts in ``#tbl*Lines`` tables whose first row is a
header. Building labels print county codes followed by free text
("03 CONC BLOCK"); those are mapped onto canonical vocabulary here so the
builders only ever see canonical text.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Optional, Sequence, Tuple

from parsel import Selector

from parcel_graph.adapters.extract import (
    instrument_from_url,
    parse_book_page,
    parse_currency,
    parse_month_year,
    parse_situs_address,
    safe_text,
    to_float,
    to_int,
)
from parcel_graph.bundle import ParcelBundle
from parcel_graph.errors import ExtractionError


logger = logging.getLogger("parcel_graph.adapters.pasco")

COUNTY = "Pasco"

Keywords = Sequence[Tuple[Tuple[str, ...], Any]]

EXTERIOR_WALL: Keywords = [
    (("CONCRETE BLOCK", "CONC BLOCK", "CONC BLK", "CB "), "Concrete Block"),
    (("STUCCO",), "Stucco"),
    (("BRICK",), "Brick"),
    (("STONE",), "Natural Stone"),
    (("VINYL",), "Vinyl Siding"),
    (("HARDI", "CEMENT BD", "FIBER"), "Fiber Cement Siding"),
    (("METAL", "ALUM"), "Metal Siding"),
    (("WOOD", "SIDING", "T1-11"), "Wood Siding"),
    (("LOG",), "Log"),
    (("GLASS",), "Curtain Wall"),
    (("BLOCK",), "Concrete Block"),
    (("CONCRETE", "PRECAST"), "Precast Concrete"),
]

EXTERIOR_ACCENT: Keywords = [
    (("BRICK",), "Brick Accent"),
    (("STONE",), "Stone Accent"),
    (("VINYL",), "Vinyl Accent"),
    (("STUCCO",), "Stucco Accent"),
    (("METAL", "ALUM"), "Metal Trim"),
    (("WOOD", "TRIM"), "Wood Trim"),
    (("BLOCK",), "Decorative Block"),
]

INTERIOR_WALL: Keywords = [
    (("PLASTER",), "Plaster"),
    (("DRYWALL", "DRY WALL", "GYPSUM"), "Drywall"),
    (("PANEL", "WOOD"), "Wood Paneling"),
    (("MASONRY", "BLOCK"), "Exposed Block"),
]

FLOORING: Keywords = [
    (("CARPET",), "Carpet"),
    (("HARDWOOD", "HDWD"), "Solid Hardwood"),
    (("LAMINATE",), "Laminate"),
    (("VINYL", "LINO"), "Sheet Vinyl"),
    (("PORCELAIN",), "Porcelain Tile"),
    (("TERRAZZO",), "Terrazzo"),
    (("TILE", "CERAMIC"), "Ceramic Tile"),
    (("SLATE", "MARBLE", "STONE"), "Stone"),
    (("CONCRETE", "CONC"), "Concrete"),
]

FRAMING: Keywords = [
    (("WOOD", "FRAME"), "Wood Frame"),
    (("STEEL",), "Steel Frame"),
    (("MASONRY",), "Masonry"),
    (("BLOCK", "CB"), "Concrete Block"),
    (("CONCRETE", "CONC"), "Poured Concrete"),
]

# (roof_covering_material, roof_material_type)
ROOF_COVER: Keywords = [
    (("ARCH", "DIMENSION"), ("Architectural Asphalt Shingle", "Shingle")),
    (("SHINGLE", "COMP", "ASPH"), ("3-Tab Asphalt Shingle", "Shingle")),
    (("STANDING SEAM",), ("Metal Standing Seam", "Metal")),
    (("METAL", "CORR", "ALUM"), ("Metal Corrugated", "Metal")),
    (("CLAY",), ("Clay Tile", "CeramicTile")),
    (("CONC TILE", "CONCRETE TILE", "CEMENT TILE"), ("Concrete Tile", "Concrete")),
    (("TILE",), (None, "Tile")),
    (("SLATE",), ("Natural Slate", "Stone")),
    (("SHAKE",), ("Wood Shake", "Wood")),
    (("WOOD SHINGLE",), ("Wood Shingle", "Wood")),
    (("BUILT UP", "BUILT-UP", "TAR", "GRAVEL"), ("Built-Up Roof", "Composition")),
    (("TPO",), ("TPO Membrane", "Manufactured")),
    (("EPDM", "MEMBRANE", "RUBBER"), ("EPDM Membrane", "Manufactured")),
    (("BITUMEN", "ROLL"), ("Modified Bitumen", "Composition")),
]

ROOF_STRUCTURE: Keywords = [
    (("GAMBREL",), "Gambrel"),
    (("MANSARD",), "Mansard"),
    (("FLAT",), "Flat"),
    (("SHED",), "Shed"),
    (("GABLE",), "Gable"),
    (("HIP",), "Hip"),
]

COOLING: Keywords = [
    (("NONE",), None),
    (("WINDOW", "WALL UNIT"), "WindowAirConditioner"),
    (("DUCTLESS", "MINI SPLIT", "SPLIT"), "Ductless"),
    (("CENTRAL", "PACKAGED", "ROOF", "CHILLED", "FORCED"), "CentralAir"),
    (("FAN",), "CeilingFans"),
]

HEATING: Keywords = [
    (("NONE",), None),
    (("HEAT PUMP", "HEATPUMP"), "HeatPump"),
    (("BASEBOARD",), "Baseboard"),
    (("RADIANT",), "Radiant"),
    (("DUCTLESS", "MINI SPLIT"), "Ductless"),
    (("FORCED", "DUCT", "CENTRAL"), "Central"),
    (("SOLAR",), "Solar"),
    (("ELEC",), "Electric"),
    (("GAS",), "Gas"),
]

FUEL: Keywords = [
    (("NONE",), None),
    (("NATURAL GAS", "NAT GAS"), "NaturalGas"),
    (("PROPANE", "LP GAS", "BOTTLE"), "Propane"),
    (("GAS",), "NaturalGas"),
    (("OIL",), "Oil"),
    (("ELEC",), "Electric"),
    (("SOLAR",), "Solar"),
    (("WOOD",), "Wood"),
]

SUBAREA_ALIASES = {
    "RPG": "BAS",
    "RPT": "APT",
    "RGR": "FGR",
    "ROP": "FOP",
    "RSA": "FSA",
    "RUS": "FUS",
    "RUP": "UOP",
}

# code -> (space_type, is_finished, is_exterior, counts as living area)
SUBAREAS: Dict[str, Tuple[str, bool, bool, bool]] = {
    "BAS": ("Living Area", True, False, True),
    "FUS": ("Living Area", True, False, True),
    "APT": ("Living Area", True, False, True),
    "FGR": ("Attached Garage", True, False, False),
    "UGR": ("Attached Garage", False, False, False),
    "FDG": ("Detached Garage", True, False, False),
    "UDG": ("Detached Garage", False, False, False),
    "FOP": ("Open Porch", True, True, False),
    "UOP": ("Open Porch", False, True, False),
    "FSP": ("Screened Porch", True, True, False),
    "USP": ("Screened Porch", False, True, False),
    "FEP": ("Enclosed Porch", True, False, False),
    "UEP": ("Enclosed Porch", False, False, False),
    "FCP": ("Attached Carport", True, True, False),
    "UCP": ("Attached Carport", False, True, False),
    "FSA": ("Storage Room", True, False, False),
    "USA": ("Storage Room", False, False, False),
    "FUT": ("Utility Closet", True, False, False),
    "UUT": ("Utility Closet", False, False, False),
    "FDK": ("Deck", True, True, False),
    "PTO": ("Patio", True, True, False),
}

SUBAREA_DESCRIPTIONS: Keywords = [
    (("LIVING", "BASE AREA", "UPPER STORY"), ("Living Area", True, False, True)),
    (("GARAGE",), ("Attached Garage", True, False, False)),
    (("SCREEN",), ("Screened Porch", True, True, False)),
    (("ENCL",), ("Enclosed Porch", True, False, False)),
    (("PORCH",), ("Open Porch", True, True, False)),
    (("CARPORT",), ("Attached Carport", True, True, False)),
    (("STORAGE",), ("Storage Room", True, False, False)),
    (("UTILITY",), ("Utility Closet", True, False, False)),
    (("PATIO",), ("Patio", True, True, False)),
    (("DECK",), ("Deck", True, True, False)),
]

# Extra-feature lines that describe a space. Order matters: an enclosure
# line mentions the pool it screens.
FEATURE_SPACES: Keywords = [
    (("SCRN", "SCREEN ENCL", "POOL ENCL"), "Screen Enclosure (Custom)"),
    (("JACUZZI", "HOT TUB", "SPA"), "Hot Tub / Spa Area"),
    (("POOL",), "Outdoor Pool"),
    (("LANAI",), "Lanai"),
    (("GAZEBO",), "Gazebo"),
    (("PERGOLA",), "Pergola"),
    (("DECK",), "Deck"),
    (("PATIO",), "Patio"),
    (("SUMMER KITCHEN", "OUTDOOR KITCHEN", "GRILL"), "Outdoor Kitchen"),
    (("WORKSHOP",), "Workshop"),
    (("SHED",), "Shed"),
    (("CARPORT",), "Detached Carport"),
    (("GREENHOUSE",), "Greenhouse"),
    (("CABANA",), "Enclosed Cabana"),
]

DRIVEWAY_LINES = ("DRVWAY", "DRIVEWAY", "DRIVE", "SIDEWALK")

# Driveway lines that name no other material are poured concrete.
DRIVEWAY: Keywords = [
    (("PAVER",), "Pavers"),
    (("ASPH",), "Asphalt"),
    (("GRAVEL", "SHELL"), "Gravel"),
]

FENCE: Keywords = [
    (("CHAIN LINK", "CHAINLINK", "CLF"), "ChainLink"),
    (("VINYL FENCE", "PVC FENCE"), "Vinyl"),
    (("ALUM FENCE", "ALUMINUM FENCE"), "Aluminum"),
    (("WOOD FENCE", "WD FENCE"), "Wood"),
    (("IRON FENCE",), "WroughtIron"),
]

DEED_TYPES: Keywords = [
    (("SPECIAL WARRANTY",), "Special Warranty Deed"),
    (("WARRANTY",), "Warranty Deed"),
    (("QUIT",), "Quitclaim Deed"),
    (("PERSONAL REP",), "Personal Representative Deed"),
    (("TRUSTEE",), "Trustee's Deed"),
    (("TAX DEED",), "Tax Deed"),
    (("GRANT",), "Grant Deed"),
    (("CORRECT",), "Correction Deed"),
    (("LIFE ESTATE",), "Life Estate Deed"),
    (("LADY BIRD", "ENHANCED LIFE"), "Lady Bird Deed"),
]

_TAX_YEAR_RE = re.compile(r"for the\s+(\d{4})\s+tax year", re.IGNORECASE)
_BR_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)
_TAG_RE = re.compile(r"<[^>]+>")


def keyword_lookup(text: Optional[str], table: Keywords) -> Any:
    """First table value whose keywords appear in ``text`` (case-insensitive)."""

    if not text:
        return None
    upper = f" {text.upper()} "
    for keywords, value in table:
        if any(k in upper for k in keywords):
            return value
    return None


def _text(sel: Selector, css: str) -> str:
    return safe_text(" ".join(sel.css(f"{css} ::text").getall()))


def _cells(row: Selector) -> List[str]:
    return [safe_text(" ".join(td.css("::text").getall())) for td in row.css("td")]


def _rows(sel: Selector, table_id: str, min_cells: int) -> List[List[str]]:
    rows = []
    for index, row in enumerate(sel.css(f"#{table_id} tr")):
        if index == 0:
            continue
        cells = _cells(row)
        if len(cells) >= min_cells:
            rows.append(cells)
    return rows


def _digits(text: str) -> str:
    return re.sub(r"\D", "", text or "")


class PascoAdapter:
    county = COUNTY

    def extract(self, html: str) -> ParcelBundle:
        sel = Selector(text=html or "")
        self._check_card(sel)
        parcel_id = _text(sel, "#lblParcelID")
        if not parcel_id:
            raise ExtractionError("Parcel ID not found.", "Property.parcel_identifier")

        sub_lines = _rows(sel, "tblSubLines", 4)
        xf_lines = _rows(sel, "tblXFLines", 5)
        living = self._living_area(sub_lines)
        owner_names, mailing = self._mailing(sel)

        bundle = ParcelBundle(
            parcel_id=parcel_id,
            county=COUNTY,
            classification=_text(sel, "#lblDORClass") or _text(sel, "#lblBuildingUse") or None,
            property_fields=self._property_fields(sel, living),
            address=self._address(sel),
            mailing_address=mailing,
            lot=self._lot(sel, xf_lines),
            taxes=self._taxes(sel),
            sales=self._sales(sel),
            owner_names=owner_names,
        )
        structure = self._structure(sel, living)
        if structure:
            bundle.structures.append(structure)
        utility = self._utility(sel)
        if utility:
            bundle.utilities.append(utility)
        bundle.layouts.extend(self._layouts(sel, sub_lines, xf_lines))
        logger.debug(
            "pasco %s: %d sale(s), %d layout(s), %d owner line(s)",
            parcel_id,
            len(bundle.sales),
            len(bundle.layouts),
            len(owner_names),
        )
        return bundle

    def _check_card(self, sel: Selector) -> None:
        current = _digits(_text(sel, "#lblCurrentCard"))
        total = _digits(_text(sel, "#lblTotalCards"))
        if current and total and current != total:
            raise ExtractionError(
                f"Expected to process the last card but current card ({current}) "
                f"!= total cards ({total}).",
                "Property.building_card",
            )

    def _living_area(self, sub_lines: List[List[str]]) -> Optional[int]:
        for cells in sub_lines:
            if "LIVING AREA" in cells[2].upper():
                return to_int(cells[3])
        return None

    def _property_fields(self, sel: Selector, living: Optional[int]) -> Dict[str, Any]:
        zoning = None
        land = _rows(sel, "tblLandLines", 5)
        if land:
            zoning = land[0][4] or None
        return {
            "property_structure_built_year": to_int(_text(sel, "#lblBuildingYearBuilt")),
            "livable_floor_area": str(living) if living else None,
            "property_legal_description_text": _text(sel, "#lblLegalDescription") or None,
            "zoning": zoning,
        }

    def _address(self, sel: Selector) -> Optional[Dict[str, Any]]:
        raw = _text(sel, "#lblPhysicalAddress")
        if not raw:
            return None
        parsed = parse_situs_address(raw) or {"unnormalized_address": raw}
        parsed["county_name"] = COUNTY
        return parsed

    def _mailing(self, sel: Selector) -> Tuple[List[str], Optional[Dict[str, Any]]]:
        markup = sel.css("#lblMailingAddress").get()
        if not markup:
            return [], None
        lines = [safe_text(_TAG_RE.sub(" ", part)) for part in _BR_RE.split(markup)]
        lines = [line for line in lines if line]
        if not lines:
            return [], None
        if len(lines) == 1:
            return [], {"unnormalized_address": lines[0]}
        return [lines[0]], {"unnormalized_address": ", ".join(lines[1:])}

    def _lot(self, sel: Selector, xf_lines: List[List[str]]) -> Optional[Dict[str, Any]]:
        lot_area = None
        land = _rows(sel, "tblLandLines", 10)
        if land:
            lot_area = to_int(land[0][5])
        driveway = None
        fencing = None
        for cells in xf_lines:
            desc = cells[2]
            if driveway is None and any(w in desc.upper() for w in DRIVEWAY_LINES):
                driveway = keyword_lookup(desc, DRIVEWAY) or "Concrete"
            fencing = fencing or keyword_lookup(desc, FENCE)
        lot = {
            "lot_area_sqft": lot_area,
            "lot_size_acre": to_float(_text(sel, "#lblAcres")),
            "driveway_material": driveway,
            "fencing_type": fencing,
        }
        if all(v is None for v in lot.values()):
            return None
        return lot

    def _taxes(self, sel: Selector) -> List[Dict[str, Any]]:
        header = safe_text(" ".join(sel.css("#parcelValueTable tr")[:1].css("::text").getall()))
        match = _TAX_YEAR_RE.search(header)
        if not match:
            return []
        return [
            {
                "tax_year": int(match.group(1)),
                "property_market_value_amount": parse_currency(_text(sel, "#lblValueJust")),
                "property_land_amount": parse_currency(_text(sel, "#lblValueLand")),
                "property_building_amount": parse_currency(_text(sel, "#lblValueBuilding")),
                "property_assessed_value_amount": parse_currency(
                    _text(sel, "#lblCountyValueAssessed")
                ),
                "property_taxable_value_amount": parse_currency(
                    _text(sel, "#lblValueCountyTaxable")
                ),
            }
        ]

    def _sales(self, sel: Selector) -> List[Dict[str, Any]]:
        sales = []
        for index, row in enumerate(sel.css("#tblSaleLines tr")):
            if index == 0:
                continue
            tds = row.css("td")
            if len(tds) < 6:
                continue
            cells = _cells(row)
            href = tds[1].css("a::attr(href)").get()
            book, page = parse_book_page(cells[1])
            sales.append(
                {
                    "ownership_transfer_date": parse_month_year(cells[0]),
                    "purchase_price_amount": parse_currency(cells[5]),
                    "deed_type": keyword_lookup(cells[2], DEED_TYPES),
                    "book": book,
                    "page": page,
                    "instrument_number": instrument_from_url(href),
                    "document_url": href.strip() if href else None,
                }
            )
        return sales

    def _structure(self, sel: Selector, living: Optional[int]) -> Dict[str, Any]:
        ext1 = _text(sel, "#lblBuildingExteriorWall1")
        ext2 = _text(sel, "#lblBuildingExteriorWall2")
        primary = keyword_lookup(ext1, EXTERIOR_WALL)
        secondary = None
        if ext2 and ext2.lower() != "none":
            secondary = keyword_lookup(ext2, EXTERIOR_ACCENT)
        if secondary is None and primary == "Concrete Block" and "STUCCO" in ext1.upper():
            secondary = "Stucco Accent"

        frame_text = (
            _text(sel, "#lblBuildingStructureFrame")
            or _text(sel, "#lblStructuralFrame")
            or _text(sel, "#lblBuildingFrame")
        )
        framing = keyword_lookup(frame_text, FRAMING)
        if framing is None and primary == "Concrete Block":
            framing = "Concrete Block"

        roof_cover = keyword_lookup(_text(sel, "#lblBuildingRoofCover"), ROOF_COVER)
        covering, material = roof_cover or (None, None)
        roof_struct = _text(sel, "#lblBuildingRoofStructure").upper()
        if "GABLE" in roof_struct and "HIP" in roof_struct:
            roof_design = "Combination"
        else:
            roof_design = keyword_lookup(roof_struct, ROOF_STRUCTURE)

        structure = {
            "building_number": 1,
            "attachment_type": "Detached",
            "exterior_wall_material_primary": primary,
            "exterior_wall_material_secondary": secondary,
            "primary_framing_material": framing,
            "interior_wall_surface_material_primary": keyword_lookup(
                _text(sel, "#lblBuildingInteriorWall1"), INTERIOR_WALL
            ),
            "flooring_material_primary": keyword_lookup(
                _text(sel, "#lblBuildingFlooring1"), FLOORING
            ),
            "flooring_material_secondary": keyword_lookup(
                _text(sel, "#lblBuildingFlooring2"), FLOORING
            ),
            "roof_covering_material": covering,
            "roof_material_type": material,
            "roof_design_type": roof_design,
            "number_of_stories": to_float(_text(sel, "#lblBuildingStories")),
            "finished_base_area": living,
        }
        facts = {k: v for k, v in structure.items() if k not in ("building_number", "attachment_type")}
        if all(v is None for v in facts.values()):
            return {}
        return structure

    def _utility(self, sel: Selector) -> Dict[str, Any]:
        heat_text = _text(sel, "#lblBuildingHeat")
        ac_text = _text(sel, "#lblBuildingAC")
        fuel_text = _text(sel, "#lblBuildingFuel")
        if not (heat_text or ac_text or fuel_text):
            return {}
        fuel = keyword_lookup(fuel_text, FUEL)
        heating = keyword_lookup(heat_text, HEATING)
        if heating is None and not heat_text:
            heating = {"Electric": "Electric", "NaturalGas": "Gas"}.get(fuel)
        return {
            "building_number": 1,
            "cooling_system_type": keyword_lookup(ac_text, COOLING),
            "heating_system_type": heating,
            "heating_fuel_type": fuel,
            "solar_panel_present": False,
        }

    def _layouts(
        self, sel: Selector, sub_lines: List[List[str]], xf_lines: List[List[str]]
    ) -> List[Dict[str, Any]]:
        rooms: List[Dict[str, Any]] = []
        total = 0.0
        livable = 0.0
        for cells in sub_lines:
            code = re.sub(r"[^A-Z]", "", cells[1].upper())
            code = SUBAREA_ALIASES.get(code, code)
            info = SUBAREAS.get(code) or keyword_lookup(cells[2], SUBAREA_DESCRIPTIONS)
            if info is None:
                continue
            space_type, finished, exterior, counts_living = info
            sqft = to_float(cells[3])
            if sqft is not None:
                total += sqft
                if counts_living:
                    livable += sqft
            rooms.append(
                {
                    "space_type": space_type,
                    "size_square_feet": sqft,
                    "livable_area_sq_ft": sqft if counts_living else None,
                    "is_finished": finished,
                    "is_exterior": exterior,
                }
            )

        for cells in xf_lines:
            space_type = keyword_lookup(f"{cells[1]} {cells[2]}", FEATURE_SPACES)
            if space_type is None:
                continue
            units = to_float(cells[4])
            rooms.append(
                {
                    "space_type": space_type,
                    "size_square_feet": units,
                    "is_finished": False,
                    "is_exterior": True,
                }
            )

        rooms.extend(self._bathrooms(_text(sel, "#lblBuildingBaths")))
        if not rooms:
            return []

        building = {
            "space_type": "Building",
            "building_number": 1,
            "size_square_feet": total or None,
            "total_area_sq_ft": total or None,
            "livable_area_sq_ft": livable or None,
            "is_finished": True,
            "is_exterior": False,
        }
        for position, room in enumerate(rooms, start=1):
            room["parent_index"] = 0
            room["space_index"] = position
        return [building] + rooms

    def _bathrooms(self, text: str) -> List[Dict[str, Any]]:
        count = to_float(text)
        if not count or count < 0:
            return []
        full, rest = divmod(round(count * 4), 4)
        kinds = ["Full Bathroom"] * full
        if rest >= 3:
            kinds.append("Three-Quarter Bathroom")
        elif rest >= 1:
            kinds.append("Half Bathroom / Powder Room")
        return [
            {"space_type": kind, "is_finished": True, "is_exterior": False, "floor_level": None}
            for kind in kinds
        ]
