"""Entity builders: raw bundle fields to canonical records.

Builders are pure. They keep only the attributes a record kind defines,
resolve enum-governed attributes through ``coerce_enum`` and leave every
other unknown fact as None.
"""

from __future__ import annotations

import logging
import re
from dataclasses import fields, replace
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type
from urllib.parse import urlparse

from .bundle import ParcelBundle
from .enums import (
    AttachmentType,
    BuildStatus,
    CoolingSystemType,
    DeedType,
    DrivewayMaterial,
    ExteriorWallAccentMaterial,
    ExteriorWallMaterial,
    FencingType,
    FileDocumentType,
    FileFormat,
    FlooringMaterial,
    FoundationType,
    HeatingFuelType,
    HeatingSystemType,
    InteriorWallSurfaceMaterial,
    LotType,
    NumberOfUnitsType,
    OwnershipEstateType,
    PrimaryFramingMaterial,
    PropertyType,
    PropertyUsageType,
    RoofCoveringMaterial,
    RoofDesignType,
    RoofMaterialType,
    SewerType,
    SpaceType,
    StructureForm,
    WaterSourceType,
)
from .association import _as_int
from .errors import UnmappedClassificationError
from .lexicon import Lexicon
from .matcher import coerce_enum
from .records import (
    AddressRecord,
    DeedRecord,
    EntityRecord,
    FileRecord,
    LayoutRecord,
    LotRecord,
    MailingAddressRecord,
    PropertyRecord,
    SalesHistoryRecord,
    StructureRecord,
    TaxRecord,
    UtilityRecord,
)


logger = logging.getLogger("parcel_graph.builders")

PROVENANCE_FIELDS = ("request_identifier", "source_http_request")

PROPERTY_ENUMS = {
    "property_type": PropertyType,
    "property_usage_type": PropertyUsageType,
    "ownership_estate_type": OwnershipEstateType,
    "structure_form": StructureForm,
    "build_status": BuildStatus,
    "number_of_units_type": NumberOfUnitsType,
}

STRUCTURE_ENUMS = {
    "attachment_type": AttachmentType,
    "exterior_wall_material_primary": ExteriorWallMaterial,
    "exterior_wall_material_secondary": ExteriorWallAccentMaterial,
    "primary_framing_material": PrimaryFramingMaterial,
    "secondary_framing_material": PrimaryFramingMaterial,
    "interior_wall_surface_material_primary": InteriorWallSurfaceMaterial,
    "interior_wall_surface_material_secondary": InteriorWallSurfaceMaterial,
    "flooring_material_primary": FlooringMaterial,
    "flooring_material_secondary": FlooringMaterial,
    "foundation_type": FoundationType,
    "roof_covering_material": RoofCoveringMaterial,
    "roof_material_type": RoofMaterialType,
    "roof_design_type": RoofDesignType,
}

UTILITY_ENUMS = {
    "cooling_system_type": CoolingSystemType,
    "heating_system_type": HeatingSystemType,
    "heating_fuel_type": HeatingFuelType,
    "sewer_type": SewerType,
    "water_source_type": WaterSourceType,
}

LAYOUT_ENUMS = {
    "space_type": SpaceType,
    "flooring_material_type": FlooringMaterial,
}

LOT_ENUMS = {
    "lot_type": LotType,
    "fencing_type": FencingType,
    "driveway_material": DrivewayMaterial,
}

DEED_ENUMS = {"deed_type": DeedType}

FILE_ENUMS = {
    "document_type": FileDocumentType,
    "file_format": FileFormat,
}

_UNITS_BY_FORM = {
    StructureForm.SINGLE_FAMILY_DETACHED: NumberOfUnitsType.ONE,
    StructureForm.SINGLE_FAMILY_SEMI_DETACHED: NumberOfUnitsType.ONE,
    StructureForm.TOWNHOUSE_ROWHOUSE: NumberOfUnitsType.ONE,
    StructureForm.MANUFACTURED_HOME_ON_LAND: NumberOfUnitsType.ONE,
    StructureForm.MANUFACTURED_HOME_IN_PARK: NumberOfUnitsType.ONE,
    StructureForm.MOBILE_HOME: NumberOfUnitsType.ONE,
    StructureForm.MANUFACTURED_HOUSING_MULTI_WIDE: NumberOfUnitsType.ONE,
    StructureForm.MANUFACTURED_HOUSING: NumberOfUnitsType.ONE,
    StructureForm.MANUFACTURED_HOUSING_SINGLE_WIDE: NumberOfUnitsType.ONE,
    StructureForm.MODULAR: NumberOfUnitsType.ONE,
    StructureForm.DUPLEX: NumberOfUnitsType.TWO,
    StructureForm.TRIPLEX: NumberOfUnitsType.THREE,
    StructureForm.QUADPLEX: NumberOfUnitsType.FOUR,
    StructureForm.MULTI_FAMILY_LESS_THAN_10: NumberOfUnitsType.TWO_TO_FOUR,
}

_UNIT_COUNTS = {
    NumberOfUnitsType.ONE: 1,
    NumberOfUnitsType.TWO: 2,
    NumberOfUnitsType.THREE: 3,
    NumberOfUnitsType.FOUR: 4,
}

QUARTER_ACRE = 0.25

_SUBDIVISION_SPLIT = re.compile(r"\s+(?:PB|PLAT BOOK)\s+", re.IGNORECASE)

_EXTENSION_FORMATS = {
    "pdf": FileFormat.PDF,
    "jpg": FileFormat.JPEG,
    "jpeg": FileFormat.JPEG,
    "png": FileFormat.PNG,
    "txt": FileFormat.TXT,
}


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def build_record(
    record_cls: Type[EntityRecord],
    entity: str,
    raw: Optional[Mapping[str, Any]],
    enum_fields: Mapping[str, Any],
    provenance: Optional[Mapping[str, Any]] = None,
) -> EntityRecord:
    """Keep the attributes ``record_cls`` defines and resolve its enum fields."""

    names = {f.name for f in fields(record_cls)}
    values: Dict[str, Any] = {}
    for key, value in (raw or {}).items():
        if key not in names:
            continue
        if _blank(value):
            values[key] = None
        elif key == "building_number":
            values[key] = _as_int(value)
        elif key in enum_fields:
            values[key] = coerce_enum(enum_fields[key], value, entity=entity, field=key)
        elif isinstance(value, str):
            values[key] = value.strip()
        else:
            values[key] = value
    for key in PROVENANCE_FIELDS:
        if values.get(key) is None and provenance:
            values[key] = provenance.get(key)
    return record_cls(**values)


def derive_units(structure_form: Optional[str]) -> Tuple[Optional[str], Optional[int]]:
    if not structure_form:
        return None, None
    units_type = _UNITS_BY_FORM.get(StructureForm(structure_form))
    if units_type is None:
        return None, None
    return units_type.value, _UNIT_COUNTS.get(units_type)


def subdivision_from_legal(legal: Optional[str]) -> Optional[str]:
    if not legal:
        return None
    parts = _SUBDIVISION_SPLIT.split(legal.strip(), maxsplit=1)
    if len(parts) < 2:
        return None
    return parts[0].strip() or None


def build_property(
    bundle: ParcelBundle,
    lexicon: Lexicon,
) -> PropertyRecord:
    raw: Dict[str, Any] = dict(bundle.property_fields)
    classification = bundle.classification
    if not _blank(classification):
        mapping = lexicon.resolve(classification)
        if mapping is None:
            raise UnmappedClassificationError(classification)
        raw.update({k: v for k, v in mapping.to_dict().items() if v is not None})
    raw["parcel_identifier"] = bundle.parcel_id

    record = build_record(PropertyRecord, "Property", raw, PROPERTY_ENUMS, bundle.provenance())

    updates: Dict[str, Any] = {}
    if record.number_of_units_type is None:
        units_type, units = derive_units(record.structure_form)
        updates["number_of_units_type"] = units_type
        if record.number_of_units is None:
            updates["number_of_units"] = units
    elif record.number_of_units is None:
        updates["number_of_units"] = _UNIT_COUNTS.get(
            NumberOfUnitsType(record.number_of_units_type)
        )
    if record.subdivision is None:
        updates["subdivision"] = subdivision_from_legal(record.property_legal_description_text)
    return replace(record, **updates)


def build_address(raw, provenance=None) -> AddressRecord:
    record = build_record(AddressRecord, "Address", raw, {}, provenance)
    if record.postal_code:
        digits = re.sub(r"\D", "", str(record.postal_code))
        record = replace(record, postal_code=digits[:5] if len(digits) >= 5 else None)
    return record


def build_mailing_address(raw, provenance=None) -> MailingAddressRecord:
    return build_record(MailingAddressRecord, "MailingAddress", raw, {}, provenance)


def lot_type_for_acreage(acres: Optional[float]) -> Optional[str]:
    if acres is None:
        return None
    if acres <= QUARTER_ACRE:
        return LotType.LESS_THAN_OR_EQUAL_TO_ONE_QUARTER_ACRE.value
    return LotType.GREATER_THAN_ONE_QUARTER_ACRE.value


def build_lot(raw, provenance=None) -> LotRecord:
    record = build_record(LotRecord, "Lot", raw, LOT_ENUMS, provenance)
    if record.lot_type is None and record.lot_size_acre is not None:
        record = replace(record, lot_type=lot_type_for_acreage(float(record.lot_size_acre)))
    return record


def build_taxes(rows, provenance=None) -> List[TaxRecord]:
    """One record per distinct tax year, in source order."""

    out: List[TaxRecord] = []
    seen = set()
    for row in rows or []:
        record = build_record(TaxRecord, "Tax", row, {}, provenance)
        if record.tax_year is not None:
            if record.tax_year in seen:
                logger.warning("Dropping duplicate tax year %s", record.tax_year)
                continue
            seen.add(record.tax_year)
        out.append(record)
    return out


def build_structure(raw, provenance=None) -> StructureRecord:
    return build_record(StructureRecord, "Structure", raw, STRUCTURE_ENUMS, provenance)


def build_utility(raw, provenance=None) -> UtilityRecord:
    return build_record(UtilityRecord, "Utility", raw, UTILITY_ENUMS, provenance)


def build_layout(raw, provenance=None) -> LayoutRecord:
    return build_record(LayoutRecord, "Layout", raw, LAYOUT_ENUMS, provenance)


def document_type_for_deed(deed_type: Optional[str]) -> str:
    if deed_type == DeedType.WARRANTY_DEED:
        return FileDocumentType.CONVEYANCE_DEED_WARRANTY_DEED.value
    if deed_type == DeedType.QUITCLAIM_DEED:
        return FileDocumentType.CONVEYANCE_DEED_QUIT_CLAIM_DEED.value
    if deed_type == DeedType.BARGAIN_AND_SALE_DEED:
        return FileDocumentType.CONVEYANCE_DEED_BARGAIN_AND_SALE_DEED.value
    return FileDocumentType.CONVEYANCE_DEED.value


def file_format_from_url(url: Optional[str]) -> Optional[str]:
    if not url:
        return None
    path = urlparse(url).path
    if "." not in path.rsplit("/", 1)[-1]:
        return None
    ext = path.rsplit(".", 1)[-1].lower()
    fmt = _EXTENSION_FORMATS.get(ext)
    return fmt.value if fmt else None


def _deed_present(raw: Mapping[str, Any]) -> bool:
    return any(
        not _blank(raw.get(key))
        for key in ("deed_type", "book", "page", "volume", "instrument_number", "document_url")
    )


def build_sale(
    raw: Mapping[str, Any], provenance=None
) -> Tuple[SalesHistoryRecord, Optional[DeedRecord], Optional[FileRecord]]:
    """A sale and, when the source has them, its deed and backing document."""

    sale = build_record(SalesHistoryRecord, "SalesHistory", raw, {}, provenance)
    if not _deed_present(raw):
        return sale, None, None

    deed = build_record(DeedRecord, "Deed", raw, DEED_ENUMS, provenance)
    url = raw.get("document_url")
    if _blank(url):
        return sale, deed, None

    name = raw.get("document_name")
    if _blank(name):
        if deed.book and deed.page:
            name = f"Deed {deed.book}/{deed.page}"
        elif deed.instrument_number:
            name = f"Deed {deed.instrument_number}"
        else:
            name = None
    file_raw = {
        "document_type": document_type_for_deed(deed.deed_type),
        "file_format": file_format_from_url(url),
        "name": name,
        "original_url": url,
        "ipfs_url": None,
    }
    return sale, deed, build_record(FileRecord, "File", file_raw, FILE_ENUMS, provenance)
