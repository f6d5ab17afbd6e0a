from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


# Every attribute defaults to None: unknown facts are emitted as null,
# never omitted and never guessed.


@dataclass(frozen=True)
class EntityRecord:
    request_identifier: Optional[str] = None
    source_http_request: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class PropertyRecord(EntityRecord):
    parcel_identifier: Optional[str] = None
    property_type: Optional[str] = None
    property_usage_type: Optional[str] = None
    ownership_estate_type: Optional[str] = None
    structure_form: Optional[str] = None
    build_status: Optional[str] = None
    number_of_units_type: Optional[str] = None
    number_of_units: Optional[int] = None
    property_structure_built_year: Optional[int] = None
    property_effective_built_year: Optional[int] = None
    property_legal_description_text: Optional[str] = None
    subdivision: Optional[str] = None
    zoning: Optional[str] = None
    livable_floor_area: Optional[str] = None
    area_under_air: Optional[str] = None
    total_area: Optional[str] = None


@dataclass(frozen=True)
class AddressRecord(EntityRecord):
    unnormalized_address: Optional[str] = None
    street_number: Optional[str] = None
    street_pre_directional_text: Optional[str] = None
    street_name: Optional[str] = None
    street_suffix_type: Optional[str] = None
    street_post_directional_text: Optional[str] = None
    unit_identifier: Optional[str] = None
    city_name: Optional[str] = None
    state_code: Optional[str] = None
    postal_code: Optional[str] = None
    county_name: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


@dataclass(frozen=True)
class MailingAddressRecord(EntityRecord):
    unnormalized_address: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


@dataclass(frozen=True)
class LotRecord(EntityRecord):
    lot_type: Optional[str] = None
    lot_length_feet: Optional[float] = None
    lot_width_feet: Optional[float] = None
    lot_area_sqft: Optional[int] = None
    lot_size_acre: Optional[float] = None
    landscaping_features: Optional[str] = None
    view: Optional[str] = None
    fencing_type: Optional[str] = None
    fence_height: Optional[str] = None
    fence_length: Optional[str] = None
    driveway_material: Optional[str] = None
    driveway_condition: Optional[str] = None
    lot_condition_issues: Optional[str] = None


@dataclass(frozen=True)
class TaxRecord(EntityRecord):
    tax_year: Optional[int] = None
    property_assessed_value_amount: Optional[float] = None
    property_market_value_amount: Optional[float] = None
    property_building_amount: Optional[float] = None
    property_land_amount: Optional[float] = None
    property_taxable_value_amount: Optional[float] = None
    monthly_tax_amount: Optional[float] = None
    yearly_tax_amount: Optional[float] = None
    period_start_date: Optional[str] = None
    period_end_date: Optional[str] = None
    first_year_on_tax_roll: Optional[int] = None
    first_year_building_on_tax_roll: Optional[int] = None


@dataclass(frozen=True)
class StructureRecord(EntityRecord):
    building_number: Optional[int] = None
    architectural_style_type: Optional[str] = None
    attachment_type: Optional[str] = None
    exterior_wall_material_primary: Optional[str] = None
    exterior_wall_material_secondary: Optional[str] = None
    exterior_wall_condition: Optional[str] = None
    exterior_wall_insulation_type: Optional[str] = None
    primary_framing_material: Optional[str] = None
    secondary_framing_material: Optional[str] = None
    interior_wall_surface_material_primary: Optional[str] = None
    interior_wall_surface_material_secondary: Optional[str] = None
    interior_wall_structure_material: Optional[str] = None
    flooring_material_primary: Optional[str] = None
    flooring_material_secondary: Optional[str] = None
    flooring_condition: Optional[str] = None
    subfloor_material: Optional[str] = None
    foundation_type: Optional[str] = None
    foundation_material: Optional[str] = None
    foundation_condition: Optional[str] = None
    roof_covering_material: Optional[str] = None
    roof_material_type: Optional[str] = None
    roof_design_type: Optional[str] = None
    roof_structure_material: Optional[str] = None
    roof_underlayment_type: Optional[str] = None
    roof_condition: Optional[str] = None
    roof_age_years: Optional[int] = None
    roof_date: Optional[str] = None
    gutters_material: Optional[str] = None
    gutters_condition: Optional[str] = None
    window_frame_material: Optional[str] = None
    window_glazing_type: Optional[str] = None
    window_operation_type: Optional[str] = None
    number_of_stories: Optional[float] = None
    finished_base_area: Optional[int] = None
    finished_upper_story_area: Optional[int] = None
    finished_basement_area: Optional[int] = None
    unfinished_base_area: Optional[int] = None
    unfinished_upper_story_area: Optional[int] = None
    unfinished_basement_area: Optional[int] = None
    structural_damage_indicators: Optional[str] = None


@dataclass(frozen=True)
class UtilityRecord(EntityRecord):
    building_number: Optional[int] = None
    cooling_system_type: Optional[str] = None
    heating_system_type: Optional[str] = None
    heating_fuel_type: Optional[str] = None
    public_utility_type: Optional[str] = None
    sewer_type: Optional[str] = None
    water_source_type: Optional[str] = None
    plumbing_system_type: Optional[str] = None
    electrical_panel_capacity: Optional[str] = None
    electrical_wiring_type: Optional[str] = None
    hvac_condensing_unit_present: Optional[str] = None
    hvac_unit_condition: Optional[str] = None
    hvac_unit_issues: Optional[str] = None
    solar_panel_present: Optional[bool] = None
    solar_panel_type: Optional[str] = None
    solar_inverter_visible: Optional[bool] = None
    smart_home_features: Optional[str] = None


@dataclass(frozen=True)
class LayoutRecord(EntityRecord):
    space_type: Optional[str] = None
    space_type_index: Optional[str] = None
    space_index: Optional[int] = None
    building_number: Optional[int] = None
    floor_level: Optional[str] = None
    size_square_feet: Optional[float] = None
    total_area_sq_ft: Optional[float] = None
    livable_area_sq_ft: Optional[float] = None
    area_under_air_sq_ft: Optional[float] = None
    is_finished: Optional[bool] = None
    is_exterior: Optional[bool] = None
    has_windows: Optional[bool] = None
    flooring_material_type: Optional[str] = None
    pool_type: Optional[str] = None
    spa_type: Optional[str] = None
    view_type: Optional[str] = None


@dataclass(frozen=True)
class SalesHistoryRecord(EntityRecord):
    ownership_transfer_date: Optional[str] = None
    purchase_price_amount: Optional[float] = None
    sale_type: Optional[str] = None


@dataclass(frozen=True)
class DeedRecord(EntityRecord):
    deed_type: Optional[str] = None
    book: Optional[str] = None
    page: Optional[str] = None
    volume: Optional[str] = None
    instrument_number: Optional[str] = None


@dataclass(frozen=True)
class FileRecord(EntityRecord):
    document_type: Optional[str] = None
    file_format: Optional[str] = None
    name: Optional[str] = None
    original_url: Optional[str] = None
    ipfs_url: Optional[str] = None


@dataclass(frozen=True)
class PersonRecord(EntityRecord):
    birth_date: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    middle_name: Optional[str] = None
    prefix_name: Optional[str] = None
    suffix_name: Optional[str] = None
    us_citizenship_status: Optional[str] = None
    veteran_status: Optional[bool] = None


@dataclass(frozen=True)
class CompanyRecord(EntityRecord):
    name: Optional[str] = None
