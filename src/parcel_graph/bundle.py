from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


RawFields = Dict[str, Any]


@dataclass
class ParcelBundle:
    """Raw facts for one parcel, as produced by a county adapter.

    Values are already-typed scalars (ints, floats, ISO date strings) or
    None. Enum-governed attributes hold free text that the builders resolve.

    ``layouts`` entries may carry ``building_number`` and ``parent_index``
    (the position of another entry in ``layouts``). ``owners_by_date`` maps
    ``"current"`` or an ISO date to owner dicts tagged with ``type``
    (``"person"`` or ``"company"``); when it is absent, ``owner_names``
    holds unclassified owner strings.
    """

    parcel_id: str
    county: Optional[str] = None
    request_identifier: Optional[str] = None
    source_http_request: Optional[Dict[str, Any]] = None
    classification: Optional[str] = None
    property_fields: RawFields = field(default_factory=dict)
    address: Optional[RawFields] = None
    mailing_address: Optional[RawFields] = None
    lot: Optional[RawFields] = None
    taxes: List[RawFields] = field(default_factory=list)
    sales: List[RawFields] = field(default_factory=list)
    structures: List[RawFields] = field(default_factory=list)
    utilities: List[RawFields] = field(default_factory=list)
    layouts: List[RawFields] = field(default_factory=list)
    owner_names: List[str] = field(default_factory=list)
    owners_by_date: Optional[Dict[str, List[RawFields]]] = None

    def provenance(self) -> Dict[str, Any]:
        return {
            "request_identifier": self.request_identifier or self.parcel_id,
            "source_http_request": self.source_http_request,
        }
