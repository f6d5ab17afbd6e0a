"""Side-channel seed documents.

Owner, structure, utility and layout facts can arrive as JSON documents
next to the parcel page, each keyed by ``property_{parcel_id}``. A seed for
a kind replaces whatever the county adapter extracted for that kind.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from .bundle import ParcelBundle
from .errors import SeedFormatError


logger = logging.getLogger("parcel_graph.seeds")

OWNER_FILE = "owner_data.json"
STRUCTURE_FILE = "structure_data.json"
UTILITY_FILE = "utilities_data.json"
LAYOUT_FILE = "layout_data.json"


class OwnerSeed(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: Literal["person", "company"]
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    middle_name: Optional[str] = None
    prefix_name: Optional[str] = None
    suffix_name: Optional[str] = None
    name: Optional[str] = None


class OwnerDocument(BaseModel):
    owners_by_date: Dict[str, List[OwnerSeed]] = Field(default_factory=dict)


class LayoutWrapper(BaseModel):
    file: Optional[str] = None
    parent: Optional[str] = None
    data: Dict[str, Any]


class LayoutDocument(BaseModel):
    layouts: List[Dict[str, Any]] = Field(default_factory=list)


_RECORD_LIST = TypeAdapter(List[Dict[str, Any]])


@dataclass
class ParcelSeeds:
    owners_by_date: Optional[Dict[str, List[Dict[str, Any]]]] = None
    structures: Optional[List[Dict[str, Any]]] = None
    utilities: Optional[List[Dict[str, Any]]] = None
    layouts: Optional[List[Dict[str, Any]]] = None


def seed_key(parcel_id: str) -> str:
    return f"property_{parcel_id}"


def _read_entry(path: Path, key: str) -> Any:
    if not path.is_file():
        return None
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SeedFormatError(path.name, f"invalid JSON: {exc}") from exc
    if not isinstance(document, dict):
        raise SeedFormatError(path.name, "top level must be an object")
    return document.get(key)


def parse_owner_entry(entry: Any, source: str = OWNER_FILE) -> Dict[str, List[Dict[str, Any]]]:
    try:
        parsed = OwnerDocument.model_validate(entry)
    except ValidationError as exc:
        raise SeedFormatError(source, str(exc)) from exc
    return {
        date_key: [owner.model_dump(exclude_none=True) for owner in owners]
        for date_key, owners in parsed.owners_by_date.items()
    }


def parse_record_entry(entry: Any, source: str) -> List[Dict[str, Any]]:
    if isinstance(entry, dict):
        entry = [entry]
    try:
        return _RECORD_LIST.validate_python(entry)
    except ValidationError as exc:
        raise SeedFormatError(source, str(exc)) from exc


def parse_layout_entry(entry: Any, source: str = LAYOUT_FILE) -> List[Dict[str, Any]]:
    """Flatten a layout seed into layout dicts with ``parent_index`` set.

    Entries are flat layout objects or ``{"file", "parent", "data"}``
    wrappers whose ``parent`` names another wrapper's ``file``.
    """

    try:
        if isinstance(entry, list):
            raw_items = _RECORD_LIST.validate_python(entry)
        else:
            raw_items = LayoutDocument.model_validate(entry).layouts
        wrappers = [
            LayoutWrapper.model_validate(item) if "data" in item else None for item in raw_items
        ]
    except ValidationError as exc:
        raise SeedFormatError(source, str(exc)) from exc

    files = {w.file: i for i, w in enumerate(wrappers) if w is not None and w.file}
    layouts: List[Dict[str, Any]] = []
    for item, wrapper in zip(raw_items, wrappers):
        if wrapper is None:
            layouts.append(dict(item))
            continue
        layout = dict(wrapper.data)
        if wrapper.parent:
            if wrapper.parent not in files:
                raise SeedFormatError(source, f"unknown parent {wrapper.parent!r}")
            layout["parent_index"] = files[wrapper.parent]
        layouts.append(layout)
    return layouts


def load_seeds(seeds_dir, parcel_id: str) -> ParcelSeeds:
    base = Path(seeds_dir)
    key = seed_key(parcel_id)
    seeds = ParcelSeeds()

    owners = _read_entry(base / OWNER_FILE, key)
    if owners is not None:
        seeds.owners_by_date = parse_owner_entry(owners)
    structures = _read_entry(base / STRUCTURE_FILE, key)
    if structures is not None:
        seeds.structures = parse_record_entry(structures, STRUCTURE_FILE)
    utilities = _read_entry(base / UTILITY_FILE, key)
    if utilities is not None:
        seeds.utilities = parse_record_entry(utilities, UTILITY_FILE)
    layouts = _read_entry(base / LAYOUT_FILE, key)
    if layouts is not None:
        seeds.layouts = parse_layout_entry(layouts)

    logger.debug(
        "seeds for %s: owners=%s structures=%s utilities=%s layouts=%s",
        key,
        seeds.owners_by_date is not None,
        seeds.structures is not None,
        seeds.utilities is not None,
        seeds.layouts is not None,
    )
    return seeds


def apply_seeds(bundle: ParcelBundle, seeds: Optional[ParcelSeeds]) -> ParcelBundle:
    if seeds is None:
        return bundle
    updates: Dict[str, Any] = {}
    if seeds.owners_by_date is not None:
        updates["owners_by_date"] = seeds.owners_by_date
        updates["owner_names"] = []
    if seeds.structures is not None:
        updates["structures"] = seeds.structures
    if seeds.utilities is not None:
        updates["utilities"] = seeds.utilities
    if seeds.layouts is not None:
        updates["layouts"] = seeds.layouts
    return replace(bundle, **updates)
