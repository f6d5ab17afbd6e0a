"""Bundle to entity graph to output directory, for one parcel."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Tuple

from .association import associate, resolve_layout_parents, synthesize_building_numbers
from .builders import (
    build_address,
    build_layout,
    build_lot,
    build_mailing_address,
    build_property,
    build_sale,
    build_structure,
    build_taxes,
    build_utility,
)
from .bundle import ParcelBundle
from .enums import SpaceType
from .feature_flags import FeatureFlags, get_flags
from .graph import EntityGraph
from .lexicon import Lexicon
from .lexicons import get_lexicon
from .materialize import materialize
from .owners import build_owner, classify_owner_name, owner_key
from .seeds import ParcelSeeds, apply_seeds


logger = logging.getLogger("parcel_graph.pipeline")

DEFAULT_LEXICON = "florida_dor"
CURRENT_OWNERS = "current"


@dataclass
class ParcelRunResult:
    parcel_id: str
    output_dir: Optional[str]
    files_written: List[str] = field(default_factory=list)
    files_removed: List[str] = field(default_factory=list)
    entity_counts: Dict[str, int] = field(default_factory=dict)
    relationship_count: int = 0
    dry_run: bool = False
    warnings: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "parcel_id": self.parcel_id,
            "output_dir": self.output_dir,
            "files_written": list(self.files_written),
            "files_removed": list(self.files_removed),
            "entity_counts": dict(self.entity_counts),
            "relationship_count": self.relationship_count,
            "dry_run": self.dry_run,
            "warnings": list(self.warnings),
        }


class GraphBuilder:
    """Assembles one parcel's entities and relationships in memory.

    Nothing here touches the filesystem; a fatal enum error raised while
    building leaves the caller with no partial graph.
    """

    def __init__(self, bundle: ParcelBundle, lexicon: Lexicon, flags: FeatureFlags) -> None:
        self.bundle = bundle
        self.lexicon = lexicon
        self.flags = flags
        self.provenance = bundle.provenance()
        self.graph = EntityGraph()
        self.warnings: List[str] = []
        self.property_id = ""
        self.mailing_id: Optional[str] = None
        self.sales: List[Tuple[str, Optional[str]]] = []

    def build(self) -> EntityGraph:
        self._add_property()
        self._add_singletons()
        self._add_taxes()
        self._add_sales()
        building_ids, building_numbers = self._add_layouts()
        for kind, rows, builder in (
            ("structure", self.bundle.structures, build_structure),
            ("utility", self.bundle.utilities, build_utility),
        ):
            self._add_building_records(kind, rows, builder, building_ids, building_numbers)
        self._add_owners()
        return self.graph

    def _add_property(self) -> None:
        record = build_property(self.bundle, self.lexicon)
        self.property_id = self.graph.add("property", record.to_dict(), indexed=False)

    def _add_singletons(self) -> None:
        if self.bundle.address:
            record = build_address(self.bundle.address, self.provenance)
            address_id = self.graph.add("address", record.to_dict(), indexed=False)
            self.graph.relate(self.property_id, address_id)
        if self.bundle.mailing_address:
            record = build_mailing_address(self.bundle.mailing_address, self.provenance)
            self.mailing_id = self.graph.add("mailing_address", record.to_dict(), indexed=False)
        if self.bundle.lot:
            record = build_lot(self.bundle.lot, self.provenance)
            lot_id = self.graph.add("lot", record.to_dict(), indexed=False)
            self.graph.relate(self.property_id, lot_id)

    def _add_taxes(self) -> None:
        taxes = build_taxes(self.bundle.taxes, self.provenance)
        dropped = len(self.bundle.taxes) - len(taxes)
        if dropped:
            self.warnings.append(f"dropped {dropped} duplicate tax year row(s)")
        for record in taxes:
            tax_id = self.graph.add("tax", record.to_dict())
            self.graph.relate(self.property_id, tax_id)

    def _add_sales(self) -> None:
        for raw in self.bundle.sales:
            sale, deed, doc = build_sale(raw, self.provenance)
            sale_id = self.graph.add("sales_history", sale.to_dict())
            self.graph.relate(self.property_id, sale_id)
            if deed is not None:
                deed_id = self.graph.add("deed", deed.to_dict())
                self.graph.relate(sale_id, deed_id)
                if doc is not None:
                    file_id = self.graph.add("file", doc.to_dict())
                    self.graph.relate(deed_id, file_id)
            self.sales.append((sale_id, sale.ownership_transfer_date))

    def _add_layouts(self):
        records = [build_layout(raw, self.provenance) for raw in self.bundle.layouts]
        # Parent resolution works on the resolved space types.
        resolved = []
        for raw, record in zip(self.bundle.layouts, records):
            resolved.append(
                {
                    "space_type": record.space_type,
                    "building_number": record.building_number,
                    "parent_index": raw.get("parent_index"),
                }
            )
        parents = resolve_layout_parents(resolved)

        building_positions = [
            i for i, r in enumerate(records) if r.space_type == SpaceType.BUILDING.value
        ]
        building_numbers = synthesize_building_numbers(
            [records[i].building_number for i in building_positions]
        )
        number_at = dict(zip(building_positions, building_numbers))

        counters: Dict[Any, int] = {}
        for index, record in enumerate(records):
            updates: Dict[str, Any] = {}
            if index in number_at:
                updates["building_number"] = number_at[index]
                if record.space_type_index is None:
                    updates["space_type_index"] = str(building_positions.index(index) + 1)
            else:
                parent = parents[index]
                owner_number = number_at.get(parent) if parent is not None else None
                if record.building_number is None and owner_number is not None:
                    updates["building_number"] = owner_number
                if record.space_type_index is None:
                    key = (owner_number, record.space_type)
                    counters[key] = counters.get(key, 0) + 1
                    if owner_number is not None:
                        updates["space_type_index"] = f"{owner_number}.{counters[key]}"
                    else:
                        updates["space_type_index"] = str(counters[key])
            if updates:
                records[index] = replace(record, **updates)

        layout_ids = [self.graph.add("layout", r.to_dict()) for r in records]
        for index, layout_id in enumerate(layout_ids):
            parent = parents[index]
            parent_id = self.property_id if parent is None else layout_ids[parent]
            self.graph.relate(parent_id, layout_id)

        building_ids = [layout_ids[i] for i in building_positions]
        return building_ids, building_numbers

    def _add_building_records(self, kind, rows, builder, building_ids, building_numbers) -> None:
        records = [builder(raw, self.provenance) for raw in rows]
        targets = associate(
            building_numbers,
            [r.building_number for r in records],
            kind=kind,
        )
        for record, target in zip(records, targets):
            entity_id = self.graph.add(kind, record.to_dict())
            parent_id = self.property_id if target is None else building_ids[target]
            self.graph.relate(parent_id, entity_id)

    def _owners_by_date(self) -> Dict[str, List[Dict[str, Any]]]:
        if self.bundle.owners_by_date is not None:
            return self.bundle.owners_by_date
        current: List[Dict[str, Any]] = []
        for name in self.bundle.owner_names:
            current.extend(classify_owner_name(name))
        return {CURRENT_OWNERS: current} if current else {}

    def _add_owners(self) -> None:
        seen: Dict[str, str] = {}
        for date_key, owners in self._owners_by_date().items():
            owner_ids: List[str] = []
            for raw in owners:
                record = build_owner(raw, self.provenance)
                if record is None:
                    self.warnings.append(f"skipped owner {raw!r}")
                    continue
                key = owner_key(record)
                if self.flags.dedupe_owners and key in seen:
                    owner_ids.append(seen[key])
                    continue
                kind = "company" if key.startswith("company:") else "person"
                entity_id = self.graph.add(kind, record.to_dict())
                seen[key] = entity_id
                owner_ids.append(entity_id)

            if date_key == CURRENT_OWNERS and self.mailing_id is not None:
                for owner_id in owner_ids:
                    self.graph.relate(owner_id, self.mailing_id)
            if self.flags.link_sale_owners:
                sale_id = self._sale_for(date_key)
                if sale_id is not None:
                    for owner_id in owner_ids:
                        self.graph.relate(sale_id, owner_id)

    def _sale_for(self, date_key: str) -> Optional[str]:
        dated = [(d, sid) for sid, d in self.sales if d]
        if not dated:
            return None
        if date_key == CURRENT_OWNERS:
            return max(dated)[1]
        for sale_date, sale_id in dated:
            if sale_date == date_key:
                return sale_id
        same_year = [(d, sid) for d, sid in dated if d[:4] == date_key[:4]]
        if same_year:
            return max(same_year)[1]
        return None


def prepare_builder(
    bundle: ParcelBundle,
    *,
    seeds: Optional[ParcelSeeds] = None,
    lexicon: Optional[Lexicon] = None,
    flags: Optional[FeatureFlags] = None,
) -> GraphBuilder:
    bundle = apply_seeds(bundle, seeds)
    if lexicon is None:
        lexicon = get_lexicon(bundle.county or DEFAULT_LEXICON)
    return GraphBuilder(bundle, lexicon, flags or get_flags())


def build_graph(
    bundle: ParcelBundle,
    *,
    seeds: Optional[ParcelSeeds] = None,
    lexicon: Optional[Lexicon] = None,
    flags: Optional[FeatureFlags] = None,
) -> EntityGraph:
    return prepare_builder(bundle, seeds=seeds, lexicon=lexicon, flags=flags).build()


def run_parcel(
    bundle: ParcelBundle,
    output_dir,
    *,
    seeds: Optional[ParcelSeeds] = None,
    lexicon: Optional[Lexicon] = None,
    dry_run: bool = False,
) -> ParcelRunResult:
    """Build the parcel graph in memory, then project it onto ``output_dir``."""

    builder = prepare_builder(bundle, seeds=seeds, lexicon=lexicon)
    graph = builder.build()
    report = materialize(graph, output_dir, dry_run=dry_run)
    result = ParcelRunResult(
        parcel_id=bundle.parcel_id,
        output_dir=str(output_dir) if output_dir is not None else None,
        files_written=report.written,
        files_removed=report.removed,
        entity_counts=graph.entity_counts(),
        relationship_count=len(graph.relationships),
        dry_run=dry_run,
        warnings=list(builder.warnings),
    )
    logger.info(
        "parcel %s: %d file(s) written, %d removed, %d relationship(s)%s",
        result.parcel_id,
        len(result.files_written),
        len(result.files_removed),
        result.relationship_count,
        " (dry run)" if dry_run else "",
    )
    return result
