"""Building association.

Structures and utilities describe physical buildings; layouts of space type
"Building" stand for those buildings. Counties rarely give a clean 1:1
mapping, so records are paired with buildings by stated building number
first and by position second. A record that cannot be placed is linked to
the property itself. Every record always ends with exactly one target.

Targets are positions in the building list, or ``None`` for the property.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Sequence


logger = logging.getLogger("parcel_graph.association")


def _as_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def synthesize_building_numbers(numbers: Sequence[Any]) -> List[int]:
    """Fill missing building numbers with the node's 1-based position."""

    out: List[int] = []
    for position, number in enumerate(numbers, start=1):
        parsed = _as_int(number)
        out.append(parsed if parsed is not None else position)
    return out


def associate(
    building_numbers: Sequence[int],
    record_numbers: Sequence[Any],
    *,
    kind: str = "record",
) -> List[Optional[int]]:
    """Assign each record to a building position or to the property (None)."""

    buildings = list(building_numbers)
    records = [_as_int(n) for n in record_numbers]

    if not buildings:
        logger.debug("%s: no buildings, %d record(s) -> property", kind, len(records))
        return [None] * len(records)

    if len(buildings) == 1 and len(records) > 1:
        logger.debug(
            "%s: single building %s takes all %d records",
            kind,
            buildings[0],
            len(records),
        )
        return [0] * len(records)

    targets: List[Optional[int]] = [None] * len(records)
    taken = [False] * len(buildings)
    placed = [False] * len(records)

    for i, number in enumerate(records):
        if number is None:
            continue
        for b, building_number in enumerate(buildings):
            if not taken[b] and building_number == number:
                targets[i] = b
                taken[b] = True
                placed[i] = True
                logger.debug("%s %d: matched building %s", kind, i + 1, number)
                break

    remaining = [b for b in range(len(buildings)) if not taken[b]]
    for i in range(len(records)):
        if placed[i]:
            continue
        if remaining:
            b = remaining.pop(0)
            targets[i] = b
            taken[b] = True
            logger.debug(
                "%s %d: paired by position with building %s",
                kind,
                i + 1,
                buildings[b],
            )
        else:
            logger.debug("%s %d: no building left, linking to property", kind, i + 1)

    return targets


def is_building_layout(layout: Mapping[str, Any]) -> bool:
    return str(layout.get("space_type") or "") == "Building"


def resolve_layout_parents(layouts: Sequence[Mapping[str, Any]]) -> List[Optional[int]]:
    """Parent index (into ``layouts``) for every layout; None means the property.

    Building layouts always hang off the property. For any other layout the
    first applicable rule wins: an explicit ``parent_index``, a
    ``building_number`` equal to a building's number, the only building
    when there is exactly one, and finally the property.
    """

    building_positions = [i for i, layout in enumerate(layouts) if is_building_layout(layout)]
    numbers = synthesize_building_numbers(
        [layouts[i].get("building_number") for i in building_positions]
    )
    by_number = {}
    for position, number in zip(building_positions, numbers):
        by_number.setdefault(number, position)

    parents: List[Optional[int]] = []
    for index, layout in enumerate(layouts):
        if is_building_layout(layout):
            parents.append(None)
            continue
        explicit = _as_int(layout.get("parent_index"))
        if explicit is not None and 0 <= explicit < len(layouts) and explicit != index:
            parents.append(explicit)
            continue
        number = _as_int(layout.get("building_number"))
        if number is not None and number in by_number:
            parents.append(by_number[number])
            continue
        if len(building_positions) == 1:
            parents.append(building_positions[0])
            continue
        parents.append(None)
    return parents
