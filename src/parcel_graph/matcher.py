"""Resolve noisy free text onto closed vocabularies.

County pages spell the same material or room many ways ("CONCRETE_BLOCK",
"Concrete Block", "concrete-block"). Matching is exact on a normalized form
first, then falls back to containment in either direction, scanning the
vocabulary in declaration order. Candidates shorter than three characters
never take the containment path.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Iterable, Optional, Type

from .errors import EnumResolutionError
from .feature_flags import get_flags


logger = logging.getLogger("parcel_graph.matcher")

MIN_CONTAINMENT_LENGTH = 3

_CURLY_APOSTROPHES = str.maketrans({"‘": "'", "’": "'", "ʼ": "'"})


def normalize_enum_text(value) -> str:
    if value is None:
        return ""
    text = str(value).translate(_CURLY_APOSTROPHES).strip().lower()
    text = re.sub(r"[_\-]+", " ", text)
    return re.sub(r"\s+", " ", text).strip()


def _values(enum_values) -> list[str]:
    if isinstance(enum_values, type) and issubclass(enum_values, Enum):
        return [member.value for member in enum_values]
    return [str(v) for v in enum_values]


def match_enum(enum_values: Iterable[str] | Type[Enum], raw_value) -> Optional[str]:
    """Return the canonical value ``raw_value`` resolves to, or None."""

    candidate = normalize_enum_text(raw_value)
    if not candidate:
        return None
    canon = [(value, normalize_enum_text(value)) for value in _values(enum_values)]
    for value, norm in canon:
        if norm == candidate:
            return value
    if len(candidate) < MIN_CONTAINMENT_LENGTH:
        return None
    for value, norm in canon:
        if norm and (candidate in norm or norm in candidate):
            return value
    return None


def coerce_enum(
    enum_cls: Type[Enum],
    raw_value,
    *,
    entity: str,
    field: str,
    strict: Optional[bool] = None,
) -> Optional[str]:
    """Resolve ``raw_value`` for ``entity.field`` or fail per the strictness flag.

    Blank input is "fact not available" and always yields None. Unmatchable
    text raises ``EnumResolutionError`` in strict mode and is dropped with a
    warning otherwise.
    """

    if raw_value is None:
        return None
    if isinstance(raw_value, enum_cls):
        return raw_value.value
    if isinstance(raw_value, str) and not raw_value.strip():
        return None
    matched = match_enum(enum_cls, raw_value)
    if matched is not None:
        return matched
    if strict is None:
        strict = get_flags().strict_enums
    if strict:
        raise EnumResolutionError(raw_value, entity, field)
    logger.warning("Dropping unknown %s.%s value %r", entity, field, raw_value)
    return None
