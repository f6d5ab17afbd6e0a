"""Classification lexicon: county use codes to canonical property attributes.

A lexicon is data. Each mapping is registered once under every alias it is
known to appear under (numeric code variants and textual labels), and
resolution walks a fixed sequence of keys derived from the raw value until
one hits. Registering two different mappings under one key is an error, so
resolution never depends on registration order.
"""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from typing import Dict, Iterable, List, Optional

from .enums import (
    BuildStatus,
    OwnershipEstateType,
    PropertyType,
    PropertyUsageType,
    StructureForm,
)


@dataclass(frozen=True)
class ClassificationMapping:
    property_type: Optional[PropertyType]
    property_usage_type: Optional[PropertyUsageType]
    ownership_estate_type: Optional[OwnershipEstateType] = None
    structure_form: Optional[StructureForm] = None
    build_status: Optional[BuildStatus] = None

    def __post_init__(self) -> None:
        # Coerce plain strings so a bad table entry fails at import time.
        for name, enum_cls in (
            ("property_type", PropertyType),
            ("property_usage_type", PropertyUsageType),
            ("ownership_estate_type", OwnershipEstateType),
            ("structure_form", StructureForm),
            ("build_status", BuildStatus),
        ):
            value = getattr(self, name)
            if value is not None and not isinstance(value, enum_cls):
                object.__setattr__(self, name, enum_cls(value))

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {k: (str(v) if v is not None else None) for k, v in asdict(self).items()}


def normalize_classification_key(value) -> str:
    if value is None:
        return ""
    trimmed = str(value).strip().lower()
    if not trimmed:
        return ""
    return re.sub(r"[^a-z0-9]+", "_", trimmed).strip("_")


def _code_keys(code: str) -> List[str]:
    digits = re.sub(r"\D", "", code or "")
    if not digits:
        return []
    unpadded = digits.lstrip("0") or "0"
    keys = [digits, unpadded, unpadded.zfill(2), digits.zfill(5)]
    if len(unpadded) <= 2:
        # County land-use codes often carry the DOR code times 100 ("00100").
        keys.append((unpadded.zfill(2) + "00").zfill(5))
    return keys


def _strip_leading_digits(label: str) -> str:
    return re.sub(r"^\s*\d+\s*", "", label)


def classification_lookup_keys(raw) -> List[str]:
    """Normalized keys tried, in order, when resolving ``raw``."""

    if raw is None:
        return []
    trimmed = str(raw).strip()
    if not trimmed:
        return []
    keys: List[str] = [trimmed]
    digits_match = re.match(r"\s*(\d+)", trimmed)
    if digits_match:
        digits = digits_match.group(1)
        unpadded = digits.lstrip("0") or "0"
        if len(unpadded) <= 2:
            keys.append(unpadded.zfill(2))
        keys.extend([unpadded, digits, digits.zfill(5)])
    for part in re.split(r"[-–—]", trimmed):
        part = part.strip()
        # Bare numbers only count as the leading code, handled above.
        if part and not part.isdigit():
            keys.append(part)
    remainder = re.sub(r"^\s*\d+\W*", "", trimmed).strip()
    if remainder:
        keys.append(remainder)

    out: List[str] = []
    seen = set()
    for key in keys:
        norm = normalize_classification_key(key)
        if norm and norm not in seen:
            seen.add(norm)
            out.append(norm)
    return out


class Lexicon:
    def __init__(self, name: str) -> None:
        self.name = name
        self._mappings: Dict[str, ClassificationMapping] = {}

    def __len__(self) -> int:
        return len(self._mappings)

    def __contains__(self, raw) -> bool:
        return self.resolve(raw) is not None

    def register(
        self,
        code: Optional[str],
        labels: Iterable[str],
        mapping: ClassificationMapping,
    ) -> None:
        candidates: List[str] = []
        if code:
            candidates.extend(_code_keys(code))
        for label in labels:
            if not label:
                continue
            candidates.append(label)
            candidates.append(_strip_leading_digits(label))
        for raw_key in candidates:
            key = normalize_classification_key(raw_key)
            if not key:
                continue
            existing = self._mappings.get(key)
            if existing is not None and existing != mapping:
                raise ValueError(
                    f"{self.name}: key {key!r} already maps to {existing.to_dict()}"
                )
            self._mappings[key] = mapping

    def resolve(self, raw) -> Optional[ClassificationMapping]:
        for key in classification_lookup_keys(raw):
            mapping = self._mappings.get(key)
            if mapping is not None:
                return mapping
        return None
