"""Owners: person/company classification, name validation and in-run dedupe."""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Mapping, Optional, Union

from .enums import PersonNamePrefix, PersonNameSuffix
from .records import CompanyRecord, PersonRecord


logger = logging.getLogger("parcel_graph.owners")

COMPANY_KEYWORDS = (
    "INC",
    "LLC",
    "LTD",
    "CORP",
    "CO",
    "FOUNDATION",
    "ALLIANCE",
    "RESCUE",
    "MISSION",
    "SOLUTIONS",
    "SERVICES",
    "SYSTEMS",
    "COUNCIL",
    "VETERANS",
    "FIRST RESPONDERS",
    "HEROES",
    "INITIATIVE",
    "ASSOCIATION",
    "GROUP",
    "TRUST",
    "PARTNERS",
    "PROPERTIES",
    "HOLDINGS",
    "ENTERPRISES",
    "INVESTMENTS",
    "FUND",
    "BANK",
    "SAVINGS",
    "MORTGAGE",
    "REALTY",
    "COMPANY",
    "LP",
    "LLP",
    "PLC",
    "PC",
    "PLLC",
    "P.A.",
    "P.C.",
    "TR",
    "DIST",
)

_COMPANY_RE = re.compile(
    r"(?<![A-Za-z0-9])(?:%s)(?![A-Za-z0-9])"
    % "|".join(re.escape(k) for k in sorted(COMPANY_KEYWORDS, key=len, reverse=True)),
    re.IGNORECASE,
)

PERSON_NAME_RE = re.compile(r"^[A-Z][a-z]*([ \-',.][A-Za-z][a-z]*)*$")
MIDDLE_NAME_RE = re.compile(r"^[A-Z][a-zA-Z\s\-',.]*$")

Owner = Union[PersonRecord, CompanyRecord]


def is_company_name(raw: str) -> bool:
    return bool(_COMPANY_RE.search(raw or ""))


def title_case_name(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    text = re.sub(r"\s+", " ", str(value)).strip()
    if not text:
        return None
    return re.sub(r"[A-Za-z]+", lambda m: m.group(0)[0].upper() + m.group(0)[1:].lower(), text)


def normalize_middle_name(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    text = re.sub(r"\s+", " ", str(value)).strip().upper()
    if not text:
        return None
    if MIDDLE_NAME_RE.match(text):
        return text
    stripped = re.sub(r"^[^A-Z]+", "", text)
    if stripped and MIDDLE_NAME_RE.match(stripped):
        return stripped
    return None


def _letters(value: str) -> str:
    return re.sub(r"[^a-z]", "", value.lower())


def lookup_prefix(value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    key = _letters(str(value))
    for member in PersonNamePrefix:
        if _letters(member.value) == key:
            return member.value
    return None


def lookup_suffix(value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    key = _letters(str(value))
    for member in PersonNameSuffix:
        if _letters(member.value) == key:
            return member.value
    return None


def _parse_person(raw: str, fallback_last: Optional[str] = None) -> Optional[Dict[str, Any]]:
    tokens = [t for t in re.split(r"\s+", raw.strip()) if t]
    if not tokens:
        return None
    suffix = None
    if len(tokens) > 2 and lookup_suffix(tokens[-1]):
        suffix = lookup_suffix(tokens.pop())
    if len(tokens) == 1:
        if fallback_last is None:
            return None
        return {
            "type": "person",
            "last_name": fallback_last,
            "first_name": tokens[0],
            "suffix_name": suffix,
        }
    return {
        "type": "person",
        "last_name": tokens[0],
        "first_name": tokens[1],
        "middle_name": " ".join(tokens[2:]) or None,
        "suffix_name": suffix,
    }


def classify_owner_name(raw: Optional[str]) -> List[Dict[str, Any]]:
    """Turn one raw owner line into owner dicts tagged ``person`` or ``company``.

    Person lines are read as ``LAST FIRST [MIDDLE]``. ``A & B`` lines hold
    two people; a second part with a single token shares the first part's
    last name.
    """

    text = re.sub(r"\s+", " ", raw or "").strip()
    if not text:
        return []
    if is_company_name(text):
        return [{"type": "company", "name": text}]
    out: List[Dict[str, Any]] = []
    last_name: Optional[str] = None
    for part in (p.strip() for p in text.split("&")):
        if not part:
            continue
        parsed = _parse_person(part, fallback_last=last_name)
        if parsed is None:
            logger.warning("Skipping unparseable owner name %r", part)
            continue
        last_name = parsed["last_name"]
        out.append(parsed)
    return out


def build_person(raw: Mapping[str, Any], provenance: Optional[Mapping[str, Any]] = None) -> Optional[PersonRecord]:
    first = title_case_name(raw.get("first_name"))
    last = title_case_name(raw.get("last_name"))
    if not first or not last or not PERSON_NAME_RE.match(first) or not PERSON_NAME_RE.match(last):
        logger.warning("Skipping invalid person name first=%r last=%r", first, last)
        return None
    provenance = provenance or {}
    return PersonRecord(
        request_identifier=raw.get("request_identifier") or provenance.get("request_identifier"),
        source_http_request=raw.get("source_http_request") or provenance.get("source_http_request"),
        birth_date=raw.get("birth_date"),
        first_name=first,
        last_name=last,
        middle_name=normalize_middle_name(raw.get("middle_name")),
        prefix_name=lookup_prefix(raw.get("prefix_name")),
        suffix_name=lookup_suffix(raw.get("suffix_name")),
        us_citizenship_status=raw.get("us_citizenship_status"),
        veteran_status=raw.get("veteran_status"),
    )


def build_company(raw: Mapping[str, Any], provenance: Optional[Mapping[str, Any]] = None) -> Optional[CompanyRecord]:
    name = re.sub(r"\s+", " ", str(raw.get("name") or "")).strip()
    if not name:
        logger.warning("Skipping company owner without a name")
        return None
    provenance = provenance or {}
    return CompanyRecord(
        request_identifier=raw.get("request_identifier") or provenance.get("request_identifier"),
        source_http_request=raw.get("source_http_request") or provenance.get("source_http_request"),
        name=name,
    )


def build_owner(raw: Mapping[str, Any], provenance: Optional[Mapping[str, Any]] = None) -> Optional[Owner]:
    kind = str(raw.get("type") or "").strip().lower()
    if kind == "company":
        return build_company(raw, provenance)
    if kind == "person":
        return build_person(raw, provenance)
    logger.warning("Skipping owner with unknown type %r", raw.get("type"))
    return None


def owner_key(owner: Owner) -> str:
    """Normalized identity used to dedupe owners within one run."""

    if isinstance(owner, CompanyRecord):
        return "company:" + re.sub(r"[^a-z0-9]+", " ", (owner.name or "").lower()).strip()
    parts = [owner.first_name, owner.middle_name, owner.last_name, owner.suffix_name]
    return "person:" + "|".join((p or "").lower() for p in parts)
