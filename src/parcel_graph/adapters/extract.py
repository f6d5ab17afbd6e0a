"""Text helpers shared by county adapters.

Every helper takes raw page text and returns a typed scalar or None; none
of them raise on malformed input.
"""

import html
import re
from datetime import datetime
from urllib.parse import unquote


STREET_SUFFIXES = {
    "ST": "St",
    "STREET": "St",
    "AVE": "Ave",
    "AVENUE": "Ave",
    "BLVD": "Blvd",
    "BOULEVARD": "Blvd",
    "RD": "Rd",
    "ROAD": "Rd",
    "LN": "Ln",
    "LANE": "Ln",
    "DR": "Dr",
    "DRIVE": "Dr",
    "CT": "Ct",
    "COURT": "Ct",
    "PL": "Pl",
    "PLACE": "Pl",
    "TER": "Ter",
    "TERRACE": "Ter",
    "HWY": "Hwy",
    "HIGHWAY": "Hwy",
    "PKWY": "Pkwy",
    "PARKWAY": "Pkwy",
    "CIR": "Cir",
    "CIRCLE": "Cir",
    "WAY": "Way",
    "LOOP": "Loop",
}

DIRECTIONALS = {"N", "S", "E", "W", "NE", "NW", "SE", "SW"}


def norm_ws(value):
    if value is None:
        return ""
    return re.sub(r"\s+", " ", str(value)).strip()


def safe_text(value):
    return norm_ws(html.unescape(value or ""))


def parse_currency(text):
    if text is None:
        return None
    clean = re.sub(r"[$,\s]", "", str(text))
    if not clean:
        return None
    try:
        return float(clean)
    except ValueError:
        return None


def to_int(text):
    if text is None:
        return None
    digits = re.sub(r"[^0-9\-]", "", str(text))
    if digits in ("", "-"):
        return None
    try:
        return int(digits)
    except ValueError:
        return None


def to_float(text):
    if text is None:
        return None
    clean = re.sub(r"[^0-9.\-]", "", str(text))
    if clean in ("", ".", "-"):
        return None
    try:
        return float(clean)
    except ValueError:
        return None


def parse_month_year(text):
    """``"2/2023"`` -> ``"2023-02-01"``."""

    match = re.match(r"^\s*(\d{1,2})\s*/\s*(\d{4})\s*$", text or "")
    if not match:
        return None
    month, year = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12 or year < 1000:
        return None
    return f"{year:04d}-{month:02d}-01"


def parse_iso_date(text):
    value = norm_ws(text)
    if not value:
        return None
    for fmt in ("%m/%d/%Y", "%Y-%m-%d"):
        try:
            return datetime.strptime(value, fmt).date().isoformat()
        except ValueError:
            continue
    return None


def parse_book_page(text):
    value = norm_ws(text)
    if "/" not in value:
        return None, None
    book, page = (part.strip() for part in value.split("/", 1))
    return book or None, page or None


def instrument_from_url(url):
    if not url:
        return None
    match = re.search(r"[?&]instrument=([^&#]+)", url, re.IGNORECASE)
    return unquote(match.group(1)) if match else None


def parse_situs_address(raw):
    """Split ``"3310 WINDFIELD DRIVE, HOLIDAY, FL 34691"`` into address parts."""

    text = norm_ws(raw)
    if not text:
        return None
    text = re.sub(r"\s*,\s*", ", ", text)
    parts = [p.strip() for p in text.split(",") if p.strip()]
    if len(parts) < 3:
        return None
    street, city, state_zip = parts[0], parts[1].upper(), parts[2].split()
    state = state_zip[0].upper() if state_zip else None
    postal = re.sub(r"\D", "", state_zip[1]) if len(state_zip) > 1 else ""

    tokens = street.split()
    number = tokens.pop(0) if tokens and re.match(r"^\d", tokens[0]) else None
    pre_dir = None
    post_dir = None
    suffix = None
    if len(tokens) > 1 and tokens[0].upper() in DIRECTIONALS:
        pre_dir = tokens.pop(0).upper()
    if len(tokens) > 1 and tokens[-1].upper() in DIRECTIONALS:
        post_dir = tokens.pop().upper()
    if len(tokens) > 1 and tokens[-1].upper() in STREET_SUFFIXES:
        suffix = STREET_SUFFIXES[tokens.pop().upper()]

    return {
        "unnormalized_address": text,
        "street_number": number,
        "street_pre_directional_text": pre_dir,
        "street_name": " ".join(tokens) or None,
        "street_suffix_type": suffix,
        "street_post_directional_text": post_dir,
        "city_name": city or None,
        "state_code": state,
        "postal_code": postal[:5] or None,
    }
