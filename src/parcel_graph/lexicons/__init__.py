from __future__ import annotations

from functools import lru_cache
from typing import Callable, Dict

from ..errors import UnknownCountyError
from ..lexicon import Lexicon
from .florida_dor import build_lexicon as build_florida_dor


def _norm(name: str) -> str:
    return (name or "").strip().lower().replace(" ", "_").replace("-", "_")


# Counties that print plain DOR codes share the statewide table.
LEXICONS: Dict[str, Callable[[], Lexicon]] = {
    "florida_dor": build_florida_dor,
    "pasco": build_florida_dor,
}


@lru_cache(maxsize=None)
def get_lexicon(name: str) -> Lexicon:
    builder = LEXICONS.get(_norm(name))
    if builder is None:
        raise UnknownCountyError(name, kind="lexicon")
    return builder()


def available_lexicons() -> list[str]:
    return sorted(LEXICONS)
