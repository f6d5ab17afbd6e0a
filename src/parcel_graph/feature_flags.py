from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = str(raw).strip().lower()
    if v in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if v in {"0", "false", "f", "no", "n", "off"}:
        return False
    return default


@dataclass(frozen=True)
class FeatureFlags:
    """Central feature flag registry.

    Env vars are simple booleans read once per process; tests reset the cache.
    """

    strict_enums: bool
    emit_error_file: bool
    dedupe_owners: bool
    link_sale_owners: bool

    @classmethod
    def from_env(cls) -> "FeatureFlags":
        return cls(
            strict_enums=_env_bool("PARCEL_GRAPH_STRICT_ENUMS", True),
            emit_error_file=_env_bool("PARCEL_GRAPH_EMIT_ERROR_FILE", False),
            dedupe_owners=_env_bool("PARCEL_GRAPH_DEDUPE_OWNERS", True),
            link_sale_owners=_env_bool("PARCEL_GRAPH_LINK_SALE_OWNERS", True),
        )


@lru_cache(maxsize=1)
def get_flags() -> FeatureFlags:
    return FeatureFlags.from_env()


def reset_flags_cache() -> None:
    """Test helper to force env re-read."""

    get_flags.cache_clear()
