from __future__ import annotations

from parcel_graph.adapters.base import CountyAdapter
from parcel_graph.adapters.pasco import PascoAdapter
from parcel_graph.errors import UnknownCountyError


def _norm(name: str) -> str:
    return (name or "").strip().lower().replace("_", " ")


_REGISTRY: dict[str, CountyAdapter] = {
    _norm("Pasco"): PascoAdapter(),
}


def get_adapter(county: str) -> CountyAdapter:
    adapter = _REGISTRY.get(_norm(county))
    if adapter is None:
        raise UnknownCountyError(county)
    return adapter


def supported_counties() -> list[str]:
    # Human-friendly names.
    return sorted({a.county for a in _REGISTRY.values()})
