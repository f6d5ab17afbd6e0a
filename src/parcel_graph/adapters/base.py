from __future__ import annotations

from typing import Protocol

from parcel_graph.bundle import ParcelBundle


class CountyAdapter(Protocol):
    county: str

    def extract(self, html: str) -> ParcelBundle:
        raise NotImplementedError
