"""Package initializer for `parcel_graph`."""

from .pipeline import ParcelRunResult, run_parcel

__all__ = ["ParcelRunResult", "run_parcel"]
