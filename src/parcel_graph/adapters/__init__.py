"""County adapters: one parcel page in, one ``ParcelBundle`` out."""

from .base import CountyAdapter
from .registry import get_adapter, supported_counties

__all__ = ["CountyAdapter", "get_adapter", "supported_counties"]
