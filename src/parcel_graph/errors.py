from __future__ import annotations

import json
from typing import Any, Dict


class ParcelGraphError(Exception):
    """Base class for every error raised by parcel_graph."""


class EnumResolutionError(ParcelGraphError, ValueError):
    """A raw value could not be resolved against a closed vocabulary.

    The structured form is what downstream tooling consumes, so ``str()``
    returns its JSON encoding rather than a prose message.
    """

    def __init__(self, value: Any, entity: str, field: str) -> None:
        self.value = value
        self.entity = entity
        self.field = field
        super().__init__(json.dumps(self.to_dict()))

    @property
    def path(self) -> str:
        return f"{self.entity}.{self.field}"

    def to_dict(self) -> Dict[str, str]:
        return {
            "type": "error",
            "message": f"Unknown enum value {self.value}.",
            "path": self.path,
        }


class UnmappedClassificationError(EnumResolutionError):
    def __init__(self, value: Any) -> None:
        super().__init__(value, "Property", "property_usage_type")


class SeedFormatError(ParcelGraphError):
    def __init__(self, source: str, detail: str) -> None:
        self.source = source
        self.detail = detail
        super().__init__(f"Invalid seed document {source}: {detail}")


class UnknownCountyError(ParcelGraphError, KeyError):
    def __init__(self, name: str, kind: str = "adapter") -> None:
        self.name = name
        self.kind = kind
        super().__init__(f"No {kind} registered for {name!r}")

    def __str__(self) -> str:
        return self.args[0]


class ExtractionError(ParcelGraphError):
    """Source page is unusable for this run (wrong card, missing parcel id)."""

    def __init__(self, message: str, path: str) -> None:
        self.message = message
        self.path = path
        super().__init__(json.dumps(self.to_dict()))

    def to_dict(self) -> Dict[str, str]:
        return {"type": "error", "message": self.message, "path": self.path}
