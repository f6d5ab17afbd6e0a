from __future__ import annotations

from typing import Any, Dict, List


def file_ref(entity_id: str) -> Dict[str, str]:
    return {"/": f"./{entity_id}.json"}


def relationship_id(from_id: str, to_id: str) -> str:
    return f"relationship_{from_id}_has_{to_id}"


class EntityGraph:
    """Entities and relationships for one parcel, held in memory.

    Identities are ``{kind}_{index}`` with a 1-based index per kind, handed
    out in insertion order; singleton kinds use the bare kind name.
    """

    def __init__(self) -> None:
        self.entities: Dict[str, Dict[str, Any]] = {}
        self.relationships: Dict[str, Dict[str, Any]] = {}
        self._kinds: Dict[str, str] = {}
        self._counters: Dict[str, int] = {}

    def add(self, kind: str, payload: Dict[str, Any], *, indexed: bool = True) -> str:
        if indexed:
            self._counters[kind] = self._counters.get(kind, 0) + 1
            entity_id = f"{kind}_{self._counters[kind]}"
        else:
            entity_id = kind
            if entity_id in self.entities:
                raise ValueError(f"singleton {kind!r} already added")
        self.entities[entity_id] = payload
        self._kinds[entity_id] = kind
        return entity_id

    def relate(self, from_id: str, to_id: str) -> str:
        for endpoint in (from_id, to_id):
            if endpoint not in self.entities:
                raise KeyError(endpoint)
        rel_id = relationship_id(from_id, to_id)
        self.relationships[rel_id] = {"from": file_ref(from_id), "to": file_ref(to_id)}
        return rel_id

    def kind_of(self, entity_id: str) -> str:
        return self._kinds[entity_id]

    def ids_of(self, kind: str) -> List[str]:
        return [eid for eid, k in self._kinds.items() if k == kind]

    def entity_counts(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for kind in self._kinds.values():
            counts[kind] = counts.get(kind, 0) + 1
        return counts

    def file_names(self) -> List[str]:
        return [f"{eid}.json" for eid in self.entities] + [
            f"{rid}.json" for rid in self.relationships
        ]

    def documents(self) -> Dict[str, Dict[str, Any]]:
        docs = {f"{eid}.json": payload for eid, payload in self.entities.items()}
        docs.update({f"{rid}.json": payload for rid, payload in self.relationships.items()})
        return docs
