import json
from pathlib import Path
from typing import Dict, List

from ecomap.domain.relationships import (
    GraphSnapshot,
    RelationshipSet,
    RelationshipSetNotFoundError,
)
from ecomap.stores.base import EcosystemStore


class LocalEcosystemStore(EcosystemStore):
    """Local ecosystem store that keeps the graph and relationship sets in a JSON file."""

    def __init__(self, filepath: str | Path | None = None) -> None:
        """Initialize LocalEcosystemStore.

        Args:
            filepath: Path to store file. If provided and exists, will auto-load.
                     If provided and doesn't exist, will save to this path when save() is called.
                     If not provided, creates empty store in memory only.
        """
        self._filepath = str(filepath) if filepath else None

        if self._filepath and Path(self._filepath).exists():
            with open(self._filepath, "r") as f:
                data = json.load(f)
            self._snapshot = GraphSnapshot(
                entities=data.get("entities", []),
                entity_types=data.get("entity_types", []),
                relationships=data.get("relationships", []),
                relationship_types=data.get("relationship_types", []),
            )
            self._relationship_sets = {
                set_data["id"]: RelationshipSet(**set_data)
                for set_data in data.get("relationship_sets", [])
            }
        else:
            self._snapshot = GraphSnapshot()
            self._relationship_sets = {}

    @classmethod
    def from_data(
        cls,
        snapshot: GraphSnapshot | None = None,
        relationship_sets: List[RelationshipSet] | None = None,
    ) -> "LocalEcosystemStore":
        """Create LocalEcosystemStore from provided data (useful for testing).

        Args:
            snapshot: Graph data
            relationship_sets: Relationship sets

        Returns:
            LocalEcosystemStore instance with provided data
        """
        instance = cls(filepath=None)
        instance._snapshot = snapshot or GraphSnapshot()
        instance._relationship_sets = {
            relationship_set.id: relationship_set for relationship_set in relationship_sets or []
        }
        return instance

    def get_snapshot(self) -> GraphSnapshot:
        """Get a copy of the graph data, so callers never see later updates."""
        return self._snapshot.model_copy(deep=True)

    def get_relationship_sets(self) -> List[RelationshipSet]:
        """Get all relationship sets ordered by ID."""
        return [self._relationship_sets[set_id] for set_id in sorted(self._relationship_sets)]

    def get_relationship_set(self, set_id: int) -> RelationshipSet:
        """Get a relationship set by its ID."""
        if set_id not in self._relationship_sets:
            raise RelationshipSetNotFoundError(set_id)
        return self._relationship_sets[set_id]

    def update_relationship_set(self, relationship_set: RelationshipSet) -> None:
        """Replace a stored relationship set."""
        if relationship_set.id not in self._relationship_sets:
            raise RelationshipSetNotFoundError(relationship_set.id)
        self._relationship_sets[relationship_set.id] = relationship_set

    def save(self, filepath: str | None = None) -> None:
        """Save the store to a JSON file.

        Args:
            filepath: Path to save to. If not provided, uses the filepath from initialization.
        """
        save_path = filepath or self._filepath
        if not save_path:
            raise ValueError(
                "No filepath provided and no default filepath set during initialization"
            )

        save_path = str(save_path)
        data: Dict[str, list] = {
            **self._snapshot.model_dump(mode="json"),
            "relationship_sets": [
                relationship_set.model_dump(mode="json")
                for relationship_set in self.get_relationship_sets()
            ],
        }
        with open(save_path, "w") as f:
            json.dump(data, f)
