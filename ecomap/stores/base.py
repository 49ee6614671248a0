from typing import List, Protocol

from ecomap.domain.relationships import GraphSnapshot, RelationshipSet


class EcosystemStore(Protocol):
    """Protocol for ecosystem data sources."""

    def get_snapshot(self) -> GraphSnapshot:
        """Get entities, entity types, relationships and relationship types together."""
        ...

    def get_relationship_sets(self) -> List[RelationshipSet]:
        """Get all relationship sets."""
        ...

    def get_relationship_set(self, set_id: int) -> RelationshipSet:
        """Get a relationship set by its ID.

        Raises:
            RelationshipSetNotFoundError: If no set has the given ID
        """
        ...

    def update_relationship_set(self, relationship_set: RelationshipSet) -> None:
        """Replace a stored relationship set."""
        ...

    def save(self, filepath: str | None = None) -> None:
        """Save the store to disk."""
        ...
