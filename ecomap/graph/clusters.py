"""Splitting relationships into organizational clusters and ordinary edges."""

from loguru import logger
from pydantic import BaseModel

from ecomap.domain.entity import Entity
from ecomap.domain.relationships import Relationship, RelationshipType

# Type names containing one of these mark organizational membership.
# Matching is by substring so renamed or new types keep clustering.
INTERNAL_TYPE_MARKERS = ("Employee", "Division")


class Partition(BaseModel):
    """Relationships split into clusters and top-level edges.

    Attributes:
        internal: Host entity ID to the membership relationships it hosts
        external: Relationships rendered as edges
    """

    internal: dict[int, list[Relationship]] = {}
    external: list[Relationship] = []


def is_internal_type(type_name: str | None) -> bool:
    """Check whether a relationship type name denotes organizational membership."""
    if not type_name:
        return False
    return any(marker in type_name for marker in INTERNAL_TYPE_MARKERS)


def partition_relationships(
    relationships: list[Relationship],
    entities_by_id: dict[int, Entity],
    relationship_types_by_id: dict[int, RelationshipType],
) -> Partition:
    """Partition relationships into internal clusters and external edges.

    Relationships with a missing or unknown endpoint are skipped.

    Args:
        relationships: Relationships to partition, already filtered
        entities_by_id: Dictionary of entity ID to Entity
        relationship_types_by_id: Dictionary of relationship type ID to RelationshipType

    Returns:
        Partition with internal relationships grouped by start entity
    """
    partition = Partition()

    for rel in relationships:
        if rel.start_entity_id is None or rel.end_entity_id is None:
            logger.warning(f"Skipping relationship {rel.id} with missing start/end entity ID")
            continue

        missing = [
            entity_id
            for entity_id in (rel.start_entity_id, rel.end_entity_id)
            if entity_id not in entities_by_id
        ]
        if missing:
            logger.warning(f"Skipping relationship {rel.id} referencing unknown entities {missing}")
            continue

        rel_type = relationship_types_by_id.get(rel.type_id)
        if rel_type and is_internal_type(rel_type.name):
            partition.internal.setdefault(rel.start_entity_id, []).append(rel)
        else:
            partition.external.append(rel)

    return partition
