"""Selecting the relationships visible through a relationship set."""

from typing import Iterable

from loguru import logger

from ecomap.domain.relationships import Relationship, RelationshipSet


def visible_subset(
    relationships: list[Relationship], active_set: RelationshipSet | None
) -> list[Relationship]:
    """Filter relationships through the active relationship set.

    A non-empty whitelist selects exactly its relationships and takes precedence
    over the blacklist. With an empty whitelist every relationship except the
    blacklisted ones is visible. IDs that match no relationship are ignored.

    Args:
        relationships: All relationships
        active_set: The active set, or None to show everything

    Returns:
        The visible relationships, in their original order
    """
    if active_set is None:
        return list(relationships)

    if active_set.whitelist:
        whitelist = set(active_set.whitelist)
        return [rel for rel in relationships if rel.id in whitelist]

    blacklist = set(active_set.blacklist)
    return [rel for rel in relationships if rel.id not in blacklist]


def select_active_set(
    relationship_sets: Iterable[RelationshipSet], set_id: int | None
) -> RelationshipSet | None:
    """Find the active relationship set.

    An unknown set_id selects no set, so every relationship stays visible.
    """
    if set_id is None:
        return None

    for relationship_set in relationship_sets:
        if relationship_set.id == set_id:
            return relationship_set

    logger.warning(f"Relationship set {set_id} not found, showing all relationships")
    return None
