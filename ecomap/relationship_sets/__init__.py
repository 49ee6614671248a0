"""Relationship set module for filtering and curating saved graph views."""

from ecomap.relationship_sets.editor import RelationshipSetEditor
from ecomap.relationship_sets.filter import select_active_set, visible_subset

__all__ = [
    "RelationshipSetEditor",
    "select_active_set",
    "visible_subset",
]
