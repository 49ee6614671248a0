"""Resolution of DOT styles and edge weights for entity and relationship types."""

import math
from typing import Iterable

from loguru import logger

from ecomap.domain.entity import EntityType
from ecomap.domain.relationships import RelationshipType

DEFAULT_ENTITY_STYLE = 'shape=box, color="#d1d5db", style=filled'
DEFAULT_RELATIONSHIP_STYLE = 'color="black"'
DEFAULT_WEIGHT = 1.0

# Keyed by entity type display name
DEFAULT_ENTITY_TYPE_STYLES = {
    "Person": 'shape=circle, color="yellow", style=filled, fontsize=12',
    "Company": 'shape=box, color="lightblue", style=filled',
    "Government Organisation": 'shape=box, color="lightgreen", style=filled',
    "Government Organization": 'shape=box, color="lightgreen", style=filled',
    "University": 'shape=box, color="orange", style=filled',
    "Partnership": 'shape=ellipse, color="red", style=filled',
    "Collective": 'shape=ellipse, color="cyan", style=filled',
    "Association": 'shape=ellipse, color="lightgrey", style=filled',
    "Division": 'shape=ellipse, color="#e5e7eb", style=filled',
}


def _explicit_style(style: str | None) -> str | None:
    if style and style.strip():
        return style
    return None


def default_entity_type_style(type_name: str | None) -> str:
    """Get the default style for an entity type name, with fallback to a grey box."""
    return DEFAULT_ENTITY_TYPE_STYLES.get(type_name or "", DEFAULT_ENTITY_STYLE)


def resolve_entity_type_styles(entity_types: Iterable[EntityType]) -> dict[int, str]:
    """Map entity type IDs to DOT node styles.

    Args:
        entity_types: Entity types to resolve

    Returns:
        Dictionary of type ID to style, using the stored style when present
        and the default for the type name otherwise
    """
    return {
        entity_type.id: _explicit_style(entity_type.style)
        or default_entity_type_style(entity_type.name)
        for entity_type in entity_types
    }


def resolve_relationship_type_styles(
    relationship_types: Iterable[RelationshipType],
) -> dict[int, str]:
    """Map relationship type IDs to DOT edge styles.

    The weight is not part of the style, see parse_weight.
    """
    return {
        relationship_type.id: _explicit_style(relationship_type.style)
        or DEFAULT_RELATIONSHIP_STYLE
        for relationship_type in relationship_types
    }


def parse_weight(raw: str | float | None) -> float:
    """Parse a relationship type weight.

    Args:
        raw: Stored weight, usually numeric text such as "2.5"

    Returns:
        The weight when it is a finite number >= 0, otherwise 1.0
    """
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return DEFAULT_WEIGHT

    try:
        weight = float(raw)
    except (TypeError, ValueError):
        logger.warning(f"Invalid weight {raw!r}, using default weight {DEFAULT_WEIGHT}")
        return DEFAULT_WEIGHT

    if not math.isfinite(weight) or weight < 0:
        logger.warning(
            f"Weight {raw!r} is not a non-negative number, using default weight {DEFAULT_WEIGHT}"
        )
        return DEFAULT_WEIGHT

    return weight
