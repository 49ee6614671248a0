"""Graph-wide layout parameters chosen from the size of the graph."""

from pydantic import BaseModel

from ecomap.config import settings


class LayoutThresholds(BaseModel):
    """A graph is large when either count exceeds its threshold."""

    max_entities: int = 50
    max_relationships: int = 100

    @classmethod
    def from_settings(cls) -> "LayoutThresholds":
        return cls(
            max_entities=settings.large_graph_entity_threshold,
            max_relationships=settings.large_graph_relationship_threshold,
        )


class LayoutParameters(BaseModel):
    """DOT graph attributes emitted in the layout block."""

    splines: str = "true"
    overlap: str = "false"
    nodesep: float = 0.6
    bgcolor: str = '"transparent"'
    pad: float = 0.5
    small_ranksep: float = 0.8
    large_ranksep: float = 2.0
    large_spring_constant: float = 1.0  # K, used by force-directed engines


def is_large_graph(
    entity_count: int, relationship_count: int, thresholds: LayoutThresholds | None = None
) -> bool:
    thresholds = thresholds or LayoutThresholds()
    return (
        entity_count > thresholds.max_entities
        or relationship_count > thresholds.max_relationships
    )


def layout_declarations(
    entity_count: int,
    relationship_count: int,
    thresholds: LayoutThresholds | None = None,
    parameters: LayoutParameters | None = None,
) -> list[str]:
    """Build the layout declarations for a graph.

    Args:
        entity_count: Number of entities in the graph
        relationship_count: Number of relationships in the graph
        thresholds: Size thresholds, defaults to 50 entities / 100 relationships
        parameters: Attribute values to emit

    Returns:
        List of DOT statements such as "nodesep=0.6;"
    """
    parameters = parameters or LayoutParameters()
    declarations = [
        f"splines={parameters.splines};",
        f"overlap={parameters.overlap};",
        f"nodesep={parameters.nodesep};",
        f"bgcolor={parameters.bgcolor};",
        f"pad={parameters.pad};",
    ]

    if is_large_graph(entity_count, relationship_count, thresholds):
        declarations.append(f"ranksep={parameters.large_ranksep};")
        declarations.append(f"K={parameters.large_spring_constant};")
    else:
        declarations.append(f"ranksep={parameters.small_ranksep};")

    return declarations
