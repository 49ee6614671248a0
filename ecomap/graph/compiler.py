"""Compiling the ecosystem graph into Graphviz DOT text."""

from ecomap.domain.entity import Entity, EntityType
from ecomap.domain.relationships import GraphSnapshot, Relationship, RelationshipType
from ecomap.graph.clusters import Partition, partition_relationships
from ecomap.graph.layout import LayoutParameters, LayoutThresholds, layout_declarations
from ecomap.graph.styles import (
    parse_weight,
    resolve_entity_type_styles,
    resolve_relationship_type_styles,
)


def escape_label(name: str | None) -> str:
    """Escape a name for use inside a double-quoted DOT string."""
    if not name:
        return ""
    return name.replace("\\", "\\\\").replace('"', '\\"')


class GraphCompiler:
    """Compiles entities and relationships into an undirected DOT graph.

    Compilation is deterministic: the same collections always give the same text.
    """

    GRAPH_NAME = "ecosystem"
    INDENT = "\t"

    DEFAULT_NODE_ATTRIBUTES = 'shape=box, style=filled, color="#f3f4f6", fontname="Arial"'
    DEFAULT_EDGE_ATTRIBUTES = 'fontname="Arial", fontsize=10, color="#6b7280", weight=1.0'
    UNTYPED_NODE_STYLE = "shape=box"

    CLUSTER_NODE_ATTRIBUTES = "style=filled, color=white"
    CLUSTER_STYLE = "filled"
    CLUSTER_COLOR = "lightgrey"

    def __init__(
        self,
        thresholds: LayoutThresholds | None = None,
        layout_parameters: LayoutParameters | None = None,
    ) -> None:
        self.thresholds = thresholds or LayoutThresholds()
        self.layout_parameters = layout_parameters or LayoutParameters()

    def compile_snapshot(self, snapshot: GraphSnapshot) -> str:
        return self.compile(
            entities=snapshot.entities,
            entity_types=snapshot.entity_types,
            relationships=snapshot.relationships,
            relationship_types=snapshot.relationship_types,
        )

    def compile(
        self,
        entities: list[Entity],
        entity_types: list[EntityType],
        relationships: list[Relationship],
        relationship_types: list[RelationshipType],
    ) -> str:
        """Compile the four collections into DOT text.

        Args:
            entities: All entities, each rendered exactly once
            entity_types: Entity types referenced by the entities
            relationships: Relationships to render, already filtered
            relationship_types: Relationship types referenced by the relationships

        Returns:
            DOT source of the graph
        """
        entity_styles = resolve_entity_type_styles(entity_types)
        edge_styles = resolve_relationship_type_styles(relationship_types)
        entities_by_id = {entity.id: entity for entity in entities}
        relationship_types_by_id = {rel_type.id: rel_type for rel_type in relationship_types}

        partition = partition_relationships(
            relationships, entities_by_id, relationship_types_by_id
        )

        lines = [f"graph {self.GRAPH_NAME} {{"]
        lines.extend(
            self.INDENT + declaration
            for declaration in layout_declarations(
                len(entities), len(relationships), self.thresholds, self.layout_parameters
            )
        )
        lines.append(f"{self.INDENT}node [{self.DEFAULT_NODE_ATTRIBUTES}];")
        lines.append(f"{self.INDENT}edge [{self.DEFAULT_EDGE_ATTRIBUTES}];")

        cluster_members = self._add_clusters(lines, partition, entities_by_id, entity_styles)
        self._add_edges(lines, partition.external, relationship_types_by_id, edge_styles)

        for entity in entities:
            if entity.id in cluster_members:
                continue
            lines.append(f"{self.INDENT}{self._node_statement(entity, entity_styles)}")

        lines.append("}")
        return "\n".join(lines) + "\n"

    def _node_statement(self, entity: Entity, entity_styles: dict[int, str]) -> str:
        style = self.UNTYPED_NODE_STYLE
        if entity.type_id is not None and entity.type_id in entity_styles:
            style = entity_styles[entity.type_id]
        return f'{entity.id} [{style}, label="{escape_label(entity.name)}"];'

    def _add_clusters(
        self,
        lines: list[str],
        partition: Partition,
        entities_by_id: dict[int, Entity],
        entity_styles: dict[int, str],
    ) -> set[int]:
        """Add one subgraph per host entity and return the IDs declared inside them.

        An entity hosted by several clusters is declared in the first one only.
        """
        declared: set[int] = set()
        inner = self.INDENT * 2

        for host_id in sorted(partition.internal):
            host = entities_by_id[host_id]
            lines.append(f"{self.INDENT}subgraph cluster{host.id} {{")
            lines.append(f"{inner}node [{self.CLUSTER_NODE_ATTRIBUTES}];")
            lines.append(f"{inner}style={self.CLUSTER_STYLE};")
            lines.append(f"{inner}color={self.CLUSTER_COLOR};")
            lines.append(f'{inner}label="{escape_label(host.name)}";')

            for rel in partition.internal[host_id]:
                member_id = rel.end_entity_id
                if member_id in declared:
                    continue
                declared.add(member_id)
                member = entities_by_id[member_id]
                lines.append(f"{inner}{self._node_statement(member, entity_styles)}")

            lines.append(f"{self.INDENT}}}")

        return declared

    def _add_edges(
        self,
        lines: list[str],
        relationships: list[Relationship],
        relationship_types_by_id: dict[int, RelationshipType],
        edge_styles: dict[int, str],
    ) -> None:
        for rel in relationships:
            attributes = []
            weight = 1.0

            rel_type = relationship_types_by_id.get(rel.type_id)
            if rel_type:
                attributes.append(edge_styles[rel_type.id])
                weight = parse_weight(rel_type.weight)

            attributes.append(f"weight={weight}")
            edge = f"{rel.start_entity_id} -- {rel.end_entity_id}"
            lines.append(f"{self.INDENT}{edge} [{', '.join(attributes)}];")
