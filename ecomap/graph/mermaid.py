"""Mermaid flowchart generation for the relationship graph."""

from collections import Counter

from ecomap.domain.entity import Entity
from ecomap.domain.relationships import Relationship


def _node_id(name: str) -> str:
    return "ci" + name.replace(" ", "")


def generate_mermaid_chart(relationships: list[Relationship], entities: list[Entity]) -> str:
    """Generate a Mermaid flowchart of relationships between named entities.

    Relationships are ordered most connected first: descending by the summed
    connection counts of their two endpoints, ties kept in input order.
    Relationships with an unknown or unnamed endpoint are skipped.

    Args:
        relationships: Relationships to draw
        entities: Entities used to look up endpoint names

    Returns:
        Mermaid source starting with "graph TD"
    """
    names = {entity.id: entity.name for entity in entities if entity.name}

    named_pairs = [
        (names[rel.start_entity_id], names[rel.end_entity_id])
        for rel in relationships
        if rel.start_entity_id in names and rel.end_entity_id in names
    ]

    connections = Counter()
    for start, end in named_pairs:
        connections[start] += 1
        connections[end] += 1

    named_pairs.sort(key=lambda pair: connections[pair[0]] + connections[pair[1]], reverse=True)

    node_names = list(dict.fromkeys(name for pair in named_pairs for name in pair))

    lines = ["graph TD"]
    lines.extend(f"  {_node_id(name)}(({name}))" for name in node_names)
    lines.extend(f"  {_node_id(start)} --- {_node_id(end)}" for start, end in named_pairs)
    return "\n".join(lines) + "\n"
