"""Tests for Mermaid chart generation."""

from ecomap.domain.entity import Entity
from ecomap.domain.relationships import Relationship
from ecomap.graph.mermaid import generate_mermaid_chart


def test_chart_nodes_and_links() -> None:
    entities = [Entity(id=1, name="Acme Corp"), Entity(id=2, name="Alice")]
    relationships = [Relationship(id=1, start_entity_id=1, end_entity_id=2)]

    chart = generate_mermaid_chart(relationships, entities)

    assert chart == (
        "graph TD\n  ciAcmeCorp((Acme Corp))\n  ciAlice((Alice))\n  ciAcmeCorp --- ciAlice\n"
    )


def test_most_connected_relationships_come_first(
    relationships: list[Relationship], entities: list[Entity]
) -> None:
    chart = generate_mermaid_chart(relationships, entities)
    links = [line.strip() for line in chart.splitlines() if "---" in line]

    assert links[0] == "ciAcmeCorp --- ciAlice"
    assert links[-1] == "ciGlobex --- ciSkunkworks"
    assert len(links) == len(relationships)


def test_nodes_are_declared_once(relationships: list[Relationship], entities: list[Entity]) -> None:
    chart = generate_mermaid_chart(relationships, entities)
    node_lines = [line for line in chart.splitlines() if "((" in line]

    assert len(node_lines) == len(set(node_lines)) == 5


def test_unnamed_or_unknown_endpoints_are_skipped() -> None:
    entities = [Entity(id=1, name="Acme"), Entity(id=2, name=None)]
    relationships = [
        Relationship(id=1, start_entity_id=1, end_entity_id=2),
        Relationship(id=2, start_entity_id=1, end_entity_id=3),
        Relationship(id=3, start_entity_id=None, end_entity_id=1),
    ]

    assert generate_mermaid_chart(relationships, entities) == "graph TD\n"
