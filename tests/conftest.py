from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from loguru import logger

from ecomap.api import create_app
from ecomap.domain.entity import Entity, EntityType
from ecomap.domain.relationships import (
    GraphSnapshot,
    Relationship,
    RelationshipSet,
    RelationshipType,
)
from ecomap.graph import GraphCompiler
from tests.fakes import FakeEcosystemStore


@pytest.fixture
def caplog(caplog: pytest.LogCaptureFixture):
    """Route loguru records into pytest's caplog."""
    handler_id = logger.add(
        caplog.handler,
        format="{message}",
        level=0,
        filter=lambda record: record["level"].no >= caplog.handler.level,
        enqueue=False,
    )
    yield caplog
    logger.remove(handler_id)


@pytest.fixture
def entity_types() -> list[EntityType]:
    return [
        EntityType(id=1, name="Company"),
        EntityType(id=2, name="Person"),
        EntityType(id=3, name="Lab", style='shape=hexagon, color="pink", style=filled'),
    ]


@pytest.fixture
def entities() -> list[Entity]:
    return [
        Entity(id=1, name="Acme Corp", type_id=1),
        Entity(id=2, name="Alice", type_id=2),
        Entity(id=3, name="Bob", type_id=2),
        Entity(id=4, name="Globex", type_id=1),
        Entity(id=5, name="Skunkworks", type_id=99),
    ]


@pytest.fixture
def relationship_types() -> list[RelationshipType]:
    return [
        RelationshipType(id=1, name="Employee"),
        RelationshipType(id=2, name="Partner", style='color="blue", style=dashed', weight="2.5"),
        RelationshipType(id=3, name="Supplier", weight="abc"),
    ]


@pytest.fixture
def relationships() -> list[Relationship]:
    return [
        Relationship(id=10, start_entity_id=1, end_entity_id=2, type_id=1),
        Relationship(id=11, start_entity_id=1, end_entity_id=3, type_id=1),
        Relationship(id=12, start_entity_id=1, end_entity_id=4, type_id=2),
        Relationship(id=13, start_entity_id=4, end_entity_id=5, type_id=3),
        Relationship(id=14, start_entity_id=2, end_entity_id=3),
    ]


@pytest.fixture
def snapshot(
    entities: list[Entity],
    entity_types: list[EntityType],
    relationships: list[Relationship],
    relationship_types: list[RelationshipType],
) -> GraphSnapshot:
    return GraphSnapshot(
        entities=entities,
        entity_types=entity_types,
        relationships=relationships,
        relationship_types=relationship_types,
    )


@pytest.fixture
def relationship_sets() -> list[RelationshipSet]:
    created = datetime(2024, 1, 1, tzinfo=timezone.utc)
    return [
        RelationshipSet(
            id=1,
            name="Partners only",
            belongs_to="user-1",
            whitelist=[12],
            created_at=created,
            updated_at=created,
        ),
        RelationshipSet(
            id=2,
            name="Hide suppliers",
            belongs_to="user-1",
            blacklist=[13],
            created_at=created,
            updated_at=created,
        ),
    ]


@pytest.fixture
def fake_store(
    snapshot: GraphSnapshot, relationship_sets: list[RelationshipSet]
) -> FakeEcosystemStore:
    return FakeEcosystemStore(snapshot, relationship_sets)


@pytest.fixture
def compiler() -> GraphCompiler:
    return GraphCompiler()


@pytest.fixture
def test_client(fake_store: FakeEcosystemStore, compiler: GraphCompiler) -> TestClient:
    """Create test client with a fake store."""
    app = create_app(store=fake_store, compiler=compiler)
    return TestClient(app)
