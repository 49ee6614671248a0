"""Relationship domain models."""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, BeforeValidator

from ecomap.domain.entity import Entity, EntityType, name_before_validator


def weight_before_validator(x: object) -> object:
    # Numeric storage columns hand back numbers, the model keeps the raw text
    if isinstance(x, (int, float)) and not isinstance(x, bool):
        return str(x)
    return x


def id_list_before_validator(x: object) -> object:
    # Null membership lists mean "no members"
    return [] if x is None else x


class RelationshipType(BaseModel):
    """Represents a category of relationship, e.g. "Employee" or "Partner"."""

    id: int
    name: Annotated[str, BeforeValidator(name_before_validator)] = "Unknown"
    style: str | None = None  # DOT attribute fragment for the edge
    description: str | None = None
    weight: Annotated[str | None, BeforeValidator(weight_before_validator)] = "1.0"


class Relationship(BaseModel):
    """Represents a connection between two entities.

    Endpoints and type are referenced by ID and resolved at compile time.
    """

    id: int
    start_entity_id: int | None = None
    end_entity_id: int | None = None
    type_id: int | None = None
    description: str | None = None
    created_at: datetime | None = None


class RelationshipSet(BaseModel):
    """A saved view selecting which relationships are rendered.

    Attributes:
        id: Unique identifier
        name: Display name
        belongs_to: ID of the owning user or organization
        description: Free-text description
        whitelist: Relationship IDs to show exclusively, when non-empty
        blacklist: Relationship IDs to hide, used when the whitelist is empty
        created_at: Creation timestamp
        updated_at: Timestamp of the last change
    """

    id: int
    name: str
    belongs_to: str
    description: str | None = None
    whitelist: Annotated[list[int], BeforeValidator(id_list_before_validator)] = []
    blacklist: Annotated[list[int], BeforeValidator(id_list_before_validator)] = []
    created_at: datetime | None = None
    updated_at: datetime | None = None


class GraphSnapshot(BaseModel):
    """The four collections the compiler consumes, fetched together."""

    entities: list[Entity] = []
    entity_types: list[EntityType] = []
    relationships: list[Relationship] = []
    relationship_types: list[RelationshipType] = []


class MutationResult(BaseModel):
    """Outcome of a relationship set mutation."""

    success: bool
    error: str | None = None


class RelationshipSetNotFoundError(KeyError):
    """Raised when a relationship set ID does not exist."""

    def __init__(self, set_id: int) -> None:
        super().__init__(f"Relationship set {set_id} not found")
        self.set_id = set_id
