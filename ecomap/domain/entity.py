"""Entity domain models."""

from typing import Annotated

from pydantic import BaseModel, BeforeValidator


def name_before_validator(x: object) -> object:
    # Stored type names may be null
    return "Unknown" if x is None else x


class EntityType(BaseModel):
    """Represents a category of entity, e.g. "Person" or "Company".

    Attributes:
        id: Unique identifier
        name: Display name, also used to pick a default style
        description: Free-text description
        style: DOT attribute fragment such as 'shape=box, color="red"'
    """

    id: int
    name: Annotated[str, BeforeValidator(name_before_validator)] = "Unknown"
    description: str | None = None
    style: str | None = None


class Entity(BaseModel):
    """Represents a node of the ecosystem graph.

    Attributes:
        id: Unique identifier
        name: Display name used as the node label
        description: Free-text description
        location: Free-text location, e.g. a postal code
        type_id: ID of the EntityType, if any
        latitude: Geocoded latitude
        longitude: Geocoded longitude
    """

    id: int
    name: str | None = None
    description: str | None = None
    location: str | None = None
    type_id: int | None = None
    latitude: float | None = None
    longitude: float | None = None
