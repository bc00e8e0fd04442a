import uuid

from pydantic import BaseModel
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel


def new_entity_id() -> str:
    """Return a new random identifier in canonical UUID string form."""
    return str(uuid.uuid4())


class Entity(BaseModel):
    """Base entity class with auto-generated UUID identifier."""

    id: str = PydanticField(
        default_factory=new_entity_id,
        description="Unique identifier for the entity",
    )


class EntityTable(SQLModel, table=False):
    """Base table class keyed by a string UUID primary key."""

    id: str = Field(
        primary_key=True,
        default_factory=new_entity_id,
        description="Unique identifier for the entity",
    )
