import uuid
from datetime import datetime, timezone

from pydantic import BaseModel as PydanticBaseModel
from pydantic import ConfigDict
from pydantic.alias_generators import to_camel
from sqlmodel import Field, SQLModel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return str(uuid.uuid4())


class BaseTable(SQLModel, table=False):
    """Abstract base model for database entities with common fields."""

    id: str = Field(
        default_factory=new_id,
        primary_key=True,
        description="Opaque identifier of the entity.",
    )
    created_at: datetime = Field(
        default_factory=utcnow,
        description="Timestamp when the entity was created.",
    )
    updated_at: datetime = Field(
        default_factory=utcnow,
        description="Timestamp when the entity was last updated.",
    )


class CamelModel(PydanticBaseModel):
    """API schema base: snake_case attributes, camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
