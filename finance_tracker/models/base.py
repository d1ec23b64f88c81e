from datetime import datetime, timezone
from decimal import Decimal
from typing import Annotated, Any, Dict

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel


def timestamp() -> str:
    """Current UTC time as ISO-8601 with second precision."""
    return datetime.now(timezone.utc).replace(microsecond=0, tzinfo=None).isoformat()


# Decimal in Python, plain number on the wire and in the JSON files.
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CamelModel(BaseModel):
    """Snake-case attributes, camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Record(CamelModel):
    """A stored row: integer id plus timestamps."""

    id: int
    created_at: str = Field(default_factory=timestamp)
    updated_at: str = Field(default_factory=timestamp)

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")
