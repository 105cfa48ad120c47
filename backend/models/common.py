"""Base model and shared value types."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Model whose fields are stored and exchanged in camelCase.

    Python code uses snake_case attributes; documents and JSON bodies use the
    camelCase aliases. Either form is accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )

    def to_document(self, **kwargs: Any) -> dict[str, Any]:
        """Dump with camelCase keys for a Firestore write."""
        return self.model_dump(by_alias=True, **kwargs)


class Location(CamelModel):
    """A point on the map with an optional street address."""

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    address: str | None = None


class Attachment(BaseModel):
    """An uploaded file held in memory until it is written to storage."""

    filename: str = Field(..., min_length=1)
    content_type: str | None = None
    data: bytes
