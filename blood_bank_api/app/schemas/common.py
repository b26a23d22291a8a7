"""
Shared schema building blocks.

Documents are stored and exchanged with camelCase keys (``bloodType``,
``createdAt``) while Python code uses snake_case attribute names; the
``CamelModel`` base maps between the two.  Identifiers are exposed as
``_id`` strings, matching what the frontend reads.
"""

from datetime import date, datetime, timezone
from typing import Annotated, Any, Dict

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def utcnow() -> datetime:
    """Current time as a naive UTC datetime (the form MongoDB returns)."""
    return _naive_utc(datetime.now(timezone.utc))


def _accept_plain_date(value: Any) -> Any:
    # ``2024-01-15`` and ``date`` objects mean midnight of that day.
    if isinstance(value, str) and len(value) == 10:
        value = date.fromisoformat(value)
    if isinstance(value, date) and not isinstance(value, datetime):
        return datetime(value.year, value.month, value.day)
    return value


def _naive_utc(value: datetime) -> datetime:
    # MongoDB keeps naive UTC with millisecond precision; match it so that
    # returned and re-read values compare equal.
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


Timestamp = Annotated[datetime, BeforeValidator(_accept_plain_date), AfterValidator(_naive_utc)]


class CamelModel(BaseModel):
    """Base model with camelCase aliases; accepts either spelling on input."""

    # Numbers sent for text fields (e.g. a numeric phone) are kept as text.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, coerce_numbers_to_str=True)

    def to_document(self, **kwargs: Any) -> Dict[str, Any]:
        """Dump the model as a MongoDB document (camelCase keys)."""
        return self.model_dump(by_alias=True, **kwargs)


class DocumentRead(CamelModel):
    """Base for records read back from a collection."""

    id: str = Field(..., alias="_id", description="Document identifier")

    @field_validator("id", mode="before")
    @classmethod
    def stringify_object_id(cls, v):
        return str(v)

    @classmethod
    def from_document(cls, document: Dict[str, Any]):
        """Build the schema from a raw MongoDB document."""
        return cls.model_validate(document)


class MessageEnvelope(BaseModel):
    """Envelope for deletions and for every error response."""

    success: bool
    message: str
