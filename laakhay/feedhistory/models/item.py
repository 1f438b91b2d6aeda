"""Feed item data model."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Item(BaseModel):
    """Read-only view of an externally owned content item.

    ``visible`` is resolved by the content source from its own status model
    before the item reaches this library.
    """

    id: int
    permalink: str = Field(..., min_length=1)
    modified_at: datetime
    visible: bool = True

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @field_validator("modified_at")
    @classmethod
    def normalize_modified_at(cls, v: datetime) -> datetime:
        """Store modification times in UTC; naive values are taken as UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)

    @property
    def sort_key(self) -> tuple[datetime, int]:
        """Ascending-by-modification key, ties broken by id."""
        return (self.modified_at, self.id)
