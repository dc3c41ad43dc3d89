"""Record model for form store."""

from datetime import datetime, timezone
from typing import Any, Dict, Optional
from uuid import uuid4

from pydantic import BaseModel, Field

RecordData = Dict[str, Any]


def format_timestamp(moment: Optional[datetime] = None) -> str:
    """Format a moment as a UTC ISO-8601 string with millisecond precision.

    Example: ``2024-01-01T12:00:00.000Z``
    """
    moment = (moment or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def generate_record_id() -> str:
    return str(uuid4())


class Record(BaseModel):
    """A stored form submission."""

    id: str = Field(default_factory=generate_record_id, description="Opaque unique identifier assigned by the store")
    created_at: str = Field(default_factory=lambda: format_timestamp(), alias="createdAt", description="ISO-8601 creation timestamp")
    data: RecordData = Field(default_factory=dict, description="Submitted values keyed by field id")

    model_config = {"populate_by_name": True, "from_attributes": True}

    def to_document(self) -> Dict[str, Any]:
        """Render the record with its wire names."""
        return self.model_dump(mode="json", by_alias=True)
