"""API request and response models."""

from typing import Any, Dict

from pydantic import BaseModel, Field

from form_store.models.record import Record


class SubmissionResponse(BaseModel):
    """Response model for a created or updated submission."""

    success: bool = Field(default=True, description="Whether the operation succeeded")
    id: str = Field(..., description="Submission identifier")
    created_at: str = Field(..., alias="createdAt", description="ISO-8601 creation timestamp")
    data: Dict[str, Any] = Field(..., description="Submitted values keyed by field id")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_record(cls, record: Record) -> "SubmissionResponse":
        return cls(id=record.id, created_at=record.created_at, data=record.data)


class ValidationErrorResponse(BaseModel):
    """Response model for a submission rejected by validation."""

    success: bool = False
    errors: Dict[str, str] = Field(..., description="Error message keyed by field id")


class MessageResponse(BaseModel):
    """Response model carrying a plain message."""

    success: bool
    message: str
