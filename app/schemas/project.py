"""Project Schemas — Project-rules for create/update bodies and the response shape.

Invariants:
    - title: trimmed, non-empty, <= 255 chars
    - description: trimmed, non-empty
    - image_url: optional; when present a syntactically valid URL, stored as submitted
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.schemas.rules import optional_url, required_text


class ProjectWrite(BaseModel):
    """Body for POST /projects and PUT /projects/{id}."""
    model_config = ConfigDict(extra="ignore", validate_default=True)

    title: str = Field(None)
    description: str = Field(None)
    image_url: str | None = None

    @field_validator("title", mode="before")
    @classmethod
    def check_title(cls, v: object) -> str:
        return required_text(v, label="Title", max_length=255)

    @field_validator("description", mode="before")
    @classmethod
    def check_description(cls, v: object) -> str:
        return required_text(v, label="Description")

    @field_validator("image_url", mode="before")
    @classmethod
    def check_image_url(cls, v: object) -> str | None:
        return optional_url(v)


class ProjectResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    image_url: str | None
    created_at: datetime
