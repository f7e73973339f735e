"""Contact Schemas — Contact-rules for form submissions and response shapes.

Invariants:
    - name: trimmed, non-empty, <= 255 chars
    - email: trimmed, syntactically valid, stored in canonical form
    - message: trimmed, non-empty, <= 1000 chars

Design Decisions:
    - email-validator for address grammar (same library behind pydantic's EmailStr);
      deliverability (DNS) checks disabled: no network IO at the request boundary
"""

from datetime import datetime

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from app.core.normalize_email import normalize_email
from app.schemas.rules import required_text

CONTACT_RECEIVED_MESSAGE = "Contact form submitted successfully"


class ContactCreate(BaseModel):
    """Body for POST /contact."""
    model_config = ConfigDict(extra="ignore", validate_default=True)

    name: str = Field(None)
    email: str = Field(None)
    message: str = Field(None)

    @field_validator("name", mode="before")
    @classmethod
    def check_name(cls, v: object) -> str:
        return required_text(v, label="Name", max_length=255)

    @field_validator("email", mode="before")
    @classmethod
    def check_email(cls, v: object) -> str:
        if not isinstance(v, str):
            raise PydanticCustomError("invalid_email", "Valid email is required")
        try:
            info = validate_email(v.strip(), check_deliverability=False)
        except EmailNotValidError:
            raise PydanticCustomError("invalid_email", "Valid email is required")
        return normalize_email(info.normalized)

    @field_validator("message", mode="before")
    @classmethod
    def check_message(cls, v: object) -> str:
        return required_text(v, label="Message", max_length=1000)


class ContactResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    message: str
    created_at: datetime


class ContactReceipt(BaseModel):
    id: int
    message: str = CONTACT_RECEIVED_MESSAGE
