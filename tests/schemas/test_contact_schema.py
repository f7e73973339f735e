"""Contact-rules — name/message caps, email grammar and canonical form."""

import pytest
from pydantic import ValidationError

from app.schemas.contact import ContactCreate


def _valid(**overrides) -> dict:
    return {"name": "Ada", "email": "ada@example.com", "message": "Hi"} | overrides


def _error_fields(payload: dict) -> list[str]:
    with pytest.raises(ValidationError) as exc_info:
        ContactCreate.model_validate(payload)
    return [e["loc"][-1] for e in exc_info.value.errors()]


def test_valid_submission():
    body = ContactCreate.model_validate(_valid(name=" Ada ", message=" Hi "))
    assert body.name == "Ada"
    assert body.message == "Hi"
    assert body.email == "ada@example.com"


def test_email_is_trimmed_and_lower_cased():
    body = ContactCreate.model_validate(_valid(email="  Ada@Example.COM "))
    assert body.email == "ada@example.com"


@pytest.mark.parametrize("email", [
    None, "", "   ", "ada", "ada@", "@example.com", "ada@@example.com",
    "ada example@example.com", 123,
])
def test_invalid_email_rejected(email):
    payload = _valid(email=email)
    if email is None:
        payload.pop("email")
    assert _error_fields(payload) == ["email"]


def test_name_required_and_capped():
    assert _error_fields(_valid(name="  ")) == ["name"]
    assert _error_fields(_valid(name="n" * 256)) == ["name"]
    assert ContactCreate.model_validate(_valid(name="n" * 255)).name == "n" * 255


def test_message_required_and_capped():
    assert _error_fields(_valid(message="")) == ["message"]
    assert _error_fields(_valid(message="m" * 1001)) == ["message"]
    body = ContactCreate.model_validate(_valid(message="m" * 1000))
    assert len(body.message) == 1000


def test_message_length_measured_after_trim():
    body = ContactCreate.model_validate(_valid(message="  " + "m" * 1000 + "  "))
    assert len(body.message) == 1000


def test_error_messages():
    with pytest.raises(ValidationError) as exc_info:
        ContactCreate.model_validate({})
    assert [e["msg"] for e in exc_info.value.errors()] == [
        "Name is required", "Valid email is required", "Message is required",
    ]
