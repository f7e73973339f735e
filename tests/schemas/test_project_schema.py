"""Project-rules — trimming, required fields, length caps, optional URL."""

import pytest
from pydantic import ValidationError

from app.schemas.project import ProjectWrite


def _errors(payload: dict) -> list[tuple[str, str]]:
    with pytest.raises(ValidationError) as exc_info:
        ProjectWrite.model_validate(payload)
    return [(e["loc"][-1], e["msg"]) for e in exc_info.value.errors()]


def test_valid_payload_is_trimmed():
    body = ProjectWrite.model_validate({"title": " T ", "description": " D "})
    assert body.title == "T"
    assert body.description == "D"
    assert body.image_url is None


def test_image_url_kept_as_submitted():
    url = "https://cdn.example.com/a/b.jpg?size=large"
    body = ProjectWrite.model_validate(
        {"title": "T", "description": "D", "image_url": url},
    )
    assert body.image_url == url


def test_explicit_null_image_url_is_absent():
    body = ProjectWrite.model_validate(
        {"title": "T", "description": "D", "image_url": None},
    )
    assert body.image_url is None


def test_missing_fields_report_required_messages():
    assert _errors({}) == [
        ("title", "Title is required"),
        ("description", "Description is required"),
    ]


def test_title_length_cap():
    assert _errors({"title": "x" * 256, "description": "D"}) == [
        ("title", "Title is too long"),
    ]


def test_title_at_cap_is_accepted():
    body = ProjectWrite.model_validate({"title": "x" * 255, "description": "D"})
    assert len(body.title) == 255


def test_description_has_no_length_cap():
    body = ProjectWrite.model_validate({"title": "T", "description": "d" * 5000})
    assert len(body.description) == 5000


def test_non_string_title_rejected():
    assert _errors({"title": 42, "description": "D"}) == [
        ("title", "Title must be a string"),
    ]


@pytest.mark.parametrize("url", [
    "", "not a url", "example", "mailto:a@example.com",
    "javascript:alert(1)", "http://localhost/img.png",
    "localhost/img.png", "//example.com/img.png", "gopher://example.com/x",
])
def test_invalid_image_urls(url):
    assert _errors({"title": "T", "description": "D", "image_url": url}) == [
        ("image_url", "Invalid image URL"),
    ]


@pytest.mark.parametrize("url", [
    "http://example.com",
    "https://i.ibb.co.com/KV3VXfg/redd-f-5-U-28ojjgms-unsplash.jpg",
    "ftp://files.example.org/img.png",
    "www.example.com/a.png",
    "example.com",
    "cdn.example.com:8080/img.png",
])
def test_valid_image_urls(url):
    body = ProjectWrite.model_validate(
        {"title": "T", "description": "D", "image_url": url},
    )
    assert body.image_url == url


def test_overlong_image_url_rejected():
    url = "https://example.com/" + "a" * 250
    assert _errors({"title": "T", "description": "D", "image_url": url}) == [
        ("image_url", "Image URL is too long"),
    ]


def test_unknown_keys_ignored():
    body = ProjectWrite.model_validate(
        {"title": "T", "description": "D", "id": 9, "created_at": "x"},
    )
    assert not hasattr(body, "created_at")
