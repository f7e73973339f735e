"""Field Rules — reusable before-validators shared by the request schemas.

Invariants:
    - Rules raise PydanticCustomError so the message reaches the client verbatim
    - Absent fields are passed in as None (schemas set validate_default=True)
"""

import re

from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

_URL_SCHEMES = frozenset({"http", "https", "ftp"})
_url_adapter = TypeAdapter(AnyUrl)
# "scheme:" not followed by a port number, e.g. mailto:, javascript:
_BARE_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*:(?!\d)")


def required_text(
    value: object,
    *,
    label: str,
    max_length: int | None = None,
) -> str:
    """Trim, require non-empty, optionally cap length."""
    if value is None:
        raise PydanticCustomError("required", f"{label} is required")
    if not isinstance(value, str):
        raise PydanticCustomError("string_type", f"{label} must be a string")
    value = value.strip()
    if not value:
        raise PydanticCustomError("required", f"{label} is required")
    if max_length is not None and len(value) > max_length:
        raise PydanticCustomError("too_long", f"{label} is too long")
    return value


def is_valid_url(value: str) -> bool:
    """http/https/ftp URL whose host has a top-level domain.

    The scheme is optional: "www.example.com/a.png" is read as http.
    """
    if "://" not in value:
        if value.startswith("/") or _BARE_SCHEME.match(value):
            return False
        value = f"http://{value}"
    try:
        url = _url_adapter.validate_python(value)
    except PydanticValidationError:
        return False
    host = url.host or ""
    return url.scheme in _URL_SCHEMES and "." in host.strip(".")


def optional_url(value: object, *, max_length: int = 255) -> str | None:
    """None stays None; anything else must be a valid URL, kept as submitted."""
    if value is None:
        return None
    if not isinstance(value, str) or not is_valid_url(value):
        raise PydanticCustomError("invalid_url", "Invalid image URL")
    if len(value) > max_length:
        raise PydanticCustomError("too_long", "Image URL is too long")
    return value
