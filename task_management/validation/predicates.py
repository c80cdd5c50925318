"""Format checks for common form fields.

Every check returns a boolean and never raises; values that cannot be parsed
are reported as invalid.
"""

import logging
import re

from pydantic import AnyHttpUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic.networks import validate_email

logger = logging.getLogger(__name__)

PASSWORD_MIN_LENGTH = 8
PHONE_NUMBER_PATTERN = re.compile(r"\+?[\d\s-]+")

_http_url_adapter = TypeAdapter(AnyHttpUrl)


def is_valid_email(email: str | None) -> bool:
    """
    Check that ``email`` is a mail address written exactly as it parses.

    Inputs the parser would rewrite (surrounding whitespace, a display name,
    an upper-case domain) are rejected.
    """
    if not isinstance(email, str):
        return False
    try:
        _, address = validate_email(email)
    except ValueError as e:
        logger.debug("Rejected e-mail address %r: %s", email, e)
        return False
    return address == email


def is_strong_password(password: str | None) -> bool:
    """Check length, upper case, lower case, digit and symbol requirements."""
    if not password:
        return False
    return (
        len(password) >= PASSWORD_MIN_LENGTH
        and any(ch.isupper() for ch in password)
        and any(ch.islower() for ch in password)
        and any(ch.isdecimal() for ch in password)
        and any(not (ch.isalpha() or ch.isdecimal()) for ch in password)
    )


def is_valid_phone_number(phone_number: str | None) -> bool:
    """Check for an optional leading ``+`` followed by digits, spaces and hyphens."""
    if not phone_number:
        return False
    return PHONE_NUMBER_PATTERN.fullmatch(phone_number) is not None


def is_valid_url(url: str | None) -> bool:
    """Check that ``url`` is an absolute URL with an http or https scheme."""
    if not isinstance(url, str):
        return False
    try:
        parsed = _http_url_adapter.validate_python(url)
    except PydanticValidationError as e:
        logger.debug("Rejected URL %r: %s", url, e.errors()[0]["msg"])
        return False
    return parsed.scheme in ("http", "https")
