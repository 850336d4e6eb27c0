"""Declarative field rules shared by the request schemas.

Each rule is an ``Annotated`` type, so a schema declares its checks next to
its fields. A failing rule raises ``PydanticCustomError`` with one of the
types in ``RULE_MESSAGES``; pydantic collects every violation of a request
and ``first_violation_message`` picks the one reported to the client.
"""

import re
from collections.abc import Sequence
from typing import Annotated, Any

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BeforeValidator
from pydantic_core import PydanticCustomError

PASSWORD_MIN_LENGTH = 8

FALLBACK_MESSAGE = "Invalid inputs passed, please check your data."

# plain decimals only: no exponents, underscores, nan or infinity
_NUMERIC = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)", re.ASCII)

RULE_MESSAGES: dict[str, str] = {
    "missing": "'{field}' is required.",
    "required_text": "'{field}' must not be empty.",
    "numeric_text": "'{field}' must be numeric.",
    "invalid_email": "Please enter a valid email.",
    "finite_number": "'{field}' must be a finite number.",
    "greater_than_equal": "'{field}' is out of range.",
    "less_than_equal": "'{field}' is out of range.",
    "password_too_short": (
        f"Password has to be at least {PASSWORD_MIN_LENGTH} characters."
    ),
}


def _required_text(value: str) -> str:
    value = value.strip()
    if not value:
        raise PydanticCustomError("required_text", "Value must not be empty.")
    return value


def _coerce_number(value: Any) -> Any:
    # JSON clients send archive ids both as numbers and as strings
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


def _numeric_text(value: str) -> str:
    value = value.strip()
    if not _NUMERIC.fullmatch(value):
        raise PydanticCustomError("numeric_text", "Value must be numeric.")
    return value


def _normalized_email(value: str) -> str:
    value = value.strip().lower()
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        raise PydanticCustomError("invalid_email", RULE_MESSAGES["invalid_email"]) from None
    return value


def _password(value: str) -> str:
    if len(value) < PASSWORD_MIN_LENGTH:
        raise PydanticCustomError(
            "password_too_short", RULE_MESSAGES["password_too_short"]
        )
    return value


RequiredText = Annotated[str, AfterValidator(_required_text)]
NumericText = Annotated[str, BeforeValidator(_coerce_number), AfterValidator(_numeric_text)]
NormalizedEmail = Annotated[str, AfterValidator(_normalized_email)]
Password = Annotated[str, AfterValidator(_password)]


def first_violation_message(errors: Sequence[dict[str, Any]]) -> str:
    """Return the client-facing message for the first validation error."""
    if not errors:
        return FALLBACK_MESSAGE
    error = errors[0]
    template = RULE_MESSAGES.get(error.get("type", ""))
    if template is None:
        return FALLBACK_MESSAGE
    loc = error.get("loc") or ()
    field = str(loc[-1]) if loc else "value"
    return template.format(field=field)
