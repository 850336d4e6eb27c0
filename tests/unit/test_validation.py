"""Unit tests for the declarative request rules."""

import pytest
from pydantic import ValidationError

from trackmaster.application.schemas import DataEventCreate, DomainCreate, UserCredentials
from trackmaster.application.validation import FALLBACK_MESSAGE, first_violation_message


def _message(model, payload: dict) -> str:
    with pytest.raises(ValidationError) as exc_info:
        model.model_validate(payload)
    return first_violation_message(exc_info.value.errors())


def test_email_is_normalized():
    credentials = UserCredentials.model_validate(
        {"email": "  John.Doe@Example.COM ", "password": "abcdefgh"}
    )
    assert credentials.email == "john.doe@example.com"


def test_invalid_email_message():
    message = _message(UserCredentials, {"email": "not-an-email", "password": "abcdefgh"})
    assert message == "Please enter a valid email."


def test_short_password_message():
    message = _message(UserCredentials, {"email": "a@b.com", "password": "short"})
    assert message == "Password has to be at least 8 characters."


def test_blank_text_is_rejected():
    message = _message(
        DomainCreate, {"domainName": "   ", "url": "https://x.io/", "owner": "John"}
    )
    assert message == "'domainName' must not be empty."


def test_missing_field_message():
    assert _message(DataEventCreate, {}) == "'owner' is required."


def test_archive_must_be_numeric():
    message = _message(DataEventCreate, {"owner": "John", "archive": "abc"})
    assert message == "'archive' must be numeric."


def test_numeric_archive_is_kept_as_text():
    assert DataEventCreate.model_validate({"owner": "John", "archive": 3}).archive == "3"
    assert DataEventCreate.model_validate({"owner": "John", "archive": "4.5"}).archive == "4.5"


def test_unknown_error_type_falls_back():
    errors = [{"type": "int_parsing", "loc": ("body", "page"), "msg": "x"}]
    assert first_violation_message(errors) == FALLBACK_MESSAGE
    assert first_violation_message([]) == FALLBACK_MESSAGE


@pytest.mark.parametrize("archive", ["1_000", "nan", "Infinity", "1e5", "0x1f", "", "1.2.3"])
def test_archive_rejects_non_decimal_text(archive: str):
    message = _message(DataEventCreate, {"owner": "John", "archive": archive})
    assert message == "'archive' must be numeric."


@pytest.mark.parametrize("archive", ["-2", "+7", ".5", "10.", " 42 "])
def test_archive_accepts_plain_decimals(archive: str):
    data = DataEventCreate.model_validate({"owner": "John", "archive": archive})
    assert data.archive == archive.strip()


@pytest.mark.parametrize(
    ("latlng", "expected"),
    [
        ({"latitude": "NaN"}, "'latitude' must be a finite number."),
        ({"longitude": "inf"}, "'longitude' must be a finite number."),
        ({"latitude": 91}, "'latitude' is out of range."),
        ({"longitude": -180.5}, "'longitude' is out of range."),
    ],
)
def test_coordinates_must_be_finite_and_in_range(latlng: dict, expected: str):
    assert _message(DataEventCreate, {"owner": "John", "latlng": latlng}) == expected


def test_coordinate_bounds_are_inclusive():
    data = DataEventCreate.model_validate(
        {"owner": "John", "latlng": {"latitude": -90, "longitude": 180}}
    )
    assert (data.latlng.latitude, data.latlng.longitude) == (-90, 180)


def test_legacy_vpn_flag_is_ignored():
    data = DataEventCreate.model_validate({"owner": "John", "vpn": "yes"})
    assert "vpn" not in data.model_dump()
