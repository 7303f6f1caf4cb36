import pytest
from pydantic import ValidationError

from user_registry.models import UserInput, UserRole, parse_role


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("ADMIN", UserRole.admin),
        ("admin", UserRole.admin),
        (" user ", UserRole.standard),
        ("Standard", UserRole.standard),
        (UserRole.admin, UserRole.admin),
    ],
)
def test_parse_role_accepts_known_spellings(raw, expected):
    assert parse_role(raw) is expected


def test_parse_role_rejects_unknown():
    with pytest.raises(ValueError, match="ADMIN, USER"):
        parse_role("superuser")


def test_user_input_parses_strings():
    data = UserInput(name="Nishad", email="Nishad@Gmail.com", role="user", active="true")
    assert data.role is UserRole.standard
    assert data.active is True
    assert data.email == "Nishad@Gmail.com"


def test_user_input_bad_role_reports_role_location():
    with pytest.raises(ValidationError) as exc_info:
        UserInput(name="x", email="x@y.com", role="owner", active="false")
    assert exc_info.value.errors()[0]["loc"] == ("role",)


def test_user_input_bad_active_flag():
    with pytest.raises(ValidationError) as exc_info:
        UserInput(name="x", email="x@y.com", role="ADMIN", active="maybe")
    assert exc_info.value.errors()[0]["loc"] == ("active",)


def test_user_role_values_match_display_text():
    assert UserRole.admin.value == "ADMIN"
    assert UserRole.standard.value == "USER"
