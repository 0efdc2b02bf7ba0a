import pytest


def test_valid_signup(validator):
    assert validator.validate_signup("Alice", "alice@example.com") is None


@pytest.mark.parametrize(
    "name,email",
    [
        ("", "alice@example.com"),
        ("A" * 256, "alice@example.com"),
        ("Alice", "alice"),
        ("Alice", "alice@"),
    ],
)
def test_invalid_signup(validator, name, email):
    error = validator.validate_signup(name, email)

    assert error is not None
    assert error.code == "VALIDATION_ERROR"


def test_login_requires_email_and_min_length(validator):
    assert validator.validate_login("alice@example.com", "12345678") is None
    assert validator.validate_login("alice@example.com", "1234567").code == "VALIDATION_ERROR"
    assert validator.validate_login("alice", "12345678").code == "VALIDATION_ERROR"


def test_change_password_rules(validator):
    assert validator.validate_change_password("OldPass123", "NewPass123") is None

    same = validator.validate_change_password("OldPass123", "OldPass123")
    assert same.code == "VALIDATION_ERROR"
    assert "differ" in same.message

    too_long = validator.validate_change_password("OldPass123", "x" * 73)
    assert too_long.code == "VALIDATION_ERROR"
    assert too_long.message.startswith("new_password")
