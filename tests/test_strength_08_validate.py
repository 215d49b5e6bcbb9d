import pytest

from securevault.password_strength import ValidationResult, validate_password


def test_validate_requires_a_password():
    result = validate_password("")

    assert result == ValidationResult(valid=False, errors=("Password is required",))


def test_validate_accepts_compliant_password():
    result = validate_password("Abcdefg1!")

    assert result.valid is True
    assert result.errors == ()


def test_validate_collects_every_failure_in_order():
    result = validate_password("abc")

    assert result.valid is False
    assert result.errors == (
        "Password must be at least 8 characters",
        "Password must contain at least one uppercase letter",
        "Password must contain at least one number",
        "Password must contain at least one special character",
    )


@pytest.mark.parametrize(
    "password,missing",
    [
        ("Abcdef1!", None),
        ("Abcde1!", "Password must be at least 8 characters"),
        ("abcdefg1!", "Password must contain at least one uppercase letter"),
        ("ABCDEFG1!", "Password must contain at least one lowercase letter"),
        ("Abcdefgh!", "Password must contain at least one number"),
        ("Abcdefgh1", "Password must contain at least one special character"),
    ],
)
def test_validate_reports_single_missing_requirement(password, missing):
    result = validate_password(password)

    if missing is None:
        assert result.valid
    else:
        assert result.errors == (missing,)


def test_validate_result_serialises_errors_as_list():
    assert validate_password("").to_dict() == {"valid": False, "errors": ["Password is required"]}
