import pytest

from securevault.password_strength import (
    SPECIAL_CHARACTERS,
    calculate_password_strength,
    check_criteria,
    validate_password,
)


@pytest.mark.parametrize("char", sorted(SPECIAL_CHARACTERS))
def test_strength_every_listed_special_character_counts(char):
    assert check_criteria(char)["special"] is True


@pytest.mark.parametrize("char", ["-", "_", "+", "=", "~", "[", "]", "'", "/", " "])
def test_strength_unlisted_symbols_are_not_special(char):
    assert check_criteria(char)["special"] is False


def test_strength_non_ascii_letters_and_digits_do_not_count():
    # fullwidth digit, accented letters, Greek capital, emoji
    criteria = check_criteria("１éÉΩ😀")

    assert criteria == {
        "length": False,
        "uppercase": False,
        "lowercase": False,
        "number": False,
        "special": False,
    }


def test_strength_unicode_only_password_still_scores():
    strength = calculate_password_strength("пароль-пароль-пароль")

    # only the length criterion and both length bonuses apply
    assert strength.percentage == 40
    assert strength.label == "Medium"


def test_strength_unicode_only_password_validates_without_raising():
    result = validate_password("密码密码密码密码")

    assert result.valid is False
    assert len(result.errors) == 4
