"""Password rule tests.

Covers the individual predicates, the combined check and the failure
reporting of check_password / ensure_valid_password.
"""

import pytest

from pwguard.exceptions.validation import InvalidArgumentException, InvalidPasswordException
from pwguard.models.enums import PasswordRule
from pwguard.utils.validators import (
    SPECIAL_CHARACTERS,
    check_password,
    ensure_valid_password,
    has_digit,
    has_lower,
    has_special,
    has_upper,
    is_valid_password,
    min_length,
    validate_password,
)


@pytest.mark.parametrize(
    "password, expected",
    [
        ("", False),
        ("Abcdef1!", True),
        ("abcdefg1", False),
        ("ABCDEFG!", False),
        ("Ab1!", False),
        ("Abcdefg1", False),
        ("Abcdefg!", False),
        ("abcdef1!", False),
        ("ABCDEF1!", False),
        ("Abcde1!", False),
        ("P4ssw0rd`", True),
        ("Correct Horse 9 Battery?", True),
    ],
)
def test_is_valid_password(password, expected):
    """Reference inputs from the password policy."""
    assert is_valid_password(password) is expected


def test_is_valid_password_is_deterministic():
    """Repeated calls with the same input give the same answer."""
    for password in ("", "Abcdef1!", "abcdefg1"):
        results = {is_valid_password(password) for _ in range(5)}
        assert len(results) == 1


def test_min_length_boundary():
    assert min_length("a" * 8)
    assert not min_length("a" * 7)
    assert not min_length("")


def test_digit_is_ascii_only():
    """Non-ASCII decimal digits do not count."""
    assert has_digit("abc5")
    assert not has_digit("abc٣")  # Arabic-Indic three
    assert not has_digit("abc²")


def test_letters_are_latin_ascii_only():
    assert has_lower("Xz")
    assert has_upper("xZ")
    assert not has_lower("ÄÖÜß")
    assert not has_upper("éàüÉ")
    assert not has_upper("ΣΔ")


def test_special_character_set():
    for c in "!@#$%^&*()[]{}-_+=~`|:;\"'<>,./?":
        assert has_special(c), c
    assert not has_special("abc ABC 123")
    assert not has_special("€£§")


def test_special_set_contains_backtick_but_not_whitespace():
    assert "`" in SPECIAL_CHARACTERS
    assert " " not in SPECIAL_CHARACTERS
    assert "\\" not in SPECIAL_CHARACTERS


def test_adding_missing_class_flips_result():
    """Adding a character of the only missing class makes the password valid."""
    base = "abcdefg1"  # missing uppercase and special
    assert not is_valid_password(base)
    assert not is_valid_password(base + "A")
    assert is_valid_password(base + "A!")

    short = "Ab1!"
    assert not is_valid_password(short + "xyz")
    assert is_valid_password(short + "xyzw")


def test_check_password_lists_every_failure_in_order():
    result = check_password("")
    assert not result.is_valid
    assert result.failed_rules == [
        PasswordRule.MIN_LENGTH,
        PasswordRule.DIGIT,
        PasswordRule.UPPERCASE,
        PasswordRule.LOWERCASE,
        PasswordRule.SPECIAL,
    ]


def test_check_password_single_failure():
    result = check_password("ABCDEFG!")
    assert result.failed_rules == [PasswordRule.DIGIT, PasswordRule.LOWERCASE]
    assert result.failed(PasswordRule.DIGIT)
    assert not result.failed(PasswordRule.SPECIAL)
    assert result.to_dict() == {
        "valid": False,
        "failed_rules": ["digit", "lowercase"],
        "messages": [
            "Password must contain at least one digit",
            "Password must contain at least one lowercase letter",
        ],
    }


def test_check_password_valid():
    result = check_password("Abcdef1!")
    assert result.is_valid
    assert result.messages == []


def test_ensure_valid_password_returns_input():
    assert ensure_valid_password("Abcdef1!") == "Abcdef1!"


def test_ensure_valid_password_raises_with_rules():
    with pytest.raises(InvalidPasswordException) as exc_info:
        ensure_valid_password("Ab1!")

    exc = exc_info.value
    assert exc.failed_rules == [PasswordRule.MIN_LENGTH]
    assert exc.status_code == 400
    assert exc.field == "password"
    assert "Ab1!" not in str(exc)


@pytest.mark.parametrize("value", [None, 12345678, b"Abcdef1!", ["A", "b"]])
def test_non_string_input_fails_fast(value):
    """Anything that is not a str is a contract violation, not a False."""
    with pytest.raises(InvalidArgumentException) as exc_info:
        is_valid_password(value)
    assert exc_info.value.received_type == type(value).__name__

    with pytest.raises(InvalidArgumentException):
        check_password(value)


def test_validate_password_matches_is_valid_password():
    for password in ("", "Abcdef1!", "abcdefg1", "ABCDEFG!", "Ab1!"):
        assert validate_password(password) is is_valid_password(password)
