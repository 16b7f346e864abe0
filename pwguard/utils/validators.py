from pwguard.exceptions.validation import InvalidArgumentException, InvalidPasswordException
from pwguard.models.enums import PasswordRule
from pwguard.models.password import PasswordCheckResult

MIN_LENGTH = 8

# Backtick included
SPECIAL_CHARACTERS = frozenset("!@#$%^&*()[]{}-_+=~`|:;\"'<>,./?")


def require_str(password, field: str = "password") -> None:
    if not isinstance(password, str):
        raise InvalidArgumentException(
            field=field,
            received_type=type(password).__name__,
        )


def has_digit(password: str) -> bool:
    return any("0" <= c <= "9" for c in password)


def has_special(password: str) -> bool:
    return any(c in SPECIAL_CHARACTERS for c in password)


def has_lower(password: str) -> bool:
    return any("a" <= c <= "z" for c in password)


def has_upper(password: str) -> bool:
    return any("A" <= c <= "Z" for c in password)


def min_length(password: str) -> bool:
    return len(password) >= MIN_LENGTH


# Evaluation order of check_password, and of failed_rules in its result
RULE_CHECKS = (
    (PasswordRule.MIN_LENGTH, min_length),
    (PasswordRule.DIGIT, has_digit),
    (PasswordRule.UPPERCASE, has_upper),
    (PasswordRule.LOWERCASE, has_lower),
    (PasswordRule.SPECIAL, has_special),
)


def check_password(password: str) -> PasswordCheckResult:
    """
    Run every rule against the password.

    Unlike is_valid_password this does not stop at the first failure, so the
    result lists every rule the password misses.

    Raises:
        InvalidArgumentException: password is not a str
    """
    require_str(password)
    return PasswordCheckResult(
        failed_rules=[rule for rule, check in RULE_CHECKS if not check(password)]
    )


def is_valid_password(password: str) -> bool:
    require_str(password)
    return all(check(password) for _, check in RULE_CHECKS)


def ensure_valid_password(password: str) -> str:
    """Return the password unchanged, or raise InvalidPasswordException."""
    result = check_password(password)
    if not result.is_valid:
        raise InvalidPasswordException(
            failed_rules=result.failed_rules,
            reason="; ".join(result.messages),
        )
    return password


validate_password = is_valid_password
