from enum import Enum


class PasswordRule(Enum):
    MIN_LENGTH = "min_length"
    DIGIT = "digit"
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    SPECIAL = "special"

    @property
    def message(self) -> str:
        return RULE_MESSAGES[self]


RULE_MESSAGES = {
    PasswordRule.MIN_LENGTH: "Password must be at least 8 characters long",
    PasswordRule.DIGIT: "Password must contain at least one digit",
    PasswordRule.UPPERCASE: "Password must contain at least one uppercase letter",
    PasswordRule.LOWERCASE: "Password must contain at least one lowercase letter",
    PasswordRule.SPECIAL: "Password must contain at least one special character",
}
