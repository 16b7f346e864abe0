import logging

from pwguard.exceptions.validation import (
    MissingFieldException,
    PasswordMismatchException,
    InvalidPasswordException,
)
from pwguard.models.enums import PasswordRule
from pwguard.models.password import PasswordCheckResult, PWD_REQUIREMENTS
from pwguard.utils.validators import check_password, require_str, MIN_LENGTH, SPECIAL_CHARACTERS

logger = logging.getLogger(__name__)


class PasswordService:
    """Password policy checks for signup and password-change flows."""

    def check(self, password: str) -> PasswordCheckResult:
        result = check_password(password)

        if result.is_valid:
            logger.debug("Password satisfies all rules")
        else:
            # Never log the password itself
            logger.info(
                f"Password rejected, failed rules: {[r.value for r in result.failed_rules]}"
            )
        return result

    def ensure_valid(self, password: str) -> None:
        result = self.check(password)
        if not result.is_valid:
            raise InvalidPasswordException(
                failed_rules=result.failed_rules,
                reason="; ".join(result.messages),
            )

    def validate_new_password(
        self, password: str | None, confirm_password: str | None
    ) -> PasswordCheckResult:
        if password is None:
            raise MissingFieldException(field="password")
        if confirm_password is None:
            raise MissingFieldException(field="confirm_password")

        require_str(password, field="password")
        require_str(confirm_password, field="confirm_password")

        if password != confirm_password:
            logger.info("Password confirmation does not match")
            raise PasswordMismatchException()

        self.ensure_valid(password)
        return PasswordCheckResult()

    def requirements(self) -> dict:
        return {
            "min_length": MIN_LENGTH,
            "require_digit": True,
            "require_uppercase": True,
            "require_lowercase": True,
            "require_special": True,
            "special_characters": "".join(sorted(SPECIAL_CHARACTERS)),
            "rules": {rule.value: rule.message for rule in PasswordRule},
            "description": PWD_REQUIREMENTS,
        }
