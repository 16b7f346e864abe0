from pwguard.exceptions.base import PwguardException
from pwguard.models.enums import PasswordRule


class ValidationException(PwguardException):
    """
    Base for input validation errors.

    Raised when a caller hands us something we cannot evaluate (missing
    field, wrong type) or a password that does not satisfy the policy.
    """

    default_status_code = 400
    default_user_message = "Invalid input provided"
    default_technical_message = "Validation failed"


class MissingFieldException(ValidationException):
    def __init__(
        self,
        field: str,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.field = field

        self.status_code = 400
        self.user_message = f"Required field '{field}' is missing"
        self.technical_message = f"Missing required field: {field}"

        self.extras["field"] = field


class InvalidArgumentException(ValidationException):
    """The value is not a character sequence at all (None, bytes, int...)."""

    def __init__(
        self,
        field: str,
        received_type: str,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.field = field
        self.received_type = received_type

        self.status_code = 400
        self.user_message = f"'{field}' must be a string"
        self.technical_message = (
            f"Invalid argument for '{field}': expected str, got {received_type}"
        )

        self.extras["field"] = field
        self.extras["received_type"] = received_type


class InvalidPasswordException(ValidationException):
    def __init__(
        self,
        failed_rules: list[PasswordRule] = None,
        reason: str = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.field = "password"
        self.failed_rules = list(failed_rules or [])

        self.status_code = 400
        self.user_message = "Password does not meet security requirements."

        if reason:
            self.user_message += f" {reason}"
            self.technical_message = f"Password validation failed: {reason}"
            self.extras["reason"] = reason
        else:
            self.technical_message = "Password validation failed"

        self.extras["field"] = self.field
        # Rule names only. The password itself never goes into extras
        self.extras["failed_rules"] = [rule.value for rule in self.failed_rules]


class PasswordMismatchException(ValidationException):
    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.field = "confirm_password"

        self.status_code = 400
        self.user_message = "Passwords do not match"
        self.technical_message = "Password and confirmation differ"

        self.extras["field"] = self.field


class InvalidRequestBodyException(ValidationException):
    """Body declared as JSON could not be parsed into an object."""

    def __init__(self, content_type: str = None, **kwargs):
        super().__init__(**kwargs)

        self.status_code = 400
        self.user_message = "Request body must be a JSON object"
        self.technical_message = f"Unparseable or non-object JSON body (content_type={content_type})"

        if content_type:
            self.extras["content_type"] = content_type
