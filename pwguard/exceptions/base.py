import json
from datetime import datetime, timezone
from typing import Any, Dict


class PwguardException(Exception):
    """
    Root of every error Pwguard raises on purpose.

    Carries two messages: one a client may see, one meant for the log.
    Keyword arguments not consumed by the constructor end up in `extras`.

    Attributes:
        status_code: response status the error handler will use (500 unless overridden)
        user_message: text returned to the client
        technical_message: text written to the logs only
        extras: structured context such as field, reason or failed_rules
        timestamp: creation time, UTC
    """

    default_status_code = 500
    default_user_message = "An unexpected error occurred. Please try again later."
    default_technical_message = "An unexpected error occurred"

    def __init__(
        self,
        user_message: str = None,
        technical_message: str = None,
        status_code: int = None,
        **kwargs,
    ):
        super().__init__(user_message or self.default_user_message)

        self.status_code = status_code or self.default_status_code
        self.user_message = user_message or self.default_user_message
        self.technical_message = technical_message or self.default_technical_message
        self.extras = kwargs
        self.timestamp = datetime.now(tz=timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """
        Response body for the client.

        Only the request id, the offending field and the failed rule names
        are lifted out of the error context. Nothing else in extras is sent.
        """
        result = {
            "error": {
                "type": self.__class__.__name__,
                "message": self.user_message,
                "timestamp": self.timestamp.isoformat(),
            }
        }

        if "request_id" in self.extras:
            result["error"]["request_id"] = self.extras["request_id"]

        if getattr(self, "field", None):
            result["error"]["field"] = self.field

        if getattr(self, "failed_rules", None):
            result["error"]["failed_rules"] = [rule.value for rule in self.failed_rules]

        return result

    def to_log_dict(self) -> Dict[str, Any]:
        """Everything known about the error, for structured log lines."""
        return {
            "exception_type": self.__class__.__name__,
            "status_code": self.status_code,
            "user_message": self.user_message,
            "technical_message": self.technical_message,
            "timestamp": self.timestamp.isoformat(),
            "extras": self.extras,
        }

    def __str__(self) -> str:
        """
        Single pipe-separated line, e.g.

            [InvalidPasswordException] | status=400 | user_msg='...' | extras={...}
        """
        parts = [
            f"[{self.__class__.__name__}]",
            f"status={self.status_code}",
            f"user_msg='{self.user_message}'",
            f"tech_msg='{self.technical_message}'",
            f"timestamp={self.timestamp.isoformat()}",
        ]

        if self.extras:
            try:
                extras_str = json.dumps(self.extras, default=str, ensure_ascii=False)
                parts.append(f"extras={extras_str}")
            except (TypeError, ValueError):
                # extras holding objects json cannot encode
                parts.append(f"extras={self.extras!r}")

        return " | ".join(parts)
