from dataclasses import dataclass, field

from pwguard.models.enums import PasswordRule

PWD_REQUIREMENTS = (
    "Password must be at least 8 characters, contain at least one digit, one symbol, "
    "one uppercase and one lowercase character"
)


@dataclass(frozen=True)
class PasswordCheckResult:
    failed_rules: list[PasswordRule] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.failed_rules

    @property
    def messages(self) -> list[str]:
        return [rule.message for rule in self.failed_rules]

    def failed(self, rule: PasswordRule) -> bool:
        return rule in self.failed_rules

    def to_dict(self) -> dict:
        return {
            "valid": self.is_valid,
            "failed_rules": [rule.value for rule in self.failed_rules],
            "messages": self.messages,
        }
