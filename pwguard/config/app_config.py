import os
from dataclasses import dataclass
from pathlib import Path


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


@dataclass
class AppConfig:
    """Configuration for the Pwguard web service."""

    host: str = "127.0.0.1"
    port: int = 5000
    debug: bool = False

    log_level: str = "INFO"
    log_dir: Path | None = None
    console_output: bool = True
    app_name: str = "pwguard"
    testing: bool = False

    @classmethod
    def from_env(cls, prefix: str = "PWGUARD") -> "AppConfig":
        """
        Create configuration from environment variables.

        Call flask.cli.load_dotenv() first if values live in a .env file.

        Args:
            prefix: Environment variable prefix (default: PWGUARD)
        """
        log_dir = os.getenv(f"{prefix}_LOG_DIR")

        return cls(
            host=os.getenv(f"{prefix}_HOST", "127.0.0.1"),
            port=int(os.getenv(f"{prefix}_PORT", "5000")),
            debug=_env_flag(f"{prefix}_DEBUG"),
            log_level=os.getenv(f"{prefix}_LOG_LEVEL", "INFO").upper(),
            log_dir=Path(log_dir) if log_dir else None,
            console_output=_env_flag(f"{prefix}_LOG_CONSOLE", "true"),
        )

    @classmethod
    def for_testing(cls, **overrides) -> "AppConfig":
        """
        Create configuration for the test suite.

        Example:
            config = AppConfig.for_testing(log_dir=tmp_path)
        """
        defaults = {
            "log_level": "DEBUG",
            "console_output": False,
            "testing": True,
        }
        defaults.update(overrides)
        return cls(**defaults)

    def to_dict(self) -> dict:
        return {
            "host": self.host,
            "port": self.port,
            "debug": self.debug,
            "log_level": self.log_level,
            "log_dir": str(self.log_dir) if self.log_dir else None,
            "console_output": self.console_output,
            "app_name": self.app_name,
            "testing": self.testing,
        }
