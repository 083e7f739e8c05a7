"""Device connection configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from panelfx.utils.persistence import PydanticPersistence

DEFAULT_CONFIG_PATH = Path.home() / ".panelfx" / "config.json"


class DeviceConfig(BaseModel):
    """Where the panel controller lives and how to authenticate against it."""

    url: str = Field(
        default="http://localhost:16021/api/v1",
        description="Device API root, e.g. http://192.168.1.20:16021/api/v1",
    )
    token: str | None = Field(
        default=None,
        description="Auth token obtained by pairing with the device",
    )
    timeout: float = Field(
        default=5.0,
        gt=0,
        description="Per-request timeout in seconds",
    )

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Require an http(s) URL and drop any trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v.rstrip("/")

    @property
    def is_paired(self) -> bool:
        """Check if an auth token is configured."""
        return bool(self.token)

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "DeviceConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses ~/.panelfx/config.json.

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        return PydanticPersistence.load_json_or_default(path or DEFAULT_CONFIG_PATH, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        PydanticPersistence.save_json(self, path or DEFAULT_CONFIG_PATH)
