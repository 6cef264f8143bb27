"""Configuration management via environment variables."""

from pydantic import AnyUrl, Field, TypeAdapter, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from frontend_env.exceptions import ConfigurationError

_url_adapter = TypeAdapter(AnyUrl)


def is_absolute_url(value: str) -> bool:
    """Return True when value parses as a URL with both a scheme and a host."""
    try:
        url = _url_adapter.validate_python(value)
    except ValidationError:
        return False
    return bool(url.scheme and url.host)


class EnvConfig(BaseSettings):
    """Front-end configuration loaded from environment variables.

    Instances are frozen. Empty variables count as unset, so an empty
    required variable is reported as missing and an empty optional one
    loads as None.
    """

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    api_base_url: str = Field(alias="NEXT_PUBLIC_API_BASE_URL")
    sentry_dsn: str | None = Field(default=None, alias="NEXT_PUBLIC_SENTRY_DSN")
    # Used by the build-time source map upload
    sentry_auth_token: str | None = Field(default=None, alias="SENTRY_AUTH_TOKEN")
    sentry_org: str | None = Field(default=None, alias="SENTRY_ORG")
    sentry_project: str | None = Field(default=None, alias="SENTRY_PROJECT")

    @field_validator("api_base_url", "sentry_dsn")
    @classmethod
    def must_be_absolute_url(cls, v: str | None) -> str | None:
        """Reject values without a scheme and host."""
        if v is not None and not is_absolute_url(v):
            raise ValueError(f"must be an absolute URL, got {v!r}")
        return v

    @classmethod
    def env_names(cls) -> dict[str, str]:
        """Map both field names and aliases to environment variable names."""
        names = {}
        for field_name, field in cls.model_fields.items():
            env_name = field.alias or field_name
            names[field_name] = env_name
            names[env_name] = env_name
        return names


def load_config(env_file: str | None = None) -> EnvConfig:
    """Validate the current environment and return the configuration.

    Args:
        env_file: Optional dotenv file. Real environment variables take
            precedence over values read from it.

    Returns:
        The validated, immutable configuration.

    Raises:
        ConfigurationError: If any required variable is missing or any set
            variable has the wrong shape. Every failing variable is listed.
    """
    try:
        return EnvConfig(_env_file=env_file)
    except ValidationError as e:
        raise ConfigurationError.from_validation_error(e, EnvConfig.env_names()) from e
