"""Pydantic models derived from the validated configuration."""

from pydantic import BaseModel, ConfigDict

from frontend_env.config import EnvConfig


class ErrorReportingOptions(BaseModel):
    """What the error-reporting integration needs to know at startup."""

    model_config = ConfigDict(frozen=True)

    enabled: bool
    dsn: str | None = None
    org: str | None = None
    project: str | None = None
    auth_token: str | None = None
    upload_source_maps: bool = False

    @classmethod
    def from_config(cls, config: EnvConfig) -> "ErrorReportingOptions":
        """Build options from a validated configuration.

        Reporting is enabled when a DSN is set. Source maps are uploaded only
        when the auth token, org and project are all present.
        """
        upload = all(
            (config.sentry_auth_token, config.sentry_org, config.sentry_project)
        )
        return cls(
            enabled=config.sentry_dsn is not None,
            dsn=config.sentry_dsn,
            org=config.sentry_org,
            project=config.sentry_project,
            auth_token=config.sentry_auth_token,
            upload_source_maps=upload,
        )
