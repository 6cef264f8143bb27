"""Unit tests for ErrorReportingOptions."""

import pytest
from pydantic import ValidationError

from frontend_env.config import load_config
from frontend_env.models import ErrorReportingOptions


class TestErrorReportingOptions:
    def test_disabled_without_dsn(self, monkeypatch):
        monkeypatch.setenv("NEXT_PUBLIC_API_BASE_URL", "https://api.example.com")

        options = ErrorReportingOptions.from_config(load_config())

        assert options.enabled is False
        assert options.dsn is None
        assert options.upload_source_maps is False

    def test_enabled_with_full_config(self, full_env):
        options = ErrorReportingOptions.from_config(load_config())

        assert options.enabled is True
        assert options.dsn == "https://dsn.example.com/1"
        assert options.org == "org"
        assert options.project == "proj"
        assert options.auth_token == "tok"
        assert options.upload_source_maps is True

    @pytest.mark.parametrize("missing", ["SENTRY_AUTH_TOKEN", "SENTRY_ORG", "SENTRY_PROJECT"])
    def test_source_maps_need_token_org_and_project(self, full_env, monkeypatch, missing):
        monkeypatch.delenv(missing)

        options = ErrorReportingOptions.from_config(load_config())

        assert options.enabled is True
        assert options.upload_source_maps is False

    def test_options_are_frozen(self, full_env):
        options = ErrorReportingOptions.from_config(load_config())

        with pytest.raises(ValidationError):
            options.enabled = False
