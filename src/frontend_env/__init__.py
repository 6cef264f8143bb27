"""Startup validation of the web front-end's environment configuration."""

from frontend_env.config import EnvConfig, load_config
from frontend_env.exceptions import ConfigurationError

__all__ = ["ConfigurationError", "EnvConfig", "load_config"]
