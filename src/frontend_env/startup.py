"""Explicit startup entry point for the front-end process.

The configuration is validated exactly once here and handed back to the
caller, who passes it on to whatever needs it. Nothing is stored at module
level.
"""

import logging

from frontend_env.config import EnvConfig, load_config
from frontend_env.exceptions import ConfigurationError
from frontend_env.models import ErrorReportingOptions

logger = logging.getLogger(__name__)


def bootstrap(env_file: str | None = None) -> EnvConfig:
    """Validate the environment before the process starts serving.

    Args:
        env_file: Optional dotenv file used as a fallback source.

    Returns:
        The validated configuration, owned by the caller.

    Raises:
        ConfigurationError: If validation fails. Each problem is logged
            before the error is re-raised.
    """
    try:
        config = load_config(env_file=env_file)
    except ConfigurationError as e:
        for name, problem in e.problems:
            logger.error("Invalid configuration: %s %s", name, problem)
        raise

    reporting = ErrorReportingOptions.from_config(config)
    logger.info(
        "Configuration loaded: api_base_url=%s error_reporting=%s upload_source_maps=%s",
        config.api_base_url,
        reporting.enabled,
        reporting.upload_source_maps,
    )
    return config
