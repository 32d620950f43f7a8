"""One-call setup of logging and tracing from a Config."""

from loguru import logger

from .core.config import Config
from .core.instrumentation import configure_tracing
from .core.logging import configure_logging


def configure(config: Config | None = None) -> Config:
    """Apply logging and tracing settings.

    Args:
        config: Configuration to apply; loaded with Config.from_env_or_file()
            when omitted.

    Returns:
        The applied configuration.
    """
    config = config or Config.from_env_or_file()
    configure_logging(config.log_level)
    configure_tracing(config.tracing)
    logger.debug(f"metabind configured: atomic_bind={config.atomic_bind}, log_level={config.log_level}")
    return config
