"""
Configuration loader from environment variables and .env files.

Main entry point for loading configuration.
"""

from typing import Any, Optional

from ..config import ConnectionConfig
from ..credentials import BasicCredentials
from ..exceptions import ConfigurationError
from ..logging.config import LoggingConfig
from .settings import RestClientSettings


def _read_settings(env_file: Optional[str]) -> RestClientSettings:
    if env_file is None:
        return RestClientSettings()
    return RestClientSettings(_env_file=env_file)


def _build_config(settings: RestClientSettings, overrides: dict) -> ConnectionConfig:
    logging_config = None
    if overrides.get('log_enabled', settings.log_enabled):
        logging_config = LoggingConfig.create(
            level=overrides.get('log_level', settings.log_level),
            format=overrides.get('log_format', settings.log_format),
        )

    return ConnectionConfig.create(
        timeout=overrides.get('timeout', settings.timeout),
        proxy=overrides.get('proxy', settings.proxy),
        verify_ssl=overrides.get('ssl_verify', settings.ssl_verify),
        ca_file=overrides.get('ssl_ca_file', settings.ssl_ca_file),
        cert_file=overrides.get('ssl_cert_file', settings.ssl_cert_file),
        key_file=overrides.get('ssl_key_file', settings.ssl_key_file),
        user_agent=overrides.get('user_agent', settings.user_agent),
        logging=logging_config,
    )


def load_from_env(env_file: Optional[str] = None, **overrides: Any) -> ConnectionConfig:
    """
    Load ConnectionConfig from environment variables.

    Priority (highest to lowest):
    1. **overrides - explicit parameters
    2. Environment variables (REST_CLIENT_*)
    3. .env file
    4. Defaults

    Args:
        env_file: Custom .env file path
        **overrides: Explicit overrides, named like the settings fields
            (timeout, proxy, ssl_verify, log_level, ...)

    Returns:
        ConnectionConfig instance

    Example:
        >>> config = load_from_env()
        >>> config = load_from_env(timeout=5, ssl_verify=False)
    """
    return _build_config(_read_settings(env_file), overrides)


def connection_from_env(env_file: Optional[str] = None, **overrides: Any):
    """
    Build a ready Connection from the environment.

    `site`, `user`, `password` and `queued` may also be overridden.

    Raises:
        ConfigurationError: REST_CLIENT_SITE is not set

    Example:
        >>> with connection_from_env() as conn:
        ...     conn.execute("GET", "/status")
    """
    from ..connection import Connection

    settings = _read_settings(env_file)
    site = overrides.pop('site', settings.site)
    if not site:
        raise ConfigurationError("REST_CLIENT_SITE is not set")

    user = overrides.pop('user', settings.user)
    password = overrides.pop('password', settings.password)
    queued = overrides.pop('queued', settings.queued)
    config = _build_config(settings, overrides)

    credentials = None
    if user is not None or password is not None:
        credentials = BasicCredentials(user, password)

    factory = Connection.queued if queued else Connection.sync
    return factory(site, config=config, credentials=credentials)
