"""
Environment configuration for the REST client.

Load configuration from .env files and environment variables.

Example:
    >>> from rest_resource.core.env_config import load_from_env, connection_from_env
    >>>
    >>> config = load_from_env()
    >>> config = load_from_env(timeout=5)
    >>> conn = connection_from_env()
"""

from .loader import load_from_env, connection_from_env
from .settings import RestClientSettings

__all__ = [
    "load_from_env",
    "connection_from_env",
    "RestClientSettings",
]
