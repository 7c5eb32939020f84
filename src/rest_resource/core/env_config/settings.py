"""
Pydantic settings for environment configuration.
"""

from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..config import DEFAULT_USER_AGENT


class RestClientSettings(BaseSettings):
    """
    REST client configuration from environment variables.

    Reads from:
    1. Environment variables (REST_CLIENT_*)
    2. .env file
    3. Defaults

    Example .env file:
        REST_CLIENT_SITE=https://api.example.com
        REST_CLIENT_USER=deploy
        REST_CLIENT_PASSWORD=secret
        REST_CLIENT_TIMEOUT=30
        REST_CLIENT_SSL_VERIFY=true
        REST_CLIENT_LOG_LEVEL=DEBUG

    Usage:
        >>> settings = RestClientSettings()
        >>> settings.site
        'https://api.example.com'
    """

    model_config = SettingsConfigDict(
        env_prefix='REST_CLIENT_',
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore',
    )

    # Site and credentials
    site: str = Field(default="", description="Base URL of the REST service")
    user: Optional[str] = None
    password: Optional[str] = None

    # Transport
    timeout: Optional[float] = Field(default=None, gt=0, description="Request timeout in seconds")
    proxy: Optional[str] = None
    queued: bool = Field(default=False, description="Use the queued (concurrent) transport")
    user_agent: Optional[str] = Field(default=DEFAULT_USER_AGENT)

    # TLS
    ssl_verify: bool = Field(default=True)
    ssl_ca_file: Optional[str] = None
    ssl_cert_file: Optional[str] = None
    ssl_key_file: Optional[str] = None

    # Logging
    log_enabled: bool = Field(default=False)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="DEBUG")
    log_format: Literal["json", "text"] = Field(default="text")

    @field_validator('ssl_key_file')
    @classmethod
    def validate_key_file(cls, v: Optional[str], info) -> Optional[str]:
        """Validate that ssl_key_file comes with ssl_cert_file."""
        if v and not info.data.get('ssl_cert_file'):
            raise ValueError("ssl_key_file requires ssl_cert_file")
        return v

    @field_validator('proxy', 'user_agent', 'ssl_ca_file', 'ssl_cert_file')
    @classmethod
    def empty_as_none(cls, v: Optional[str]) -> Optional[str]:
        return v or None
