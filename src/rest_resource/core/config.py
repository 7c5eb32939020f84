"""
Система конфигурации соединения.

Все конфиги immutable (frozen dataclasses). Изменение настроек соединения
означает замену конфига целиком, поэтому транспорт всегда может сравнить
старый и новый набор опций.
"""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Dict, Mapping, Optional, TYPE_CHECKING

from .exceptions import ConfigurationError

if TYPE_CHECKING:
    from .logging import LoggingConfig

DEFAULT_USER_AGENT = "rest-resource-core"

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# SSL CONFIG
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@dataclass(frozen=True)
class SSLConfig:
    """
    TLS options passed through to the transport.

    Args:
        verify: Проверять сертификат сервера
        ca_file: CA bundle (файл)
        ca_path: CA bundle (директория)
        cert_file: Клиентский сертификат
        key_file: Приватный ключ клиентского сертификата

    Examples:
        >>> SSLConfig(verify=False)  # Для тестов
        >>> SSLConfig(ca_file="/etc/ssl/internal-ca.pem")
        >>> SSLConfig(cert_file="client.pem", key_file="client.key")
    """
    verify: bool = True
    ca_file: Optional[str] = None
    ca_path: Optional[str] = None
    cert_file: Optional[str] = None
    key_file: Optional[str] = None

    def __post_init__(self):
        """Валидация."""
        if self.key_file and not self.cert_file:
            raise ConfigurationError("key_file requires cert_file")

    @property
    def client_cert(self):
        """Client certificate in the (cert, key) / cert form requests expects."""
        if not self.cert_file:
            return None
        if self.key_file:
            return (self.cert_file, self.key_file)
        return self.cert_file

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# CONNECTION CONFIG
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@dataclass(frozen=True)
class ConnectionConfig:
    """
    Главная конфигурация Connection.

    Args:
        timeout: Таймаут запроса по умолчанию (сек, None = без лимита)
        proxy: URL прокси (опционально)
        ssl: TLS опции
        headers: Дефолтные заголовки каждого запроса
        user_agent: Значение User-Agent (None = не отправлять)
        logging: Конфигурация логирования (None = без логов)

    Examples:
        >>> config = ConnectionConfig(timeout=10)
        >>> config = ConnectionConfig.create(timeout=30, verify_ssl=False)
    """
    timeout: Optional[float] = None
    proxy: Optional[str] = None
    ssl: SSLConfig = field(default_factory=SSLConfig)
    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    user_agent: Optional[str] = DEFAULT_USER_AGENT
    logging: Optional['LoggingConfig'] = None

    def __post_init__(self):
        """Валидация и заморозка mutable dict."""
        if self.timeout is not None and self.timeout <= 0:
            raise ConfigurationError("timeout must be positive")
        if isinstance(self.headers, dict):
            object.__setattr__(self, 'headers', MappingProxyType(dict(self.headers)))

    @classmethod
    def create(
        cls,
        timeout: Optional[float] = None,
        proxy: Optional[str] = None,
        verify_ssl: bool = True,
        ca_file: Optional[str] = None,
        cert_file: Optional[str] = None,
        key_file: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        user_agent: Optional[str] = DEFAULT_USER_AGENT,
        logging: Optional['LoggingConfig'] = None,
    ) -> 'ConnectionConfig':
        """
        Удобный конструктор конфигурации.

        Returns:
            ConnectionConfig instance

        Examples:
            >>> config = ConnectionConfig.create(timeout=60, proxy="http://proxy:3128")
        """
        return cls(
            timeout=timeout,
            proxy=proxy or None,
            ssl=SSLConfig(
                verify=verify_ssl,
                ca_file=ca_file,
                cert_file=cert_file,
                key_file=key_file,
            ),
            headers=headers or {},
            user_agent=user_agent,
            logging=logging,
        )

    def default_headers(self) -> Dict[str, str]:
        """Headers sent with every request, before caller headers."""
        headers = {}
        if self.user_agent:
            headers['User-Agent'] = self.user_agent
        headers.update(self.headers)
        return headers

    def with_timeout(self, timeout: Optional[float]) -> 'ConnectionConfig':
        """Создать новый конфиг с изменённым timeout."""
        return replace(self, timeout=timeout)

    def with_proxy(self, proxy: Optional[str]) -> 'ConnectionConfig':
        """Создать новый конфиг с изменённым прокси."""
        return replace(self, proxy=proxy or None)

    def with_ssl(self, ssl: SSLConfig) -> 'ConnectionConfig':
        """Создать новый конфиг с новыми TLS опциями."""
        return replace(self, ssl=ssl)

    def with_headers(self, headers: Dict[str, str]) -> 'ConnectionConfig':
        """
        Создать новый конфиг с дополнительными заголовками.

        Example:
            >>> new_config = config.with_headers({"X-API-Key": "secret"})
        """
        merged = dict(self.headers)
        merged.update(headers)
        return replace(self, headers=merged)
