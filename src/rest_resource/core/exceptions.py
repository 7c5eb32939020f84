"""
Иерархия исключений REST клиента.

Две независимые оси:
- ConnectionError и наследники - классифицированный HTTP статус.
  Никогда не выбрасываются неявно, только из Result.value.
- TransportError и наследники - ответа нет вообще (таймаут, TLS, сеть).
  Выбрасываются сразу.
"""

from typing import Any, Optional

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# BASE
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class RestClientException(Exception):
    """Базовое исключение REST клиента."""

    def __init__(self, message: str, **kwargs):
        self.message = message
        super().__init__(message)

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# STATUS CODE TAXONOMY
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class ConnectionError(RestClientException):
    """
    Базовая ошибка классифицированного ответа.

    Сама по себе означает неизвестный код ответа.

    Args:
        response: ClassifiedResponse (или ResponseEnvelope)
        message: Сообщение (по умолчанию строится из кода ответа)
    """

    def __init__(self, response: Any = None, message: Optional[str] = None):
        self.response = response
        self.status_code = getattr(response, 'status_code', None)
        self.url = getattr(response, 'url', None)

        if message is None:
            reason = getattr(response, 'reason', None) or ""
            message = f"Failed. Response code = {self.status_code}."
            if reason:
                message += f" Response message = {reason}."
            if self.url:
                message += f" (url: {self.url})"

        super().__init__(message)

class Redirection(ConnectionError):
    """301/302 - не фатально, клиент сам решает следовать ли Location."""

    @property
    def location(self) -> Optional[str]:
        headers = getattr(self.response, 'headers', None) or {}
        return headers.get('Location')

    def __init__(self, response: Any = None, message: Optional[str] = None):
        super().__init__(response, message)
        if message is None and self.location:
            self.message = f"{self.message} => {self.location}"
            self.args = (self.message,)

class ClientError(ConnectionError):
    """4xx ошибка клиента."""
    pass

class BadRequest(ClientError):
    """400 Bad Request."""
    pass

class UnauthorizedAccess(ClientError):
    """401 Unauthorized."""
    pass

class ForbiddenAccess(ClientError):
    """403 Forbidden."""
    pass

class ResourceNotFound(ClientError):
    """404 Not Found."""
    pass

class MethodNotAllowed(ClientError):
    """405 Method Not Allowed."""

    @property
    def allowed_methods(self):
        headers = getattr(self.response, 'headers', None) or {}
        allow = headers.get('Allow', '')
        return [m.strip().upper() for m in allow.split(',') if m.strip()]

class ResourceConflict(ClientError):
    """409 Conflict."""
    pass

class ResourceGone(ClientError):
    """410 Gone."""
    pass

class ResourceInvalid(ClientError):
    """422 Unprocessable Entity."""
    pass

class ServerError(ConnectionError):
    """5xx ошибка сервера."""
    pass

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# TRANSPORT FAILURES
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class TransportError(RestClientException):
    """
    Ошибка транспорта - ответа нет.

    Args:
        message: Сообщение об ошибке
        url: URL запроса
    """

    def __init__(self, message: str, url: Optional[str] = None):
        self.url = url
        full_message = f"{message}"
        if url:
            full_message += f" (url: {url})"
        super().__init__(full_message)

class NetworkError(TransportError):
    """
    Сетевая ошибка.

    Примеры:
    - Connection refused
    - Connection reset
    - DNS resolution failed
    """
    pass

class TimeoutError(TransportError):
    """
    Таймаут запроса.

    Args:
        message: Сообщение об ошибке
        url: URL запроса
        timeout: Значение таймаута (сек)
    """

    def __init__(self, message: str, url: Optional[str] = None, timeout: Optional[float] = None):
        self.timeout = timeout

        msg = message
        if timeout:
            msg += f" (timeout: {timeout}s)"

        super().__init__(msg, url)

class SSLError(TransportError):
    """TLS handshake / certificate failure."""
    pass

class ProxyError(TransportError):
    """
    Ошибка прокси.

    Args:
        message: Сообщение
        url: URL
        proxy: Адрес прокси
    """

    def __init__(self, message: str, url: Optional[str] = None, proxy: Optional[str] = None):
        self.proxy = proxy
        msg = message
        if proxy:
            msg += f" (proxy: {proxy})"
        super().__init__(msg, url)

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# СПЕЦИАЛЬНЫЕ
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class InvalidResponseError(RestClientException):
    """
    Невалидный ответ.

    Тело ответа не удалось декодировать кодеком формата.

    Args:
        message: Сообщение
        response: ClassifiedResponse
    """

    def __init__(self, message: str, response: Any = None):
        self.response = response
        self.status_code = getattr(response, 'status_code', None)
        super().__init__(message)

class ConfigurationError(RestClientException):
    """Ошибка конфигурации."""
    pass
