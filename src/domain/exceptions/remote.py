"""Config backend-related domain exceptions."""

from .base import DomainException


class ConfigBackendException(DomainException):
    """Base for failures talking to the config backend."""

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int | None = None,
        attempts: int = 1,
    ):
        super().__init__(
            message=message,
            code=code,
        )
        self.status_code = status_code
        self.attempts = attempts


class RemoteRejectedException(ConfigBackendException):
    """Raised when the config backend answers with a 4xx or an undecodable body."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(
            message=message,
            code="CONFIG_BACKEND_REJECTED",
            status_code=status_code,
            attempts=1,
        )


class RemoteUnavailableException(ConfigBackendException):
    """Raised when all attempts against the config backend failed with 5xx or transport errors."""

    def __init__(self, message: str, status_code: int | None, attempts: int):
        super().__init__(
            message=message,
            code="CONFIG_BACKEND_UNAVAILABLE",
            status_code=status_code,
            attempts=attempts,
        )
