class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int = 500) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class ForbiddenError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 403)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class AuthenticationError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 401)


class PersistenceError(CustomBaseError):
    """Document store unreachable or write rejected. Message is safe to return to clients."""

    def __init__(self, message: str) -> None:
        super().__init__(message, 500)


class GatewayUnavailableError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 500)


class GatewayRejectedError(CustomBaseError):
    def __init__(self, message: str, *, reason: str = '') -> None:
        self.reason = reason
        super().__init__(message, 500)
