class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class ValidationError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class InvalidTimeError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class ForbiddenError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 403)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 409) -> None:
        super().__init__(message, status_code)


class SlotConflictError(ConflictError):
    """Another booking already holds the (venue, date, time) slot"""

    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class AuthenticationError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 401)


class LoginError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class DependencyError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 500)
