from typing import Any


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class EnumerationNotFoundError(NotFoundError):
    """Strict lookup found no declared member for the given key."""

    def __init__(self, key: Any, kind: str, type_name: str) -> None:
        self.key = key
        self.kind = kind
        self.type_name = type_name
        super().__init__(f"'{key}' is not a valid {kind} in {type_name}")


class DuplicateEnumerationValueError(DomainError):
    def __init__(self, value: int, type_name: str, names: tuple[str, ...]) -> None:
        self.value = value
        self.type_name = type_name
        self.names = names
        super().__init__(
            f'{type_name} declares value {value} more than once: {", ".join(names)}', 500
        )


class EnumerationValueLockedError(DomainError):
    def __init__(self, type_name: str, value: int | None) -> None:
        self.type_name = type_name
        self.value = value
        super().__init__(f'{type_name} value is already set to {value} and cannot be rebound')
