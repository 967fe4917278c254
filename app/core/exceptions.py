from fastapi import status

# Literal: starlette deprecated the HTTP_422_UNPROCESSABLE_ENTITY name.
HTTP_422 = 422


class ServiceError(Exception):
    """Base exception for service layer errors."""

    def __init__(self, message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class InvalidBirthDateError(ServiceError):
    """Birth date is not a 10-character YYYY-MM-DD string."""

    def __init__(self, message: str = "Invalid birth date format") -> None:
        super().__init__(message, HTTP_422)


class InvalidGenderError(ServiceError):
    def __init__(self, gender: str) -> None:
        super().__init__(f"Invalid gender marker: {gender!r}", HTTP_422)
        self.gender = gender
