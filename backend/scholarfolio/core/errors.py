"""Application error taxonomy.

Services raise these; the handlers registered in ``main.py`` turn them into
JSON responses. Auth routes render the same errors as ``{success, message}``.
"""


class AppError(Exception):
    status_code: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """A required field is missing or malformed."""


class ConflictError(AppError):
    """A uniqueness constraint would be violated."""


class AuthError(AppError):
    """Credentials did not verify. The message never says which factor failed."""


class StoreError(AppError):
    """Unclassified database failure. The message is generic; details go to the log."""

    status_code = 500
