"""
Application errors
==================
ValidationError: required input missing or malformed, nothing was attempted.
StoreError: the database failed; callers only see an opaque failure.
"""


class AppError(Exception):
    """Base class for errors raised by the application layer"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    pass


class StoreError(AppError):
    pass
