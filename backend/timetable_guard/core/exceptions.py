class AppError(Exception):
    """Base class for all application exceptions."""
    def __init__(self, message: str, status_code: int = 500, details: dict = None):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class InvalidIntervalError(AppError):
    """Raised when a time slot has inverted or out-of-range bounds."""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message, status_code=422, details=details)


class TimetablePayloadError(AppError):
    """Raised when a validation request cannot be processed as submitted."""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message, status_code=400, details=details)
