"""Exceptions raised by the resume enhancer services."""

from typing import Optional


class ResumeValidationError(ValueError):
    """
    Base class for recoverable input errors detected before analysis.

    Attributes:
        message: User-facing description of what to fix
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidFileTypeError(ResumeValidationError):
    def __init__(self, content_type: Optional[str] = None):
        self.content_type = content_type
        super().__init__("Please upload a PDF file")


class FileTooLargeError(ResumeValidationError):
    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(f"File size should be less than {limit // (1024 * 1024)}MB")


class MissingFieldsError(ResumeValidationError):
    def __init__(self):
        super().__init__("Please fill in all required fields")


class PDFExtractionError(ResumeValidationError):
    def __init__(self, filename: Optional[str] = None):
        self.filename = filename
        super().__init__("Could not extract text from PDF")


class SessionError(Exception):
    """Base class for enhancement session errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class SessionNotFoundError(SessionError):
    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(f"Session not found: {session_id}")


class InvalidTransitionError(SessionError):
    """
    Raised when an action is not allowed in the session's current state.

    Attributes:
        action: Name of the attempted action
        state: State the session was in
    """

    def __init__(self, action: str, state: str, message: Optional[str] = None):
        self.action = action
        self.state = state
        super().__init__(message or f"Cannot {action} while session is {state}")


class DownloadNotAllowedError(InvalidTransitionError):
    def __init__(self, state: str):
        super().__init__("download", state, "Please review suggestions before downloading")
