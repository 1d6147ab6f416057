"""
Error types for code complexity analysis.

Every error is terminal for a single analysis and is turned into
display state by the analyzer; none of them is retried.
"""

from typing import Optional


class AnalysisError(Exception):
    """Base exception for analysis failures."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InputValidationError(AnalysisError):
    """Raised when there is no code to analyze."""

    def __init__(self, message: str = "Please enter code to analyze"):
        super().__init__(message)


class TransportError(AnalysisError):
    """Exception for Groq API errors (network, auth, quota, bad status)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class EmptyResponseError(AnalysisError):
    """The API call succeeded but returned no content."""

    def __init__(self, message: str = "No response received from AI"):
        super().__init__(message)


class ResponseParseError(AnalysisError):
    """Model output could not be read as a JSON object."""
