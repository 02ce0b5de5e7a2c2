from __future__ import annotations

from typing import Optional


class AnalysisError(Exception):
    """Base class for every failure raised by `AttributeAnalysisClient.analyze`."""


class EmptyInput(AnalysisError):
    def __init__(self) -> None:
        super().__init__("Input text is empty")


class EmptyTypes(AnalysisError):
    def __init__(self) -> None:
        super().__init__("No attribute types requested")


class RequestFailed(AnalysisError):
    """
    Transport failure (connection error, timeout) or a non-2xx HTTP status.

    status_code is set only when the service answered with an error status.
    """

    def __init__(self, detail: str, status_code: Optional[int] = None):
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code


class ParsingFailed(AnalysisError):
    """Response body did not match the expected schema."""

    def __init__(self, detail: str):
        super().__init__(detail or "Unparseable response")
        self.detail = detail or "Unparseable response"
