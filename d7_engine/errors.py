from __future__ import annotations

from typing import Optional


class D7Error(Exception):
    """Base class for errors raised inside the D7 engine."""


class FetchError(D7Error):
    """
    The published sheet could not be downloaded.
    Carries the HTTP status when the server answered with a non-2xx code.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class InsightsError(D7Error):
    """The generative-text client is not available (missing key or package)."""
