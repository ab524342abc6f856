"""
Errors raised inside the tailoring client.

They never leave TailorClient.submit(): every one of them is flattened into a
Failed state carrying str(error) as the user-visible message.
"""

from typing import Optional


class TailorClientError(Exception):
    """Base class for tailoring client errors."""


class TailorValidationError(TailorClientError):
    """Resume or job description is blank. Detected before any network call."""


class TailorTransportError(TailorClientError):
    """Non-2xx status, or the HTTP call itself failed (connect, timeout, ...)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class TailorParseError(TailorClientError):
    """Backend answered 2xx but the body is not valid JSON."""


class ClipboardUnavailableError(TailorClientError):
    """No system clipboard mechanism could be found (e.g. headless Linux without xclip)."""
