"""
Exceptions raised by the Artifactory client.
"""

from typing import Optional


class ArtifactoryError(Exception):
    """Base class for all client errors."""
    pass


class TransportError(ArtifactoryError):
    """Raised when the HTTP request fails or returns an error status."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_text: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_text = response_text


class EncodeError(ArtifactoryError):
    """Raised when a repository configuration cannot be serialized."""
    pass


class DecodeError(ArtifactoryError):
    """Raised when a response body does not match the expected shape."""
    pass
