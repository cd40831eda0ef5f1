"""
Client for the Artifactory repository configuration API.
"""

__version__ = "0.1.0"

from .api import ArtifactoryClient
from .config import APIConfig, Settings
from .errors import ArtifactoryError, DecodeError, EncodeError, TransportError

__all__ = [
    'ArtifactoryClient',
    'APIConfig',
    'Settings',
    'ArtifactoryError',
    'TransportError',
    'EncodeError',
    'DecodeError',
]
