"""
Models for repository listings and repository configurations.
"""

from .repository import Repo
from .repo_config import (
    GenericRepoConfig,
    LocalRepoConfig,
    RemoteRepoConfig,
    VirtualRepoConfig,
    RepoConfig,
    REPO_CONFIG_TYPES,
    LOCAL_REPO_MIME_TYPE,
    REMOTE_REPO_MIME_TYPE,
    VIRTUAL_REPO_MIME_TYPE,
    decode_repo_config,
)

__all__ = [
    'Repo',
    'GenericRepoConfig',
    'LocalRepoConfig',
    'RemoteRepoConfig',
    'VirtualRepoConfig',
    'RepoConfig',
    'REPO_CONFIG_TYPES',
    'LOCAL_REPO_MIME_TYPE',
    'REMOTE_REPO_MIME_TYPE',
    'VIRTUAL_REPO_MIME_TYPE',
    'decode_repo_config',
]
