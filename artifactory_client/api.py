"""
Artifactory API client for managing repository configurations.
"""

import logging
from typing import Dict, List, Optional
from urllib.parse import quote

from pydantic import TypeAdapter, ValidationError

from .config import APIConfig
from .errors import DecodeError, EncodeError
from .models import GenericRepoConfig, Repo, RepoConfig, decode_repo_config
from .transport import HTTPTransport, Request, RequestExecutor

logger = logging.getLogger("artifactory_client")

REPOSITORIES_PATH = "/api/repositories"

_repo_list_adapter = TypeAdapter(List[Repo])


def repo_path(key: str) -> str:
    """Path of a single repository, with the key escaped as one path segment."""
    return f"{REPOSITORIES_PATH}/{quote(key, safe='')}"


class ArtifactoryClient:
    """Client for the Artifactory repository configuration API."""

    def __init__(
        self,
        config: Optional[APIConfig] = None,
        transport: Optional[RequestExecutor] = None
    ):
        """
        Initialize the Artifactory client.

        Args:
            config: Connection settings; defaults are used when omitted
            transport: Request executor; an HTTPTransport built from
                ``config`` is used when omitted
        """
        self.config = config or APIConfig()
        self.transport = transport or HTTPTransport(self.config)

    def get_repos(self, rtype: str = "all") -> List[Repo]:
        """
        List repositories.

        Args:
            rtype: Repository kind to filter by ("local", "remote", "virtual"),
                or "all" for every repository

        Returns:
            List of Repo objects

        Raises:
            TransportError: if the request fails
            DecodeError: if the response is not a list of repositories
        """
        params: Dict[str, str] = {}
        if rtype != "all":
            params["type"] = rtype

        data = self.transport(Request(verb="GET", path=REPOSITORIES_PATH, query_params=params))

        try:
            repos = _repo_list_adapter.validate_json(data)
        except ValidationError as e:
            logger.error(f"Failed to parse repository list: {e}")
            raise DecodeError(f"Invalid repository list: {e}") from e

        logger.debug(f"Retrieved {len(repos)} repositories (type={rtype})")
        return repos

    def get_repo(self, key: str) -> RepoConfig:
        """
        Get the full configuration of a repository.

        The returned model depends on the repository's rclass: LocalRepoConfig,
        RemoteRepoConfig or VirtualRepoConfig, or GenericRepoConfig for any
        other kind.

        Args:
            key: Repository key

        Returns:
            The repository configuration

        Raises:
            ValueError: if ``key`` is empty
            TransportError: if the request fails
            DecodeError: if the response is not a repository configuration
        """
        if not key:
            raise ValueError("Repository key must not be empty")

        data = self.transport(Request(verb="GET", path=repo_path(key)))
        return decode_repo_config(data)

    def create_repo(
        self,
        key: str,
        config: RepoConfig,
        params: Optional[Dict[str, str]] = None
    ) -> None:
        """
        Create a repository.

        Args:
            key: Key of the new repository
            config: Repository configuration of any kind
            params: Extra query parameters passed through to the API

        Raises:
            EncodeError: if the configuration cannot be serialized
            TransportError: if the request fails
        """
        self._write_repo("PUT", key, config, params)

    def update_repo(
        self,
        key: str,
        config: RepoConfig,
        params: Optional[Dict[str, str]] = None
    ) -> None:
        """Update a repository. Same contract as create_repo, sent as a POST."""
        self._write_repo("POST", key, config, params)

    def _write_repo(
        self,
        verb: str,
        key: str,
        config: RepoConfig,
        params: Optional[Dict[str, str]]
    ) -> None:
        if not isinstance(config, GenericRepoConfig):
            logger.error(f"Refusing to send {type(config).__name__} as a repository configuration")
            raise EncodeError(f"Not a repository configuration: {type(config).__name__}")

        body = config.to_json()
        self.transport(Request(
            verb=verb,
            path=repo_path(key),
            query_params=params or {},
            body=body,
            content_type=config.mime_type or "application/json",
        ))
        logger.debug(f"{verb} {repo_path(key)} succeeded")
