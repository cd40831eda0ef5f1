"""
Models for repository configurations.

A configuration is one of three kinds (local, remote, virtual), identified by
the ``rclass`` field. All kinds share the fields of ``GenericRepoConfig``;
JSON names follow the Artifactory REST API exactly, including its spelling of
``supressPomConsistencyChecks``.
"""

import json
import logging
from typing import ClassVar, Dict, List, Optional, Type, Union

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_core import PydanticSerializationError

from ..errors import DecodeError, EncodeError

logger = logging.getLogger("artifactory_client")

LOCAL_REPO_MIME_TYPE = "application/vnd.org.jfrog.artifactory.repositories.LocalRepositoryConfiguration+json"
REMOTE_REPO_MIME_TYPE = "application/vnd.org.jfrog.artifactory.repositories.RemoteRepositoryConfiguration+json"
VIRTUAL_REPO_MIME_TYPE = "application/vnd.org.jfrog.artifactory.repositories.VirtualRepositoryConfiguration+json"


class GenericRepoConfig(BaseModel):
    """Fields common to every repository kind."""
    mime_type: ClassVar[str] = ""

    key: Optional[str] = None
    rclass: str = ""
    package_type: Optional[str] = Field(None, alias="packageType")
    description: Optional[str] = None
    notes: Optional[str] = None
    includes_pattern: Optional[str] = Field(None, alias="includesPattern")
    excludes_pattern: Optional[str] = Field(None, alias="excludesPattern")
    handle_releases: Optional[bool] = Field(None, alias="handleReleases")
    handle_snapshots: Optional[bool] = Field(None, alias="handleSnapshots")
    max_unique_snapshots: Optional[int] = Field(None, alias="maxUniqueSnapshots")
    suppress_pom_consistency_checks: Optional[bool] = Field(
        None, alias="supressPomConsistencyChecks"
    )
    blacked_out: Optional[bool] = Field(None, alias="blackedOut")
    property_sets: Optional[List[str]] = Field(None, alias="propertySets")

    model_config = {
        "extra": "ignore",
        "populate_by_name": True,
        "validate_assignment": True
    }

    @field_validator('rclass', mode="before")
    def validate_rclass(cls, v):
        """Treat a null kind tag as unset."""
        if v is None:
            return cls.model_fields["rclass"].default
        return v

    def to_json(self) -> bytes:
        """
        Serialize the configuration to its wire representation.

        Unset optional fields are left out of the payload.

        Raises:
            EncodeError: if a field holds a value that cannot be serialized
        """
        try:
            payload = self.model_dump(mode="json", by_alias=True, exclude_none=True)
            return json.dumps(payload).encode("utf-8")
        except (PydanticSerializationError, TypeError, ValueError) as e:
            logger.error(f"Failed to serialize {type(self).__name__}: {e}")
            raise EncodeError(f"Cannot serialize {type(self).__name__}: {e}") from e


class LocalRepoConfig(GenericRepoConfig):
    """Configuration of a repository hosted by Artifactory itself."""
    mime_type: ClassVar[str] = LOCAL_REPO_MIME_TYPE

    rclass: str = "local"
    layout_ref: Optional[str] = Field(None, alias="repoLayoutRef")
    debian_trivial_layout: Optional[bool] = Field(None, alias="debianTrivialLayout")
    checksum_policy_type: Optional[str] = Field(None, alias="checksumPolicyType")
    snapshot_version_behavior: Optional[str] = Field(None, alias="snapshotVersionBehavior")
    archive_browsing_enabled: Optional[bool] = Field(None, alias="archiveBrowsingEnabled")
    calculate_yum_metadata: Optional[bool] = Field(None, alias="calculateYumMetadata")
    yum_root_depth: Optional[int] = Field(None, alias="yumRootDepth")


class RemoteRepoConfig(GenericRepoConfig):
    """Configuration of a repository proxying an upstream URL."""
    mime_type: ClassVar[str] = REMOTE_REPO_MIME_TYPE

    rclass: str = "remote"
    url: str = ""
    username: Optional[str] = None
    password: Optional[str] = None
    proxy: Optional[str] = None
    remote_repo_checksum_policy_type: Optional[str] = Field(
        None, alias="remoteRepoChecksumPolicyType"
    )
    hard_fail: Optional[bool] = Field(None, alias="hardFail")
    offline: Optional[bool] = None
    store_artifacts_locally: Optional[bool] = Field(None, alias="storeArtifactsLocally")
    socket_timeout_millis: Optional[int] = Field(None, alias="socketTimeoutMillis")
    local_address: Optional[str] = Field(None, alias="localAddress")
    retrieval_cache_period_secs: Optional[int] = Field(None, alias="retrievalCachePeriodSecs")
    failed_retrieval_cache_period_secs: Optional[int] = Field(
        None, alias="failedRetrievalCachePeriodSecs"
    )
    missed_retrieval_cache_period_secs: Optional[int] = Field(
        None, alias="missedRetrievalCachePeriodSecs"
    )
    unused_artifacts_cleanup_enabled: Optional[bool] = Field(
        None, alias="unusedArtifactCleanupEnabled"
    )
    unused_artifacts_cleanup_period_hours: Optional[int] = Field(
        None, alias="unusedArtifactCleanupPeriodHours"
    )
    fetch_jars_eagerly: Optional[bool] = Field(None, alias="fetchJarsEagerly")
    share_configuration: Optional[bool] = Field(None, alias="shareConfiguration")
    synchronize_properties: Optional[bool] = Field(None, alias="synchronizeProperties")
    allow_any_host_auth: Optional[bool] = Field(None, alias="allowAnyHostAuth")
    enable_cookie_management: Optional[bool] = Field(None, alias="enableCookieManagement")
    bower_registry_url: Optional[str] = Field(None, alias="bowerRegistryUrl")
    vcs_type: Optional[str] = Field(None, alias="vcsType")
    vcs_git_provider: Optional[str] = Field(None, alias="vcsGitProvider")
    vcs_git_downloader: Optional[str] = Field(None, alias="vcsGitDownloader")

    @field_validator('url', mode="before")
    def validate_url(cls, v):
        return "" if v is None else v


class VirtualRepoConfig(GenericRepoConfig):
    """Configuration of a repository aggregating other repositories."""
    mime_type: ClassVar[str] = VIRTUAL_REPO_MIME_TYPE

    rclass: str = "virtual"
    repositories: List[str] = Field(default_factory=list)
    debian_trivial_layout: Optional[bool] = Field(None, alias="debianTrivialLayout")
    artifactory_requests_can_retrieve_remote_artifacts: Optional[bool] = Field(
        None, alias="artifactoryRequestsCanRetrieveRemoteArtifacts"
    )
    key_pair: Optional[str] = Field(None, alias="keyPair")
    pom_repository_reference_cleanup_policy: Optional[str] = Field(
        None, alias="pomRepositoryReferenceCleanupPolicy"
    )

    @field_validator('repositories', mode="before")
    def validate_repositories(cls, v):
        """A null member list means no members."""
        return [] if v is None else v


RepoConfig = Union[LocalRepoConfig, RemoteRepoConfig, VirtualRepoConfig, GenericRepoConfig]

REPO_CONFIG_TYPES: Dict[str, Type[GenericRepoConfig]] = {
    "local": LocalRepoConfig,
    "remote": RemoteRepoConfig,
    "virtual": VirtualRepoConfig,
}


def decode_repo_config(raw: Union[bytes, str]) -> RepoConfig:
    """
    Decode a repository configuration, choosing the model from its rclass.

    The body is first read with the common fields only to find the kind, then
    read again as that kind. Kinds other than local, remote and virtual are
    returned with the common fields only.

    Args:
        raw: JSON document describing one repository

    Returns:
        The configuration model matching the document's rclass

    Raises:
        DecodeError: if the document is not valid JSON or does not fit the model
    """
    try:
        generic = GenericRepoConfig.model_validate_json(raw)
    except ValidationError as e:
        logger.error(f"Failed to parse repository configuration: {e}")
        raise DecodeError(f"Invalid repository configuration: {e}") from e

    config_type = REPO_CONFIG_TYPES.get(generic.rclass)
    if config_type is None:
        logger.debug(f"Unknown rclass {generic.rclass!r}, keeping common fields only")
        return generic

    try:
        return config_type.model_validate_json(raw)
    except ValidationError as e:
        logger.error(f"Failed to parse {generic.rclass} repository configuration: {e}")
        raise DecodeError(f"Invalid {generic.rclass} repository configuration: {e}") from e
