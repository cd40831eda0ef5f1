"""
Configuration management for the Artifactory client.
"""

from typing import Any, Literal, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class APIConfig(BaseModel):
    """Artifactory API configuration."""
    url: str = Field(
        "http://localhost:8080/artifactory",
        description="Artifactory base URL, including the context path"
    )
    token: Optional[str] = Field(None, description="Artifactory API key")
    username: Optional[str] = Field(None, description="Username for basic auth")
    password: Optional[str] = Field(None, description="Password for basic auth")
    auth_method: Literal["token", "basic"] = Field(
        "token",
        description="How requests are authenticated"
    )
    verify_ssl: bool = Field(True, description="Verify TLS certificates")
    timeout: float = Field(30.0, description="Request timeout in seconds")
    max_retries: int = Field(
        0,
        description="Connection retries handed to the HTTP adapter"
    )


class Settings(BaseSettings):
    """Connection settings read from ARTIFACTORY_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ARTIFACTORY_",
        extra="ignore",
    )

    url: str = "http://localhost:8080/artifactory"
    token: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    auth_method: Optional[Literal["token", "basic"]] = None
    verify_ssl: bool = True
    timeout: float = 30.0

    def to_api_config(self, **overrides: Any) -> APIConfig:
        """
        Build an APIConfig from these settings.

        Args:
            **overrides: Values taking precedence over the environment;
                ``None`` values are ignored.

        Returns:
            APIConfig instance
        """
        values = self.model_dump()
        values.update({k: v for k, v in overrides.items() if v is not None})

        if values.get("auth_method") is None:
            # Fall back to basic auth only when credentials are all we have
            if values.get("username") and values.get("password") and not values.get("token"):
                values["auth_method"] = "basic"
            else:
                values["auth_method"] = "token"

        return APIConfig(**values)
