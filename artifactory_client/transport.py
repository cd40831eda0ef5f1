"""
HTTP transport used by the Artifactory client.

The client only depends on a ``RequestExecutor``: any callable that takes a
``Request`` and returns the raw response body. ``HTTPTransport`` is the
default executor, built on a requests session.
"""

import logging
from typing import Dict, Optional, Protocol

import requests
from pydantic import BaseModel, Field
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from . import __version__
from .config import APIConfig
from .errors import TransportError

logger = logging.getLogger("artifactory_client")


class Request(BaseModel):
    """A single HTTP call against the Artifactory API."""
    verb: str
    path: str
    query_params: Dict[str, str] = Field(default_factory=dict)
    body: Optional[bytes] = None
    content_type: Optional[str] = None


class RequestExecutor(Protocol):
    """Anything able to perform a Request and return the response body."""

    def __call__(self, request: Request) -> bytes:
        ...


class HTTPTransport:
    """Request executor backed by a requests session."""

    def __init__(self, config: APIConfig):
        self.config = config
        self.base_url = config.url.rstrip("/")

        # Retries are off unless explicitly configured
        retry_strategy = Retry(
            total=config.max_retries,
            backoff_factor=1,
            status_forcelist=[429, 500, 502, 503, 504],
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)

        self.session = requests.Session()
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)
        self.session.verify = config.verify_ssl

        self.session.headers.update({
            "Accept": "application/json",
            "User-Agent": f"artifactory-client/{__version__}"
        })
        if config.auth_method == "basic":
            self.session.auth = (config.username or "", config.password or "")
        elif config.token:
            self.session.headers["X-JFrog-Art-Api"] = config.token

    def __call__(self, request: Request) -> bytes:
        url = f"{self.base_url}/{request.path.lstrip('/')}"
        headers = {}
        if request.content_type:
            headers["Content-Type"] = request.content_type

        logger.debug(f"{request.verb} {url} params={request.query_params}")

        try:
            response = self.session.request(
                request.verb,
                url,
                params=request.query_params or None,
                data=request.body,
                headers=headers,
                timeout=self.config.timeout,
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            status_code = e.response.status_code if e.response is not None else None
            response_text = e.response.text if e.response is not None else None
            logger.error(f"{request.verb} {url} failed: {e}")
            if response_text:
                logger.debug(f"Response text: {response_text}")
            raise TransportError(str(e), status_code=status_code, response_text=response_text) from e

        return response.content
