"""Shared JSON-over-HTTP client for the summarization and dispatch backends."""
import os
import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from models.backend_models import ErrorResponse

logger = logging.getLogger(__name__)

DEFAULT_API_BASE_URL = "http://localhost:5000"


class BackendError(Exception):
    """Raised when a backend call does not produce a usable success payload.

    The message is the text to show the user: the server-provided error
    when there is one, otherwise the client's generic fallback.
    """


class BackendClient:
    """Base class for clients that POST JSON to one backend endpoint.

    Subclasses set ``endpoint`` and ``fallback_error``.
    """

    endpoint: str = ""
    fallback_error: str = "Request failed"

    def __init__(
        self,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """Initialize with the backend base URL from the environment.

        Args:
            base_url: Overrides the API_BASE_URL environment variable
            http_client: Pre-built client to use instead of an owned one
            transport: Transport for the owned client, e.g. httpx.MockTransport
        """
        self.base_url = (
            base_url or os.getenv("API_BASE_URL", DEFAULT_API_BASE_URL)
        ).rstrip("/")
        self._owns_client = http_client is None
        # No timeout: a request waits for its terminal outcome.
        self.client = http_client or httpx.AsyncClient(
            timeout=None,
            follow_redirects=True,
            transport=transport
        )
        logger.info(f"{type(self).__name__} initialized with url={self.url}")

    @property
    def url(self) -> str:
        return f"{self.base_url}{self.endpoint}"

    async def _post(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        POST a JSON payload and return the decoded success body.

        Raises:
            BackendError: On transport failure, non-2xx status, or a body
                that is not a JSON object
        """
        try:
            response = await self.client.post(
                self.url,
                json=payload,
                headers={"Content-Type": "application/json"}
            )
        except httpx.HTTPError as e:
            logger.error(f"Request to {self.url} failed: error={type(e).__name__}: {e}")
            raise BackendError(self.fallback_error) from e

        data = self._decode(response)

        if not response.is_success:
            message = self._error_text(data) or self.fallback_error
            logger.error(
                f"Backend returned error: url={self.url}, "
                f"status={response.status_code}, error={message}"
            )
            raise BackendError(message)

        if data is None:
            logger.error(
                f"Backend returned unreadable body: url={self.url}, "
                f"status={response.status_code}"
            )
            raise BackendError(self.fallback_error)

        return data

    def _error_text(self, data: Optional[Dict[str, Any]]) -> Optional[str]:
        """Server-provided error text from a failure body, if usable."""
        if data is None:
            return None
        try:
            return ErrorResponse.model_validate(data).error
        except ValidationError:
            return None

    def _decode(self, response: httpx.Response) -> Optional[Dict[str, Any]]:
        try:
            data = response.json()
        except ValueError:
            logger.warning(f"Non-JSON response body: url={self.url}, status={response.status_code}")
            return None
        return data if isinstance(data, dict) else None

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self.client.aclose()
