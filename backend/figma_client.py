"""
Figma REST API client.

Fetches the raw file JSON for a file key and extracts the top-level
``document.children`` nodes that the semantic tree consumes. Transport and
HTTP failures are mapped onto the ``FigmaError`` hierarchy so callers can
report them without inspecting status codes.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)

FIGMA_BASE_URL = "https://api.figma.com/v1"
DEFAULT_TIMEOUT_SECONDS = 30.0


class FigmaError(RuntimeError):
    """Base class for document retrieval failures."""


class FigmaAuthError(FigmaError):
    """Invalid or expired personal access token."""


class FigmaNotFoundError(FigmaError):
    """Unknown file key."""


class FigmaNetworkError(FigmaError):
    """The API could not be reached."""


class FigmaProtocolError(FigmaError):
    """Any other non-success status."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class FigmaDecodeError(FigmaError):
    """The response body was not a JSON object."""


class FigmaClient:
    def __init__(
        self,
        token: str,
        base_url: str = FIGMA_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not token:
            raise ValueError("FigmaClient requires a Personal Access Token.")
        self._token = token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def _get_client(self) -> httpx.AsyncClient:
        """Get httpx client for the Figma API"""
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers={"X-Figma-Token": self._token},
            transport=self._transport,
        )

    async def fetch_file(self, file_key: str) -> Dict[str, Any]:
        """Fetch the full node tree of a Figma file."""
        if not file_key:
            raise ValueError("fetch_file requires a file key.")

        try:
            async with self._get_client() as client:
                response = await client.get(f"/files/{file_key}")
        except httpx.RequestError as exc:
            logger.error("[FigmaClient] Network error fetching %s: %s", file_key, exc)
            raise FigmaNetworkError(f"Network error reaching Figma API: {exc}") from exc

        status = response.status_code
        if status in (401, 403):
            raise FigmaAuthError(
                "Figma API: Invalid or expired token. Check your Personal Access Token."
            )
        if status == 404:
            raise FigmaNotFoundError(f'Figma API: File not found. Check the file key: "{file_key}".')
        if not response.is_success:
            logger.error("[FigmaClient] HTTP %s for file %s", status, file_key)
            raise FigmaProtocolError(
                f"Figma API error: {status} {response.reason_phrase}", status_code=status
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise FigmaDecodeError(f"Failed to parse Figma API response: {exc}") from exc
        if not isinstance(payload, dict):
            raise FigmaDecodeError(
                f"Failed to parse Figma API response: expected an object, got {type(payload).__name__}."
            )

        logger.info("[FigmaClient] Retrieved file %s", file_key)
        return payload

    @staticmethod
    def extract_nodes(file_data: Any) -> List[Any]:
        """Top-level nodes of a file response; [] when the path is missing."""
        if not isinstance(file_data, dict):
            return []
        document = file_data.get("document")
        if not isinstance(document, dict):
            return []
        children = document.get("children")
        if not isinstance(children, list):
            return []
        return children
