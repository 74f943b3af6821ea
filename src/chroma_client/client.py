import re
from typing import Optional

import httpx
from loguru import logger

from chroma_client.accumulator import ResponseAccumulator
from chroma_client.config import DEFAULT_TIMEOUT
from chroma_client.exceptions import (
    AllocationError,
    ChromaClientError,
    EncodeError,
    TransportError,
)
from chroma_client.models import Collection
from chroma_client.parser import parse_collection_response

# characters that break the URL path segment or the JSON string they are interpolated into
UNSAFE_NAME_PATTERN = re.compile(r'["\\/?#%\s\x00-\x1f]')


class CollectionClient:
    """Synchronous client for the collection endpoints of a Chroma server."""

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the collection client.

        Args:
            base_url: Base URL of the server (e.g., http://localhost:8000),
                used as given without trailing-slash normalization
            timeout: Transport timeout in seconds
            transport: Alternative httpx transport, e.g. a MockTransport
        """
        self.base_url = base_url
        self.timeout = timeout if timeout is not None else DEFAULT_TIMEOUT
        self.client = httpx.Client(timeout=self.timeout, transport=transport)

    def _perform(self, method: str, url: str, sink: ResponseAccumulator, **kwargs) -> int:
        """
        Run one request, feeding the body into `sink` as it arrives.

        Returns:
            HTTP status code of the response

        Raises:
            TransportError: If the exchange fails below the HTTP layer
            EncodeError: If the URL or body cannot be encoded
            AllocationError: If the sink cannot accept a chunk
        """
        logger.debug(f"{method} {url}")

        try:
            with self.client.stream(method, url, **kwargs) as response:
                for chunk in response.iter_bytes():
                    if sink.append(chunk) != len(chunk):
                        raise AllocationError(
                            f"Response buffer rejected a {len(chunk)} byte chunk from {url}"
                        )
                logger.debug(f"{method} {url} -> {response.status_code} ({len(sink)} bytes)")
                return response.status_code
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise TransportError(f"{type(e).__name__}: {e}", original_error=e) from e
        except UnicodeEncodeError as e:
            raise EncodeError(f"Cannot encode request: {e}", original_error=e) from e

    @staticmethod
    def _warn_unescaped(collection_name: str) -> None:
        if UNSAFE_NAME_PATTERN.search(collection_name):
            logger.warning(
                f"Collection name {collection_name!r} contains characters that are sent unescaped "
                "and may produce a malformed URL or JSON payload"
            )

    def probe_liveness(self) -> bool:
        """
        Check that the server answers on /heartbeat.

        Only the exchange is checked, not the HTTP status code.

        Returns:
            True if a response was received, False on transport failure
        """
        url = f"{self.base_url}/heartbeat"
        body = ResponseAccumulator()

        try:
            self._perform("GET", url, body)
        except ChromaClientError as e:
            logger.error(f"Heartbeat request to {url} failed: {e.message}")
            return False

        logger.debug(f"Heartbeat response: {body.text}")
        logger.info("HEARTBEAT: Success")
        return True

    def create_collection(self, collection_name: str) -> bool:
        """
        Create a collection named `collection_name`.

        The name is interpolated into the payload as is. The HTTP status
        code is not inspected, so a server-side rejection still counts as
        success.

        Args:
            collection_name: Name for the new collection

        Returns:
            True if the request was exchanged, False on transport failure
        """
        self._warn_unescaped(collection_name)
        url = f"{self.base_url}/api/v1/collections"
        payload = '{"name":"%s"}' % collection_name

        try:
            self._perform(
                "POST",
                url,
                ResponseAccumulator(),
                content=payload,
                headers={"Content-Type": "application/json"},
            )
        except ChromaClientError as e:
            logger.error(f"Create collection request to {url} failed: {e.message}")
            return False

        return True

    def get_collection(self, collection_name: str) -> ResponseAccumulator:
        """
        Fetch the raw description of a collection.

        Args:
            collection_name: Name of the collection, inserted into the path as is

        Returns:
            Accumulator holding the response body; empty if the request failed
        """
        self._warn_unescaped(collection_name)
        url = f"{self.base_url}/api/v1/collections/{collection_name}"
        response = ResponseAccumulator()

        try:
            self._perform("GET", url, response)
        except ChromaClientError as e:
            logger.error(f"Get collection request to {url} failed: {e.message}")
            response.clear()

        return response

    def fetch_collection(self, collection_name: str) -> Collection:
        """Fetch and parse a collection; an empty response yields an empty Collection."""
        response = self.get_collection(collection_name)
        if not response:
            logger.warning(f"No response body received for collection '{collection_name}'")
            return Collection()

        return parse_collection_response(response.data)

    def close(self):
        """Close the HTTP client."""
        if hasattr(self, "client"):
            self.client.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()


def probe_liveness(base_url: str, **kwargs) -> bool:
    """Probe /heartbeat with a client scoped to this call."""
    with CollectionClient(base_url, **kwargs) as client:
        return client.probe_liveness()


def create_collection(base_url: str, collection_name: str, **kwargs) -> bool:
    """Create a collection with a client scoped to this call."""
    with CollectionClient(base_url, **kwargs) as client:
        return client.create_collection(collection_name)


def get_collection(base_url: str, collection_name: str, **kwargs) -> ResponseAccumulator:
    """Fetch a collection's raw response with a client scoped to this call."""
    with CollectionClient(base_url, **kwargs) as client:
        return client.get_collection(collection_name)
