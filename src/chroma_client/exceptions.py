"""
Errors raised inside the collection client.

None of these cross the public operations: `CollectionClient` catches them,
logs the message and answers with False or an empty accumulator.
"""


class ChromaClientError(Exception):
    """Base error; `original_error` keeps the httpx/json exception that caused it."""

    def __init__(self, message: str, original_error: Exception | None = None):
        self.message = message
        self.original_error = original_error
        super().__init__(self.message)


class TransportError(ChromaClientError):
    """No HTTP response was exchanged: DNS, connect, timeout, protocol or bad URL."""


class EncodeError(ChromaClientError):
    """The request URL or body could not be encoded, e.g. a lone surrogate in a name."""


class AllocationError(ChromaClientError):
    """The response buffer refused a chunk; the transfer is aborted."""


class DecodeError(ChromaClientError):
    """A response body is not JSON the collection parser can read."""
