"""Minimal client for the collection endpoints of a Chroma vector database."""

from chroma_client.accumulator import ResponseAccumulator
from chroma_client.client import (
    CollectionClient,
    create_collection,
    get_collection,
    probe_liveness,
)
from chroma_client.models import Collection
from chroma_client.parser import parse_collection_response

__all__ = [
    "Collection",
    "CollectionClient",
    "ResponseAccumulator",
    "create_collection",
    "get_collection",
    "parse_collection_response",
    "probe_liveness",
]
