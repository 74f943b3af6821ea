#!/usr/bin/env python
"""
Collection demo for a running Chroma server.

Checks the heartbeat, creates a collection and reads it back.

Usage:
    chroma-client --base-url http://localhost:8000 --collection-name TestCollection
    python -m chroma_client --help
"""

import argparse
import sys
from typing import List, Optional

from loguru import logger

from chroma_client.client import CollectionClient
from chroma_client.config import Config
from chroma_client.logging import setup_logger
from chroma_client.parser import parse_collection_response


def build_parser(config: Config) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Check, create and fetch a collection on a Chroma server"
    )
    parser.add_argument(
        "--base-url",
        type=str,
        default=config.base_url,
        help=f"Server base URL (default: {config.base_url})",
    )
    parser.add_argument(
        "--collection-name",
        type=str,
        default=config.collection_name,
        help=f"Collection name (default: {config.collection_name})",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=config.timeout,
        help=f"Transport timeout in seconds (default: {config.timeout})",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=config.log_level,
        help=f"Log level (default: {config.log_level})",
    )
    return parser


def check_base_url(base_url: str) -> bool:
    """Warn when the URL has no http(s) scheme; the requests will then fail at the transport."""
    if not base_url.startswith(("http://", "https://")):
        logger.warning(f"Base URL should start with http:// or https://, got '{base_url}'")
        return False
    return True


def run(base_url: str, collection_name: str, timeout: float) -> None:
    with CollectionClient(base_url, timeout=timeout) as client:
        client.probe_liveness()

        print("\n\nCreate Collection")
        if client.create_collection(collection_name):
            print("Collection created successfully.")
        else:
            print("Failed to create collection.")

        response = client.get_collection(collection_name)

    print("\n\nGet Collection")
    if response:
        collection = parse_collection_response(response.data)
        if collection.is_complete:
            print(f"Collection ID: {collection.id}")
            print(f"Collection Name: {collection.name}")
    else:
        print("Collection not found or an error occurred.")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    config = Config()
    args = build_parser(config).parse_args(argv)

    setup_logger(config.api_mode, args.log_level)

    check_base_url(args.base_url)
    run(args.base_url, args.collection_name, args.timeout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
