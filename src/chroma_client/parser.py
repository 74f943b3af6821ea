import json
from typing import Any, Dict, Optional, Union

from loguru import logger

from chroma_client.exceptions import DecodeError
from chroma_client.models import Collection


def _decode(body: str) -> Any:
    """
    Decode a JSON document.

    Integers are read as floats so arbitrarily long numbers in ignored
    fields decode instead of hitting the int conversion digit limit.

    Raises:
        DecodeError: If the body is not valid JSON; the message carries the
            text remaining at the failure position
    """
    try:
        return json.loads(body, parse_int=float)
    except json.JSONDecodeError as e:
        raise DecodeError(
            f"Error before: {body[e.pos:]!r} (line {e.lineno}, column {e.colno}, position {e.pos})",
            original_error=e,
        ) from e
    except RecursionError as e:
        raise DecodeError("JSON document is nested too deeply", original_error=e) from e
    except ValueError as e:
        raise DecodeError(f"Invalid JSON value: {e}", original_error=e) from e


def _string_field(document: Dict[str, Any], key: str) -> Optional[str]:
    value = document.get(key)
    return value if isinstance(value, str) else None


def parse_collection_response(body: Union[str, bytes, None]) -> Collection:
    """
    Parse a get-collection response body into a Collection.

    Only top-level `id` and `name` keys holding JSON strings are copied;
    anything else leaves the field unset. Never raises for bad input.

    Args:
        body: Raw response body

    Returns:
        Collection, with both fields unset if the body could not be decoded
    """
    if body is None:
        body = ""
    if isinstance(body, (bytes, bytearray)):
        body = body.decode("utf-8", errors="replace")

    try:
        document = _decode(body)
    except DecodeError as e:
        logger.error(e.message)
        return Collection()

    if not isinstance(document, dict):
        logger.warning(f"Expected a JSON object, got {type(document).__name__}")
        return Collection()

    return Collection(id=_string_field(document, "id"), name=_string_field(document, "name"))
