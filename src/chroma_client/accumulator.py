from loguru import logger


class ResponseAccumulator:
    """Growable byte buffer collecting a response body as the transport delivers it."""

    def __init__(self):
        self._buffer = bytearray()

    def append(self, chunk: bytes) -> int:
        """
        Append a chunk to the end of the buffer.

        Args:
            chunk: Bytes received from the transport

        Returns:
            Number of bytes consumed; 0 for a non-empty chunk means the
            buffer could not grow and the transfer must be aborted
        """
        try:
            # extend() allocates before it copies, so a failure leaves the old bytes intact
            self._buffer.extend(chunk)
        except MemoryError:
            logger.error(
                f"Not enough memory to grow response buffer by {len(chunk)} bytes "
                f"(currently {len(self._buffer)} bytes)"
            )
            return 0

        return len(chunk)

    def clear(self) -> None:
        self._buffer.clear()

    @property
    def length(self) -> int:
        return len(self._buffer)

    @property
    def data(self) -> bytes:
        return bytes(self._buffer)

    @property
    def text(self) -> str:
        return self._buffer.decode("utf-8", errors="replace")

    def __len__(self) -> int:
        return len(self._buffer)

    def __bool__(self) -> bool:
        return len(self._buffer) > 0

    def __repr__(self) -> str:
        return f"ResponseAccumulator(length={len(self._buffer)})"
