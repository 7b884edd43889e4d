"""
Streaming digest computation with bounded buffering.

Reads a byte stream in chunks of at most buffer_size bytes, so memory use
does not depend on the stream length.
"""

from __future__ import annotations

from typing import BinaryIO

from digestcheck.core.primitive import (
    DEFAULT_ALGORITHM,
    Digest,
    DigestPrimitive,
    PrimitiveFactory,
    get_primitive_factory,
)
from digestcheck.logger import get_logger

logger = get_logger(__name__)

DEFAULT_BUFFER_SIZE = 65536


def digest_stream(
    stream: BinaryIO,
    primitive: DigestPrimitive,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
) -> Digest:
    """
    Consume a stream to its end and finalize the digest.

    Args:
        stream: Open binary stream; fully consumed by this call.
        primitive: Fresh accumulator.
        buffer_size: Maximum bytes read per chunk.

    Returns:
        Finalized digest. An empty stream yields the empty-input digest.

    Raises:
        OSError: The first read failure, unchanged.
    """
    for chunk in iter(lambda: stream.read(buffer_size), b""):
        primitive.consume(chunk)
    return primitive.finalize()


class StreamDigester:
    """
    Binds an algorithm and buffer size for repeated stream digests.

    Each call to digest() uses a fresh primitive, so the digester holds no
    state between streams.
    """

    def __init__(
        self,
        algorithm: str = DEFAULT_ALGORITHM,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        primitive_factory: PrimitiveFactory | None = None,
    ):
        """
        Initialize digester.

        Args:
            algorithm: Registered algorithm name.
            buffer_size: Maximum bytes read per chunk.
            primitive_factory: Explicit factory, overriding the registry lookup.
        """
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")

        self.algorithm = algorithm
        self.buffer_size = buffer_size
        self._factory = primitive_factory or get_primitive_factory(algorithm)
        self.digest_size = self._factory().digest_size

    def digest(self, stream: BinaryIO) -> Digest:
        """Digest one stream with a fresh primitive."""
        result = digest_stream(stream, self._factory(), self.buffer_size)
        logger.debug("%s digest computed: %s", self.algorithm, result.hexdigest)
        return result
