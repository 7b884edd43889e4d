"""
Digest primitives and the fixed-width Digest value.

A primitive is an opaque accumulator: construct it, feed it bytes with
consume(), and read the result once with finalize(). Everything above this
module is algorithm-agnostic.
"""

from __future__ import annotations

import hashlib
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable

import xxhash

DEFAULT_ALGORITHM = "md5"


@dataclass(frozen=True)
class Digest:
    """Finalized fixed-width digest value."""

    value: bytes

    @property
    def size(self) -> int:
        """Width in bytes."""
        return len(self.value)

    @property
    def hexdigest(self) -> str:
        """Canonical form: lowercase hex, two characters per byte."""
        return self.value.hex()

    def matches(self, hex_digest: str) -> bool:
        """Compare against a hex string, ignoring hex letter case."""
        return self.hexdigest == hex_digest.lower()

    def __str__(self) -> str:
        return self.hexdigest


class DigestPrimitive(ABC):
    """
    Abstract digest accumulator.

    Instances are single-use: after finalize() the accumulator must not be
    fed again.
    """

    name: str
    digest_size: int

    @abstractmethod
    def consume(self, data: bytes) -> None:
        """
        Feed bytes into the accumulator.

        Args:
            data: Next chunk of input.
        """
        ...

    @abstractmethod
    def finalize(self) -> Digest:
        """
        Produce the digest of everything consumed so far.

        Returns:
            Finalized digest.
        """
        ...


class HashlibPrimitive(DigestPrimitive):
    """Primitive backed by a hashlib constructor."""

    def __init__(self, name: str):
        self.name = name
        self._hasher = hashlib.new(name)
        self.digest_size = self._hasher.digest_size

    def consume(self, data: bytes) -> None:
        self._hasher.update(data)

    def finalize(self) -> Digest:
        return Digest(self._hasher.digest())


class XXHashPrimitive(DigestPrimitive):
    """Primitive backed by an xxhash hasher (non-cryptographic, fast)."""

    _CONSTRUCTORS: dict[str, Callable[[], object]] = {
        "xxh32": xxhash.xxh32,
        "xxh64": xxhash.xxh64,
        "xxh128": xxhash.xxh128,
    }

    def __init__(self, name: str):
        if name not in self._CONSTRUCTORS:
            raise ValueError(f"Unknown xxhash variant: {name}")
        self.name = name
        self._hasher = self._CONSTRUCTORS[name]()
        self.digest_size = self._hasher.digest_size

    def consume(self, data: bytes) -> None:
        self._hasher.update(data)

    def finalize(self) -> Digest:
        return Digest(self._hasher.digest())


PrimitiveFactory = Callable[[], DigestPrimitive]

_HASHLIB_ALGORITHMS = ["md5", "sha1", "sha224", "sha256", "sha384", "sha512"]
_XXHASH_ALGORITHMS = ["xxh32", "xxh64", "xxh128"]

ALGORITHMS: dict[str, PrimitiveFactory] = {
    **{name: (lambda name=name: HashlibPrimitive(name)) for name in _HASHLIB_ALGORITHMS},
    **{name: (lambda name=name: XXHashPrimitive(name)) for name in _XXHASH_ALGORITHMS},
}


def get_primitive_factory(algorithm: str) -> PrimitiveFactory:
    """
    Look up the factory for a registered algorithm.

    Args:
        algorithm: Algorithm name (case-insensitive).

    Returns:
        Zero-argument callable creating a fresh primitive.

    Raises:
        ValueError: If the algorithm is not registered.
    """
    key = algorithm.lower()
    if key not in ALGORITHMS:
        raise ValueError(
            f"Unsupported algorithm: {algorithm}. Supported: {sorted(ALGORITHMS)}"
        )
    return ALGORITHMS[key]


def digest_size_of(algorithm: str) -> int:
    """Width in bytes of the digest produced by an algorithm."""
    return get_primitive_factory(algorithm)().digest_size
