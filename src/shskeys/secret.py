"""
Scoped containers for secret key material.

Python ``bytes`` are immutable and cannot be cleared, so secrets are held
in a private ``bytearray`` that is overwritten with zeros when the secret
is wiped, leaves a ``with`` block, or is garbage collected. Clearing is
best effort: copies handed out through ``bytes(secret)`` are the caller's
responsibility.
"""

import hmac
from typing import Optional, Union

from .types import InvalidKeyFormatError, InvalidKeyLengthError, SecretWipedError

BytesLike = Union[bytes, bytearray, memoryview]


def wipe_bytearray(buf: bytearray) -> None:
    """Overwrite a mutable buffer with zeros in place."""
    buf[:] = bytes(len(buf))


def as_bytes(value: BytesLike, name: str, size: int) -> bytes:
    """
    Validate a byte-like value against a fixed size.

    Args:
        value: Raw input
        name: Type name used in error messages
        size: Required length in bytes

    Returns:
        The value as bytes

    Raises:
        TypeError: If value is not byte-like
        InvalidKeyLengthError: If value has the wrong length
    """
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"{name} requires bytes, got {type(value).__name__}")
    data = bytes(value)
    if len(data) != size:
        raise InvalidKeyLengthError(name, size, len(data))
    return data


def parse_hex(text: str, name: str) -> bytes:
    """Decode a hex string, reporting bad text as a format violation."""
    if not isinstance(text, str):
        raise TypeError(f"{name}.from_hex requires str, got {type(text).__name__}")
    try:
        return bytes.fromhex(text)
    except ValueError as e:
        raise InvalidKeyFormatError(f"{name} is not valid hex: {e}") from e


class SecretBytes:
    """
    Fixed-size secret that can be wiped.

    Subclasses set ``SIZE`` to pin the required length. Instances compare
    in constant time (wiped secrets and secrets of another type compare
    unequal) and never show their contents in ``repr``.
    """

    SIZE: Optional[int] = None

    __slots__ = ("_buf", "_wiped")

    def __init__(self, data: BytesLike) -> None:
        name = type(self).__name__
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"{name} requires bytes, got {type(data).__name__}")
        buf = bytearray(data)
        if self.SIZE is not None and len(buf) != self.SIZE:
            wipe_bytearray(buf)
            raise InvalidKeyLengthError(name, self.SIZE, len(buf))
        self._buf = buf
        self._wiped = False

    @classmethod
    def from_hex(cls, text: str):
        """Create a secret from its hex encoding."""
        return cls(parse_hex(text, cls.__name__))

    @property
    def wiped(self) -> bool:
        return self._wiped

    def view(self) -> memoryview:
        """Read-only view of the secret without copying it."""
        self._check()
        return memoryview(self._buf).toreadonly()

    def hex(self) -> str:
        self._check()
        return self._buf.hex()

    def wipe(self) -> None:
        """Overwrite the secret with zeros. Safe to call repeatedly."""
        wipe_bytearray(self._buf)
        self._wiped = True

    def _check(self) -> None:
        if self._wiped:
            raise SecretWipedError(f"{type(self).__name__} has been wiped")

    def __bytes__(self) -> bytes:
        self._check()
        return bytes(self._buf)

    def __len__(self) -> int:
        return len(self._buf)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SecretBytes):
            if type(self) is not type(other) or self._wiped or other._wiped:
                return False
            return hmac.compare_digest(self._buf, other._buf)
        if isinstance(other, (bytes, bytearray, memoryview)):
            return not self._wiped and hmac.compare_digest(self._buf, bytes(other))
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        state = "wiped" if self._wiped else f"{len(self._buf)} bytes"
        return f"<{type(self).__name__} {state}>"

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.wipe()

    def __del__(self) -> None:
        buf = getattr(self, "_buf", None)
        if buf is not None:
            wipe_bytearray(buf)
