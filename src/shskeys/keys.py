"""Typed fixed-size inputs for handshake key derivation."""

from typing import Union

from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey
from cryptography.hazmat.primitives.asymmetric.x25519 import X25519PublicKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from .secret import BytesLike, SecretBytes, as_bytes, parse_hex
from .types import (
    MAIN_NETWORK_KEY_HEX,
    NETWORK_KEY_SIZE,
    PUBLIC_KEY_SIZE,
    SHARED_SECRET_SIZE,
)


class FixedBytes:
    """Immutable, non-secret byte string of a fixed length."""

    SIZE = 0

    __slots__ = ("_data",)

    def __init__(self, data: BytesLike) -> None:
        self._data = as_bytes(data, type(self).__name__, self.SIZE)

    @classmethod
    def from_hex(cls, text: str):
        """Create a value from its hex encoding."""
        return cls(parse_hex(text, cls.__name__))

    def hex(self) -> str:
        return self._data.hex()

    def __bytes__(self) -> bytes:
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FixedBytes):
            return type(self) is type(other) and self._data == other._data
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self._data == bytes(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._data))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data.hex()!r})"


class NetworkKey(FixedBytes):
    """Pre-shared identifier of a network; mixed into every derivation."""

    SIZE = NETWORK_KEY_SIZE

    @classmethod
    def main(cls) -> "NetworkKey":
        """Network key of the main Secure Scuttlebutt network."""
        return cls.from_hex(MAIN_NETWORK_KEY_HEX)


class PublicKey(FixedBytes):
    """Raw 32-byte curve public key of either party."""

    SIZE = PUBLIC_KEY_SIZE

    @classmethod
    def from_key(cls, key: Union[X25519PublicKey, Ed25519PublicKey]):
        """Create a public key from a ``cryptography`` key object."""
        return cls(public_key_to_bytes(key))


class ClientPublicKey(PublicKey):
    """Client's long-term (static) public key."""


class ServerPublicKey(PublicKey):
    """Server's long-term (static) public key."""


class ClientEphPublicKey(PublicKey):
    """Client's one-time public key for this handshake."""


class ServerEphPublicKey(PublicKey):
    """Server's one-time public key for this handshake."""


class SharedSecret(SecretBytes):
    """Diffie-Hellman shared secret produced earlier in the handshake."""

    SIZE = SHARED_SECRET_SIZE


class SharedA(SharedSecret):
    """Shared secret of both ephemeral keys."""


class SharedB(SharedSecret):
    """Shared secret of the client ephemeral and server static keys."""


class SharedC(SharedSecret):
    """Shared secret of the client static and server ephemeral keys."""


class SessionKey(SecretBytes):
    """Symmetric key for one traffic direction."""


def public_key_to_bytes(public_key: Union[X25519PublicKey, Ed25519PublicKey]) -> bytes:
    """Convert an X25519 or Ed25519 public key to raw bytes."""
    if not isinstance(public_key, (X25519PublicKey, Ed25519PublicKey)):
        raise TypeError(
            f"Expected X25519PublicKey or Ed25519PublicKey, got {type(public_key).__name__}"
        )
    return public_key.public_bytes(Encoding.Raw, PublicFormat.Raw)


def coerce(cls, value):
    """
    Return value as an instance of cls.

    Instances of cls pass through untouched so callers keep ownership of
    the object they wipe. Raw bytes and role-less ``PublicKey`` values are
    wrapped. A value typed for a different role is rejected, since a
    swapped binding key silently produces the other direction's key.

    Raises:
        TypeError: If value belongs to another role or is not byte-like
        InvalidKeyLengthError: If value has the wrong length
    """
    if isinstance(value, cls):
        return value
    if type(value) is PublicKey and issubclass(cls, PublicKey):
        return cls(bytes(value))
    if isinstance(value, (FixedBytes, SecretBytes)):
        raise TypeError(f"Expected {cls.__name__}, got {type(value).__name__}")
    return cls(value)
