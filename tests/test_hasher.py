"""Tests for the two-stage shared secret hash."""

import pytest
from cryptography.hazmat.primitives.hashes import Hash, SHA224, SHA256, SHA512

from shskeys.config import DerivationSuite
from shskeys.hasher import (
    SecretDigest,
    bind_public_key,
    double_hash,
    serialize_shared_secrets,
)
from shskeys.keys import PublicKey, SessionKey
from shskeys.types import ConfigurationError, InvalidKeyLengthError
from .test_vectors import (
    NET_KEY_HEX,
    SHARED_A_HEX,
    SHARED_B_HEX,
    SHARED_C_HEX,
    CLIENT_PK_HEX,
    SERVER_PK_HEX,
    FIRST_HASH_HEX,
    DOUBLE_HASH_HEX,
    CLIENT_TO_SERVER_KEY_HEX,
    SERVER_TO_CLIENT_KEY_HEX,
)


class TestSerialization:
    """Test the byte layout of the first hash input."""

    def test_field_order(self, net_key, shared) -> None:
        """Fields are concatenated as net_key, a, b, c."""
        data = serialize_shared_secrets(net_key, *shared)

        assert bytes(data) == bytes.fromhex(NET_KEY_HEX + SHARED_A_HEX + SHARED_B_HEX + SHARED_C_HEX)

    def test_no_padding(self, net_key, shared) -> None:
        """Serialized input is exactly four 32-byte fields."""
        data = serialize_shared_secrets(net_key, *shared)

        assert len(data) == 128
        assert isinstance(data, bytearray)


class TestDoubleHash:
    """Test the hash-of-hash over the shared secrets."""

    def test_double_hash_vector(self, net_key, shared) -> None:
        """Double hash matches the precomputed vector."""
        digest = double_hash(net_key, *shared)

        assert isinstance(digest, SecretDigest)
        assert digest.hex() == DOUBLE_HASH_HEX

    def test_first_stage_vector(self, net_key, shared) -> None:
        """Each stage of the double hash matches the precomputed vectors."""
        first = Hash(SHA256())
        first.update(bytes(serialize_shared_secrets(net_key, *shared)))
        first_digest = first.finalize()

        second = Hash(SHA256())
        second.update(first_digest)

        assert first_digest.hex() == FIRST_HASH_HEX
        assert second.finalize().hex() == DOUBLE_HASH_HEX

    def test_accepts_raw_bytes(self) -> None:
        """Raw byte inputs are wrapped and give the same digest."""
        digest = double_hash(
            bytes.fromhex(NET_KEY_HEX),
            bytes.fromhex(SHARED_A_HEX),
            bytes.fromhex(SHARED_B_HEX),
            bytes.fromhex(SHARED_C_HEX),
        )

        assert digest.hex() == DOUBLE_HASH_HEX

    def test_swapped_secrets_change_digest(self, net_key, shared) -> None:
        """Field order matters: swapping A and B changes the digest."""
        a, b, c = shared
        swapped = double_hash(
            net_key,
            bytes.fromhex(SHARED_B_HEX),
            bytes.fromhex(SHARED_A_HEX),
            c,
        )

        assert swapped.hex() != DOUBLE_HASH_HEX

    def test_rejects_short_secret(self, net_key, shared) -> None:
        """A 31-byte shared secret is rejected, not padded."""
        _, b, c = shared

        with pytest.raises(InvalidKeyLengthError, match="32 bytes"):
            double_hash(net_key, b"\x00" * 31, b, c)

    def test_rejects_long_network_key(self, shared) -> None:
        """A 33-byte network key is rejected, not truncated."""
        with pytest.raises(InvalidKeyLengthError, match="NetworkKey"):
            double_hash(b"\x00" * 33, *shared)

    def test_rejects_misplaced_secret(self, net_key, shared) -> None:
        """Secret B cannot be passed in the slot of secret A."""
        a, b, c = shared

        with pytest.raises(TypeError, match="SharedA"):
            double_hash(net_key, b, b, c)


class TestBindPublicKey:
    """Test binding the double hash to a public key."""

    def test_bind_server_key(self) -> None:
        """Binding the server key gives the client-to-server key."""
        digest = SecretDigest.from_hex(DOUBLE_HASH_HEX)
        key = bind_public_key(digest, PublicKey.from_hex(SERVER_PK_HEX))

        assert isinstance(key, SessionKey)
        assert key.hex() == CLIENT_TO_SERVER_KEY_HEX

    def test_bind_client_key(self) -> None:
        """Binding the client key gives the server-to-client key."""
        digest = SecretDigest.from_hex(DOUBLE_HASH_HEX)
        key = bind_public_key(digest, PublicKey.from_hex(CLIENT_PK_HEX))

        assert key.hex() == SERVER_TO_CLIENT_KEY_HEX

    def test_digest_left_intact(self) -> None:
        """Binding does not consume the digest."""
        digest = SecretDigest.from_hex(DOUBLE_HASH_HEX)
        bind_public_key(digest, PublicKey.from_hex(CLIENT_PK_HEX))

        assert not digest.wiped
        assert digest.hex() == DOUBLE_HASH_HEX

    def test_rejects_short_public_key(self) -> None:
        """A 16-byte public key is rejected."""
        digest = SecretDigest.from_hex(DOUBLE_HASH_HEX)

        with pytest.raises(InvalidKeyLengthError):
            bind_public_key(digest, b"\x01" * 16)

    def test_longer_hash_is_truncated(self) -> None:
        """A 64-byte hash output is cut to the key size."""
        suite = DerivationSuite(hash_algorithm=SHA512())
        digest = SecretDigest(bytes(64))
        key = bind_public_key(digest, PublicKey.from_hex(SERVER_PK_HEX), suite)

        assert len(key) == 32

    def test_shorter_hash_is_fatal(self) -> None:
        """A 28-byte hash cannot produce a 32-byte key."""
        suite = DerivationSuite(hash_algorithm=SHA224())
        digest = SecretDigest(bytes(28))

        with pytest.raises(ConfigurationError, match="key requires 32"):
            bind_public_key(digest, PublicKey.from_hex(SERVER_PK_HEX), suite)
