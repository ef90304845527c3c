"""
Two-stage hashing of the handshake shared secrets.

Byte layout (no padding, separators or length prefixes):

    hash input 1 = net_key (32) || shared_a (32) || shared_b (32) || shared_c (32)
    double hash  = H(H(hash input 1))
    hash input 2 = double hash (32) || public key (32)
    session key  = H(hash input 2)[:key_size]

Every independent implementation of the handshake uses this layout, so any
change here breaks interoperability.
"""

from cryptography.hazmat.primitives.hashes import Hash

from .config import DEFAULT_SUITE, DerivationSuite
from .keys import (
    NetworkKey,
    PublicKey,
    SessionKey,
    SharedA,
    SharedB,
    SharedC,
    coerce,
)
from .secret import BytesLike, SecretBytes, wipe_bytearray


class SecretDigest(SecretBytes):
    """Double hash of the network key and the three shared secrets."""


def _digest(data: BytesLike, suite: DerivationSuite) -> bytearray:
    h = Hash(suite.hash_algorithm)
    h.update(data)
    return bytearray(h.finalize())


def serialize_shared_secrets(
    net_key: NetworkKey,
    shared_a: SharedA,
    shared_b: SharedB,
    shared_c: SharedC,
) -> bytearray:
    """
    Lay out the first hash input.

    Returns a bytearray so the caller can wipe it once hashed.
    """
    buf = bytearray()
    buf += bytes(net_key)
    buf += shared_a.view()
    buf += shared_b.view()
    buf += shared_c.view()
    return buf


def double_hash(
    net_key: NetworkKey,
    shared_a: SharedA,
    shared_b: SharedB,
    shared_c: SharedC,
    suite: DerivationSuite = DEFAULT_SUITE,
) -> SecretDigest:
    """
    Hash the network key and shared secrets, then hash the result again.

    Args:
        net_key: Network key (32 bytes)
        shared_a: Shared secret A (32 bytes)
        shared_b: Shared secret B (32 bytes)
        shared_c: Shared secret C (32 bytes)
        suite: Primitive suite

    Returns:
        SecretDigest of the suite's digest size
    """
    suite.validate()
    data = serialize_shared_secrets(
        coerce(NetworkKey, net_key),
        coerce(SharedA, shared_a),
        coerce(SharedB, shared_b),
        coerce(SharedC, shared_c),
    )
    first = _digest(data, suite)
    wipe_bytearray(data)

    second = _digest(first, suite)
    wipe_bytearray(first)

    digest = SecretDigest(second)
    wipe_bytearray(second)
    return digest


def bind_public_key(
    digest: SecretDigest,
    pk: PublicKey,
    suite: DerivationSuite = DEFAULT_SUITE,
) -> SessionKey:
    """
    Bind a double hash to a public key, producing a session key.

    Args:
        digest: Output of double_hash
        pk: Public key that selects the traffic direction
        suite: Primitive suite

    Returns:
        SessionKey of suite.key_size bytes

    Raises:
        ConfigurationError: If the hash output is shorter than the key size
    """
    suite.validate()
    data = bytearray(coerce(SecretDigest, digest).view())
    data += bytes(coerce(PublicKey, pk))

    out = _digest(data, suite)
    wipe_bytearray(data)

    key = SessionKey(memoryview(out)[:suite.key_size])
    wipe_bytearray(out)
    return key
