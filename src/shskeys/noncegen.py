"""Nonce generator seeds for box-stream traffic."""

from cryptography.hazmat.primitives.hmac import HMAC

from .config import DEFAULT_SUITE, DerivationSuite
from .keys import FixedBytes, NetworkKey, PublicKey, coerce
from .types import NONCE_SEED_SIZE


class NonceSeed(FixedBytes):
    """Initial nonce of one traffic direction."""

    SIZE = NONCE_SEED_SIZE


def derive_nonce_seed(
    eph_pk: PublicKey,
    net_key: NetworkKey,
    suite: DerivationSuite = DEFAULT_SUITE,
) -> NonceSeed:
    """
    Derive a nonce seed from an ephemeral public key.

    seed = HMAC-SHA-512-256(key=net_key, msg=eph_pk)[:24]

    Args:
        eph_pk: Ephemeral public key (32 bytes)
        net_key: Network key (32 bytes)
        suite: Primitive suite

    Returns:
        NonceSeed
    """
    suite.validate()
    mac = HMAC(bytes(coerce(NetworkKey, net_key)), suite.nonce_mac_algorithm)
    mac.update(bytes(coerce(PublicKey, eph_pk)))
    tag = mac.finalize()[:suite.nonce_mac_size]
    return NonceSeed(tag[:NonceSeed.SIZE])
