"""Directional session key derivation.

    c2s key = H(H(H(net_key || a || b || c)) || server_pk)
    s2c key = H(H(H(net_key || a || b || c)) || client_pk)

Both directions consume the same shared secrets; only the bound public
key differs.
"""

from .config import DEFAULT_SUITE, DerivationSuite
from .hasher import bind_public_key, double_hash
from .keys import (
    ClientPublicKey,
    NetworkKey,
    PublicKey,
    ServerPublicKey,
    SessionKey,
    SharedA,
    SharedB,
    SharedC,
    coerce,
)


def derive_key(
    recipient_pk: PublicKey,
    net_key: NetworkKey,
    shared_a: SharedA,
    shared_b: SharedB,
    shared_c: SharedC,
    suite: DerivationSuite = DEFAULT_SUITE,
) -> SessionKey:
    """
    Derive the session key for traffic addressed to recipient_pk.

    Args:
        recipient_pk: Static public key of the party that decrypts
        net_key: Network key (32 bytes)
        shared_a: Shared secret A (32 bytes)
        shared_b: Shared secret B (32 bytes)
        shared_c: Shared secret C (32 bytes)
        suite: Primitive suite

    Returns:
        SessionKey of suite.key_size bytes
    """
    with double_hash(net_key, shared_a, shared_b, shared_c, suite) as digest:
        return bind_public_key(digest, recipient_pk, suite)


def client_to_server_key(
    server_pk: ServerPublicKey,
    net_key: NetworkKey,
    shared_a: SharedA,
    shared_b: SharedB,
    shared_c: SharedC,
    suite: DerivationSuite = DEFAULT_SUITE,
) -> SessionKey:
    """Key the client seals with and the server opens with."""
    return derive_key(
        coerce(ServerPublicKey, server_pk),
        net_key,
        shared_a,
        shared_b,
        shared_c,
        suite,
    )


def server_to_client_key(
    client_pk: ClientPublicKey,
    net_key: NetworkKey,
    shared_a: SharedA,
    shared_b: SharedB,
    shared_c: SharedC,
    suite: DerivationSuite = DEFAULT_SUITE,
) -> SessionKey:
    """Key the server seals with and the client opens with."""
    return derive_key(
        coerce(ClientPublicKey, client_pk),
        net_key,
        shared_a,
        shared_b,
        shared_c,
        suite,
    )
