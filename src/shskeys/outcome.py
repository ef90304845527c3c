"""Assembly of the per-party session keys and nonce seeds."""

import logging
from dataclasses import dataclass

from .config import DEFAULT_SUITE, DerivationSuite
from .derivation import client_to_server_key, server_to_client_key
from .keys import (
    ClientEphPublicKey,
    ClientPublicKey,
    NetworkKey,
    ServerEphPublicKey,
    ServerPublicKey,
    SessionKey,
    SharedA,
    SharedB,
    SharedC,
    coerce,
)
from .noncegen import NonceSeed, derive_nonce_seed

logger = logging.getLogger(__name__)


@dataclass(frozen=True, repr=False)
class HandshakeOutcome:
    """
    Session material of one party after a completed handshake.

    Each party reads with the key bound to its own static public key and
    writes with the key bound to the counterparty's, so one side's
    write_key equals the other side's read_key. Read nonces start from the
    party's own ephemeral key, write nonces from the counterparty's.

    The outcome owns both session keys: wipe() or leaving a ``with``
    block erases them.
    """
    read_key: SessionKey
    read_nonce_seed: NonceSeed
    write_key: SessionKey
    write_nonce_seed: NonceSeed

    @classmethod
    def client_side(
        cls,
        pk: ClientPublicKey,
        server_pk: ServerPublicKey,
        eph_pk: ClientEphPublicKey,
        server_eph_pk: ServerEphPublicKey,
        net_key: NetworkKey,
        shared_a: SharedA,
        shared_b: SharedB,
        shared_c: SharedC,
        suite: DerivationSuite = DEFAULT_SUITE,
    ) -> "HandshakeOutcome":
        """
        Build the client's outcome.

        Args:
            pk: Client's static public key
            server_pk: Server's static public key
            eph_pk: Client's ephemeral public key
            server_eph_pk: Server's ephemeral public key
            net_key: Network key
            shared_a: Shared secret A
            shared_b: Shared secret B
            shared_c: Shared secret C
            suite: Primitive suite

        Returns:
            HandshakeOutcome for the client
        """
        pk = coerce(ClientPublicKey, pk)
        server_pk = coerce(ServerPublicKey, server_pk)
        eph_pk = coerce(ClientEphPublicKey, eph_pk)
        server_eph_pk = coerce(ServerEphPublicKey, server_eph_pk)
        net_key = coerce(NetworkKey, net_key)

        outcome = cls(
            read_key=server_to_client_key(pk, net_key, shared_a, shared_b, shared_c, suite),
            read_nonce_seed=derive_nonce_seed(eph_pk, net_key, suite),
            write_key=client_to_server_key(server_pk, net_key, shared_a, shared_b, shared_c, suite),
            write_nonce_seed=derive_nonce_seed(server_eph_pk, net_key, suite),
        )
        logger.debug(
            "Assembled client outcome (%s, %d-byte keys)",
            suite.hash_algorithm.name, len(outcome.read_key),
        )
        return outcome

    @classmethod
    def server_side(
        cls,
        pk: ServerPublicKey,
        client_pk: ClientPublicKey,
        eph_pk: ServerEphPublicKey,
        client_eph_pk: ClientEphPublicKey,
        net_key: NetworkKey,
        shared_a: SharedA,
        shared_b: SharedB,
        shared_c: SharedC,
        suite: DerivationSuite = DEFAULT_SUITE,
    ) -> "HandshakeOutcome":
        """Build the server's outcome. Mirrors client_side with roles swapped."""
        pk = coerce(ServerPublicKey, pk)
        client_pk = coerce(ClientPublicKey, client_pk)
        eph_pk = coerce(ServerEphPublicKey, eph_pk)
        client_eph_pk = coerce(ClientEphPublicKey, client_eph_pk)
        net_key = coerce(NetworkKey, net_key)

        outcome = cls(
            read_key=client_to_server_key(pk, net_key, shared_a, shared_b, shared_c, suite),
            read_nonce_seed=derive_nonce_seed(eph_pk, net_key, suite),
            write_key=server_to_client_key(client_pk, net_key, shared_a, shared_b, shared_c, suite),
            write_nonce_seed=derive_nonce_seed(client_eph_pk, net_key, suite),
        )
        logger.debug(
            "Assembled server outcome (%s, %d-byte keys)",
            suite.hash_algorithm.name, len(outcome.read_key),
        )
        return outcome

    @property
    def wiped(self) -> bool:
        return self.read_key.wiped and self.write_key.wiped

    def wipe(self) -> None:
        """Erase both session keys."""
        self.read_key.wipe()
        self.write_key.wipe()

    def __enter__(self) -> "HandshakeOutcome":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.wipe()

    def __repr__(self) -> str:
        return (
            f"HandshakeOutcome(read_key={self.read_key!r}, "
            f"read_nonce_seed={self.read_nonce_seed!r}, "
            f"write_key={self.write_key!r}, "
            f"write_nonce_seed={self.write_nonce_seed!r})"
        )


def compute_outcome_as_client(
    pk: ClientPublicKey,
    server_pk: ServerPublicKey,
    eph_pk: ClientEphPublicKey,
    server_eph_pk: ServerEphPublicKey,
    net_key: NetworkKey,
    shared_a: SharedA,
    shared_b: SharedB,
    shared_c: SharedC,
    suite: DerivationSuite = DEFAULT_SUITE,
) -> HandshakeOutcome:
    """Compute the client's session material. See HandshakeOutcome.client_side."""
    return HandshakeOutcome.client_side(
        pk, server_pk, eph_pk, server_eph_pk, net_key, shared_a, shared_b, shared_c, suite
    )


def compute_outcome_as_server(
    pk: ServerPublicKey,
    client_pk: ClientPublicKey,
    eph_pk: ServerEphPublicKey,
    client_eph_pk: ClientEphPublicKey,
    net_key: NetworkKey,
    shared_a: SharedA,
    shared_b: SharedB,
    shared_c: SharedC,
    suite: DerivationSuite = DEFAULT_SUITE,
) -> HandshakeOutcome:
    """Compute the server's session material. See HandshakeOutcome.server_side."""
    return HandshakeOutcome.server_side(
        pk, client_pk, eph_pk, client_eph_pk, net_key, shared_a, shared_b, shared_c, suite
    )
