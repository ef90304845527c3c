"""Shared fixtures for shskeys tests."""

import pytest

from shskeys.keys import (
    ClientEphPublicKey,
    ClientPublicKey,
    NetworkKey,
    ServerEphPublicKey,
    ServerPublicKey,
    SharedA,
    SharedB,
    SharedC,
)
from .test_vectors import (
    NET_KEY_HEX,
    SHARED_A_HEX,
    SHARED_B_HEX,
    SHARED_C_HEX,
    CLIENT_PK_HEX,
    SERVER_PK_HEX,
    CLIENT_EPH_PK_HEX,
    SERVER_EPH_PK_HEX,
)


@pytest.fixture
def net_key() -> NetworkKey:
    return NetworkKey.from_hex(NET_KEY_HEX)


@pytest.fixture
def shared():
    """Shared secrets A, B and C."""
    return (
        SharedA.from_hex(SHARED_A_HEX),
        SharedB.from_hex(SHARED_B_HEX),
        SharedC.from_hex(SHARED_C_HEX),
    )


@pytest.fixture
def client_keys():
    """Client static and ephemeral public keys."""
    return ClientPublicKey.from_hex(CLIENT_PK_HEX), ClientEphPublicKey.from_hex(CLIENT_EPH_PK_HEX)


@pytest.fixture
def server_keys():
    """Server static and ephemeral public keys."""
    return ServerPublicKey.from_hex(SERVER_PK_HEX), ServerEphPublicKey.from_hex(SERVER_EPH_PK_HEX)
