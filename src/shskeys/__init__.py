"""
shskeys - Session key derivation for the secret handshake

Turns the three Diffie-Hellman shared secrets of a completed secret
handshake into directional box-stream keys and nonce seeds.
"""

from .types import (
    KEY_SIZE,
    NETWORK_KEY_SIZE,
    PUBLIC_KEY_SIZE,
    SHARED_SECRET_SIZE,
    NONCE_SEED_SIZE,
    MAIN_NETWORK_KEY_HEX,
    ShsKeysError,
    InvalidKeyFormatError,
    InvalidKeyLengthError,
    ConfigurationError,
    SecretWipedError,
)
from .config import DerivationSuite, DEFAULT_SUITE
from .secret import SecretBytes, wipe_bytearray
from .keys import (
    NetworkKey,
    PublicKey,
    ClientPublicKey,
    ServerPublicKey,
    ClientEphPublicKey,
    ServerEphPublicKey,
    SharedA,
    SharedB,
    SharedC,
    SessionKey,
    public_key_to_bytes,
)
from .hasher import SecretDigest, serialize_shared_secrets, double_hash, bind_public_key
from .derivation import derive_key, client_to_server_key, server_to_client_key
from .noncegen import NonceSeed, derive_nonce_seed
from .outcome import (
    HandshakeOutcome,
    compute_outcome_as_client,
    compute_outcome_as_server,
)

__version__ = "0.1.0"

__all__ = [
    # Constants
    "KEY_SIZE",
    "NETWORK_KEY_SIZE",
    "PUBLIC_KEY_SIZE",
    "SHARED_SECRET_SIZE",
    "NONCE_SEED_SIZE",
    "MAIN_NETWORK_KEY_HEX",
    # Errors
    "ShsKeysError",
    "InvalidKeyFormatError",
    "InvalidKeyLengthError",
    "ConfigurationError",
    "SecretWipedError",
    # Config
    "DerivationSuite",
    "DEFAULT_SUITE",
    # Secrets
    "SecretBytes",
    "wipe_bytearray",
    # Keys
    "NetworkKey",
    "PublicKey",
    "ClientPublicKey",
    "ServerPublicKey",
    "ClientEphPublicKey",
    "ServerEphPublicKey",
    "SharedA",
    "SharedB",
    "SharedC",
    "SessionKey",
    "public_key_to_bytes",
    # Hasher
    "SecretDigest",
    "serialize_shared_secrets",
    "double_hash",
    "bind_public_key",
    # Derivation
    "derive_key",
    "client_to_server_key",
    "server_to_client_key",
    # Nonce seeds
    "NonceSeed",
    "derive_nonce_seed",
    # Outcome
    "HandshakeOutcome",
    "compute_outcome_as_client",
    "compute_outcome_as_server",
]
