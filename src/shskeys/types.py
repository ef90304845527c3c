"""Type definitions and constants for secret-handshake key derivation."""


# Primitive sizes
KEY_SIZE = 32  # secretbox key
NETWORK_KEY_SIZE = 32
PUBLIC_KEY_SIZE = 32
SHARED_SECRET_SIZE = 32
NONCE_SEED_SIZE = 24  # secretbox nonce
NONCE_MAC_SIZE = 32  # HMAC-SHA-512-256

# Network key of the main Secure Scuttlebutt network
MAIN_NETWORK_KEY_HEX = "d4a1cb88a66f02f8db635ce26441cc5dac1b08420ceaac230839b755845a9ffb"


# Exception types
class ShsKeysError(Exception):
    """Base exception for key derivation errors."""
    pass


class InvalidKeyFormatError(ShsKeysError, ValueError):
    """Input cannot be decoded into a fixed-size value."""
    pass


class InvalidKeyLengthError(InvalidKeyFormatError):
    """Input byte sequence does not have its required fixed size."""

    def __init__(self, name: str, expected: int, actual: int) -> None:
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(f"{name} must be {expected} bytes, got {actual}")


class ConfigurationError(ShsKeysError):
    """Primitive suite cannot produce keys of the required length."""
    pass


class SecretWipedError(ShsKeysError):
    """Secret material was used after being wiped."""
    pass
