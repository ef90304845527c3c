"""Primitive suite configuration for key derivation."""

from dataclasses import dataclass, field

from cryptography.hazmat.primitives.hashes import HashAlgorithm, SHA256, SHA512

from .types import (
    ConfigurationError,
    KEY_SIZE,
    NONCE_SEED_SIZE,
    NONCE_MAC_SIZE,
)


@dataclass(frozen=True)
class DerivationSuite:
    """Hash and size parameters shared by every derivation step.

    Attributes:
        hash_algorithm: Hash used for the double hash and the key binding.
        key_size: Required session key length in bytes.
        nonce_mac_algorithm: Hash underlying the HMAC that seeds nonces.
        nonce_mac_size: Length the nonce MAC is truncated to.
    """
    hash_algorithm: HashAlgorithm = field(default_factory=SHA256)
    key_size: int = KEY_SIZE
    nonce_mac_algorithm: HashAlgorithm = field(default_factory=SHA512)
    nonce_mac_size: int = NONCE_MAC_SIZE

    @property
    def digest_size(self) -> int:
        """Output length of the derivation hash."""
        return self.hash_algorithm.digest_size

    def validate(self) -> None:
        """
        Check that the suite can produce full-length keys and nonce seeds.

        Raises:
            ConfigurationError: If a size is not positive or a primitive
                output is shorter than the value cut from it
        """
        if self.key_size <= 0 or self.nonce_mac_size <= 0:
            raise ConfigurationError("Suite sizes must be positive")

        if self.digest_size < self.key_size:
            raise ConfigurationError(
                f"{self.hash_algorithm.name} produces {self.digest_size} bytes, "
                f"key requires {self.key_size}"
            )

        if self.nonce_mac_algorithm.digest_size < self.nonce_mac_size:
            raise ConfigurationError(
                f"HMAC-{self.nonce_mac_algorithm.name} produces "
                f"{self.nonce_mac_algorithm.digest_size} bytes, "
                f"truncation requires {self.nonce_mac_size}"
            )

        if self.nonce_mac_size < NONCE_SEED_SIZE:
            raise ConfigurationError(
                f"Nonce MAC of {self.nonce_mac_size} bytes cannot supply a "
                f"{NONCE_SEED_SIZE}-byte nonce seed"
            )


DEFAULT_SUITE = DerivationSuite()
