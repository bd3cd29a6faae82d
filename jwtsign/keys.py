"""RSA private key handle loaded from PEM."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from loguru import logger

from jwtsign.errors import CryptoError, KeyFileError


class RSAKey:
    """
    Read-only RSA private key used by the signer.

    The wrapped key is never mutated or exported, so one instance can be
    shared between tokens and threads.
    """

    __slots__ = ("_key",)

    def __init__(self, key: rsa.RSAPrivateKey):
        if not isinstance(key, rsa.RSAPrivateKey):
            raise CryptoError(f"Expected an RSA private key, got {type(key).__name__}")
        object.__setattr__(self, "_key", key)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("RSAKey is immutable")

    def __repr__(self) -> str:
        return f"RSAKey(bits={self.key_size})"

    @property
    def key_size(self) -> int:
        return self._key.key_size

    @classmethod
    def from_pem(cls, filename: str | Path) -> "RSAKey":
        """Load a PEM-encoded RSA private key from a file."""
        path = Path(filename).expanduser()
        try:
            data = path.read_bytes()
        except OSError as e:
            logger.error(f"Cannot read key file {path}: {e}")
            raise KeyFileError(f"Cannot read key file {path}", e) from e

        key = cls.from_str(data)
        logger.debug(f"Loaded {key.key_size}-bit RSA key from {path}")
        return key

    @classmethod
    def from_str(cls, pem: str | bytes) -> "RSAKey":
        """Parse a PEM-encoded RSA private key held in memory."""
        data = pem.encode() if isinstance(pem, str) else pem
        try:
            key = serialization.load_pem_private_key(data, password=None)
        except (ValueError, TypeError) as e:
            raise CryptoError("Invalid PEM private key", e) from e
        except UnsupportedAlgorithm as e:
            raise CryptoError("Unsupported private key", e) from e
        return cls.from_key(key)

    @classmethod
    def from_key(cls, key: Any) -> "RSAKey":
        """Wrap an already-loaded ``cryptography`` private key."""
        return cls(key)

    def public_key(self) -> rsa.RSAPublicKey:
        return self._key.public_key()

    def _produce_key(self) -> rsa.RSAPrivateKey:
        return self._key
