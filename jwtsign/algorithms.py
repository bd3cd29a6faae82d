"""Signing algorithms and their digest lookup."""

from __future__ import annotations

from enum import Enum

from cryptography.hazmat.primitives import hashes

from jwtsign.errors import UnsupportedAlgorithmError


class Algorithm(str, Enum):
    """JWS algorithms known to jwtsign. Only RS256 can sign."""

    RS256 = "RS256"
    HS256 = "HS256"

    def __str__(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: "str | Algorithm") -> "Algorithm":
        if isinstance(name, Algorithm):
            return name
        try:
            return cls(name.strip().upper())
        except ValueError:
            raise UnsupportedAlgorithmError(f"Unknown algorithm '{name}'") from None

    def digest(self) -> hashes.HashAlgorithm:
        """Return the hash used by this algorithm's signature scheme."""
        digest = _DIGESTS.get(self)
        if digest is None:
            raise UnsupportedAlgorithmError(f"Algorithm {self.value} is not implemented")
        return digest()


DEFAULT_ALGORITHM = Algorithm.RS256

# HS256 is reserved: no entry means no working implementation.
_DIGESTS: dict[Algorithm, type[hashes.HashAlgorithm]] = {
    Algorithm.RS256: hashes.SHA256,
}
