"""Error types raised while loading keys and building tokens."""

from __future__ import annotations


class JWTError(Exception):
    """Base class for every failure surfaced by jwtsign."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message}: {self.cause}"


class KeyFileError(JWTError):
    """Key file could not be opened or read."""


class SerializationError(JWTError):
    """Header or payload could not be turned into JSON."""


class CryptoError(JWTError):
    """Key parsing or the signing operation failed."""


class UnsupportedAlgorithmError(JWTError):
    """Algorithm is declared but has no signing implementation."""
