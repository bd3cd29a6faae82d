"""jwtsign - build and RS256-sign compact JSON Web Tokens."""

__version__ = "0.1.0"

from jwtsign.algorithms import Algorithm
from jwtsign.errors import (
    CryptoError,
    JWTError,
    KeyFileError,
    SerializationError,
    UnsupportedAlgorithmError,
)
from jwtsign.header import JwtHeader, build_header
from jwtsign.keys import RSAKey
from jwtsign.token import Jwt, encode

__all__ = [
    "Algorithm",
    "CryptoError",
    "JWTError",
    "Jwt",
    "JwtHeader",
    "KeyFileError",
    "RSAKey",
    "SerializationError",
    "UnsupportedAlgorithmError",
    "build_header",
    "encode",
]
