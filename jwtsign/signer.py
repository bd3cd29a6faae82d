"""RSA signatures over token signing input."""

from __future__ import annotations

from cryptography.hazmat.primitives.asymmetric import padding

from jwtsign.algorithms import Algorithm
from jwtsign.encoding import b64url
from jwtsign.errors import CryptoError
from jwtsign.keys import RSAKey


def sign(algorithm: Algorithm, key: RSAKey, message: bytes) -> bytes:
    """Sign ``message`` with ``key`` using ``algorithm``.

    RS256 is RSASSA-PKCS1-v1_5 over a SHA-256 digest. Algorithms without an
    implementation raise UnsupportedAlgorithmError before the key is used.
    """
    digest = algorithm.digest()
    try:
        return key._produce_key().sign(message, padding.PKCS1v15(), digest)
    except Exception as e:
        raise CryptoError(f"{algorithm} signing failed", e) from e


def sign_b64url(algorithm: Algorithm, key: RSAKey, message: bytes) -> str:
    return b64url(sign(algorithm, key, message))
