"""Token assembly: header, payload and signature in compact form."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from loguru import logger

from jwtsign.algorithms import DEFAULT_ALGORITHM, Algorithm
from jwtsign.encoding import encode_json_b64url, to_json
from jwtsign.header import JwtHeader, build_header
from jwtsign.keys import RSAKey
from jwtsign.signer import sign_b64url

T = TypeVar("T")


class Jwt(Generic[T]):
    """
    A payload bound to a signing key, ready to be finalized.

    ``finalize`` produces ``base64url(header).base64url(payload).base64url(sig)``
    where the signature covers the first two segments exactly as emitted.
    The payload is kept by reference, so changes made to it before
    ``finalize`` show up in the token. Nothing is cached.

    Example::

        key = RSAKey.from_pem("~/.keys/issuer.pem")
        token = Jwt({"sub": "42"}, key).finalize()
    """

    def __init__(self, body: T, key: RSAKey, algorithm: Algorithm | str | None = None):
        self.body = body
        self._key = key
        self._algorithm = Algorithm.parse(algorithm) if algorithm else DEFAULT_ALGORITHM

    @property
    def algorithm(self) -> Algorithm:
        return self._algorithm

    def header(self) -> JwtHeader:
        return build_header(self._algorithm)

    def signing_input(self) -> str:
        header = encode_json_b64url(self.header())
        body = encode_json_b64url(self.body)
        return f"{header}.{body}"

    def finalize(self) -> str:
        """Encode and sign the token. Raises a JWTError subclass on failure."""
        signing_input = self.signing_input()
        signature = sign_b64url(self._algorithm, self._key, signing_input.encode("ascii"))
        logger.debug(
            f"Finalized {self._algorithm} token "
            f"({len(signing_input)} char signing input, {len(signature)} char signature)"
        )
        return f"{signing_input}.{signature}"

    def display(self) -> str:
        return (
            f"Jwt: \n header: {to_json(self.header(), indent=2)} \n"
            f" body: {to_json(self.body, indent=2)}, \n"
            f" algorithm: {self._algorithm}"
        )

    def __str__(self) -> str:
        return self.display()

    def __repr__(self) -> str:
        return f"Jwt(algorithm={self._algorithm}, key={self._key!r})"


def encode(body: Any, key: RSAKey, algorithm: Algorithm | str | None = None) -> str:
    """Shortcut for ``Jwt(body, key, algorithm).finalize()``."""
    return Jwt(body, key, algorithm).finalize()
