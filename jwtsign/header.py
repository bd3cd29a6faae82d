"""JWT header value object."""

from __future__ import annotations

import json
from dataclasses import dataclass

from jwtsign.algorithms import Algorithm

TOKEN_TYPE = "JWT"


@dataclass(frozen=True)
class JwtHeader:
    alg: str
    typ: str = TOKEN_TYPE

    def to_dict(self) -> dict[str, str]:
        # alg before typ
        return {"alg": self.alg, "typ": self.typ}

    def __str__(self) -> str:
        return f"JwtHeader: {json.dumps(self.to_dict(), indent=2)}"


def build_header(algorithm: Algorithm) -> JwtHeader:
    """Build the fixed-shape header for ``algorithm``."""
    return JwtHeader(alg=algorithm.display_name)
