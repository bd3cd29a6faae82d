"""Canonical JSON and base64url encoding for token segments.

Segments use the URL-safe base64 alphabet with ``=`` padding stripped,
as in RFC 7515. The same policy applies to header, payload and signature.
"""

from __future__ import annotations

import base64
import dataclasses
import json
from typing import Any

from jwtsign.errors import SerializationError


def b64url(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def _to_jsonable(value: Any) -> Any:
    """Reduce structured payload objects to plain JSON values.

    Used as the ``default`` hook of ``json.dumps``, so objects nested inside
    dicts and lists are reduced too. Dataclasses and pydantic models keep
    field declaration order.
    """
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if hasattr(value, "model_dump"):
        return value.model_dump(mode="json")
    if hasattr(value, "to_dict"):
        return value.to_dict()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(value: Any, indent: int | None = None) -> str:
    """Serialize ``value`` to JSON without sorting keys."""
    try:
        return json.dumps(
            value,
            separators=None if indent else (",", ":"),
            indent=indent,
            ensure_ascii=False,
            allow_nan=False,
            default=_to_jsonable,
        )
    except (TypeError, ValueError, RecursionError) as e:
        raise SerializationError("Cannot serialize value to JSON", e) from e


def encode_json_b64url(value: Any) -> str:
    text = to_json(value)
    try:
        data = text.encode("utf-8")
    except UnicodeEncodeError as e:
        # lone surrogates survive json.dumps with ensure_ascii=False
        raise SerializationError("JSON text is not valid UTF-8", e) from e
    return b64url(data)
