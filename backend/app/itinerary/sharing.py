"""Sharing codec - reversible itinerary <-> URL-safe token mapping.

The token is canonical JSON (client field names, sorted keys, compact
separators, UTF-8) in URL-safe base64 with the ``=`` padding stripped, so it
can sit in a query parameter without escaping.
"""

import base64
import binascii
import json
from collections.abc import Mapping
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from pydantic import ValidationError as PydanticValidationError

from backend.app.errors import DecodeError
from backend.app.models.itinerary import Itinerary

SHARE_QUERY_PARAM = "trip"


def encode(itinerary: Itinerary) -> str:
    """Encode an itinerary into a URL-safe token."""
    canonical = json.dumps(
        itinerary.to_wire(),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )
    token = base64.urlsafe_b64encode(canonical.encode("utf-8")).decode("ascii")
    return token.rstrip("=")


def decode(token: str) -> Itinerary:
    """Decode a token produced by :func:`encode`.

    Raises:
        DecodeError: If the token is not URL-safe base64, not UTF-8 JSON, or
            not a well-formed Itinerary.
    """
    token = token.strip()
    if not token:
        raise DecodeError("empty share token")

    try:
        padded = token + "=" * (-len(token) % 4)
        raw = base64.b64decode(padded, altchars=b"-_", validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"share token is not valid base64: {e}") from e

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError("share token does not contain UTF-8 text") from e

    try:
        return Itinerary.model_validate_json(text, strict=True)
    except PydanticValidationError as e:
        raise DecodeError(f"share token is not a valid itinerary: {e.error_count()} error(s)") from e


def build_share_url(base_url: str, itinerary: Itinerary, param: str = SHARE_QUERY_PARAM) -> str:
    """Return ``base_url`` with the encoded itinerary set as a query parameter."""
    parts = urlsplit(base_url)
    query = [(k, v) for k, v in parse_qsl(parts.query, keep_blank_values=True) if k != param]
    query.append((param, encode(itinerary)))
    return urlunsplit(parts._replace(query=urlencode(query)))


def token_from_query(params: Mapping[str, str | list[str]], param: str = SHARE_QUERY_PARAM) -> str | None:
    """Read the share token from query parameters, if present."""
    value = params.get(param)
    if isinstance(value, list):
        value = value[0] if value else None
    return value or None
