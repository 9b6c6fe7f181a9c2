"""Signing with HMAC-SHA512."""

from __future__ import annotations

from cryptography.hazmat.primitives import hashes

from ..claims import Claims
from .codec import decode_generic, encode_generic
from .mac import Key, compute_hmac

__all__ = ["HEADER", "decode", "encode"]

HEADER = "eyJhbGciOiJIUzUxMiIsInR5cCI6IkpXVCJ9"
"""Encoded header for every HS512 token: ``{"alg":"HS512","typ":"JWT"}``."""


def encode(claims: Claims, key: Key) -> str:
    """Encode a set of claims and sign with HMAC-SHA512."""
    return encode_generic(
        claims, HEADER, lambda data: compute_hmac(key, hashes.SHA512(), data)
    )


def decode(token: str, key: Key) -> Claims:
    """Decode a JWT signed with HMAC-SHA512.

    Raises
    ------
    hsjwt.exceptions.InvalidSignatureError
        Raised if the token was not signed with this key.
    hsjwt.exceptions.MalformedTokenError
        Raised if the token could not be parsed.
    """
    return decode_generic(
        token,
        lambda header, payload: compute_hmac(
            key, hashes.SHA512(), header, b".", payload
        ),
    )
