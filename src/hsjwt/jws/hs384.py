"""Signing with HMAC-SHA384."""

from __future__ import annotations

from cryptography.hazmat.primitives import hashes

from ..claims import Claims
from .codec import decode_generic, encode_generic
from .mac import Key, compute_hmac

__all__ = ["HEADER", "decode", "encode"]

HEADER = "eyJhbGciOiJIUzM4NCIsInR5cCI6IkpXVCJ9"
"""Encoded header for every HS384 token: ``{"alg":"HS384","typ":"JWT"}``."""


def encode(claims: Claims, key: Key) -> str:
    """Encode a set of claims and sign with HMAC-SHA384."""
    return encode_generic(
        claims, HEADER, lambda data: compute_hmac(key, hashes.SHA384(), data)
    )


def decode(token: str, key: Key) -> Claims:
    """Decode a JWT signed with HMAC-SHA384.

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
            key, hashes.SHA384(), header, b".", payload
        ),
    )
