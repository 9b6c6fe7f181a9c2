"""Signing with HMAC-SHA256.

This is the only place that names the HS256 algorithm.  Other HMAC
algorithms live in sibling modules that supply their own header and hash and
share the generic codec.
"""

from __future__ import annotations

from cryptography.hazmat.primitives import hashes

from ..claims import Claims
from .codec import decode_generic, encode_generic
from .mac import Key, compute_hmac

__all__ = ["HEADER", "decode", "encode"]

HEADER = "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9"
"""Encoded header for every HS256 token: ``{"alg":"HS256","typ":"JWT"}``."""


def encode(claims: Claims, key: Key) -> str:
    """Encode a set of claims and sign with HMAC-SHA256.

    Parameters
    ----------
    claims
        Claims for the token payload.
    key
        Shared secret.  Text is used as its UTF-8 encoding.

    Returns
    -------
    str
        The signed token in JWS Compact Serialization.
    """

    def sign(signing_input: bytes) -> bytes:
        return compute_hmac(key, hashes.SHA256(), signing_input)

    return encode_generic(claims, HEADER, sign)


def decode(token: str, key: Key) -> Claims:
    """Decode a JWT signed with HMAC-SHA256.

    Parameters
    ----------
    token
        The token in JWS Compact Serialization.
    key
        Shared secret.  Text is used as its UTF-8 encoding.

    Returns
    -------
    Claims
        The claims of the verified token.  Registered claims such as ``exp``
        are not checked.

    Raises
    ------
    hsjwt.exceptions.InvalidSignatureError
        Raised if the token was not signed with this key.
    hsjwt.exceptions.MalformedTokenError
        Raised if the token could not be parsed.
    """

    def sign(header: bytes, payload: bytes) -> bytes:
        return compute_hmac(key, hashes.SHA256(), header, b".", payload)

    return decode_generic(token, sign)
