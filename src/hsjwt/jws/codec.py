"""Generic JWS Compact Serialization encoding and decoding.

Nothing in this module knows about a specific algorithm.  Algorithm bindings
supply a pre-encoded header and a function that computes the signature over
the signing input.
"""

from __future__ import annotations

import binascii
import json
from collections.abc import Callable

import structlog

from ..claims import Claims
from ..constants import LOGGER_NAME, SEGMENT_SEPARATOR
from ..exceptions import InvalidSignatureError, MalformedTokenError
from ..util import base64url_decode, base64url_encode, safe_compare

SignFunction = Callable[[bytes], bytes]
"""Computes the signature of a signing input."""

VerifyFunction = Callable[[bytes, bytes], bytes]
"""Computes the expected signature given raw header and payload segments."""

__all__ = [
    "SignFunction",
    "VerifyFunction",
    "decode_generic",
    "encode_generic",
]


def _reject_constant(constant: str) -> None:
    """Reject the non-standard NaN and Infinity constants when parsing JSON."""
    raise ValueError(f"Invalid JSON constant {constant}")


def encode_generic(claims: Claims, header: str, sign: SignFunction) -> str:
    """Encode and sign a set of claims.

    Parameters
    ----------
    claims
        Claims to put in the payload.
    header
        Header segment, already base64url-encoded.
    sign
        Function that returns the signature of its input.

    Returns
    -------
    str
        The token in JWS Compact Serialization.
    """
    signing_input = header + SEGMENT_SEPARATOR + claims.to_base64()
    signature = sign(signing_input.encode())
    return signing_input + SEGMENT_SEPARATOR + base64url_encode(signature)


def decode_generic(token: str, sign: VerifyFunction) -> Claims:
    """Verify and decode a token.

    The signature is checked before the payload is decoded, so nothing in a
    forged payload is ever parsed.  The signature is computed over the header
    and payload segments exactly as they appear in the token.

    Parameters
    ----------
    token
        The token in JWS Compact Serialization.
    sign
        Function that returns the expected signature given the header and
        payload segments.

    Returns
    -------
    Claims
        The claims from the verified token.

    Raises
    ------
    InvalidSignatureError
        Raised if the signature does not match.
    MalformedTokenError
        Raised if the token is not three segments, if the signature or
        payload is not valid base64url, or if the payload is not a UTF-8 JSON
        object.
    """
    logger = structlog.get_logger(LOGGER_NAME)
    parts = token.split(SEGMENT_SEPARATOR, 2)
    if len(parts) != 3:
        logger.debug("Rejected token", error=MalformedTokenError.error)
        raise MalformedTokenError("Token does not have three segments")
    header64, payload64, signature64 = parts
    if not (header64.isascii() and payload64.isascii()):
        logger.debug("Rejected token", error=MalformedTokenError.error)
        raise MalformedTokenError("Token is not ASCII")

    try:
        signature = base64url_decode(signature64)
    except binascii.Error as e:
        logger.debug("Rejected token", error=MalformedTokenError.error)
        raise MalformedTokenError("Signature is not valid base64url") from e
    expected = sign(header64.encode(), payload64.encode())
    if not safe_compare(signature, expected):
        logger.debug("Rejected token", error=InvalidSignatureError.error)
        raise InvalidSignatureError

    try:
        payload = base64url_decode(payload64).decode()
        value = json.loads(payload, parse_constant=_reject_constant)
        claims = Claims.from_json(value)
    except (ValueError, RecursionError) as e:
        logger.debug("Rejected token", error=MalformedTokenError.error)
        raise MalformedTokenError(f"Invalid token payload: {e!s}") from e
    except MalformedTokenError:
        logger.debug("Rejected token", error=MalformedTokenError.error)
        raise

    logger.debug("Decoded token", claims=len(claims))
    return claims
