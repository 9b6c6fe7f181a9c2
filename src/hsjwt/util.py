"""General utility functions."""

from __future__ import annotations

import base64
import binascii
import re

from .constants import BASE64URL_REGEX

__all__ = [
    "add_padding",
    "base64url_decode",
    "base64url_encode",
    "safe_compare",
]


def add_padding(encoded: str) -> str:
    """Add padding to base64 encoded bytes.

    Parameters
    ----------
    encoded
        A base64-encoded string, possibly with the padding removed.

    Returns
    -------
    str
        A correctly-padded version of the encoded string.
    """
    underflow = len(encoded) % 4
    if underflow:
        return encoded + ("=" * (4 - underflow))
    else:
        return encoded


def base64url_encode(data: bytes) -> str:
    """Encode bytes as URL-safe base64 with the padding stripped.

    Parameters
    ----------
    data
        Data to encode.

    Returns
    -------
    str
        The unpadded base64url encoding, as used in every segment of a JWS
        Compact Serialization.
    """
    return base64.urlsafe_b64encode(data).decode().rstrip("=")


def base64url_decode(encoded: str) -> bytes:
    """Strictly decode unpadded URL-safe base64.

    Parameters
    ----------
    encoded
        Base64url-encoded text without padding.

    Returns
    -------
    bytes
        The decoded data.

    Raises
    ------
    binascii.Error
        Raised if the text contains characters outside the URL-safe alphabet
        (padding included), has an impossible length, or is not the canonical
        encoding of its data.

    Notes
    -----
    The standard library decoder silently ignores the unused low bits of the
    final character, so several distinct strings decode to the same bytes.
    Those are rejected here by re-encoding and comparing, so that any change
    to a signature segment either fails to decode or changes the signature.
    """
    if not re.fullmatch(BASE64URL_REGEX, encoded):
        raise binascii.Error("Invalid character in base64url data")
    decoded = base64.b64decode(add_padding(encoded), altchars=b"-_")
    if base64url_encode(decoded) != encoded:
        raise binascii.Error("Non-canonical base64url data")
    return decoded


def safe_compare(a: bytes, b: bytes) -> bool:
    """Compare two byte strings in time independent of their contents.

    Parameters
    ----------
    a
        First byte string.
    b
        Second byte string.

    Returns
    -------
    bool
        Whether the two byte strings are equal.

    Notes
    -----
    Lengths are compared first and unequal lengths return immediately, since
    signature lengths are public.  For equal lengths, every byte pair is
    examined even after a difference is found, so the running time does not
    reveal the position of the first differing byte.
    """
    if len(a) != len(b):
        return False
    result = 0
    for x, y in zip(a, b):
        result |= x ^ y
    return result == 0
