"""Signed JSON Web Tokens using HMAC."""

from .claims import Claims
from .exceptions import DecodeError, InvalidSignatureError, MalformedTokenError
from .jws import hs256
from .util import safe_compare

__all__ = [
    "Claims",
    "DecodeError",
    "InvalidSignatureError",
    "MalformedTokenError",
    "hs256",
    "safe_compare",
]
