"""Exceptions for hsjwt."""

from __future__ import annotations

from typing import ClassVar

__all__ = [
    "DecodeError",
    "InvalidSignatureError",
    "MalformedTokenError",
]


class DecodeError(Exception):
    """A token could not be decoded.

    Callers should treat every subclass as "do not trust this token."  The
    ``error`` tag is intended for logging and diagnostics only and should not
    be revealed to whoever presented the token.
    """

    error: ClassVar[str] = "decode_error"
    """Short tag identifying the kind of failure."""

    message: ClassVar[str] = "Unable to decode token"
    """The summary message to use when logging this error."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class MalformedTokenError(DecodeError):
    """The token is not in JWS Compact Serialization format.

    Raised if the token does not have three segments, if any segment that is
    examined is not valid base64url, or if the payload is not UTF-8 JSON
    encoding a JSON object.
    """

    error = "malformed"
    message = "not in JWS Compact Serialization format"


class InvalidSignatureError(DecodeError):
    """The token is well-formed but its signature does not match."""

    error = "invalid_signature"
    message = "signature validation failed"
