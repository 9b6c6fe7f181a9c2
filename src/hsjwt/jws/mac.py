"""HMAC computation shared by the HMAC algorithm bindings."""

from __future__ import annotations

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives import hmac as crypto_hmac

__all__ = ["Key", "compute_hmac"]

Key = bytes | str
"""Type of a shared secret.  Text keys are used as their UTF-8 encoding."""


def compute_hmac(
    key: Key, algorithm: hashes.HashAlgorithm, *parts: bytes
) -> bytes:
    """Compute an HMAC over the concatenation of one or more parts.

    Parameters
    ----------
    key
        Shared secret.
    algorithm
        Hash algorithm to use, such as ``hashes.SHA256()``.
    *parts
        Message parts, fed to the HMAC in order.

    Returns
    -------
    bytes
        Raw MAC.
    """
    if isinstance(key, str):
        key = key.encode()
    mac = crypto_hmac.HMAC(key, algorithm)
    for part in parts:
        mac.update(part)
    return mac.finalize()
