"""JSON Web Signature.

Protects the header and payload against changes, but performs no
encryption.
"""

from . import hs256, hs384, hs512
from .codec import decode_generic, encode_generic

__all__ = [
    "decode_generic",
    "encode_generic",
    "hs256",
    "hs384",
    "hs512",
]
