"""Tests for the other HMAC algorithms."""

from __future__ import annotations

import hashlib
import hmac

import pytest
from cryptography.hazmat.primitives import hashes

from hsjwt import InvalidSignatureError
from hsjwt.jws import hs256, hs384, hs512
from hsjwt.jws.mac import compute_hmac
from hsjwt.util import base64url_decode

from ..support.constants import TEST_KEY, TEST_PAYLOAD, TEST_TOKEN
from ..support.tokens import build_claims

HS384_TOKEN = (
    "eyJhbGciOiJIUzM4NCIsInR5cCI6IkpXVCJ9"
    f".{TEST_PAYLOAD}"
    ".3SGEh_gmaRTzCkxAb3a6Cq64GQLrA9daGyPRodKQmU0pXVetDz0GYaALHkUvGMHS"
)
HS512_TOKEN = (
    "eyJhbGciOiJIUzUxMiIsInR5cCI6IkpXVCJ9"
    f".{TEST_PAYLOAD}"
    ".501JaVgnskCiIigXoek4Z9lOc0Wy8M_9wtN-Unm1xDfkRMXcw0cjzIA2gi4mjo3GB2NCYLH"
    "GMjHH97Qwk2lO4g"
)


def test_compute_hmac() -> None:
    expected = hmac.new(b"key", b"header.payload", hashlib.sha256).digest()
    assert compute_hmac(b"key", hashes.SHA256(), b"header.payload") == expected
    assert compute_hmac("key", hashes.SHA256(), b"header.payload") == expected
    parts = (b"header", b".", b"payload")
    assert compute_hmac(b"key", hashes.SHA256(), *parts) == expected

    expected = hmac.new(b"key", b"message", hashlib.sha512).digest()
    assert compute_hmac(b"key", hashes.SHA512(), b"message") == expected


def test_headers() -> None:
    assert base64url_decode(hs384.HEADER) == b'{"alg":"HS384","typ":"JWT"}'
    assert base64url_decode(hs512.HEADER) == b'{"alg":"HS512","typ":"JWT"}'


def test_hs384() -> None:
    assert hs384.encode(build_claims(), TEST_KEY) == HS384_TOKEN
    assert hs384.decode(HS384_TOKEN, TEST_KEY) == build_claims()
    with pytest.raises(InvalidSignatureError):
        hs384.decode(HS384_TOKEN, b"other")


def test_hs512() -> None:
    assert hs512.encode(build_claims(), TEST_KEY) == HS512_TOKEN
    assert hs512.decode(HS512_TOKEN, TEST_KEY) == build_claims()
    with pytest.raises(InvalidSignatureError):
        hs512.decode(HS512_TOKEN, b"other")


def test_algorithm_mismatch() -> None:
    for token in (HS384_TOKEN, HS512_TOKEN):
        with pytest.raises(InvalidSignatureError):
            hs256.decode(token, TEST_KEY)
    with pytest.raises(InvalidSignatureError):
        hs512.decode(TEST_TOKEN, TEST_KEY)
