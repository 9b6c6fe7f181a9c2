"""Tests for signing with HMAC-SHA256."""

from __future__ import annotations

import jwt
import pytest

from hsjwt import (
    Claims,
    DecodeError,
    InvalidSignatureError,
    MalformedTokenError,
)
from hsjwt.jws.hs256 import HEADER, decode, encode
from hsjwt.util import base64url_decode, base64url_encode

from ..support.constants import INVALID_TOKEN, TEST_KEY, TEST_TOKEN
from ..support.tokens import build_claims, sign_segments

INTEROP_KEY = "a-shared-secret-that-is-at-least-32-bytes-long"


def test_header() -> None:
    assert base64url_decode(HEADER) == b'{"alg":"HS256","typ":"JWT"}'


def test_encode() -> None:
    assert encode(build_claims(), TEST_KEY) == TEST_TOKEN
    assert encode(build_claims(), TEST_KEY.decode()) == TEST_TOKEN


def test_decode() -> None:
    claims = decode(TEST_TOKEN, TEST_KEY)
    assert len(claims) == 2
    assert claims.get("com.example.my") == "value"
    assert claims.raw["com.example.my"] == "value"
    assert claims.sub == "urn:someone"
    assert claims == build_claims()


def test_signature() -> None:
    with pytest.raises(InvalidSignatureError):
        decode(INVALID_TOKEN, TEST_KEY)


def test_wrong_key() -> None:
    for key in (b"Secret", b"secret ", b"other-secret", "secret\n"):
        with pytest.raises(InvalidSignatureError):
            decode(TEST_TOKEN, key)


def test_e2e() -> None:
    claims = Claims()
    claims.set_iss("https://example.com/")
    claims.set_aud(["a", "b"])
    claims.set_exp(1767225600)
    claims.insert_unsafe("com.example.my-claim", {"nested": [1, 2.5, None]})
    claims.insert_unsafe("name", "Jürgen")
    token = encode(claims, b"secret")
    decoded = decode(token, b"secret")
    assert decoded == claims
    assert decoded.aud == ["a", "b"]
    assert decoded.exp == 1767225600.0


def test_tampering() -> None:
    for i, char in enumerate(TEST_TOKEN):
        if char == ".":
            continue
        for bit in range(7):
            tampered_char = chr(ord(char) ^ (1 << bit))
            tampered = TEST_TOKEN[:i] + tampered_char + TEST_TOKEN[i + 1 :]
            with pytest.raises(DecodeError):
                decode(tampered, TEST_KEY)


def test_pyjwt_interop() -> None:
    claims = build_claims()
    token = encode(claims, INTEROP_KEY)
    assert jwt.get_unverified_header(token) == {"alg": "HS256", "typ": "JWT"}
    assert jwt.decode(token, INTEROP_KEY, algorithms=["HS256"]) == claims.raw

    payload = {"sub": "urn:someone", "aud": ["a"], "com.example.my": 1}
    pyjwt_token = jwt.encode(payload, INTEROP_KEY, algorithm="HS256")
    decoded = decode(pyjwt_token, INTEROP_KEY)
    assert decoded.raw == payload
    assert decoded.aud == ["a"]
    with pytest.raises(InvalidSignatureError):
        decode(pyjwt_token, TEST_KEY)


def test_malformed_payload() -> None:
    for payload in (b"not json", b"[1,2]", b'"string"', b"\xff\xfe"):
        payload64 = base64url_encode(payload)
        token = sign_segments(HEADER, payload64, TEST_KEY)
        with pytest.raises(MalformedTokenError):
            decode(token, TEST_KEY)
        with pytest.raises(InvalidSignatureError):
            decode(token, b"other")
