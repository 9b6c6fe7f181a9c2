"""Representation of a set of JWT claims."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Self

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    JsonValue,
    ValidationError,
    field_validator,
)
from pydantic_core import PydanticSerializationError, to_jsonable_python

from .exceptions import MalformedTokenError
from .util import base64url_encode

__all__ = ["Claims"]


def _is_strict_json(value: Any) -> bool:
    """Whether a JSON value serializes without NaN or Infinity."""
    try:
        json.dumps(value, allow_nan=False)
    except ValueError:
        return False
    return True


def _to_timestamp(value: datetime | float) -> int | float:
    """Convert a datetime or number to seconds since epoch."""
    if isinstance(value, datetime):
        return int(value.timestamp())
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise TypeError(f"Expected datetime or number, not {value!r}")
    return value


class Claims(BaseModel):
    """A set of JWT claims.

    Notes
    -----
    The claims are held in ``raw``, a mapping of claim name to JSON value that
    is always kept sorted by claim name so that serialization is
    deterministic, including when ``raw`` is assigned directly.  Equality of
    two claim sets is equality of ``raw``.

    The registered-claim properties never raise.  A claim that is missing and
    a claim whose value has the wrong JSON type both read as `None`.
    """

    model_config = ConfigDict(validate_assignment=True)

    raw: dict[str, JsonValue] = Field(
        default_factory=dict, title="Raw JSON contents of the claims"
    )

    @field_validator("raw")
    @classmethod
    def _sort_raw(cls, v: dict[str, JsonValue]) -> dict[str, JsonValue]:
        if not _is_strict_json(v):
            raise ValueError("Claims may not contain NaN or Infinity")
        return dict(sorted(v.items()))

    @classmethod
    def from_json(cls, value: Any) -> Self:
        """Wrap a parsed JSON value as a claim set.

        Parameters
        ----------
        value
            Parsed JSON, which must be an object.

        Returns
        -------
        Claims
            New claim set holding the members of that object.

        Raises
        ------
        MalformedTokenError
            Raised if the value is not a JSON object.
        """
        if not isinstance(value, dict):
            raise MalformedTokenError("Token payload is not a JSON object")
        try:
            return cls(raw=value)
        except ValidationError as e:
            raise MalformedTokenError(str(e)) from e

    @property
    def iss(self) -> str | None:
        """Who issued the JWT."""
        return self._get_str("iss")

    @property
    def sub(self) -> str | None:
        """Subject of the JWT.

        Other claims are typically statements about the subject.
        """
        return self._get_str("sub")

    @property
    def aud(self) -> str | list[str] | None:
        """Recipient or list of recipients the JWT is intended for.

        A single audience may be given as a string, so callers must check
        which shape they got.  A list with any non-string member is treated
        as absent rather than filtered.
        """
        aud = self.raw.get("aud")
        if isinstance(aud, str):
            return aud
        if not isinstance(aud, list):
            return None
        if not all(isinstance(a, str) for a in aud):
            return None
        return [str(a) for a in aud]

    @property
    def exp(self) -> float | None:
        """Time after which the JWT is considered invalid (POSIX time)."""
        return self._get_number("exp")

    @property
    def nbf(self) -> float | None:
        """Time before which the JWT is considered invalid (POSIX time)."""
        return self._get_number("nbf")

    @property
    def iat(self) -> float | None:
        """Time the JWT was issued (POSIX time)."""
        return self._get_number("iat")

    @property
    def jti(self) -> str | None:
        """Unique identifier that may be used to prevent replays."""
        return self._get_str("jti")

    def get(self, key: str) -> JsonValue:
        """Get the value of a claim, or `None` if it is not present."""
        return self.raw.get(key)

    def insert_unsafe(self, key: str, value: Any) -> None:
        """Add a claim, which need not be a registered claim.

        This can produce an invalid JWT if the value does not match the
        semantics of a registered claim (a non-numeric ``exp``, for example).

        Parameters
        ----------
        key
            Name of the claim.  Replaces any existing claim of that name.
        value
            Any value with a JSON representation.

        Raises
        ------
        TypeError
            Raised if the value cannot be represented as strict JSON, which
            excludes NaN and infinite numbers.
        """
        try:
            json_value = to_jsonable_python(value)
        except PydanticSerializationError as e:
            raise TypeError(f"Value for claim {key} is not JSON") from e
        if not _is_strict_json(json_value):
            raise TypeError(f"Value for claim {key} is not finite")
        self.raw = {**self.raw, key: json_value}

    def remove(self, key: str) -> JsonValue:
        """Remove a claim, returning its previous value or `None`."""
        return self.raw.pop(key, None)

    def set_iss(self, iss: str) -> None:
        """Set the issuer claim."""
        self._set_str("iss", iss)

    def set_sub(self, sub: str) -> None:
        """Set the subject claim."""
        self._set_str("sub", sub)

    def set_aud(self, aud: str | list[str]) -> None:
        """Set the audience claim to one recipient or a list of them."""
        if isinstance(aud, str):
            self.insert_unsafe("aud", aud)
        elif isinstance(aud, list) and all(isinstance(a, str) for a in aud):
            self.insert_unsafe("aud", aud)
        else:
            raise TypeError(f"Invalid aud claim {aud!r}")

    def set_exp(self, exp: datetime | float) -> None:
        """Set the expiration claim.

        Datetimes are stored as integer seconds since epoch.
        """
        self.insert_unsafe("exp", _to_timestamp(exp))

    def set_nbf(self, nbf: datetime | float) -> None:
        """Set the not-before claim."""
        self.insert_unsafe("nbf", _to_timestamp(nbf))

    def set_iat(self, iat: datetime | float) -> None:
        """Set the issued-at claim."""
        self.insert_unsafe("iat", _to_timestamp(iat))

    def set_jti(self, jti: str) -> None:
        """Set the JWT ID claim."""
        self._set_str("jti", jti)

    def to_json(self) -> dict[str, JsonValue]:
        """Return the claims as a JSON object."""
        return dict(self.raw)

    def to_json_text(self) -> str:
        """Return the claims as compact JSON text with sorted keys."""
        return json.dumps(
            self.raw,
            separators=(",", ":"),
            sort_keys=True,
            ensure_ascii=False,
            allow_nan=False,
        )

    def to_base64(self) -> str:
        """Return the claims as an unpadded base64url payload segment."""
        return base64url_encode(self.to_json_text().encode())

    def _get_number(self, key: str) -> float | None:
        value = self.raw.get(key)
        if isinstance(value, bool) or not isinstance(value, int | float):
            return None
        return float(value)

    def _get_str(self, key: str) -> str | None:
        value = self.raw.get(key)
        return value if isinstance(value, str) else None

    def _set_str(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"Invalid {key} claim {value!r}")
        self.insert_unsafe(key, value)

    def __contains__(self, key: object) -> bool:
        return key in self.raw

    def __len__(self) -> int:
        return len(self.raw)
