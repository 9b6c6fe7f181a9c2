"""Constants for hsjwt."""

from __future__ import annotations

__all__ = [
    "BASE64URL_REGEX",
    "ENV_PREFIX",
    "LOGGER_NAME",
    "SEGMENT_SEPARATOR",
]

BASE64URL_REGEX = "[A-Za-z0-9_-]*"
"""Regex matching unpadded URL-safe base64 text."""

ENV_PREFIX = "HSJWT_"
"""Prefix for environment variables used by the command-line interface."""

LOGGER_NAME = "hsjwt"
"""Name of the structlog logger used by the library."""

SEGMENT_SEPARATOR = "."
"""Separator between the segments of a compact serialization."""
