"""Reversible, deterministic identifiers for catalog entries.

Names are encoded code point by code point with Hashids, so the same
sequence of code points always yields the same short alphanumeric id and the
id can be turned back into the name.
"""

import re

from hashids import Hashids

from micro_obs.core.exceptions import CodecError

SALT = "Best salt"
MIN_LENGTH = 8

# Shape of every non-empty identifier (the default Hashids alphabet).
IDENTIFIER_RE = re.compile(r"[a-zA-Z0-9]+")

# Highest valid Unicode code point.
_MAX_CODE_POINT = 0x10FFFF

_hashids = Hashids(salt=SALT, min_length=MIN_LENGTH)


def encode(value: str) -> str:
    """Encode ``value`` into an identifier. The empty string encodes to ``""``."""
    if not value:
        return ""
    identifier = _hashids.encode(*(ord(char) for char in value))
    if not identifier:
        raise CodecError(f"unable to encode {value!r}", context={"value": value})
    return identifier


def decode(identifier: str) -> str:
    """Decode an identifier produced by :func:`encode` back into its string."""
    if not identifier:
        return ""
    code_points = _hashids.decode(identifier)
    if not code_points:
        raise CodecError(f"unable to decode {identifier!r}", context={"identifier": identifier})
    if any(point > _MAX_CODE_POINT for point in code_points):
        raise CodecError(
            f"{identifier!r} does not decode to valid code points",
            context={"identifier": identifier},
        )
    return "".join(chr(point) for point in code_points)
