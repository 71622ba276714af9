"""Device index list parsing.

This module converts the textual ``devices`` setting into ordered GPU
indices. Tokens may come from a command line, a whitespace-separated
string, or a YAML list that mixes strings and integers.
"""

from __future__ import annotations

from typing import Sequence

from core.errors import MalformedDeviceIndexError

DeviceSpec = str | Sequence[str | int]


def parse_device_indices(raw_spec: DeviceSpec | None) -> tuple[int, ...]:
    """Parse a device spec into non-negative integer indices.

    Args:
        raw_spec: Whitespace-separated string or sequence of tokens.

    Returns:
        Parsed indices in their original order, empty when no spec is given.

    Raises:
        MalformedDeviceIndexError: If any token is not a non-negative integer literal.
    """
    if raw_spec is None:
        return ()
    tokens = raw_spec.split() if isinstance(raw_spec, str) else raw_spec
    return tuple(_parse_token(token, position) for position, token in enumerate(tokens))


def _parse_token(token: object, position: int) -> int:
    if isinstance(token, bool):
        raise _malformed(token, position)
    if isinstance(token, int):
        if token < 0:
            raise _malformed(token, position)
        return token
    if isinstance(token, str):
        stripped = token.strip()
        # str.isdigit accepts non-ASCII digits such as superscripts.
        if stripped.isascii() and stripped.isdigit():
            return int(stripped)
    raise _malformed(token, position)


def _malformed(token: object, position: int) -> MalformedDeviceIndexError:
    return MalformedDeviceIndexError(
        f"Invalid device index {token!r} at position {position} in devices: "
        "expected a non-negative integer such as 0 or 3."
    )
