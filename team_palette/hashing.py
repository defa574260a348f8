"""Stable string hashing used to seed colour draws."""

from __future__ import annotations

_MASK_32 = 0xFFFFFFFF


def _utf16_units(text: str) -> list[int]:
    """Return the UTF-16 code units of ``text``."""

    data = text.encode("utf-16-le")
    return [int.from_bytes(data[i : i + 2], "little") for i in range(0, len(data), 2)]


def simple_hash(text: str) -> int:
    """Return a non-negative 32-bit hash of ``text``.

    Computes ``h = h * 31 + unit`` over UTF-16 code units with signed 32-bit
    wrap-around and returns the absolute value. Unlike :func:`hash`, the result
    is identical across interpreter runs.
    """

    h = 0
    for unit in _utf16_units(text):
        h = (h * 31 + unit) & _MASK_32
    if h >= 0x80000000:
        h -= 0x100000000
    return abs(h)


__all__ = ["simple_hash"]
