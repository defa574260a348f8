"""Immutable colour value used throughout the allocator."""

from __future__ import annotations

import colorsys
import math
from dataclasses import dataclass

import numpy as np
from PIL import ImageColor
from skimage.color import rgb2lab


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def _round_half_up(value: float) -> int:
    # Halves round up (30.5 -> 31), not to even as ``round`` does.
    return int(math.floor(value + 0.5))


@dataclass(frozen=True, slots=True)
class Color:
    """An sRGB colour with channels in ``[0, 255]``.

    Channels may be fractional, e.g. for colours derived from HSL maths;
    :meth:`to_rgb` always yields integers.
    """

    r: float
    g: float
    b: float

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def from_rgb(cls, r: float, g: float, b: float) -> "Color":
        return cls(_clamp(r, 0, 255), _clamp(g, 0, 255), _clamp(b, 0, 255))

    @classmethod
    def parse(cls, text: str) -> "Color":
        """Return a colour from a hex string or CSS colour name.

        Raises ``ValueError`` for unrecognised input.
        """

        rgb = ImageColor.getrgb(text)
        return cls(*rgb[:3])

    @classmethod
    def from_hls(cls, h: float, l: float, s: float) -> "Color":
        """Build a colour from HLS floats in ``[0, 1]``."""

        r, g, b = colorsys.hls_to_rgb(h % 1.0, _clamp(l, 0, 1), _clamp(s, 0, 1))
        return cls(r * 255, g * 255, b * 255)

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------
    def to_rgb(self) -> tuple[int, int, int]:
        """Return ``(r, g, b)`` rounded to integers in ``[0, 255]``."""

        return (
            _clamp(_round_half_up(self.r), 0, 255),
            _clamp(_round_half_up(self.g), 0, 255),
            _clamp(_round_half_up(self.b), 0, 255),
        )

    def rounded(self) -> "Color":
        """Return a copy with every channel rounded to the nearest integer."""

        return Color(*self.to_rgb())

    def to_hex(self) -> str:
        return "#{:02x}{:02x}{:02x}".format(*self.to_rgb())

    def to_hls(self) -> tuple[float, float, float]:
        return colorsys.rgb_to_hls(self.r / 255, self.g / 255, self.b / 255)

    def to_lab(self) -> tuple[float, float, float]:
        """Return CIE ``(L, a, b)`` under the D65 illuminant."""

        L, a, b = lab_array([self])[0]
        return float(L), float(a), float(b)

    def darken(self, amount: float) -> "Color":
        """Return this colour with HLS lightness reduced by ``amount``."""

        h, l, s = self.to_hls()
        return Color.from_hls(h, l - amount, s)

    def __str__(self) -> str:
        return self.to_hex()


def lab_array(colors: "list[Color]") -> np.ndarray:
    """Return an ``(n, 3)`` Lab array for ``colors``."""

    if not colors:
        return np.empty((0, 3), dtype=float)
    rgb = np.asarray([(c.r, c.g, c.b) for c in colors], dtype=float) / 255.0
    return rgb2lab(np.clip(rgb, 0.0, 1.0))


__all__ = ["Color", "lab_array"]
