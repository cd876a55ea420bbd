"""Hex ↔ HSL ↔ RGB conversion for the palette generator.

Hue, saturation and lightness travel in two scales:

* fractions in [0-1] straight out of :func:`hex_to_hsl`,
* degrees / percent (h ∈ [0,360), s, l ∈ [0,100]) everywhere else.

Channel rounding is half-up, i.e. what the browser's ``Math.round()`` does for
positive inputs, so hex strings match the ones the page shows.
"""

from __future__ import annotations

import math
import string
from typing import Tuple

Hex = str
RGB = Tuple[int, int, int]
HSL = Tuple[float, float, float]


# -----------------------------------------------------------------------------
# Parsing / formatting helpers
# -----------------------------------------------------------------------------


def canon_hex(s: str) -> Hex:
    """Normalize to '#rrggbb'; accept 3- or 6-digit hex only."""
    raw = (s or "").strip().lstrip("#")
    if len(raw) == 3 and all(c in string.hexdigits for c in raw):
        raw = "".join(ch * 2 for ch in raw)
    if len(raw) != 6 or not all(c in string.hexdigits for c in raw):
        raise ValueError(f"hex must be 3 or 6 hex digits, got {s!r}")
    return "#" + raw.lower()


def hex_to_rgb(hex_str: str) -> RGB:
    raw = canon_hex(hex_str)[1:]
    r, g, b = (int(raw[i : i + 2], 16) for i in (0, 2, 4))
    return r, g, b


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def rgb_to_hex(r: int, g: int, b: int, *, prefix: bool = True) -> Hex:
    out = f"{r:02x}{g:02x}{b:02x}"
    return "#" + out if prefix else out


def hsl_css(h: float, s: float, l: float) -> str:
    return f"hsl({round_half_up(h)}, {round_half_up(s)}%, {round_half_up(l)}%)"


def wrap_unit(x: float) -> float:
    """Bring a hue fraction back into [0-1] by whole turns.

    Exactly 1.0 is left alone, so a hue of 1 stays 1 (same colour as 0).
    """
    if 0.0 <= x <= 1.0:
        return x
    return x % 1.0


# -----------------------------------------------------------------------------
# Hex → HSL
# -----------------------------------------------------------------------------


def hex_to_hsl(color_hex: str) -> HSL:
    """Convert '#rrggbb' (or 'rrggbb') to (h, s, l) fractions in [0-1]."""
    r, g, b = (c / 255 for c in hex_to_rgb(color_hex))

    lo = min(r, g, b)
    hi = max(r, g, b)
    delta = hi - lo

    lightness = (hi + lo) / 2
    if delta == 0:
        return 0.0, 0.0, lightness

    if lightness < 0.5:
        saturation = delta / (hi + lo)
    else:
        saturation = delta / (2 - hi - lo)

    r_delta = (((hi - r) / 6) + (delta / 2)) / delta
    g_delta = (((hi - g) / 6) + (delta / 2)) / delta
    b_delta = (((hi - b) / 6) + (delta / 2)) / delta

    if r == hi:
        hue = b_delta - g_delta
    elif g == hi:
        hue = (1 / 3) + r_delta - b_delta
    else:
        hue = (2 / 3) + g_delta - r_delta

    return wrap_unit(hue), saturation, lightness


def hex_to_hsl_scaled(color_hex: str) -> HSL:
    """Like :func:`hex_to_hsl` but in degrees / percent."""
    h, s, l = hex_to_hsl(color_hex)
    return h * 360, s * 100, l * 100


# -----------------------------------------------------------------------------
# HSL → RGB / hex
# -----------------------------------------------------------------------------


def hue_to_channel(p: float, q: float, hue: float) -> float:
    hue = wrap_unit(hue)
    if hue < 1 / 6:
        return p + (q - p) * 6 * hue
    if hue < 1 / 2:
        return q
    if hue < 2 / 3:
        return p + (q - p) * (2 / 3 - hue) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """(degrees, percent, percent) → 8-bit (r, g, b)."""
    h, s, l = h / 360, s / 100, l / 100
    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = hue_to_channel(p, q, h + 1 / 3)
        g = hue_to_channel(p, q, h)
        b = hue_to_channel(p, q, h - 1 / 3)
    return tuple(max(0, min(255, round_half_up(c * 255))) for c in (r, g, b))  # type: ignore[return-value]


def hsl_to_hex(h: float, s: float, l: float, *, prefix: bool = True) -> Hex:
    return rgb_to_hex(*hsl_to_rgb(h, s, l), prefix=prefix)


__all__ = [
    "canon_hex",
    "hex_to_rgb",
    "rgb_to_hex",
    "hsl_css",
    "wrap_unit",
    "hex_to_hsl",
    "hex_to_hsl_scaled",
    "hue_to_channel",
    "hsl_to_rgb",
    "hsl_to_hex",
]
