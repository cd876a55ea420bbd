from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Literal, Protocol, Tuple

import numpy as np

from .convert import Hex, canon_hex, hex_to_hsl_scaled, hsl_css, hsl_to_hex, round_half_up

log = logging.getLogger(__name__)

Tone = Literal["light", "dark"]
Weight = int

# Fixed Material factor tables: weight → how much of the base s/l survives.
LIGHTER: Tuple[Tuple[Weight, float], ...] = (
    (50, 0.13),
    (100, 0.31),
    (200, 0.5),
    (300, 0.7),
    (400, 0.85),
)
BASE: Tuple[Weight, float] = (500, 1.0)
DARKER: Tuple[Tuple[Weight, float], ...] = (
    (600, 0.91),
    (700, 0.81),
    (800, 0.71),
    (900, 0.52),
)
WEIGHTS: Tuple[Weight, ...] = tuple(w for w, _ in LIGHTER) + (BASE[0],) + tuple(
    w for w, _ in DARKER
)

TONE_SPLIT = 50.0  # lightness below this is a dark shade


def opposite(tone: Tone) -> Tone:
    return "dark" if tone == "light" else "light"


@dataclass(frozen=True)
class Shade:
    weight: Weight
    factor: float
    h: float
    s: float
    l: float

    @property
    def tone(self) -> Tone:
        return "dark" if self.l < TONE_SPLIT else "light"

    @property
    def text(self) -> Tone:
        """Text colour class that stays legible on this shade."""
        return opposite(self.tone)

    @property
    def rounded(self) -> Tuple[int, int, int]:
        return round_half_up(self.h), round_half_up(self.s), round_half_up(self.l)

    @property
    def hex(self) -> Hex:
        return hsl_to_hex(*self.rounded)

    @property
    def css(self) -> str:
        return hsl_css(self.h, self.s, self.l)


@dataclass(frozen=True)
class Palette:
    seed: Hex
    shades: Tuple[Shade, ...]

    def __getitem__(self, weight: Weight) -> Shade:
        for shade in self.shades:
            if shade.weight == weight:
                return shade
        raise KeyError(weight)

    def by_text(self) -> Dict[Tone, List[Weight]]:
        out: Dict[Tone, List[Weight]] = {"light": [], "dark": []}
        for shade in self.shades:
            out[shade.text].append(shade.weight)
        return out

    @property
    def contrast_default(self) -> Tone:
        """Majority text colour over the ten shades; a tie goes to 'light'."""
        groups = self.by_text()
        return "dark" if len(groups["dark"]) > len(groups["light"]) else "light"

    @property
    def contrast_list(self) -> List[Weight]:
        """Weights whose text colour differs from :attr:`contrast_default`."""
        return self.by_text()[opposite(self.contrast_default)]


def lighter_shades(
    h: float, s: float, l: float, table: Iterable[Tuple[Weight, float]] = LIGHTER
) -> List[Shade]:
    """Scale saturation and blend lightness toward 100."""
    weights, factors = _split(table)
    new_s = s * factors
    new_l = (l * factors + 100.0) / (1.0 + factors)
    return _as_shades(h, weights, factors, new_s, new_l)


def darker_shades(
    h: float, s: float, l: float, table: Iterable[Tuple[Weight, float]] = DARKER
) -> List[Shade]:
    """Scale saturation and lightness toward 0."""
    weights, factors = _split(table)
    new_s = s * factors
    new_l = l * factors
    return _as_shades(h, weights, factors, new_s, new_l)


def _split(table: Iterable[Tuple[Weight, float]]) -> Tuple[np.ndarray, np.ndarray]:
    pairs = list(table)
    weights = np.array([w for w, _ in pairs], dtype=np.int64)
    factors = np.array([f for _, f in pairs], dtype=np.float64)
    return weights, factors


def _as_shades(
    h: float,
    weights: np.ndarray,
    factors: np.ndarray,
    new_s: np.ndarray,
    new_l: np.ndarray,
) -> List[Shade]:
    # one row per weight: factor, s, l as plain floats
    rows = np.column_stack([factors, new_s, new_l]).tolist()
    return [Shade(w, f, h, ns, nl) for w, (f, ns, nl) in zip(weights.tolist(), rows)]


def build_palette(seed_hex: str) -> Palette:
    seed = canon_hex(seed_hex)
    h, s, l = hex_to_hsl_scaled(seed)
    shades = (
        lighter_shades(h, s, l)
        + [Shade(BASE[0], BASE[1], h, s, l)]
        + darker_shades(h, s, l)
    )
    palette = Palette(seed=seed, shades=tuple(shades))
    log.debug(
        "palette %s: hsl=(%.1f, %.1f, %.1f) default=%s minority=%s",
        seed,
        h,
        s,
        l,
        palette.contrast_default,
        palette.contrast_list,
    )
    return palette


# -----------------------------------------------------------------------------
# Render sinks
# -----------------------------------------------------------------------------


class RenderSink(Protocol):
    def paint(self, shade: Shade) -> None: ...


class SlotSink:
    """Collects what each ``c_<weight>`` element of the page should show."""

    def __init__(self) -> None:
        self.slots: Dict[str, Dict[str, str]] = {}

    def paint(self, shade: Shade) -> None:
        self.slots[f"c_{shade.weight}"] = {
            "background": shade.css,
            "label": shade.hex,
            "text": shade.text,
        }


def render(palette: Palette, sink: RenderSink) -> RenderSink:
    for shade in palette.shades:
        sink.paint(shade)
    return sink


__all__ = [
    "LIGHTER",
    "BASE",
    "DARKER",
    "WEIGHTS",
    "Shade",
    "Palette",
    "RenderSink",
    "SlotSink",
    "lighter_shades",
    "darker_shades",
    "build_palette",
    "render",
]
