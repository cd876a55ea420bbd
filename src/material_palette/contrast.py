from __future__ import annotations

from typing import Dict

from coloraide import Color

from .shades import Palette, Shade, Tone

TEXT_COLORS: Dict[Tone, str] = {"light": "#ffffff", "dark": "#000000"}


def text_contrast(shade: Shade) -> float:
    """WCAG 2.1 ratio between the shade and the text colour it recommends."""
    return Color(shade.hex).contrast(TEXT_COLORS[shade.text], method="wcag21")


def palette_contrast(palette: Palette) -> Dict[int, float]:
    return {shade.weight: round(text_contrast(shade), 2) for shade in palette.shades}


__all__ = ["TEXT_COLORS", "text_contrast", "palette_contrast"]
