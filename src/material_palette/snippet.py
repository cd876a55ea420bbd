"""Theme-config snippet for Angular Material's ``definePalette``."""

from __future__ import annotations

from typing import List

from markupsafe import Markup, escape

from .shades import Palette

INDENT = "  "


def contrast_key(palette: Palette) -> str:
    return (
        "contrastDarkColors"
        if palette.contrast_default == "light"
        else "contrastLightColors"
    )


def js_string(s: str) -> str:
    """Body of a single-quoted JS string literal."""
    return s.replace("\\", "\\\\").replace("'", "\\'")


def snippet_lines(palette: Palette, name: str = "customPalette") -> List[str]:
    lines = [f"$mdThemingProvider.definePalette('{js_string(name)}', {{"]
    for shade in palette.shades:
        lines.append(f"{INDENT}'{shade.weight}': '{shade.hex.lstrip('#')}',")
    lines.append(f"{INDENT}'contrastDefaultColor': '{palette.contrast_default}',")
    weights = ", ".join(f"'{w}'" for w in palette.contrast_list)
    lines.append(f"{INDENT}'{contrast_key(palette)}': [{weights}]")
    lines.append("});")
    return lines


def palette_snippet(palette: Palette, name: str = "customPalette") -> str:
    return "\n".join(snippet_lines(palette, name))


def palette_snippet_html(palette: Palette, name: str = "customPalette") -> Markup:
    """Escaped snippet; indentation as ``&nbsp;``, one ``<br>`` per line."""
    out = []
    for line in snippet_lines(palette, name):
        body = line.lstrip(" ")
        pad = len(line) - len(body)
        out.append(Markup("&nbsp;" * pad) + escape(body))
    return Markup("<br>").join(out)


__all__ = ["js_string", "contrast_key", "snippet_lines", "palette_snippet", "palette_snippet_html"]
