from __future__ import annotations

import logging
from typing import Any, Mapping

from flask import Flask, current_app, jsonify, render_template, request

from .contrast import palette_contrast
from .convert import canon_hex
from .shades import Palette, SlotSink, build_palette, render
from .snippet import contrast_key, palette_snippet, palette_snippet_html

log = logging.getLogger(__name__)

DEFAULTS: Mapping[str, Any] = {
    "DEFAULT_SEED": "#2196f3",
    "PALETTE_NAME": "customPalette",
}


def palette_payload(palette: Palette, name: str) -> dict[str, Any]:
    ratios = palette_contrast(palette)
    return {
        "seed": palette.seed,
        "shades": [
            {
                "weight": shade.weight,
                "hex": shade.hex,
                "css": shade.css,
                "hsl": list(shade.rounded),
                "tone": shade.tone,
                "text": shade.text,
                "contrast": ratios[shade.weight],
            }
            for shade in palette.shades
        ],
        "contrastDefaultColor": palette.contrast_default,
        contrast_key(palette): palette.contrast_list,
        "contrastList": palette.contrast_list,
        "snippet": palette_snippet(palette, name),
        "snippet_html": str(palette_snippet_html(palette, name)),
    }


# ----------------------------- Flask app ----------------------------------


def create_app(test_config: Mapping[str, Any] | None = None) -> Flask:
    app = Flask(__name__, static_folder="static", template_folder="templates")
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    app.config.from_mapping(DEFAULTS)
    app.config.from_prefixed_env("MATERIAL_PALETTE")
    if test_config is not None:
        app.config.from_mapping(test_config)
    # env values arrive JSON-decoded, so 123456 is an int here
    app.config["DEFAULT_SEED"] = canon_hex(str(app.config["DEFAULT_SEED"]))

    @app.route("/")
    def index():
        palette = build_palette(current_app.config["DEFAULT_SEED"])
        sink = render(palette, SlotSink())
        return render_template(
            "index.html",
            palette=palette,
            slots=sink.slots,
            snippet=palette_snippet_html(palette, current_app.config["PALETTE_NAME"]),
        )

    @app.route("/palette")
    def palette():
        seed = request.args.get("seed", current_app.config["DEFAULT_SEED"])
        try:
            pal = build_palette(seed)
        except ValueError as e:
            return jsonify({"error": f"invalid color: {e}"}), 400

        try:
            payload = palette_payload(pal, current_app.config["PALETTE_NAME"])
        except Exception as exc:
            log.exception("Palette rendering failed")
            return jsonify({"error": str(exc)}), 500

        return jsonify(payload)

    return app


if __name__ == "__main__":
    create_app().run(debug=False, threaded=True)
