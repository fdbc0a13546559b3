from __future__ import annotations

import logging

from flask import Flask, Response, jsonify, request
from werkzeug.exceptions import HTTPException

from .codec import normalize_hex
from .export import export_scales
from .metrics import contrast_tone
from .names import closest_color_name
from .palette import HARMONIES, monochromatic, tailwind_palette, tetradic
from .utils import create_color_scale, random_hex_color

log = logging.getLogger(__name__)

MAX_MONO = 64


def parse_count(val: str | None, default: int = 5) -> int:
    try:
        n = int(val) if val is not None else default
    except ValueError:
        n = default
    return max(1, min(n, MAX_MONO))


def supported_harmonies() -> tuple[str, ...]:
    return tuple(list(HARMONIES.keys()) + ["tetradic", "monochromatic"])


def harmony(kind: str, color: str, *, color2: str | None, count: int) -> list[str]:
    if kind == "tetradic":
        if not color2:
            raise ValueError("tetradic needs a second color (color2)")
        return tetradic(color, normalize_hex(color2))
    if kind == "monochromatic":
        return monochromatic(color, count)
    out = HARMONIES[kind](color)
    return out if isinstance(out, list) else [out]


# ----------------------------- Flask app ----------------------------------


def create_app() -> Flask:
    app = Flask(__name__)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    def _color(name: str = "color") -> str:
        return normalize_hex(request.args.get(name) or "")

    @app.errorhandler(ValueError)
    def bad_request(exc: ValueError):
        return jsonify({"error": str(exc)}), 400

    @app.errorhandler(Exception)
    def server_error(exc: Exception):
        if isinstance(exc, HTTPException):
            return exc
        log.exception("Request failed")
        return jsonify({"error": str(exc)}), 500

    @app.route("/palette")
    def palette():
        base = _color()
        scale = tailwind_palette(base)
        return jsonify(
            {
                "base": base,
                "name": closest_color_name(base),
                "steps": list(scale.steps),
                "colors": list(scale.colors),
                "contrast": [contrast_tone(c) for c in scale],
            }
        )

    @app.route("/harmony")
    def harmony_view():
        base = _color()
        kind = (request.args.get("kind") or "complementary").strip().lower()
        if kind not in supported_harmonies():
            return (
                jsonify(
                    {
                        "error": f"unknown harmony '{kind}'",
                        "supported": supported_harmonies(),
                    }
                ),
                400,
            )
        colors = harmony(
            kind,
            base,
            color2=request.args.get("color2"),
            count=parse_count(request.args.get("count")),
        )
        return jsonify(colors)

    @app.route("/name")
    def name():
        base = _color()
        return jsonify({"color": base, "name": closest_color_name(base)})

    @app.route("/random")
    def random_color():
        return jsonify({"color": random_hex_color()})

    @app.route("/export")
    def export():
        scale = create_color_scale(_color(), request.args.get("name") or "Primary")
        text = export_scales([scale], request.args.get("format") or "tailwind")
        return Response(text, mimetype="text/plain")

    return app


if __name__ == "__main__":
    create_app().run(debug=False, threaded=True)
