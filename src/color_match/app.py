from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping, Optional

import numpy as np
from flask import Flask, current_app, jsonify, request

# ColorAide
from coloraide import Color as CAColor

from .colorspace import (
    Color,
    Hex,
    get_text_color,
    hex_to_rgb,
    is_hex_color,
    rgb_to_hex,
)
from .game import Round, random_color
from .match import MatchResult, format_difference
from .palette import BASIC_PALETTE

log = logging.getLogger(__name__)

FIT_HEX = {"method": "raytrace"}  # consistent gamut-fit for hex output


def parse_color(value: Any) -> Color:
    """Any CSS color ColorAide understands, fitted into sRGB."""
    if not isinstance(value, str) or not value.strip():
        raise ValueError("color must be a non-empty string")
    value = value.strip()
    # bare "rrggbb" is not CSS, so plain hex skips ColorAide
    if is_hex_color(value):
        return hex_to_rgb(value)
    hex_str = CAColor(value).convert("srgb").to_string(
        hex=True, alpha=False, fit=FIT_HEX
    )
    return hex_to_rgb(hex_str)


def parse_picked(value: Any) -> Dict[Hex, int]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ValueError("picked must be an object of hex → quantity")
    picked: Dict[Hex, int] = {}
    for key, qty in value.items():
        if isinstance(qty, bool) or not isinstance(qty, int) or qty < 0:
            raise ValueError(f"quantity for {key!r} must be a non-negative integer")
        hex_key = rgb_to_hex(hex_to_rgb(key))
        picked[hex_key] = picked.get(hex_key, 0) + qty
    return picked


def result_payload(result: MatchResult) -> dict[str, Any]:
    return {
        "mixed": rgb_to_hex(result.mixed),
        "difference": result.difference,
        "display": format_difference(result.difference),
        "match": result.is_match,
        "text": get_text_color(result.mixed).value,
    }


def _rng() -> np.random.Generator:
    seed: Optional[int] = current_app.config.get("TARGET_SEED")
    return np.random.default_rng(seed)


def _json_body() -> Mapping[str, Any]:
    body = request.get_json(silent=True)
    if not isinstance(body, Mapping):
        raise ValueError("expected a JSON object body")
    return body


# ----------------------------- Flask app ----------------------------------


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    app = Flask(__name__)
    app.config.update(TARGET_SEED=None)
    if config:
        app.config.update(config)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    def respond(handler: Callable[[Mapping[str, Any], Round], dict[str, Any]]):
        # Inputs
        try:
            body = _json_body()
            rnd = Round(
                target=parse_color(body.get("target")),
                picked=parse_picked(body.get("picked")),
            )
        except ValueError as e:
            return jsonify({"error": f"invalid input: {e}"}), 400

        try:
            payload = handler(body, rnd)
        except ValueError as e:
            return jsonify({"error": f"invalid input: {e}"}), 400
        except Exception as exc:
            log.exception("Evaluation failed")
            return jsonify({"error": str(exc)}), 500
        return jsonify(payload)

    @app.route("/palette")
    def palette():
        return jsonify(
            [
                {
                    "name": entry.name,
                    "hex": rgb_to_hex(entry.color),
                    "text": get_text_color(entry.color).value,
                }
                for entry in BASIC_PALETTE
            ]
        )

    @app.route("/target")
    def target():
        return jsonify({"target": rgb_to_hex(random_color(_rng()))})

    @app.route("/evaluate", methods=["POST"])
    def evaluate():
        return respond(lambda body, rnd: result_payload(rnd.evaluate()))

    @app.route("/pick", methods=["POST"])
    def pick():
        def handle(body: Mapping[str, Any], rnd: Round) -> dict[str, Any]:
            quantity = body.get("quantity", 1)
            if isinstance(quantity, bool) or not isinstance(quantity, int):
                raise ValueError("quantity must be an integer")
            rnd = rnd.pick(parse_color(body.get("color")), quantity)
            payload = result_payload(rnd.evaluate())
            payload["picked"] = dict(rnd.picked)
            return payload

        return respond(handle)

    return app


if __name__ == "__main__":
    create_app().run(debug=False, threaded=True)
