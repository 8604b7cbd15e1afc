from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_endpoint, read_json_body
from ..common.validators import optional_iso_datetime
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/predictions", methods=["POST"], endpoint="api_predictions")
    @json_endpoint
    def api_predictions():
        body = read_json_body()
        now = optional_iso_datetime(body.get("now"), "now")

        predictions = container.forecast_service.predictions(body.get("entries"), now=now)
        return jsonify({"success": True, "data": [p.to_dict() for p in predictions]})

    @app.route("/api/forecast", methods=["POST"], endpoint="api_forecast")
    @json_endpoint
    def api_forecast():
        body = read_json_body()
        now = optional_iso_datetime(body.get("now"), "now")

        points = container.forecast_service.forecast(
            body.get("entries"),
            future_days=body.get("future_days"),
            now=now,
        )
        return jsonify({"success": True, "data": [p.to_dict() for p in points]})
