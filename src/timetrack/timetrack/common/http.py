"""Shared helpers for the JSON controllers."""
from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify, request

from ..core.exceptions import ValidationError

log = logging.getLogger(__name__)


def read_json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        if request.get_data():
            raise ValidationError("request body is not valid JSON")
        return {}
    if not isinstance(data, dict):
        raise ValidationError("request body must be a JSON object")
    return data


def json_endpoint(view):
    """Map ValidationError to 400 and anything unexpected to 500."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            log.exception("unhandled error in %s", request.path)
            return jsonify({"success": False, "message": "Internal server error"}), 500

    return wrapper
