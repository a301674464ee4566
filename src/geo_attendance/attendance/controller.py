from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_timestamp
from ..common.validators import require_attendance_fields
from ..container import Container
from ..core.constants import (
    MSG_CHECKIN_OK,
    MSG_CHECKOUT_OK,
    MSG_FIELDS_REQUIRED,
    MSG_INTERNAL_ERROR,
    WELCOME_MESSAGE,
)
from ..core.exceptions import DuplicateOperationError, InvalidStateError, ValidationError
from .model import GeoPoint

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _read_body():
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            payload = request.form.to_dict() or None
        user_id, raw_ts, latitude, longitude = require_attendance_fields(payload)
        try:
            timestamp = parse_timestamp(raw_ts)
        except ValidationError as e:
            raise ValidationError(MSG_FIELDS_REQUIRED) from e
        return user_id, timestamp, GeoPoint(latitude=latitude, longitude=longitude)

    @app.route("/", methods=["GET"], endpoint="index")
    def index():
        return jsonify({"message": WELCOME_MESSAGE}), 200

    @app.route("/api/checkin", methods=["POST"], endpoint="api_checkin")
    def api_checkin():
        try:
            user_id, timestamp, location = _read_body()
            container.attendance_service.check_in(user_id, timestamp=timestamp, location=location)
            return jsonify({"message": MSG_CHECKIN_OK}), 200
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except DuplicateOperationError as e:
            return jsonify({"message": str(e)}), 400
        except Exception:
            logger.exception("Check-in failed")
            return jsonify({"error": MSG_INTERNAL_ERROR}), 500

    @app.route("/api/checkout", methods=["POST"], endpoint="api_checkout")
    def api_checkout():
        try:
            user_id, timestamp, location = _read_body()
            container.attendance_service.check_out(user_id, timestamp=timestamp, location=location)
            return jsonify({"message": MSG_CHECKOUT_OK}), 200
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except InvalidStateError as e:
            return jsonify({"message": str(e)}), 400
        except Exception:
            logger.exception("Check-out failed")
            return jsonify({"error": MSG_INTERNAL_ERROR}), 500

    @app.route("/api/status/<employee_id>", methods=["GET"], endpoint="api_status")
    def api_status(employee_id: str):
        try:
            view = container.attendance_service.get_status(employee_id)
            return jsonify(view.to_dict()), 200
        except Exception:
            logger.exception("Error fetching status for employee %s", employee_id)
            return jsonify({"error": MSG_INTERNAL_ERROR}), 500
