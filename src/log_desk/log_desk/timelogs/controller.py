from __future__ import annotations

import logging
from dataclasses import asdict

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import PersistenceError, ValidationError
from . import messages

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.timelog_service

    @app.route("/api/logs", methods=["GET"], endpoint="list_logs")
    def list_logs():
        result = service.load_records()
        return jsonify({
            "logs": service.get_history(),
            "integrity_ok": result.integrity_ok,
            "warning": None if result.integrity_ok else messages.DATA_INTEGRITY_WARNING,
        })

    @app.route("/api/status", methods=["GET"], endpoint="today_status")
    def today_status():
        return jsonify(asdict(service.get_today_status()))

    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        try:
            record = service.record_login()
        except PersistenceError as e:
            return jsonify({"success": False, "message": str(e)}), 500
        return jsonify({
            "success": True,
            "message": messages.LOGIN_SUCCESS.format(time=record.login_time),
            "log": record.to_dict(),
        })

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        try:
            record = service.record_logout()
        except PersistenceError as e:
            return jsonify({"success": False, "message": str(e)}), 500
        if record is None:
            return jsonify({"success": False, "message": messages.NOTHING_TO_CLOSE}), 409
        return jsonify({
            "success": True,
            "message": messages.LOGOUT_SUCCESS.format(time=record.logout_time),
            "log": record.to_dict(),
        })

    @app.route("/api/logs/<int:index>", methods=["PUT"], endpoint="update_log")
    def update_log(index: int):
        data = request.get_json(silent=True) or {}
        try:
            record = service.update_record(
                index,
                login_time=str(data.get("loginTime") or ""),
                logout_time=str(data.get("logoutTime") or ""),
            )
        except ValidationError as e:
            return jsonify({"success": False, "reason": e.reason, "message": str(e)}), 400
        except PersistenceError as e:
            return jsonify({"success": False, "message": str(e)}), 500
        return jsonify({"success": True, "message": messages.TIME_UPDATED, "log": record.to_dict()})

    @app.route("/api/reset", methods=["POST"], endpoint="reset")
    def reset():
        data = request.get_json(silent=True) or {}
        if data.get("confirm") is not True:
            return jsonify({"success": False, "message": messages.RESET_NOT_CONFIRMED}), 400

        if not service.reset_all(confirmed=True):
            return jsonify({"success": False, "message": messages.SAVE_ERROR}), 500
        logger.info("All time logs were reset")
        return jsonify({"success": True, "message": messages.DATA_RESET})
