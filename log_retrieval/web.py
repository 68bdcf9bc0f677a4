"""Flask web interface for the log query service."""

import logging

from flask import Flask, jsonify, request

from log_retrieval.config import Config
from log_retrieval.errors import NotFoundError, ReadError
from log_retrieval.service import LogQueryService
from log_retrieval.validation import ValidationError, validate_date, validate_log_id

logger = logging.getLogger(__name__)

ERROR_TYPE_NOT_FOUND = "not_found"
ERROR_TYPE_INVALID_INPUT = "invalid_input"
ERROR_TYPE_INTERNAL = "internal_error"


def _success(data, message: str):
    return jsonify(success=True, data=data, message=message)


def _error(code: int, message: str, error_type: str):
    body = {"success": False, "error": {"code": code, "message": message, "type": error_type}}
    return jsonify(body), code


def _logs_payload(records, total: int) -> dict:
    return {"logs": [r.to_dict() for r in records], "total": total}


def create_app(config: Config, service: LogQueryService | None = None) -> Flask:
    """Flask application factory."""
    app = Flask(__name__)
    if service is None:
        service = LogQueryService(config)
    app.config["LOG_DIR"] = config.log_dir
    app.config["service"] = service

    @app.errorhandler(ValidationError)
    def handle_validation(exc):
        return _error(400, str(exc), ERROR_TYPE_INVALID_INPUT)

    @app.errorhandler(NotFoundError)
    def handle_not_found(exc):
        logger.info("Not found: %s", exc.path)
        return _error(404, str(exc), ERROR_TYPE_NOT_FOUND)

    @app.errorhandler(ReadError)
    def handle_read_error(exc):
        logger.error("Failed to read logs: %s", exc)
        return _error(500, "Failed to read log file", ERROR_TYPE_INTERNAL)

    @app.route("/health")
    def health():
        return jsonify(status="ok")

    @app.route("/api/v1/log/byId/<log_id>")
    def logs_by_id(log_id):
        validate_log_id(log_id)
        records = service.get_by_correlation_id(log_id)
        return _success(_logs_payload(records, len(records)),
                        "Logs retrieved successfully")

    @app.route("/api/v1/log/byDate/<day>")
    def logs_by_date(day):
        parsed = validate_date(day, service.today())
        level = request.args.get("level") or None
        records, total = service.get_by_date(parsed, level=level)
        return _success(_logs_payload(records, total), "Logs retrieved successfully")

    @app.route("/api/v1/log/search")
    def search():
        query = request.args.get("q", "").strip()
        if not query:
            raise ValidationError("Search query is required")
        day = request.args.get("date") or None
        parsed = validate_date(day, service.today()) if day else None
        level = request.args.get("level") or None
        records, total = service.search(query, day=parsed, level=level)
        return _success(_logs_payload(records, total), "Search completed successfully")

    @app.route("/api/v1/log/files")
    def files():
        return _success({"dates": service.available_dates()}, "Log files listed successfully")

    return app
