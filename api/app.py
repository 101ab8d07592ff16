"""Flask REST API exposing the ledger services."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request
from flask_cors import CORS

from ledger_core.aggregation import MonthKey, build_snapshot
from ledger_core.exceptions import PersistenceError, RecordNotFoundError, ValidationError
from ledger_core.navigation import LedgerController
from ledger_core.repository import LedgerRepository
from ledger_core.storage import JSONStorage, default_data_dir
from ledger_core.validators import parse_month

TRUTHY = {"1", "true", "yes"}


def create_app(data_dir: Optional[Path] = None) -> Flask:
    app = Flask(__name__)

    env_name = os.getenv("MEOW_LEDGER_ENV", "prod").lower()
    if env_name in {"dev", "development"}:
        CORS(app, resources={r"/*": {"origins": "*"}}, supports_credentials=True)
    else:
        allowed_origins = os.getenv("MEOW_LEDGER_ALLOWED_ORIGINS")
        if allowed_origins:
            origins = [origin.strip() for origin in allowed_origins.split(",") if origin.strip()]
            CORS(app, resources={r"/*": {"origins": origins}}, supports_credentials=True)
        else:
            CORS(app)

    repository = LedgerRepository(JSONStorage(Path(data_dir or default_data_dir())))
    controller = LedgerController(repository)

    def _success(payload: Any, status: int = 200):
        if status == 204:
            return ("", status)
        return jsonify(payload), status

    def _handle_error(exc: Exception, status: int, message: str):
        app.logger.error("%s: %s", message, exc)
        return jsonify({"error": message, "details": str(exc)}), status

    @app.errorhandler(ValidationError)
    def handle_validation_error(exc: ValidationError):
        return _handle_error(exc, 400, "Validation error")

    @app.errorhandler(RecordNotFoundError)
    def handle_not_found(exc: RecordNotFoundError):
        return _handle_error(exc, 404, "Record not found")

    @app.errorhandler(PersistenceError)
    def handle_persistence_error(exc: PersistenceError):
        return _handle_error(exc, 500, "Persistence error")

    def _json_body() -> Dict[str, Any]:
        if not request.is_json:
            raise ValidationError("Request content must be application/json")
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Malformed JSON body")
        return data

    def _month_arg() -> MonthKey:
        raw = request.args.get("month")
        if not raw:
            return MonthKey.today()
        year, month = parse_month(raw)
        return MonthKey(year, month)

    def _snapshot():
        return build_snapshot(
            controller.transactions.list(),
            controller.categories.list(),
            controller.active_ledger_id,
            _month_arg(),
        )

    @app.get("/ledgers")
    def list_ledgers():
        return _success({
            "items": [ledger.to_dict() for ledger in controller.ledgers.list()],
            "activeLedgerId": controller.active_ledger_id,
        })

    @app.put("/ledgers/active")
    def switch_ledger():
        payload = _json_body()
        ledger_id = payload.get("ledgerId")
        if not isinstance(ledger_id, str) or not ledger_id.strip():
            raise ValidationError("ledgerId is required")
        ledger = controller.switch_ledger(ledger_id.strip())
        return _success(ledger.to_dict())

    @app.get("/categories")
    def list_categories():
        categories = controller.categories.list(request.args.get("type") or None)
        return _success({"items": [category.to_dict() for category in categories]})

    @app.get("/transactions")
    def list_transactions():
        snapshot = _snapshot()
        return _success({
            "month": snapshot.month.label,
            "items": [tx.to_dict() for tx in snapshot.transactions],
        })

    @app.post("/transactions")
    def create_transaction():
        payload = _json_body()
        transaction = controller.transactions.add(payload, controller.active_ledger_id)
        return _success(transaction.to_dict(), 201)

    @app.delete("/transactions/<transaction_id>")
    def delete_transaction(transaction_id: str):
        confirmed = (request.args.get("confirm") or "").lower() in TRUTHY

        def confirm(_prompt: str) -> bool:
            return confirmed

        if not controller.request_delete(transaction_id, confirm):
            raise ValidationError("Deletion must be confirmed with confirm=true")
        return _success({}, 204)

    @app.get("/summary")
    def summary():
        snapshot = _snapshot()
        return _success({
            "ledgerId": snapshot.ledger_id,
            "month": snapshot.month.label,
            **snapshot.stats.to_dict(),
            "totalBalance": f"{snapshot.total_balance:.2f}",
        })

    @app.get("/daily")
    def daily():
        snapshot = _snapshot()
        return _success({
            "month": snapshot.month.label,
            "items": [group.to_dict() for group in snapshot.daily_groups],
        })

    @app.get("/stats/categories")
    def category_stats():
        snapshot = _snapshot()
        return _success({
            "month": snapshot.month.label,
            "expense": f"{snapshot.stats.expense:.2f}",
            "items": [share.to_dict() for share in snapshot.ranking],
        })

    return app
