from __future__ import annotations

import logging
from typing import Any

from flask import Blueprint, g, jsonify, request

from app.customer_api.db import get_database
from app.customer_api.modules.customers.service import (
    ValidationError,
    create_customer,
    delete_customer,
    list_customers,
    update_customer,
    validate_create_payload,
    validate_customer_id,
    validate_update_payload,
)
from app.customer_api.store import StoreError

bp = Blueprint("customers", __name__)

logger = logging.getLogger(__name__)

INTERNAL_ERROR = {"error": "Internal Server Error"}


def _json_payload() -> dict[str, Any]:
    # Malformed or non-object bodies validate as empty payloads.
    payload = request.get_json(silent=True, force=True)
    return payload if isinstance(payload, dict) else {}


def _bad_request(errs: list[ValidationError]):
    logger.debug("Rejected %s %s: field=%s", request.method, request.path, errs[0].field)
    return jsonify({"error": errs[0].message}), 400


def _store_failure(operation: str):
    logger.exception("Database error (op=%s request_id=%s)", operation, getattr(g, "request_id", None))
    return jsonify(INTERNAL_ERROR), 500


@bp.get("/hello")
def customers_list():
    try:
        rows = list_customers(get_database())
    except StoreError:
        return _store_failure("customers.list")
    return jsonify({"data": rows})


@bp.post("/hello")
def customers_create():
    payload = _json_payload()
    errs = validate_create_payload(payload)
    if errs:
        return _bad_request(errs)
    try:
        result = create_customer(get_database(), payload)
    except StoreError:
        return _store_failure("customers.create")
    return jsonify({"success": result.success, "CustomerId": result.meta.last_row_id})


@bp.put("/hello")
def customers_update():
    payload = _json_payload()
    errs = validate_update_payload(payload)
    if errs:
        return _bad_request(errs)
    try:
        result = update_customer(get_database(), payload)
    except StoreError:
        return _store_failure("customers.update")
    return jsonify({"success": result.success})


@bp.delete("/hello")
def customers_delete():
    customer_id = request.args.get("CustomerId")
    errs = validate_customer_id(customer_id)
    if errs:
        return _bad_request(errs)
    try:
        result = delete_customer(get_database(), customer_id)
    except StoreError:
        return _store_failure("customers.delete")
    return jsonify({"success": result.success})
