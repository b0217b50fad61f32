"""
Customers service: payload validation and the SQL each verb issues.

Validators return a list of ValidationError and never touch the store.
Executors issue exactly one statement and let StoreError propagate.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from app.customer_api.modules.customers.utils import UpdateBuilder, coerce_customer_id
from app.customer_api.store import Database, RunResult

TABLE = "Customers"
KEY_COLUMN = "CustomerId"
# Declaration order; also the SET-clause order for updates.
EDITABLE_COLUMNS = ("CompanyName", "ContactName")

# Identifiers are quoted: Postgres folds unquoted names to lower case.
LIST_SQL = 'SELECT * FROM "Customers" ORDER BY "CustomerId"'
INSERT_SQL = 'INSERT INTO "Customers" ("CompanyName", "ContactName") VALUES (?, ?)'
DELETE_SQL = 'DELETE FROM "Customers" WHERE "CustomerId" = ?'

MSG_CREATE_REQUIRED = "CompanyName and ContactName are required"
MSG_ID_REQUIRED = "CustomerId is required"
MSG_NO_FIELDS = "No fields to update"


@dataclass(frozen=True)
class ValidationError:
    field: str
    message: str


def validate_create_payload(payload: dict[str, Any]) -> list[ValidationError]:
    # Truthiness: an empty string counts as missing.
    if not payload.get("CompanyName") or not payload.get("ContactName"):
        missing = "CompanyName" if not payload.get("CompanyName") else "ContactName"
        return [ValidationError(missing, MSG_CREATE_REQUIRED)]
    return []


def validate_customer_id(value: Any) -> list[ValidationError]:
    if not value:
        return [ValidationError(KEY_COLUMN, MSG_ID_REQUIRED)]
    return []


def build_customer_update(payload: dict[str, Any]) -> UpdateBuilder:
    return UpdateBuilder(TABLE, KEY_COLUMN).set_present(payload, EDITABLE_COLUMNS)


def validate_update_payload(payload: dict[str, Any]) -> list[ValidationError]:
    errs = validate_customer_id(payload.get(KEY_COLUMN))
    if errs:
        return errs
    if not build_customer_update(payload).has_changes():
        return [ValidationError("fields", MSG_NO_FIELDS)]
    return []


def list_customers(db: Database) -> list[dict[str, Any]]:
    return db.prepare(LIST_SQL).all().results


def create_customer(db: Database, payload: dict[str, Any]) -> RunResult:
    return db.prepare(INSERT_SQL).bind(payload["CompanyName"], payload["ContactName"]).run()


def update_customer(db: Database, payload: dict[str, Any]) -> RunResult:
    sql, values = build_customer_update(payload).build(coerce_customer_id(payload[KEY_COLUMN]))
    return db.prepare(sql).bind(*values).run()


def delete_customer(db: Database, customer_id: Any) -> RunResult:
    return db.prepare(DELETE_SQL).bind(coerce_customer_id(customer_id)).run()
