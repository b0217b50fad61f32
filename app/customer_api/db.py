from __future__ import annotations

from flask import Flask, current_app
from sqlalchemy import create_engine, event

from app.customer_api.store import Database


def init_db(app: Flask) -> None:
    db_url = app.config["DATABASE_URL"]
    is_postgres = db_url.startswith("postgres")
    engine_kwargs: dict[str, object] = {
        "future": True,
        "pool_pre_ping": True,
    }
    if is_postgres:
        engine_kwargs.update(
            {
                "pool_recycle": 1800,
                "pool_size": 5,
                "max_overflow": 10,
                "pool_timeout": 30,
            }
        )
    engine = create_engine(db_url, **engine_kwargs)
    if not app.config.get("IS_PRODUCTION"):
        @event.listens_for(engine, "checkout")
        def _receive_checkout(dbapi_connection, connection_record, connection_proxy):  # type: ignore[no-redef]
            app.logger.debug("DB connection checkout from pool")
    app.extensions["sqlalchemy_engine"] = engine
    app.extensions["customer_store"] = Database(engine)


def get_database(app: Flask | None = None) -> Database:
    """
    Binding for the current request. Stateless; shared across requests.
    """
    if app is None:
        app = current_app
    return app.extensions["customer_store"]


def create_schema(app: Flask) -> None:
    from app.customer_api.models import Base

    Base.metadata.create_all(bind=app.extensions["sqlalchemy_engine"])
