import logging
import uuid

from dotenv import load_dotenv
from flask import Flask, g, jsonify
from werkzeug.exceptions import HTTPException

from app.customer_api.config import load_config
from app.customer_api.db import create_schema, init_db
from app.customer_api.routes import bp as routes_bp
from app.customer_api.modules.customers.api import INTERNAL_ERROR, bp as customers_bp


def _configure_logging(app: Flask) -> None:
    level = getattr(logging, app.config.get("LOG_LEVEL") or "INFO", logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    app.logger.setLevel(level)
    logging.getLogger("app.customer_api").setLevel(level)


def create_app() -> Flask:
    load_dotenv()
    app = Flask(__name__)
    app.config.from_mapping(load_config())
    # Response keys keep insertion order ({"success", "CustomerId"}).
    app.json.sort_keys = False
    _configure_logging(app)

    # Production guardrails (fail fast with clear logs)
    if app.config.get("IS_PRODUCTION"):
        if not app.config.get("DATABASE_URL") or str(app.config["DATABASE_URL"]).strip() == "":
            raise RuntimeError("DATABASE_URL is required in production.")
        if str(app.config["DATABASE_URL"]).startswith("sqlite"):
            raise RuntimeError("DATABASE_URL must be Postgres in production (not sqlite).")

    init_db(app)

    def _dispose_engine_on_fork() -> None:
        import os
        if hasattr(os, "register_at_fork"):
            def _after_fork_child():
                engine = app.extensions.get("sqlalchemy_engine")
                if engine:
                    engine.dispose()
                    app.logger.info("Disposed DB engine after fork (pid=%s)", os.getpid())

            os.register_at_fork(after_in_child=_after_fork_child)

    _dispose_engine_on_fork()

    if app.config.get("AUTO_CREATE_SCHEMA") and not app.config.get("IS_PRODUCTION"):
        create_schema(app)
        app.logger.info("Customers schema ensured on %s", app.config["DATABASE_URL"].split("://", 1)[0])

    app.register_blueprint(routes_bp)
    app.register_blueprint(customers_bp)

    @app.before_request
    def _assign_request_id():
        g.request_id = uuid.uuid4().hex

    @app.after_request
    def _echo_request_id(response):
        rid = getattr(g, "request_id", None)
        if rid:
            response.headers["X-Request-ID"] = rid
        return response

    @app.errorhandler(HTTPException)
    def _err_http(e: HTTPException):  # type: ignore[no-redef]
        return jsonify({"error": e.name}), e.code

    @app.errorhandler(Exception)
    def _err_500(e: Exception):  # type: ignore[no-redef]
        app.logger.exception("Unhandled 500 (request_id=%s)", getattr(g, "request_id", None))
        return jsonify(INTERNAL_ERROR), 500

    logging.getLogger(__name__).info("create_app() complete; app ready to serve")

    return app
