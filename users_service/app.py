import logging
import time
import uuid

from flask import Flask, jsonify, request
from flask_cors import CORS

from .config import ServiceConfig, configure_logging
from .store import build_store

logger = logging.getLogger(__name__)


def new_record_id() -> str:
    # epoch millis + random suffix: time-ordered, distinct within the same millisecond
    return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}"


def create_app(config: ServiceConfig, store=None) -> Flask:
    """
    Build the users API.

    Each request is exactly one store call. Nothing is cached on the app
    between requests, and store errors are left to Flask's stock 500.
    """
    if store is None:
        store = build_store(config)

    app = Flask(__name__)
    # UI is served from another origin
    CORS(app, resources={r"/*": {"origins": config.cors_origins}})

    @app.route("/api/user", methods=["POST"])
    def create_user():
        data = request.get_json(force=True, silent=True)
        item = {"id": new_record_id()}
        # no validation: name is stored as sent, or left out when not sent
        if isinstance(data, dict) and "name" in data:
            item["name"] = data["name"]

        store.put(item)
        logger.info("Created user %s", item["id"])
        return jsonify({"status": "OK"}), 200

    @app.route("/api/users", methods=["GET"])
    def list_users():
        items = store.scan()
        logger.info("Listed %d users", len(items))
        return jsonify(items), 200

    return app


if __name__ == "__main__":
    config = ServiceConfig.from_env()
    configure_logging(config.log_level)
    app = create_app(config)
    app.run(host=config.host, port=config.port)
