import logging
import os
from typing import Mapping, Optional

from flask import Flask, request
from pydantic import BaseModel

from users_service.config import configure_logging

from .client import UsersApiClient
from .view import UserFormView

logger = logging.getLogger(__name__)


class UiConfig(BaseModel):
    api_base_url: str = "http://localhost:3000"
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "UiConfig":
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            api_base_url=env.get("API_BASE_URL", defaults.api_base_url),
            host=env.get("HOST", defaults.host),
            port=int(env.get("PORT", defaults.port)),
            log_level=env.get("LOG_LEVEL", defaults.log_level).upper(),
        )


def create_app(config: UiConfig, client: Optional[UsersApiClient] = None) -> Flask:
    """Serve the user form. A fresh view is built for every request."""
    if client is None:
        client = UsersApiClient(config.api_base_url)

    app = Flask(__name__)

    @app.route("/", methods=["GET"])
    def index():
        view = UserFormView(client)
        view.mount()
        return view.render()

    @app.route("/", methods=["POST"])
    def submit():
        view = UserFormView(client)
        view.current_input = request.form.get("name", "")
        view.submit()
        logger.info("Submitted form, %d users listed", len(view.records))
        return view.render()

    return app


if __name__ == "__main__":
    config = UiConfig.from_env()
    configure_logging(config.log_level)
    app = create_app(config)
    app.run(host=config.host, port=config.port)
