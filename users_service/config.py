import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel

# ---------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

STORE_BACKENDS = ("dynamodb", "sql")


class ServiceConfig(BaseModel):
    table_name: str = "Users"
    region: str = "us-east-1"
    endpoint_url: Optional[str] = None
    store_backend: str = "dynamodb"
    database_uri: str = "sqlite:///users.db"
    cors_origins: str = "*"
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServiceConfig":
        """
        Build the startup config from environment variables.
        Only the entrypoint should call this; everything else gets the config passed in.
        """
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            table_name=env.get("TABLE_NAME", defaults.table_name),
            region=env.get("AWS_REGION", defaults.region),
            endpoint_url=env.get("DYNAMODB_ENDPOINT_URL") or None,
            store_backend=env.get("STORE_BACKEND", defaults.store_backend).lower(),
            database_uri=env.get("DATABASE_URI", defaults.database_uri),
            cors_origins=env.get("CORS_ORIGINS", defaults.cors_origins),
            host=env.get("HOST", defaults.host),
            port=int(env.get("PORT", defaults.port)),
            log_level=env.get("LOG_LEVEL", defaults.log_level).upper(),
        )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
