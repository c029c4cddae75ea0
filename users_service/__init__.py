"""Users API: create and list user records in an external table."""

from .app import create_app, new_record_id
from .config import ServiceConfig

__all__ = ["create_app", "new_record_id", "ServiceConfig"]
