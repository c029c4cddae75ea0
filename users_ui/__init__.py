"""Single-page user form backed by the users API."""

from .app import UiConfig, create_app
from .client import UsersApiClient
from .view import UserFormView

__all__ = ["UiConfig", "create_app", "UsersApiClient", "UserFormView"]
