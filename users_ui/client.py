from typing import Any, Dict, List, Optional

import requests


class UsersApiClient:
    """
    The two calls the form makes against the users API.

    No timeout and no retry: a transport or HTTP error is raised to the caller.
    """

    def __init__(self, base_url: str, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()

    def create_user(self, name: Any) -> Dict[str, Any]:
        resp = self.session.post(f"{self.base_url}/api/user", json={"name": name})
        resp.raise_for_status()
        return resp.json()

    def list_users(self) -> List[Dict[str, Any]]:
        resp = self.session.get(f"{self.base_url}/api/users")
        resp.raise_for_status()
        return resp.json()
