# tablegen/client.py
from typing import Any, Dict, Mapping, Optional, Tuple

import requests

from tablegen.config import settings


class TableApiError(Exception):
    """The API answered with an error; detail is its message."""

    def __init__(self, status_code: int, detail: str):
        super().__init__(detail)
        self.status_code = status_code
        self.detail = detail


class TableApiClient:
    """Thin wrapper over the tablegen HTTP API, used by the Streamlit UI."""

    def __init__(self, base_url: Optional[str] = None, timeout: float = 10.0, session: Optional[requests.Session] = None):
        self.base_url = (base_url or settings.API_BASE).rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        resp = self.session.request(method, f"{self.base_url}{path}", timeout=self.timeout, **kwargs)
        if resp.status_code >= 400:
            try:
                detail = resp.json().get("detail", resp.text)
            except (ValueError, AttributeError):
                # body is not JSON, or JSON that is not an object
                detail = resp.text
            raise TableApiError(resp.status_code, str(detail))
        return resp

    def generate(self, form: Mapping[str, Any]) -> Tuple[str, str]:
        """Return (full, preview) markup for the given raw form values."""
        data = self._request("POST", "/generate", json=dict(form)).json()
        return data["full"], data["preview"]

    def load_settings(self) -> Dict[str, Any]:
        return self._request("GET", "/settings").json()["settings"]
