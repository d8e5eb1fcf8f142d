from __future__ import annotations

from neocities_client.auth import AuthMode
from neocities_client.exceptions import ResponseFormatError
from neocities_client.http import HttpClient


class KeyApi:
    path = "key"

    def __init__(self, http_client: HttpClient):
        self._http_client = http_client

    def get_key(self, auth: AuthMode) -> str:
        payload = self._http_client.get_json(self.path, auth=auth)
        api_key = str(payload.get("api_key") or "").strip()
        if not api_key:
            raise ResponseFormatError(status_code=200, message="Response has no 'api_key'")
        return api_key
