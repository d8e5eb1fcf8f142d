from __future__ import annotations

import logging
from typing import Any

import requests

from neocities_client.auth import AuthMode, apply_auth
from neocities_client.config import NeocitiesSettings
from neocities_client.exceptions import ApiError, ResponseFormatError, TransportError

logger = logging.getLogger(__name__)


class HttpClient:
    def __init__(self, settings: NeocitiesSettings, session: requests.Session | None = None):
        self._settings = settings
        self._session = session if session is not None else requests.Session()
        self._session.headers.update({"Accept": "application/json"})

    @property
    def base_url(self) -> str:
        return self._settings.base_url

    def get_json(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        auth: AuthMode | None = None,
    ) -> dict[str, Any]:
        return self._send("GET", path, auth, params=params)

    def post_json(
        self,
        path: str,
        data: Any = None,
        files: Any = None,
        auth: AuthMode | None = None,
    ) -> dict[str, Any]:
        return self._send("POST", path, auth, data=data, files=files)

    def _send(self, method: str, path: str, auth: AuthMode | None, **kwargs: Any) -> dict[str, Any]:
        request_kwargs: dict[str, Any] = {
            key: value for key, value in kwargs.items() if value is not None
        }
        request_kwargs["timeout"] = self._settings.timeout_seconds
        if auth is not None:
            request_kwargs = apply_auth(auth, request_kwargs)

        url = f"{self._settings.base_url}/{path.lstrip('/')}"
        logger.debug("%s %s", method, url)
        try:
            response = self._session.request(method, url, **request_kwargs)
        except requests.RequestException as exc:
            logger.debug("%s %s failed before a response: %s", method, url, exc)
            raise TransportError(f"{method} {url} failed: {exc}") from exc

        logger.debug("%s %s -> %s", method, url, response.status_code)
        return self._decode(path, response)

    @staticmethod
    def _decode(path: str, response: requests.Response) -> dict[str, Any]:
        try:
            body = response.json()
        except ValueError:
            body = None

        if not response.ok:
            if isinstance(body, dict):
                error = _error_from_envelope(response.status_code, body)
            else:
                error = ApiError(
                    status_code=response.status_code,
                    message=f"HTTP {response.status_code}: {response.text[:500]}",
                )
            logger.warning("Neocities /%s failed: %s", path.lstrip("/"), error)
            raise error

        if not isinstance(body, dict):
            raise ResponseFormatError(
                status_code=response.status_code,
                message=f"Expected a JSON object from /{path.lstrip('/')}, got: {response.text[:500]}",
            )

        if body.get("result") != "success":
            error = _error_from_envelope(response.status_code, body)
            logger.warning("Neocities /%s failed: %s", path.lstrip("/"), error)
            raise error

        return body


def _error_from_envelope(status_code: int, body: dict[str, Any]) -> ApiError:
    message = str(body.get("message") or body.get("error_type") or "Unknown Neocities error")
    error_type = body.get("error_type")
    return ApiError(
        status_code=status_code,
        message=message,
        error_type=str(error_type) if error_type else None,
    )
