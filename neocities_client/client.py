"""
Neocities API client.

Create a client with a username and password, an API key, or no credentials::

    client = NeocitiesClient.new("randomuser", "notmypassword")
    client = NeocitiesClient.new_with_key(key)
    client = NeocitiesClient.new_no_auth()

No-auth clients can only call ``info_no_auth()``; every other method raises
``AuthenticationError`` without touching the network.
"""
from __future__ import annotations

from collections.abc import Iterable, Sequence
import logging
import os
from pathlib import Path

import requests

from neocities_client.apis import FilesApi, InfoApi, KeyApi
from neocities_client.auth import ApiKeyAuth, AuthMode, BasicAuth, NoAuth
from neocities_client.config import NeocitiesSettings
from neocities_client.exceptions import AuthenticationError
from neocities_client.http import HttpClient
from neocities_client.models import ApiResult, FileEntry, SiteInfo

logger = logging.getLogger(__name__)

LocalPath = str | os.PathLike


class NeocitiesClient:
    def __init__(
        self,
        auth: AuthMode,
        settings: NeocitiesSettings | None = None,
        session: requests.Session | None = None,
    ):
        if not isinstance(auth, (NoAuth, BasicAuth, ApiKeyAuth)):
            raise TypeError(f"Unsupported auth mode: {type(auth).__name__}")

        self._auth = auth
        self._settings = settings or NeocitiesSettings()
        self._http_client = HttpClient(self._settings, session=session)
        self._info_api = InfoApi(self._http_client)
        self._files_api = FilesApi(self._http_client)
        self._key_api = KeyApi(self._http_client)
        logger.debug("Neocities client using %s against %s", type(auth).__name__, self._settings.base_url)

    @classmethod
    def new(cls, username: str, password: str, **kwargs) -> "NeocitiesClient":
        """Client acting on the site of ``username``.

        Prefer an API key for automated jobs; this keeps a plaintext password around.
        """
        return cls(BasicAuth(username, password), **kwargs)

    @classmethod
    def new_with_key(cls, key: str, **kwargs) -> "NeocitiesClient":
        """Client authenticated by an API key (see ``get_key()``)."""
        return cls(ApiKeyAuth(key), **kwargs)

    @classmethod
    def new_no_auth(cls, **kwargs) -> "NeocitiesClient":
        return cls(NoAuth(), **kwargs)

    @classmethod
    def from_settings(cls, settings: NeocitiesSettings, **kwargs) -> "NeocitiesClient":
        return cls(settings.build_auth(), settings=settings, **kwargs)

    def __repr__(self) -> str:
        return f"NeocitiesClient(auth={self._auth!r}, base_url={self._settings.base_url!r})"

    @property
    def auth_mode(self) -> AuthMode:
        return self._auth

    @property
    def has_auth(self) -> bool:
        return not isinstance(self._auth, NoAuth)

    @property
    def settings(self) -> NeocitiesSettings:
        return self._settings

    def _require_auth(self, operation: str) -> AuthMode:
        if not self.has_auth:
            raise AuthenticationError(
                f"{operation}() needs credentials; a no-auth client can only call info_no_auth()"
            )
        return self._auth

    def info(self) -> SiteInfo:
        """Info about the authenticated user's site."""
        return self._info_api.info(self._require_auth("info"))

    def info_no_auth(self, site_name: str) -> SiteInfo:
        """Public info about any site. Unknown sites raise ``ApiError`` (``site_not_found``)."""
        return self._info_api.info_for_site(site_name)

    def list_all(self) -> list[FileEntry]:
        """Every file and directory on the authenticated user's site."""
        return self._files_api.list_files(self._require_auth("list_all"))

    def list(self, path: str) -> list[FileEntry]:
        """Files and directories below ``path``."""
        auth = self._require_auth("list")
        return self._files_api.list_files(auth, path=path)

    def upload(self, local_path: LocalPath, remote_path: str) -> ApiResult:
        return self.upload_multiple([(local_path, remote_path)])

    def upload_multiple(self, paths: Sequence[tuple[LocalPath, str]]) -> ApiResult:
        """Upload ``(local, remote)`` pairs in one request.

        All local files are read first; if any cannot be opened the ``OSError``
        propagates and nothing is sent.
        """
        auth = self._require_auth("upload_multiple")
        uploads = [(Path(local).read_bytes(), remote) for local, remote in paths]
        return self._files_api.upload(auth, uploads)

    def upload_bytes(self, data: bytes, remote_path: str) -> ApiResult:
        return self.upload_bytes_multiple([(data, remote_path)])

    def upload_bytes_multiple(self, uploads: Sequence[tuple[bytes, str]]) -> ApiResult:
        """Upload in-memory ``(data, remote)`` pairs without writing them to disk first."""
        return self._files_api.upload(self._require_auth("upload_bytes_multiple"), uploads)

    def delete(self, path: str) -> ApiResult:
        return self.delete_multiple([path])

    def delete_multiple(self, paths: Iterable[str]) -> ApiResult:
        return self._files_api.delete(self._require_auth("delete_multiple"), paths)

    def get_key(self) -> str:
        """API key of the authenticated user. Calling this generates one if none exists yet."""
        return self._key_api.get_key(self._require_auth("get_key"))
