from __future__ import annotations

from collections.abc import Iterable, Sequence
import logging
from typing import Any

from neocities_client.auth import AuthMode
from neocities_client.exceptions import ResponseFormatError
from neocities_client.http import HttpClient
from neocities_client.models import ApiResult, FileEntry

logger = logging.getLogger(__name__)


class FilesApi:
    list_path = "list"
    upload_path = "upload"
    delete_path = "delete"

    def __init__(self, http_client: HttpClient):
        self._http_client = http_client

    def list_files(self, auth: AuthMode, path: str | None = None) -> list[FileEntry]:
        params = {"path": path} if path else None
        payload = self._http_client.get_json(self.list_path, params=params, auth=auth)

        files = payload.get("files")
        if not isinstance(files, list):
            raise ResponseFormatError(status_code=200, message="Response has no 'files' list")
        return [FileEntry.from_payload(entry) for entry in files]

    def upload(self, auth: AuthMode, uploads: Sequence[tuple[bytes, str]]) -> ApiResult:
        if not uploads:
            raise ValueError("At least one file is required for upload")

        files = self.build_upload_parts(uploads)
        logger.info("Uploading %d file(s): %s", len(files), ", ".join(name for name, _ in files))
        payload = self._http_client.post_json(self.upload_path, files=files, auth=auth)
        return ApiResult(endpoint=self.upload_path, message=str(payload.get("message", "")), payload=payload)

    def delete(self, auth: AuthMode, paths: Iterable[str]) -> ApiResult:
        # a bare string would be iterated one character at a time
        if isinstance(paths, (str, bytes)):
            raise TypeError("delete expects a list of paths, not a single string")

        data = []
        for path in paths:
            path = str(path).strip()
            if not path:
                raise ValueError("Remote path is required for delete")
            data.append(("filenames[]", path))
        if not data:
            raise ValueError("At least one path is required for delete")

        logger.info("Deleting %d file(s): %s", len(data), ", ".join(path for _, path in data))
        payload = self._http_client.post_json(self.delete_path, data=data, auth=auth)
        return ApiResult(endpoint=self.delete_path, message=str(payload.get("message", "")), payload=payload)

    @staticmethod
    def build_upload_parts(uploads: Sequence[tuple[bytes, str]]) -> list[tuple[str, tuple[str, bytes]]]:
        """Multipart parts keyed by remote path, as ``curl -F "remote=@local"`` sends them."""
        parts: list[tuple[str, tuple[str, Any]]] = []
        for data, remote_path in uploads:
            remote_path = str(remote_path).strip()
            if not remote_path:
                raise ValueError("Remote path is required for upload")
            parts.append((remote_path, (remote_path, bytes(data))))
        return parts
