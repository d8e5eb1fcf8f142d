"""
Helpers for working with a site's file list.

Neocities includes a SHA-1 hash for every file in its list response, so a
local file can be compared against the remote copy without downloading it::

    client = NeocitiesClient.new_with_key(key)
    site = SiteFiles(client)
    if site.file_changed("site/index.html", "/index.html"):
        client.upload("site/index.html", "index.html")

Entries are kept as one flat list. Every path starts with ``/``.
"""
from __future__ import annotations

from dataclasses import replace
import hashlib
import os
from pathlib import Path
from typing import TYPE_CHECKING

from neocities_client.models import FileEntry

if TYPE_CHECKING:
    from neocities_client.client import NeocitiesClient


def hash_of_bytes(data: bytes) -> str:
    return hashlib.sha1(data).hexdigest()


def hash_of_string(text: str) -> str:
    return hash_of_bytes(text.encode("utf-8"))


def hash_of_local(path: str | os.PathLike) -> str:
    """SHA-1 of a local file. Raises ``OSError`` if it cannot be read."""
    digest = hashlib.sha1()
    with Path(path).open("rb") as handle:
        for chunk in iter(lambda: handle.read(64 * 1024), b""):
            digest.update(chunk)
    return digest.hexdigest()


def normalize_path(path: str) -> str:
    return "/" + path.strip().strip("/")


class SiteFiles:
    def __init__(self, client: "NeocitiesClient"):
        self.client = client
        self.items: list[FileEntry] = []
        self.refresh()

    def refresh(self) -> None:
        """Query the list endpoint again and replace the cached entries."""
        entries = self.client.list_all()
        self.items = [replace(entry, path=normalize_path(entry.path)) for entry in entries]

    def get_item(self, path: str) -> FileEntry | None:
        wanted = normalize_path(path)
        for item in self.items:
            if item.path == wanted:
                return item
        return None

    def get_file(self, path: str) -> FileEntry | None:
        item = self.get_item(path)
        if item is None or item.is_directory:
            return None
        return item

    def get_dir(self, path: str) -> FileEntry | None:
        item = self.get_item(path)
        if item is None or not item.is_directory:
            return None
        return item

    def file_exists(self, path: str) -> bool:
        return self.get_file(path) is not None

    def dir_exists(self, path: str) -> bool:
        return self.get_dir(path) is not None

    def file_changed(self, local_path: str | os.PathLike, remote_path: str) -> bool:
        """True when the remote file is missing or its hash differs from the local file."""
        remote = self.get_file(remote_path)
        if remote is None:
            return True
        return hash_of_local(local_path) != (remote.sha1_hash or "").lower()
