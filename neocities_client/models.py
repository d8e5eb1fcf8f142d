from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from email.utils import format_datetime, parsedate_to_datetime
from typing import Any

from neocities_client.exceptions import ResponseFormatError


def parse_timestamp(value: Any) -> datetime | None:
    """Parse the RFC 2822 dates Neocities returns (``Sat, 13 Feb 2016 03:04:00 -0000``)."""
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise ResponseFormatError(status_code=200, message=f"Invalid timestamp: {value!r}")
    try:
        parsed = parsedate_to_datetime(value)
    except (TypeError, ValueError) as exc:
        raise ResponseFormatError(status_code=200, message=f"Invalid timestamp: {value!r}") from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def format_timestamp(value: datetime | None) -> str | None:
    if value is None:
        return None
    return format_datetime(value.astimezone(timezone.utc), usegmt=True)


def _require(payload: dict[str, Any], key: str, kind: type | tuple[type, ...]) -> Any:
    value = payload.get(key)
    # bool is an int subclass; a flag is never a valid count
    if not isinstance(value, kind) or (isinstance(value, bool) and bool not in _as_tuple(kind)):
        raise ResponseFormatError(status_code=200, message=f"Field {key!r} missing or not {kind}")
    return value


def _as_tuple(kind: type | tuple[type, ...]) -> tuple[type, ...]:
    return kind if isinstance(kind, tuple) else (kind,)


@dataclass(frozen=True)
class SiteInfo:
    sitename: str
    views: int
    hits: int
    created_at: datetime | None
    last_updated: datetime | None
    domain: str | None = None
    tags: tuple[str, ...] = ()
    latest_ipfs_hash: str | None = None

    @staticmethod
    def from_payload(payload: dict[str, Any]) -> "SiteInfo":
        info = payload.get("info")
        if not isinstance(info, dict):
            raise ResponseFormatError(status_code=200, message="Response has no 'info' object")

        raw_tags = info.get("tags") or []
        if not isinstance(raw_tags, list):
            raise ResponseFormatError(status_code=200, message="Field 'tags' is not a list")

        return SiteInfo(
            sitename=_require(info, "sitename", str),
            views=_require(info, "views", int),
            hits=_require(info, "hits", int),
            created_at=parse_timestamp(info.get("created_at")),
            last_updated=parse_timestamp(info.get("last_updated")),
            domain=info.get("domain") or None,
            tags=tuple(str(tag) for tag in raw_tags),
            latest_ipfs_hash=info.get("latest_ipfs_hash") or None,
        )

    def to_payload(self) -> dict[str, Any]:
        return {
            "sitename": self.sitename,
            "views": self.views,
            "hits": self.hits,
            "created_at": format_timestamp(self.created_at),
            "last_updated": format_timestamp(self.last_updated),
            "domain": self.domain,
            "tags": list(self.tags),
            "latest_ipfs_hash": self.latest_ipfs_hash,
        }


@dataclass(frozen=True)
class FileEntry:
    path: str
    is_directory: bool
    updated_at: datetime | None
    size: int | None = None
    sha1_hash: str | None = None

    @staticmethod
    def from_payload(entry: Any) -> "FileEntry":
        if not isinstance(entry, dict):
            raise ResponseFormatError(status_code=200, message=f"Invalid file list entry: {entry!r}")

        is_directory = _require(entry, "is_directory", bool)
        path = _require(entry, "path", str)
        updated_at = parse_timestamp(entry.get("updated_at"))
        if is_directory:
            return FileEntry(path=path, is_directory=True, updated_at=updated_at)

        return FileEntry(
            path=path,
            is_directory=False,
            updated_at=updated_at,
            size=_require(entry, "size", int),
            sha1_hash=_require(entry, "sha1_hash", str),
        )

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "path": self.path,
            "is_directory": self.is_directory,
            "updated_at": format_timestamp(self.updated_at),
        }
        if not self.is_directory:
            payload["size"] = self.size
            payload["sha1_hash"] = self.sha1_hash
        return payload


@dataclass(frozen=True)
class ApiResult:
    endpoint: str
    message: str
    payload: dict[str, Any] = field(default_factory=dict)
