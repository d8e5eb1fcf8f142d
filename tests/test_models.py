"""Tests for neocities_client.models."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from conftest import INFO_PAYLOAD, LIST_PAYLOAD
from neocities_client.exceptions import ResponseFormatError
from neocities_client.models import FileEntry, SiteInfo, parse_timestamp


def test_site_info_survives_payload_round_trip() -> None:
    info = SiteInfo(
        sitename="youpi",
        views=10,
        hits=20,
        created_at=datetime(2013, 6, 29, 10, 11, 38, tzinfo=timezone.utc),
        last_updated=None,
        domain=None,
        tags=("art",),
    )

    assert SiteInfo.from_payload({"result": "success", "info": info.to_payload()}) == info


def test_site_info_missing_info_object() -> None:
    with pytest.raises(ResponseFormatError):
        SiteInfo.from_payload({"result": "success"})


def test_site_info_rejects_non_integer_views() -> None:
    payload = {"info": {**INFO_PAYLOAD["info"], "views": "many"}}
    with pytest.raises(ResponseFormatError):
        SiteInfo.from_payload(payload)


def test_site_info_rejects_boolean_hits() -> None:
    payload = {"info": {**INFO_PAYLOAD["info"], "hits": True}}
    with pytest.raises(ResponseFormatError):
        SiteInfo.from_payload(payload)


def test_site_info_empty_domain_is_none() -> None:
    payload = {"info": {**INFO_PAYLOAD["info"], "domain": "", "tags": None}}
    info = SiteInfo.from_payload(payload)
    assert info.domain is None
    assert info.tags == ()


def test_parse_timestamp_converts_offsets_to_utc() -> None:
    assert parse_timestamp("Tue, 23 Jul 2013 22:04:03 +0200") == datetime(2013, 7, 23, 20, 4, 3, tzinfo=timezone.utc)


@pytest.mark.parametrize("value", [None, ""])
def test_parse_timestamp_empty(value: object) -> None:
    assert parse_timestamp(value) is None


@pytest.mark.parametrize("value", ["yesterday", 12345])
def test_parse_timestamp_invalid(value: object) -> None:
    with pytest.raises(ResponseFormatError):
        parse_timestamp(value)


def test_file_entry_file_fields() -> None:
    entry = FileEntry.from_payload(LIST_PAYLOAD["files"][3])

    assert entry.path == "images/cat.png"
    assert not entry.is_directory
    assert entry.size == 16793
    assert entry.sha1_hash == "41fe08fc0dd44e79f799d03ece903e62be25dc7d"
    assert entry.updated_at == datetime(2016, 2, 13, 3, 4, tzinfo=timezone.utc)


def test_file_entry_directory_has_no_size_or_hash() -> None:
    entry = FileEntry.from_payload(LIST_PAYLOAD["files"][2])

    assert entry.is_directory
    assert entry.size is None
    assert entry.sha1_hash is None
    assert "size" not in entry.to_payload()


def test_file_entry_requires_hash_for_files() -> None:
    raw = dict(LIST_PAYLOAD["files"][0])
    del raw["sha1_hash"]
    with pytest.raises(ResponseFormatError):
        FileEntry.from_payload(raw)


def test_file_entry_rejects_non_object() -> None:
    with pytest.raises(ResponseFormatError):
        FileEntry.from_payload("index.html")
