"""
Neocities command line.

Usage examples:
  neocities info ambyshframber
  neocities upload site/index.html index.html
  neocities upload-text "$(date -R)" time.txt
  neocities delete time.txt
  neocities list blog

Credentials come from NEOCITIES_API_KEY / NEOCITIES_API_KEY_FILE or
NEOCITIES_USERNAME + NEOCITIES_PASSWORD (a .env file is read too).
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from neocities_client.client import NeocitiesClient
from neocities_client.config import ConfigurationError, NeocitiesSettings
from neocities_client.exceptions import AuthenticationError, NeocitiesError
from neocities_client.logging_utils import configure_logging
from neocities_client.models import ApiResult, FileEntry, SiteInfo

logger = logging.getLogger(__name__)


def _to_json(value: Any) -> Any:
    if isinstance(value, (SiteInfo, FileEntry)):
        return value.to_payload()
    if isinstance(value, ApiResult):
        return {"endpoint": value.endpoint, "message": value.message}
    if isinstance(value, list):
        return [_to_json(item) for item in value]
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="neocities", description="Talk to the Neocities API")
    parser.add_argument("--log-level", default=None, help="Logging level (default: NEOCITIES_LOG_LEVEL or INFO)")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_info = sub.add_parser("info", help="Show site info (your own site, or SITENAME without auth)")
    p_info.add_argument("sitename", nargs="?", help="Public site to look up")

    p_list = sub.add_parser("list", help="List files on your site")
    p_list.add_argument("path", nargs="?", help="Only list below this path")

    p_upload = sub.add_parser("upload", help="Upload a local file")
    p_upload.add_argument("local", help="Local file path")
    p_upload.add_argument("remote", help="Path on the site, relative to the root")

    p_text = sub.add_parser("upload-text", help="Upload a string as a file")
    p_text.add_argument("text", help="File contents")
    p_text.add_argument("remote", help="Path on the site, relative to the root")

    p_delete = sub.add_parser("delete", help="Delete files on your site")
    p_delete.add_argument("paths", nargs="+", help="Paths on the site")

    sub.add_parser("key", help="Print the API key for the configured account")
    return parser


def run(args: argparse.Namespace, client: NeocitiesClient) -> Any:
    if args.cmd == "info":
        if args.sitename:
            return client.info_no_auth(args.sitename)
        return client.info()
    if args.cmd == "list":
        return client.list(args.path) if args.path else client.list_all()
    if args.cmd == "upload":
        return client.upload(args.local, args.remote)
    if args.cmd == "upload-text":
        return client.upload_bytes(args.text.encode("utf-8"), args.remote)
    if args.cmd == "delete":
        return client.delete_multiple(args.paths)
    if args.cmd == "key":
        return {"api_key": client.get_key()}
    raise ValueError(f"Unknown command: {args.cmd}")


def main(argv: list[str] | None = None, client: NeocitiesClient | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = client.settings if client is not None else NeocitiesSettings.from_env()
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    configure_logging(args.log_level or settings.log_level)
    if client is None:
        client = NeocitiesClient.from_settings(settings)

    try:
        result = run(args, client)
    except AuthenticationError as exc:
        print(f"Authentication error: {exc}", file=sys.stderr)
        return 2
    except ValueError as exc:
        print(f"Invalid arguments: {exc}", file=sys.stderr)
        return 2
    except (NeocitiesError, OSError) as exc:
        logger.debug("Command %s failed", args.cmd, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(_to_json(result), indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
