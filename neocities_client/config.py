from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
import os
from pathlib import Path
from urllib.parse import urlparse

from neocities_client.auth import ApiKeyAuth, AuthMode, BasicAuth, NoAuth

DEFAULT_BASE_URL = "https://neocities.org/api"

class ConfigurationError(ValueError):
    pass

@dataclass(frozen=True)
class NeocitiesSettings:
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: int = 45
    username: str = ""
    password: str = field(default="", repr=False)
    api_key: str = field(default="", repr=False)
    log_level: str = "INFO"

    @staticmethod
    def from_env() -> "NeocitiesSettings":
        _load_dotenv_if_present()

        base_url = os.getenv("NEOCITIES_BASE_URL", DEFAULT_BASE_URL).strip().rstrip("/")
        raw_timeout = os.getenv("NEOCITIES_TIMEOUT_SECONDS", "45").strip()
        try:
            timeout_seconds = int(raw_timeout)
        except ValueError as exc:
            raise ConfigurationError("NEOCITIES_TIMEOUT_SECONDS must be an integer") from exc

        username = os.getenv("NEOCITIES_USERNAME", "").strip()
        password = os.getenv("NEOCITIES_PASSWORD", "")

        api_key = os.getenv("NEOCITIES_API_KEY", "").strip()
        key_file = os.getenv("NEOCITIES_API_KEY_FILE", "").strip()
        if not api_key and key_file:
            api_key = _read_key_file(Path(key_file).expanduser())

        log_level = os.getenv("NEOCITIES_LOG_LEVEL", "INFO").strip().upper() or "INFO"

        settings = NeocitiesSettings(
            base_url=base_url,
            timeout_seconds=timeout_seconds,
            username=username,
            password=password,
            api_key=api_key,
            log_level=log_level,
        )
        settings.validate()
        return settings

    def validate(self) -> None:
        parsed = urlparse(self.base_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ConfigurationError("NEOCITIES_BASE_URL must be an http(s) URL")

        if self.timeout_seconds <= 0:
            raise ConfigurationError("NEOCITIES_TIMEOUT_SECONDS must be greater than 0")

        if self.username and not self.password:
            raise ConfigurationError("NEOCITIES_PASSWORD is required when NEOCITIES_USERNAME is set")
        if self.password and not self.username:
            raise ConfigurationError("NEOCITIES_USERNAME is required when NEOCITIES_PASSWORD is set")

    def build_auth(self) -> AuthMode:
        if self.api_key:
            return ApiKeyAuth(self.api_key)
        if self.username:
            return BasicAuth(self.username, self.password)
        return NoAuth()

def _read_key_file(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise ConfigurationError(f"Cannot read NEOCITIES_API_KEY_FILE {path}: {exc}") from exc

def _load_dotenv_if_present() -> None:
    """Copy ``.env`` values into the environment; variables already set win."""
    for path in _env_file_locations():
        for key, value in parse_env_file(path).items():
            os.environ.setdefault(key, value)

def _env_file_locations() -> Iterator[Path]:
    explicit = os.getenv("NEOCITIES_ENV_FILE", "").strip()
    locations = [
        Path(explicit).expanduser() if explicit else None,
        Path.cwd() / ".env",
        Path(__file__).resolve().parent.parent / ".env",
    ]

    seen: set[Path] = set()
    for location in locations:
        if location is None or not location.is_file():
            continue
        resolved = location.resolve()
        if resolved not in seen:
            seen.add(resolved)
            yield location

def parse_env_file(path: Path) -> dict[str, str]:
    """``KEY=value`` pairs from a dotenv file. Blank lines, comments and ``export`` prefixes are skipped."""
    values: dict[str, str] = {}
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except OSError:
        return values

    for line in lines:
        key, sep, value = line.strip().removeprefix("export ").partition("=")
        key = key.strip()
        if not sep or not key or key.startswith("#"):
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
            value = value[1:-1]
        values[key] = value
    return values
