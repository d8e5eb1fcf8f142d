from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from neocities_client.exceptions import AuthenticationError


@dataclass(frozen=True)
class NoAuth:
    pass


@dataclass(frozen=True)
class BasicAuth:
    username: str
    password: str = field(repr=False)

    def __post_init__(self) -> None:
        if not self.username:
            raise AuthenticationError("Basic auth requires a username")


@dataclass(frozen=True)
class ApiKeyAuth:
    key: str = field(repr=False)

    def __post_init__(self) -> None:
        # Keys pasted from files usually carry a trailing newline.
        object.__setattr__(self, "key", self.key.strip())
        if not self.key:
            raise AuthenticationError("API key must not be empty")


AuthMode = Union[NoAuth, BasicAuth, ApiKeyAuth]


def apply_auth(mode: AuthMode, request_kwargs: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of ``request_kwargs`` carrying the credentials for ``mode``."""
    if isinstance(mode, BasicAuth):
        return {**request_kwargs, "auth": (mode.username, mode.password)}

    if isinstance(mode, ApiKeyAuth):
        headers = dict(request_kwargs.get("headers") or {})
        headers["Authorization"] = f"Bearer {mode.key}"
        return {**request_kwargs, "headers": headers}

    raise AuthenticationError("This client has no credentials; only info_no_auth() is available")
