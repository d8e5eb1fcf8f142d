"""Small client for the Neocities HTTP API."""

from .auth import ApiKeyAuth, AuthMode, BasicAuth, NoAuth
from .client import NeocitiesClient
from .config import ConfigurationError, NeocitiesSettings
from .exceptions import (
    ApiError,
    AuthenticationError,
    NeocitiesError,
    ResponseFormatError,
    TransportError,
)
from .models import ApiResult, FileEntry, SiteInfo
from .site_files import SiteFiles, hash_of_bytes, hash_of_local, hash_of_string

__all__ = [
    "ApiError",
    "ApiKeyAuth",
    "ApiResult",
    "AuthMode",
    "AuthenticationError",
    "BasicAuth",
    "ConfigurationError",
    "FileEntry",
    "NeocitiesClient",
    "NeocitiesError",
    "NeocitiesSettings",
    "NoAuth",
    "ResponseFormatError",
    "SiteFiles",
    "SiteInfo",
    "TransportError",
    "hash_of_bytes",
    "hash_of_local",
    "hash_of_string",
]
