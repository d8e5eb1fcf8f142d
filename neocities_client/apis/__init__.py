from .files_api import FilesApi
from .info_api import InfoApi
from .key_api import KeyApi

__all__ = ["FilesApi", "InfoApi", "KeyApi"]
