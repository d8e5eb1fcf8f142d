from __future__ import annotations

from neocities_client.auth import AuthMode
from neocities_client.http import HttpClient
from neocities_client.models import SiteInfo


class InfoApi:
    path = "info"

    def __init__(self, http_client: HttpClient):
        self._http_client = http_client

    def info(self, auth: AuthMode) -> SiteInfo:
        payload = self._http_client.get_json(self.path, auth=auth)
        return SiteInfo.from_payload(payload)

    def info_for_site(self, site_name: str) -> SiteInfo:
        site_name = site_name.strip()
        if not site_name:
            raise ValueError("Site name is required")

        # public endpoint: never attach credentials
        payload = self._http_client.get_json(self.path, params={"sitename": site_name})
        return SiteInfo.from_payload(payload)
