"""Abstract API IP geolocation client: implements the IpGeolocator interface.

Docs: https://docs.abstractapi.com/ip-geolocation
"""

import logging
import math
from typing import Any

import httpx

from trackmaster.application.interfaces import IpGeolocator
from trackmaster.domain.entities import GeoLocation
from trackmaster.domain.exceptions import LookupServiceError

logger = logging.getLogger(__name__)


class AbstractIpGeolocator(IpGeolocator):
    """Infrastructure adapter: resolves country, ISP, VPN flag and coordinates."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://ipgeolocation.abstractapi.com/v1/",
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout
        self._http_client = http_client

    @property
    def service_name(self) -> str:
        return "abstract-ip-geolocation"

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def locate(self, ip: str) -> GeoLocation:
        client = await self._get_client()
        should_close = self._http_client is None
        params = {"api_key": self._api_key, "ip_address": ip}

        try:
            logger.debug("geolocating ip=%s", ip)
            response = await client.get(self._base_url, params=params)
        except httpx.HTTPError as e:
            raise LookupServiceError(self.service_name, 0, str(e)) from e
        finally:
            if should_close:
                await client.aclose()

        if response.status_code != 200:
            raise LookupServiceError(self.service_name, response.status_code, response.text)

        try:
            data = response.json()
        except ValueError as e:
            raise LookupServiceError(self.service_name, 200, "response is not JSON") from e
        return self._parse(data)

    def _parse(self, data: dict[str, Any]) -> GeoLocation:
        """Map the API payload to a GeoLocation; missing required fields are an error."""
        if not isinstance(data, dict):
            raise LookupServiceError(self.service_name, 200, "response is not a JSON object")
        try:
            connection = data.get("connection") or {}
            isp_name = connection["isp_name"]
            latitude = float(data["latitude"])
            longitude = float(data["longitude"])
            if not (math.isfinite(latitude) and math.isfinite(longitude)):
                raise ValueError(f"non-finite coordinates {latitude}, {longitude}")
            return GeoLocation(
                country=data["country"],
                flag_emoji=(data.get("flag") or {})["emoji"],
                isp_name=isp_name,
                isp_domain=connection.get("organization_name") or isp_name,
                is_vpn=bool((data.get("security") or {}).get("is_vpn", False)),
                latitude=latitude,
                longitude=longitude,
            )
        except (KeyError, TypeError, ValueError) as e:
            raise LookupServiceError(
                self.service_name, 200, f"incomplete geolocation payload: {e!r}"
            ) from e
