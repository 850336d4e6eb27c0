"""userstack API client: implements the DeviceDetector interface.

Docs: https://userstack.com/documentation
"""

import logging

import httpx

from trackmaster.application.interfaces import DeviceDetector
from trackmaster.domain.entities import DeviceInfo
from trackmaster.domain.exceptions import LookupServiceError

logger = logging.getLogger(__name__)


class UserstackDeviceDetector(DeviceDetector):
    """Infrastructure adapter: identifies devices from User-Agent strings."""

    def __init__(
        self,
        access_key: str,
        base_url: str = "http://api.userstack.com",
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._access_key = access_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._http_client = http_client

    @property
    def service_name(self) -> str:
        return "userstack"

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def detect(self, user_agent: str) -> DeviceInfo:
        client = await self._get_client()
        should_close = self._http_client is None
        params = {"access_key": self._access_key, "ua": user_agent}

        try:
            logger.debug("userstack detect ua=%r", user_agent)
            response = await client.get(f"{self._base_url}/detect", params=params)
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
        if not isinstance(data, dict):
            raise LookupServiceError(self.service_name, 200, "response is not a JSON object")

        # userstack reports API errors (bad key, quota) with HTTP 200
        if data.get("success") is False:
            error = data.get("error")
            if not isinstance(error, dict):
                error = {}
            code = error.get("code")
            raise LookupServiceError(
                self.service_name,
                code if isinstance(code, int) else 0,
                str(error.get("info") or error.get("type") or "request failed"),
            )

        device = data.get("device")
        if not isinstance(device, dict) or not device.get("type"):
            raise LookupServiceError(self.service_name, 200, "response has no device type")

        return DeviceInfo(type=device["type"], brand=device.get("brand"))
