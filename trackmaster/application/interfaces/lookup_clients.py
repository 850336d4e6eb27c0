"""Abstract interfaces (ports) for the external lookups used during enrichment."""

from abc import ABC, abstractmethod

from trackmaster.domain.entities import DeviceInfo, GeoLocation


class DeviceDetector(ABC):
    """Port for user-agent based device detection."""

    @abstractmethod
    async def detect(self, user_agent: str) -> DeviceInfo:
        """Identify the device type and brand behind a User-Agent header.

        Raises:
            LookupServiceError: if the upstream service fails or answers
                without device information.
        """
        ...


class IpGeolocator(ABC):
    """Port for IP address geolocation."""

    @abstractmethod
    async def locate(self, ip: str) -> GeoLocation:
        """Resolve country, ISP, VPN flag and coordinates for an IP address.

        Raises:
            LookupServiceError: if the upstream service fails or answers
                without the required fields.
        """
        ...
