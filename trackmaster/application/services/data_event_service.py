"""Application service (use case) for DataEvent operations.

Creating a data event enriches the client's fields with two sequential
lookups: device detection from the User-Agent header, then geolocation of
the caller's IP address.
"""

import logging
from dataclasses import dataclass

from trackmaster.application.interfaces import (
    DataEventRepository,
    DeviceDetector,
    IpGeolocator,
)
from trackmaster.application.schemas import DataEventCreate
from trackmaster.application.services.failures import persistence_failures
from trackmaster.application.services.ids import ensure_stored_id
from trackmaster.domain.entities import (
    ClientContext,
    CountryOwnerCount,
    DataEvent,
    DeviceInfo,
    GeoLocation,
    Location,
)
from trackmaster.domain.exceptions import InternalError, LookupServiceError, NotFoundError

logger = logging.getLogger(__name__)

UNIDENTIFIED = "Unidentified"
_CREATE_FAILED = "Registering data failed, please try again."
_LIST_FAILED = "Fetching data failed, please try again later."


@dataclass
class DataEventPage:
    """One page of data events plus aggregates over the whole table."""

    events: list[DataEvent]
    country_count: int
    by_country_owner: list[CountryOwnerCount]

    @property
    def hits(self) -> int:
        return len(self.events)


def page_offset(page: int, page_size: int) -> int:
    """Zero-based offset of a 1-based page number, clamped to 0."""
    return max((page - 1) * page_size, 0)


class DataEventService:
    """Orchestrates data event logic. Depends on the repository and lookup ports (DI)."""

    def __init__(
        self,
        repository: DataEventRepository,
        device_detector: DeviceDetector,
        geolocator: IpGeolocator,
        page_size: int = 20,
    ):
        self._repository = repository
        self._device_detector = device_detector
        self._geolocator = geolocator
        self._page_size = page_size

    async def get_event(self, event_id: int) -> DataEvent:
        ensure_stored_id("data", event_id)
        with persistence_failures("Something went wrong, could not find data."):
            event = await self._repository.get_by_id(event_id)
        if event is None:
            raise NotFoundError("data", event_id)
        return event

    async def list_events(self, page: int | None = None) -> DataEventPage:
        """List events; with ``page`` only that page of ``page_size`` events."""
        if page is None:
            skip, limit = 0, None
        else:
            skip, limit = page_offset(page, self._page_size), self._page_size

        with persistence_failures(_LIST_FAILED):
            events = await self._repository.get_all(skip=skip, limit=limit)
            country_count = await self._repository.count_countries()
            groups = await self._repository.count_by_country_owner()
        return DataEventPage(
            events=events, country_count=country_count, by_country_owner=groups
        )

    async def create_event(self, data: DataEventCreate, client: ClientContext) -> DataEvent:
        try:
            device = await self._device_detector.detect(client.user_agent)
            geo = await self._geolocator.locate(client.ip)
        except LookupServiceError as exc:
            logger.error("Enrichment failed for %s: %s", client.ip, exc)
            raise InternalError(_CREATE_FAILED) from exc

        event = build_event(data, client, device, geo)
        with persistence_failures(_CREATE_FAILED):
            event = await self._repository.create(event)
        logger.info(
            "Recorded data event id=%s owner=%s country=%s", event.id, event.owner, event.country
        )
        return event

    async def delete_event(self, event_id: int) -> bool:
        ensure_stored_id("data", event_id)
        with persistence_failures("Something went wrong, could not delete data."):
            exists = await self._repository.get_by_id(event_id)
            if exists is None:
                raise NotFoundError("data", event_id)
            return await self._repository.delete(event_id)


def build_event(
    data: DataEventCreate,
    client: ClientContext,
    device: DeviceInfo,
    geo: GeoLocation,
) -> DataEvent:
    """Merge client fields with lookup results into a new, unsaved DataEvent.

    Client coordinates win over geolocated ones, one axis at a time.
    """
    latlng = data.latlng
    latitude = latlng.latitude if latlng and latlng.latitude is not None else geo.latitude
    longitude = latlng.longitude if latlng and latlng.longitude is not None else geo.longitude

    return DataEvent(
        ip=client.ip,
        ip_details=f"This is an ip address with the request made from {geo.country}",
        host=device.type,
        owner=data.owner,
        source=f"from latitude: {latitude} and longitude: {longitude}",
        domain=client.host,
        brand=device.brand or UNIDENTIFIED,
        country=geo.country,
        country_flag=geo.flag_emoji,
        isp=geo.isp_name,
        isp_domain=geo.isp_domain or geo.isp_name,
        is_vpn=geo.is_vpn,
        archive=data.archive or UNIDENTIFIED,
        location=Location(latitude=latitude, longitude=longitude),
    )
