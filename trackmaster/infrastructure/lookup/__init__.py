from .userstack_client import UserstackDeviceDetector
from .abstract_geolocation_client import AbstractIpGeolocator

__all__ = ["UserstackDeviceDetector", "AbstractIpGeolocator"]
