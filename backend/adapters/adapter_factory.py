# adapters/adapter_factory.py
from core.adapter_factory_registry import geocoders, routing_providers
from core.interfaces import Geocoder, RoutingProvider


def create_routing_provider(name: str = "osrm") -> RoutingProvider:
    return routing_providers.get(name)


def create_geocoder(name: str = "nominatim") -> Geocoder:
    return geocoders.get(name)
