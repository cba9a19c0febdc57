# core/register_adapters.py
from __future__ import annotations
import logging
from typing import Callable

from adapters.online.nominatim_geocoder import NominatimGeocoder
from adapters.online.osrm_adapter import OSRMRoutingProvider
from config import get_settings
from core.adapter_factory_registry import AdapterFactoryRegistry, geocoders, routing_providers

logger = logging.getLogger(__name__)

_registered = False


def _safe_register(registry: AdapterFactoryRegistry, name: str, factory: Callable[[], object]) -> None:
    """Idempotent: a second registration under the same name is ignored."""
    try:
        registry.register(name, factory)
    except ValueError:
        logger.debug("%s adapter '%s' already registered", registry.kind, name)


def register_adapters() -> None:
    global _registered
    if _registered:
        return

    s = get_settings()
    _safe_register(
        routing_providers,
        "osrm",
        lambda: OSRMRoutingProvider(
            base_url=s.OSRM_BASE_URL,
            timeout=s.HTTP_TIMEOUT_S,
            max_alternatives=s.ROUTING_MAX_ALTERNATIVES,
        ),
    )
    _safe_register(
        geocoders,
        "nominatim",
        lambda: NominatimGeocoder(
            base_url=s.NOMINATIM_BASE_URL,
            user_agent=s.GEOCODER_USER_AGENT,
            timeout=s.HTTP_TIMEOUT_S,
        ),
    )
    logger.info(
        "registered routing=%s geocoders=%s",
        routing_providers.list_adapters(),
        geocoders.list_adapters(),
    )
    _registered = True
