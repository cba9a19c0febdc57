# api/dependencies.py
from adapters.adapter_factory import create_geocoder, create_routing_provider
from core.interfaces import EmissionFactorStore, PreferenceStore
from core.register_adapters import register_adapters
from services.emissions.emissions_factory import get_factor_table
from services.emissions.factors import EmissionFactorTable
from services.planning.planner import TripPlanner
from services.planning.preferences import InMemoryPreferenceStore

# Stored preferences live with the account service; this process only reads
_preference_store = InMemoryPreferenceStore()


def get_factor_store() -> EmissionFactorTable:
    return get_factor_table()


def get_preference_store() -> PreferenceStore:
    return _preference_store


def get_planner() -> TripPlanner:
    # Lazy init in case app lifespan didn't run
    register_adapters()
    store: EmissionFactorStore = get_factor_store()
    return TripPlanner(
        provider=create_routing_provider("osrm"),
        factor_store=store,
        geocoder=create_geocoder("nominatim"),
        preference_store=get_preference_store(),
    )
