from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Optional

from models.emissions import EmissionFactor
from models.fleet import FuelType, VehicleType
from models.preferences import TravelerPreferences
from models.routes import Location, ProviderRoute, TravelMode


class RoutingProvider(ABC):
    """All online/offline routing backends must implement this."""

    @abstractmethod
    async def get_routes(
        self,
        origin: Location,
        destination: Location,
        mode: TravelMode,
        alternatives: bool = False,
    ) -> List[ProviderRoute]: ...


class Geocoder(ABC):
    """Resolves free text into a Location or raises LocationNotFoundError."""

    @abstractmethod
    async def geocode(self, query: str) -> Location: ...


class EmissionFactorStore(ABC):
    @abstractmethod
    def lookup(
        self, vehicle_type: VehicleType, fuel_type: FuelType
    ) -> Optional[EmissionFactor]: ...


class PreferenceStore(ABC):
    @abstractmethod
    def get(self, user_id: str) -> Optional[TravelerPreferences]: ...
