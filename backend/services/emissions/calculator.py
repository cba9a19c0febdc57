from __future__ import annotations
from typing import Optional

from core.emissions import mode_co2_kg, vehicle_co2_kg
from core.interfaces import EmissionFactorStore
from core.logic.scoring import eco_score
from models.emissions import LegModel
from models.fleet import VehicleProfile
from models.routes import ProviderRoute, RouteCandidate, TravelMode


def candidate_co2_kg(
    route: ProviderRoute,
    vehicle: Optional[VehicleProfile],
    store: EmissionFactorStore,
) -> float:
    # Driving without a known vehicle falls back to the driving baseline
    if route.travel_mode == TravelMode.driving and vehicle is not None:
        return vehicle_co2_kg(route.distance_km, vehicle, store)
    return mode_co2_kg(route.distance_km, route.travel_mode)


def score_candidate(
    route: ProviderRoute,
    vehicle: Optional[VehicleProfile],
    store: EmissionFactorStore,
) -> RouteCandidate:
    """Emissions and eco score are always computed together."""
    co2 = candidate_co2_kg(route, vehicle, store)
    return RouteCandidate(
        **route.model_dump(exclude={"co2_kg", "eco_score"}),
        co2_kg=co2,
        eco_score=eco_score(co2, route.distance_km, route.travel_mode),
    )


def emissions_for_leg(leg: LegModel, store: EmissionFactorStore) -> float:
    if leg.travel_mode == TravelMode.driving and leg.vehicle is not None:
        return vehicle_co2_kg(leg.distance_km, leg.vehicle, store)
    return mode_co2_kg(leg.distance_km, leg.travel_mode)
