from __future__ import annotations


class AppError(Exception):
    """Base app error."""


class RoutingRequestError(AppError):
    """Raised when a single routing-provider call fails or returns garbage."""


class RoutingUnavailableError(AppError):
    """Raised when no travel mode could be routed at all."""


class LocationNotFoundError(AppError):
    """Raised when the geocoder cannot resolve an origin or destination."""


class EmissionFactorNotFoundError(AppError, LookupError):
    """Raised when a vehicle/fuel combination has no active emission factor."""

    def __init__(self, vehicle_type: str, fuel_type: str):
        self.vehicle_type = vehicle_type
        self.fuel_type = fuel_type
        super().__init__(
            f"No emission factor for {vehicle_type} with {fuel_type}"
        )


class EmissionFactorTableError(AppError, ValueError):
    """Raised when an emission-factor table is malformed."""
