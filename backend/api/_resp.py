from fastapi import HTTPException

from core.exceptions import (
    AppError,
    EmissionFactorNotFoundError,
    LocationNotFoundError,
    RoutingUnavailableError,
)

# most specific first
_STATUS_BY_ERROR = (
    (LocationNotFoundError, 404),
    (EmissionFactorNotFoundError, 422),
    (RoutingUnavailableError, 503),
    (AppError, 400),
)


def ok(data: dict | list | str | int | float | None = None, **extras):
    payload = {"status": "success"}
    if data is not None:
        payload["data"] = data
    if extras:
        payload.update(extras)
    return payload


def fail(status: int, message: str):
    raise HTTPException(status, message)


def fail_from(exc: AppError):
    for cls, status in _STATUS_BY_ERROR:
        if isinstance(exc, cls):
            fail(status, str(exc))
    fail(500, str(exc))
