from fastapi import APIRouter

from core.adapter_factory_registry import geocoders, routing_providers

router = APIRouter(tags=["status"])


@router.get("/status/adapters")
def adapters():
    return {
        "routing": routing_providers.list_adapters(),
        "geocoders": geocoders.list_adapters(),
    }


@router.get("/health")
def health():
    return {"status": "ok"}
