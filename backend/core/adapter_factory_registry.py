# core/adapter_factory_registry.py
from typing import Callable, Dict, Generic, List, TypeVar

from core.interfaces import Geocoder, RoutingProvider

T = TypeVar("T")


class AdapterFactoryRegistry(Generic[T]):
    def __init__(self, kind: str) -> None:
        self.kind = kind
        self._factories: Dict[str, Callable[[], T]] = {}

    def register(self, name: str, factory: Callable[[], T]) -> None:
        key = name.lower().strip()
        if key in self._factories:
            raise ValueError(f"{self.kind} adapter '{name}' is already registered.")
        self._factories[key] = factory

    def get(self, name: str) -> T:
        key = name.lower().strip()
        if key not in self._factories:
            raise ValueError(f"{self.kind} adapter '{name}' is not registered.")
        return self._factories[key]()  # create instance

    def list_adapters(self) -> List[str]:
        return sorted(self._factories.keys())


routing_providers: AdapterFactoryRegistry[RoutingProvider] = AdapterFactoryRegistry("routing")
geocoders: AdapterFactoryRegistry[Geocoder] = AdapterFactoryRegistry("geocoder")
