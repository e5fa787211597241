from __future__ import annotations

from typing import Callable

from .adapter import DataProvider
from .errors import ProviderCapabilityError

ProviderFactory = Callable[[], DataProvider]


class ProviderRegistry:
    def __init__(self) -> None:
        self._factories: dict[str, ProviderFactory] = {}

    def register(self, key: str, factory: ProviderFactory) -> None:
        key = str(key)
        if key in self._factories:
            raise ValueError(f"Duplicate provider registration: {key}")
        self._factories[key] = factory

    def keys(self) -> list[str]:
        return sorted(self._factories)

    def get(self, key: str) -> DataProvider:
        factory = self._factories.get(str(key))
        if factory is None:
            raise ProviderCapabilityError(
                f"No data provider registered for key={key} (known: {', '.join(self.keys())})"
            )
        return factory()
