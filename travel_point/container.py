"""Dependency injection container.

Wires the reference data adapter into the resolution service. There is
no process-wide default container: each caller builds one and passes
the resulting service where it is needed.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Lazily builds one instance per registered type.

    Usage:
        container = Container.create_default()
        service = container.resolve(TravelPointService)

        # Embedding with pre-built tables
        container.register(ReferenceDataPort, lambda: InMemoryReferenceRepository(...))

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type, Callable[[], Any]] = field(default_factory=dict, repr=False)
    _instances: Dict[type, Any] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(self, port_type: type, factory: Callable[[], Any]) -> None:
        """Register the factory for *port_type*, dropping any built instance."""
        with self._lock:
            self._factories[port_type] = factory
            self._instances.pop(port_type, None)

    def resolve(self, port_type: type) -> Any:
        """Return the instance for *port_type*, building it on first use.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if port_type not in self._instances:
                if port_type not in self._factories:
                    raise KeyError(f"Type not registered: {port_type}")
                self._instances[port_type] = self._factories[port_type]()
            return self._instances[port_type]

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with CSV-backed reference data.

        Args:
            config: Optional configuration override.
        """
        from .adapters.reference_data import CSVReferenceRepository
        from .ports.reference_data import ReferenceDataPort
        from .services import TravelPointService

        config = config or get_config()
        container = cls(config=config)
        container.register(ReferenceDataPort, lambda: CSVReferenceRepository(config.data))
        container.register(
            TravelPointService,
            lambda: TravelPointService(
                reference_data=container.resolve(ReferenceDataPort),
                config=config.resolution,
                matching_config=config.matching,
            ),
        )
        return container
