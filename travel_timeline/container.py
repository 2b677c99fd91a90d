"""Dependency injection container.

This module provides a simple DI container without external frameworks.
The storage backend, the clock and the renderer are registered here
once, from configuration, and resolved by whoever needs them.

Design principles:
1. No magic - explicit registration and resolution
2. Testable - easy to swap implementations
3. Lazy loading - adapters instantiated on first use
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, StorageConfig, get_config
from .domain.errors import ConfigurationError


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        service = container.resolve(TimelineService)

        # Testing
        container = Container()
        container.register(StoragePort, lambda: InMemoryStorage())
        storage = container.resolve(StoragePort)

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a port type.

        Args:
            port_type: The type (usually a Protocol) to register.
            factory: A callable that creates instances of the type.
            singleton: If True, only one instance is created.
        """
        with self._lock:
            self._factories[port_type] = factory
            self._singletons.pop(port_type, None)
            if singleton:
                self._singleton_types.add(port_type)
            else:
                self._singleton_types.discard(port_type)

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve an instance of a port type.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if port_type not in self._factories:
                raise KeyError(f"Type not registered: {port_type}")

            if port_type in self._singleton_types:
                if port_type not in self._singletons:
                    self._singletons[port_type] = self._factories[port_type]()
                return self._singletons[port_type]

            return self._factories[port_type]()

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._factories

    def clear_singletons(self) -> None:
        """Clear all cached singletons.

        Call this in tests to ensure fresh instances.
        """
        with self._lock:
            self._singletons.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with default production bindings.

        Args:
            config: Optional configuration override.

        Returns:
            A configured Container instance.
        """
        from .adapters.clock import SystemClock
        from .adapters.rendering import TextTimelineRenderer
        from .domain.models import HomeLocation
        from .ports.clock import ClockPort
        from .ports.rendering import TimelineRendererPort
        from .ports.storage import StoragePort
        from .services import TimelineService
        from .timeline import EntryDateResolver, JourneyPartitioner

        config = config or get_config()
        container = cls(config=config)

        container.register(ClockPort, lambda: SystemClock())
        container.register(StoragePort, lambda: create_storage(config.storage))
        container.register(TimelineRendererPort, lambda: TextTimelineRenderer())

        def create_timeline_service() -> TimelineService:
            resolver = EntryDateResolver(clock=container.resolve(ClockPort))
            return TimelineService(
                storage=container.resolve(StoragePort),
                partitioner=JourneyPartitioner(resolver=resolver),
                seed_sample_data=config.timeline.seed_sample_data,
                default_home=HomeLocation(
                    country=config.timeline.home_country,
                    city=config.timeline.home_city,
                    flag_code=config.timeline.home_flag_code,
                ),
            )

        container.register(TimelineService, create_timeline_service)

        return container


def create_storage(config: StorageConfig) -> Any:
    """Build the storage adapter selected by configuration.

    Raises:
        ConfigurationError: If the backend name is unknown.
    """
    from .adapters.storage import InMemoryStorage, JsonFileStorage, SqlAlchemyStorage

    if config.backend == "local":
        return JsonFileStorage(config.data_dir)
    elif config.backend == "database":
        if config.database_url is None:
            config.data_dir.mkdir(parents=True, exist_ok=True)
        return SqlAlchemyStorage(config.resolved_database_url)
    elif config.backend == "memory":
        return InMemoryStorage()
    raise ConfigurationError(
        f"Unknown storage backend {config.backend!r}",
        setting_name="storage.backend",
        expected_type="local | database | memory",
    )
