"""Dependency injection container.

Wires the network repository and the routing service together so
front-ends (the CLI, tests) never construct adapters by hand. Tests
register their own factories to swap the CSV repository for an
in-memory one.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        service = container.resolve(MetroRouterService)

        # Testing
        container = Container()
        container.register(GraphRepositoryPort, lambda: FakeRepository())

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type, Callable[[], Any]] = field(default_factory=dict, repr=False)
    _instances: Dict[type, Any] = field(default_factory=dict, repr=False)
    _transient: set = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        key: type,
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a type.

        Re-registering a type drops any instance already built for it.

        Args:
            key: The type (usually a Protocol) to register.
            factory: A callable that creates instances of the type.
            singleton: If True, only one instance is created.
        """
        with self._lock:
            self._factories[key] = factory
            self._instances.pop(key, None)
            if singleton:
                self._transient.discard(key)
            else:
                self._transient.add(key)

    def resolve(self, key: type) -> Any:
        """Resolve an instance of a registered type.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if key not in self._factories:
                raise KeyError(f"Type not registered: {key}")
            if key in self._transient:
                return self._factories[key]()
            if key not in self._instances:
                self._instances[key] = self._factories[key]()
            return self._instances[key]

    def is_registered(self, key: type) -> bool:
        return key in self._factories

    def clear_all(self) -> None:
        """Clear all registrations and cached instances."""
        with self._lock:
            self._factories.clear()
            self._instances.clear()
            self._transient.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with the production bindings.

        Args:
            config: Optional configuration override.

        Returns:
            A configured Container instance.
        """
        from .adapters.graph import CSVGraphRepository
        from .ports.graph import GraphRepositoryPort
        from .services import MetroRouterService

        config = config or get_config()
        container = cls(config=config)

        container.register(
            GraphRepositoryPort,
            lambda: CSVGraphRepository(config.graph),
        )
        container.register(
            MetroRouterService,
            lambda: MetroRouterService(
                graph_repository=container.resolve(GraphRepositoryPort),
                routing=config.routing,
            ),
        )
        return container


# Global default container (lazy initialized)
_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Get the default application container, creating it if needed."""
    global _default_container
    if _default_container is None:
        with _container_lock:
            if _default_container is None:
                _default_container = Container.create_default()
    return _default_container


def reset_container() -> None:
    """Reset the default container.

    Call this in tests to ensure a fresh container.
    """
    global _default_container
    with _container_lock:
        if _default_container is not None:
            _default_container.clear_all()
        _default_container = None
