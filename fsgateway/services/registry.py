"""Service registry for dependency injection.

Date: 2026-10-19

A small service locator: implementations are registered by protocol type and
retrieved by whoever wires the application together. Components themselves
should take the gateway as a constructor argument.

Usage:
    from fsgateway.services.registry import configure_default_services, get_service_registry
    from fsgateway.services.interfaces import FilesystemGatewayProtocol

    configure_default_services()
    fs = get_service_registry().get_required(FilesystemGatewayProtocol)
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any, ClassVar

from fsgateway.utils.logging.logger_factory import get_cached_logger

if TYPE_CHECKING:
    from fsgateway.services.filesystem_gateway import FilesystemGateway

logger = get_cached_logger(__name__)


class ServiceRegistry:
    """Service locator keyed by protocol type.

    Supports direct instances and factories that run on first access.
    Registration and factory resolution are serialized by a lock, so
    concurrent first access creates exactly one instance.
    """

    _instance: ClassVar[ServiceRegistry | None] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        """Initialize the service registry."""
        self._services: dict[type, Any] = {}
        self._factories: dict[type, Any] = {}
        self._lock = threading.RLock()

    @classmethod
    def instance(cls) -> ServiceRegistry:
        """Get the process-wide ServiceRegistry, creating it on first use."""
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Reset the process-wide registry (useful for testing)."""
        with cls._instance_lock:
            cls._instance = None

    def register(self, protocol: type[Any], implementation: Any) -> None:
        """Register a service implementation for a protocol.

        Args:
            protocol: The protocol/interface type.
            implementation: The concrete implementation instance.

        """
        with self._lock:
            self._services[protocol] = implementation
            self._factories.pop(protocol, None)
        logger.debug(
            "Registered service: %s -> %s",
            protocol.__name__,
            type(implementation).__name__,
        )

    def register_factory(self, protocol: type[Any], factory: Any) -> None:
        """Register a factory for lazy instantiation.

        Args:
            protocol: The protocol/interface type.
            factory: A callable that returns an implementation instance,
                     or a class to instantiate.

        """
        with self._lock:
            self._factories[protocol] = factory
            self._services.pop(protocol, None)
        logger.debug("Registered factory for: %s", protocol.__name__)

    def get(self, protocol: type[Any]) -> Any | None:
        """Get a service implementation for a protocol.

        Args:
            protocol: The protocol/interface type.

        Returns:
            The registered implementation, or None if not found.

        """
        with self._lock:
            if protocol in self._services:
                return self._services[protocol]

            if protocol in self._factories:
                implementation = self._factories[protocol]()
                self._services[protocol] = implementation
                del self._factories[protocol]
                logger.debug(
                    "Created service from factory: %s -> %s",
                    protocol.__name__,
                    type(implementation).__name__,
                )
                return implementation

        logger.warning("No service registered for: %s", protocol.__name__)
        return None

    def get_required(self, protocol: type[Any]) -> Any:
        """Get a service implementation, raising if not found.

        Raises:
            KeyError: If no service is registered for the protocol.

        """
        service = self.get(protocol)
        if service is None:
            raise KeyError(f"No service registered for: {protocol.__name__}")
        return service

    def has(self, protocol: type) -> bool:
        """Check if a service or factory is registered for a protocol."""
        with self._lock:
            return protocol in self._services or protocol in self._factories

    def unregister(self, protocol: type) -> bool:
        """Unregister a service.

        Returns:
            True if a service was unregistered, False if none existed.

        """
        with self._lock:
            removed = self._services.pop(protocol, None) is not None
            removed = self._factories.pop(protocol, None) is not None or removed

        if removed:
            logger.debug("Unregistered service: %s", protocol.__name__)
        return removed

    def clear(self) -> None:
        """Clear all registered services."""
        with self._lock:
            self._services.clear()
            self._factories.clear()
        logger.debug("Cleared all services")

    def list_services(self) -> list[str]:
        """List all registered service protocol names."""
        with self._lock:
            registered = set(self._services) | set(self._factories)
        return sorted(p.__name__ for p in registered)


def get_service_registry() -> ServiceRegistry:
    """Get the process-wide service registry."""
    return ServiceRegistry.instance()


def get_filesystem_gateway() -> FilesystemGateway:
    """Get the process-wide filesystem gateway.

    Same object as FilesystemGateway.get_instance().
    """
    from fsgateway.services.filesystem_gateway import FilesystemGateway

    return FilesystemGateway.get_instance()


def configure_default_services(registry: ServiceRegistry | None = None) -> None:
    """Configure default service implementations.

    Call this during application startup.

    Args:
        registry: Optional registry to configure. Uses global if None.

    """
    if registry is None:
        registry = get_service_registry()

    from fsgateway.services.filesystem_gateway import FilesystemGateway
    from fsgateway.services.interfaces import (
        FilesystemGatewayProtocol,
        PathResolverProtocol,
    )

    registry.register_factory(FilesystemGatewayProtocol, FilesystemGateway.get_instance)
    # The resolver is the one the registered gateway canonicalizes with
    registry.register_factory(
        PathResolverProtocol,
        lambda: registry.get_required(FilesystemGatewayProtocol).path_resolver,
    )

    logger.debug("Default services configured")
