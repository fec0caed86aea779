"""Services layer for fsgateway.

Date: 2026-10-19

Service abstractions and implementations for filesystem access. Services
follow the Protocol pattern for dependency injection and testability.

Usage:
    from fsgateway.services import FilesystemGateway, FilesystemGatewayProtocol
    from fsgateway.services import get_filesystem_gateway

Modules:
    interfaces: Protocol definitions
    filesystem_gateway: Fault-tolerant filesystem facade
    path_resolver: Native handle-based final-path resolution
    registry: Service locator for dependency injection
"""

from __future__ import annotations

from fsgateway.services.filesystem_gateway import FilesystemGateway
from fsgateway.services.interfaces import (
    FilesystemGatewayProtocol,
    PathResolverProtocol,
)
from fsgateway.services.path_resolver import (
    ProcFdPathResolver,
    UnsupportedPathResolver,
    WindowsFinalPathResolver,
    default_path_resolver,
)
from fsgateway.services.registry import (
    ServiceRegistry,
    configure_default_services,
    get_filesystem_gateway,
    get_service_registry,
)

__all__ = [
    # Protocols
    "FilesystemGatewayProtocol",
    "PathResolverProtocol",
    # Implementations
    "FilesystemGateway",
    "ProcFdPathResolver",
    "UnsupportedPathResolver",
    "WindowsFinalPathResolver",
    "default_path_resolver",
    # Registry
    "ServiceRegistry",
    "configure_default_services",
    "get_filesystem_gateway",
    "get_service_registry",
]
