"""
Domain Services Package

Architectural Intent:
- Pure functions shared by every producer: header-to-request binding
"""

from cloudlink.domain.services.request_builders import (
    REQUEST_BUILDERS,
    RequestBuilder,
    build_network,
    build_port,
    build_router,
    build_subnet,
    get_builder,
)

__all__ = [
    "REQUEST_BUILDERS",
    "RequestBuilder",
    "build_network",
    "build_port",
    "build_router",
    "build_subnet",
    "get_builder",
]
