"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    SettingsDep,
    GatewayRegistryDep,
)
from infrastructure.services.providers import (
    get_settings,
    get_gateway_registry,
)

__all__ = [
    "SettingsDep",
    "GatewayRegistryDep",
    "get_settings",
    "get_gateway_registry",
]
