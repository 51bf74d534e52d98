"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated
from fastapi import Depends
from infrastructure.configuration import Settings
from infrastructure.notifications import GatewayRegistry
from infrastructure.services.providers import (
    get_settings,
    get_gateway_registry,
)

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# WhatsApp gateway registry dependency
# Usage: registry.select("notif").send(...), registry.get("twilio").test_connection()
GatewayRegistryDep = Annotated[GatewayRegistry, Depends(get_gateway_registry)]

__all__ = [
    "SettingsDep",
    "GatewayRegistryDep",
]
