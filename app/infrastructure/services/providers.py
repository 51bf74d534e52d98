"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.notifications import (
    GatewayRegistry,
    MediaUrlBuilder,
    NotifMyIdGateway,
    TwilioWhatsAppGateway,
)


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    This is the single source of truth for settings across the entire application.
    The @lru_cache decorator ensures only ONE instance is created per process,
    even if called from multiple packages.

    Infrastructure packages should use this directly to ensure singleton consistency:
        from infrastructure.services.providers import get_settings
        settings = get_settings()

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/config")
        def get_config(settings: SettingsDep):
            return {"provider": settings.incident_blast.BLAST_DEFAULT_PROVIDER}

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_gateway_registry() -> GatewayRegistry:
    """
    Get application-scoped WhatsApp gateway registry singleton.

    Both gateways are always registered; an unconfigured one is skipped by
    fallback selection and fails its sends as configuration errors.

    Returns:
        GatewayRegistry: Registry holding the Twilio and notif.my.id gateways.

    Usage:
        @router.post("/probe")
        def probe(registry: GatewayRegistryDep):
            return registry.select().test_connection()
    """
    settings = get_settings()
    media = MediaUrlBuilder(settings.media.domains)
    gateways = {
        "twilio": TwilioWhatsAppGateway(settings, media=media),
        "notif": NotifMyIdGateway(settings, media=media),
    }
    return GatewayRegistry(
        gateways,
        default=settings.incident_blast.BLAST_DEFAULT_PROVIDER,
        fallback_enabled=settings.incident_blast.BLAST_FALLBACK_ENABLED,
    )
