"""Registry of WhatsApp gateways keyed by name."""

from typing import Dict, List, Optional

from infrastructure.logging import get_module_logger
from infrastructure.notifications.channels.base import WhatsAppGateway

logger = get_module_logger()


class UnknownGatewayError(ValueError):
    """Raised when a gateway name is not registered."""


class GatewayRegistry:
    """Holds the available gateways and picks one for a blast.

    Example:
        registry = GatewayRegistry(
            {"twilio": TwilioWhatsAppGateway(settings), "notif": NotifMyIdGateway(settings)},
            default="twilio",
        )
        gateway = registry.select("notif")
    """

    def __init__(
        self,
        gateways: Dict[str, WhatsAppGateway],
        default: str,
        fallback_enabled: bool = True,
    ):
        if default not in gateways:
            raise UnknownGatewayError(
                f"Default gateway '{default}' is not registered. "
                f"Available: {sorted(gateways)}"
            )
        self._gateways = dict(gateways)
        self.default = default
        self.fallback_enabled = fallback_enabled

    def names(self) -> List[str]:
        return list(self._gateways.keys())

    def get(self, name: str) -> WhatsAppGateway:
        try:
            return self._gateways[name]
        except KeyError:
            raise UnknownGatewayError(
                f"Unknown gateway '{name}'. Available: {self.names()}"
            ) from None

    def select(self, preferred: Optional[str] = None) -> WhatsAppGateway:
        """Return the gateway for a blast.

        The preferred gateway (or the default) is used when configured. When
        it is not and fallback is enabled, the first configured gateway takes
        its place. With nothing configured the preferred gateway is returned
        so that its sends fail as configuration errors.
        """
        name = (preferred or self.default).strip().lower()
        gateway = self.get(name)

        if gateway.is_configured or not self.fallback_enabled:
            return gateway

        for candidate_name, candidate in self._gateways.items():
            if candidate_name != name and candidate.is_configured:
                logger.warning(
                    "gateway_fallback_selected",
                    requested=name,
                    selected=candidate_name,
                    reason="requested gateway is not configured",
                )
                return candidate

        logger.error("no_gateway_configured", requested=name, available=self.names())
        return gateway
