"""Infrastructure layer for the incident blast service.

Subpackages:
    configuration: pydantic-settings based application settings
    logging: structlog setup and request context binding
    notifications: WhatsApp gateways, registry and the batched blast dispatcher
    operations: OperationResult and error classification helpers
    services: cached providers and FastAPI dependency aliases

Import from the subpackages directly, e.g.::

    from infrastructure.services import SettingsDep, GatewayRegistryDep
    from infrastructure.notifications import BlastOrchestrator
"""
