from fastapi import APIRouter, Request

from api.dependencies.rate_limits import SYSTEM_ROUTE_LIMIT, get_limiter
from infrastructure.services import GatewayRegistryDep, SettingsDep

router = APIRouter(tags=["System"])
limiter = get_limiter()


# Load balancer health checks hit these frequently, so the limit is generous
@router.get("/version")
@limiter.limit(SYSTEM_ROUTE_LIMIT)
def get_version(request: Request, settings: SettingsDep):  # pylint: disable=unused-argument
    """Get the version of the application."""
    return {"version": settings.GIT_SHA}


@router.get("/health")
@limiter.limit(SYSTEM_ROUTE_LIMIT)
def get_health(request: Request, registry: GatewayRegistryDep):  # pylint: disable=unused-argument
    """Healthcheck endpoint.

    Reports which gateways have credentials; it never calls them.
    """
    return {
        "status": "ok",
        "gateways": {
            name: registry.get(name).is_configured for name in registry.names()
        },
    }
