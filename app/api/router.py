from fastapi import APIRouter

from api.routes.system import router as system_router
from modules.incident_blast.controllers import router as incident_blast_router

api_router = APIRouter()

api_router.include_router(system_router)
api_router.include_router(incident_blast_router)
