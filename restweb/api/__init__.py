from fastapi import APIRouter
from restweb.api.echo import router as echo_router
from restweb.api.greeting import router as greeting_router
from restweb.api.health import router as health_router

api_router = APIRouter()
api_router.include_router(health_router, tags=["health"])
api_router.include_router(greeting_router, tags=["greeting"])
api_router.include_router(echo_router, tags=["echo"])
