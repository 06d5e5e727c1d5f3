from fastapi import APIRouter

from weather_proxy.api.weather import weather_router

# Serverless-style routes live under /api
api_router = APIRouter(prefix="/api")

api_router.include_router(weather_router)

__all__ = ["api_router"]
