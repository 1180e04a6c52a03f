from fastapi import APIRouter

from src.api.v1.endpoints import generate, health, intent, library

v1_router = APIRouter()
v1_router.include_router(health.router, tags=["health"])
v1_router.include_router(intent.router, tags=["intent"])
v1_router.include_router(generate.router, tags=["generate"])
v1_router.include_router(library.router, tags=["library"])
