from fastapi import APIRouter

from app.api.endpoints.generate import generate_router

api_router = APIRouter()

api_router.include_router(generate_router, prefix="/vapi", tags=["interview"])
