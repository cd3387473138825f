from fastapi import APIRouter
from formsmith.api.v1.endpoints import ai, auth, forms

api_router = APIRouter()
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(forms.router, prefix="/forms", tags=["forms"])
api_router.include_router(ai.router, tags=["ai"])
