"""
Controlador de configuración pública

Expone al frontend la URL y la anon key de Supabase para la conexión en tiempo real.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from app.core.config import get_settings


router = APIRouter(tags=["config"])


class PublicConfigResponse(BaseModel):
    supabaseUrl: str
    supabaseAnonKey: str


@router.get("/config", response_model=PublicConfigResponse)
async def get_public_config():
    """Config pública de Supabase (nunca la service key)."""
    settings = get_settings()

    return PublicConfigResponse(
        supabaseUrl=settings.supabase_url,
        supabaseAnonKey=settings.supabase_anon_key
    )
