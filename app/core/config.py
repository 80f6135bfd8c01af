"""
Configuración de la app cargada desde variables de entorno (.env)

Todo lo que varía entre desarrollo/producción va aquí
"""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Supabase - la base de datos hosteada (PostgREST)
    supabase_url: str  # "https://<project>.supabase.co"
    supabase_anon_key: str  # Key pública, solo lectura (también la usa el frontend)
    supabase_service_key: str  # Key de servicio, para escribir resultados

    # Timeout (segundos) de cada request al gateway
    gateway_timeout_seconds: float = 10.0

    # App
    app_env: str = "development"  # o "production"
    debug: bool = False
    log_level: str = "INFO"

    # CORS - de dónde pueden venir los requests
    # "*" permite cualquier origen (las páginas HTML estáticas del leaderboard)
    cors_origins: str = "*"  # URLs separadas por coma

    class Config:
        env_file = ".env"  # Lee desde el archivo .env
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignora campos extras del .env que no estén en el modelo


@lru_cache()
def get_settings() -> Settings:
    """Retorna la instancia de configuración (cacheada para no releerla)"""
    return Settings()
