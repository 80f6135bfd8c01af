"""
🔌 Database Connection Setup - Supabase (PostgREST)

Configuración centralizada para hablar con la base de datos hosteada.
Hay dos clientes: uno de lectura (anon key) y otro de escritura (service key).
"""

import logging
from typing import Any, Optional

import httpx

from app.core.config import get_settings

logger = logging.getLogger(__name__)


class GatewayError(Exception):
    """La lectura o escritura contra la base de datos falló"""
    pass


class SupabaseGateway:
    """
    Acceso mínimo a una tabla vía la API REST de Supabase.

    Solo expone lo que usa la app: select(table, columns) e insert(table, rows).
    Cualquier fallo (red, permisos, esquema) se convierte en GatewayError.
    """

    def __init__(self, client: httpx.AsyncClient):
        self.client = client

    @classmethod
    def create(
        cls,
        url: str,
        key: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "SupabaseGateway":
        client = httpx.AsyncClient(
            base_url=f"{url.rstrip('/')}/rest/v1",
            headers={
                "apikey": key,
                "Authorization": f"Bearer {key}",
            },
            timeout=timeout,
            transport=transport,
        )
        return cls(client)

    async def select(self, table: str, columns: str = "*") -> list[dict[str, Any]]:
        """Lee todas las filas de una tabla"""
        response = await self._request("GET", f"/{table}", params={"select": columns})
        return _decode(response)

    async def insert(self, table: str, rows: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """Inserta filas y retorna las filas insertadas"""
        response = await self._request(
            "POST",
            f"/{table}",
            json=rows,
            headers={"Prefer": "return=representation"},
        )
        if not response.content:
            return []
        return _decode(response)

    async def close(self):
        await self.client.aclose()

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            response = await self.client.request(method, path, **kwargs)
        except httpx.TimeoutException:
            logger.error(f"❌ Timeout en {method} {path}")
            raise GatewayError("Timeout talking to the database")
        except httpx.RequestError as e:
            logger.error(f"❌ Error de red en {method} {path}: {e}")
            raise GatewayError(f"Error talking to the database: {str(e)}")

        if response.is_error:
            message = _error_message(response)
            logger.error(f"❌ {method} {path} -> {response.status_code}: {message}")
            raise GatewayError(message)

        return response


def _decode(response: httpx.Response) -> list[dict[str, Any]]:
    try:
        return response.json()
    except ValueError:
        logger.error(f"❌ Respuesta no JSON de {response.request.url}: {response.text[:200]}")
        raise GatewayError("Invalid response from the database")


def _error_message(response: httpx.Response) -> str:
    # PostgREST responde {"code", "message", "details", "hint"}
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.text or f"Database request failed with status {response.status_code}"


class Database:
    """Singleton con los gateways de lectura y escritura"""

    reader: Optional[SupabaseGateway] = None
    writer: Optional[SupabaseGateway] = None

    @classmethod
    async def connect(cls):
        """Crea los clientes HTTP contra Supabase"""
        if cls.reader is None:
            settings = get_settings()

            cls.reader = SupabaseGateway.create(
                settings.supabase_url,
                settings.supabase_anon_key,
                timeout=settings.gateway_timeout_seconds,
            )
            cls.writer = SupabaseGateway.create(
                settings.supabase_url,
                settings.supabase_service_key,
                timeout=settings.gateway_timeout_seconds,
            )
            logger.info(f"✅ Supabase gateways ready: {settings.supabase_url}")

    @classmethod
    async def disconnect(cls):
        """Cierra los clientes"""
        for gateway in (cls.reader, cls.writer):
            if gateway is not None:
                await gateway.close()
        cls.reader = None
        cls.writer = None
        logger.info("❌ Supabase gateways closed")

    @classmethod
    def get_reader(cls) -> SupabaseGateway:
        if cls.reader is None:
            raise RuntimeError("Database not connected. Call Database.connect() first.")
        return cls.reader

    @classmethod
    def get_writer(cls) -> SupabaseGateway:
        if cls.writer is None:
            raise RuntimeError("Database not connected. Call Database.connect() first.")
        return cls.writer


# ============================================
# 🎯 DEPENDENCIES para FastAPI
# ============================================

async def get_read_gateway() -> SupabaseGateway:
    """
    FastAPI dependency para inyectar el gateway de lectura

    Uso:
        @router.get("/institutes")
        async def get_institutes(db: ReadGateway):
            repo = InstituteRepository(db)
            return await repo.get_all()
    """
    return Database.get_reader()


async def get_write_gateway() -> SupabaseGateway:
    """FastAPI dependency para inyectar el gateway de escritura"""
    return Database.get_writer()
