"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y credenciales del RecordStore.
- Facilita testeo: se puede inyectar un `transport` (p.ej. `httpx.MockTransport`).
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_store_headers(settings: AppSettings) -> dict[str, str]:
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
        "Content-Type": "application/json",
    }
    if settings.store_api_key:
        headers["apikey"] = settings.store_api_key
        headers["Authorization"] = f"Bearer {settings.store_api_key}"
    return headers


def build_async_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` apuntando al RecordStore.

    Por qué un builder:
    - Centraliza timeouts/headers para que todas las llamadas se comporten igual.
    - Los tests inyectan un `transport` sin tocar el adaptador PostgREST.
    """

    settings = settings or AppSettings()
    return httpx.AsyncClient(
        base_url=(settings.store_url or "").rstrip("/"),
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=build_store_headers(settings),
        transport=transport,
    )
