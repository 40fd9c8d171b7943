"""Taxonomía de errores del sincronizador.

Los pasos best-effort (borrados, inserción de huéspedes/cabañas) registran un
`StoreError` y continúan; los pasos críticos (resolución e inserción de
reservas) lanzan y abortan el resto del pipeline.
"""

from __future__ import annotations


class SeedSyncError(Exception):
    """Raíz de todos los errores del paquete."""


class StoreError(SeedSyncError):
    """Fallo reportado por el RecordStore (red, restricción, payload).

    `column` se rellena en el adaptador cuando el store rechaza una columna
    concreta; el Core decide con ese campo y nunca inspecciona `message`.
    """

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        column: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.column = column
        self.status_code = status_code


class MissingPrerequisiteError(SeedSyncError):
    """No hay huéspedes o cabañas en el store (o no se pudieron leer)."""


class ReferentialIntegrityError(SeedSyncError):
    """Alguna reserva no resolvió su huésped o su cabaña."""

    def __init__(self, message: str, *, unresolved: int) -> None:
        super().__init__(message)
        self.unresolved = unresolved


class PersistenceError(SeedSyncError):
    """Falló la inserción final de reservas."""

    def __init__(self, message: str, *, original: str) -> None:
        super().__init__(message)
        self.original = original


class SyncInProgressError(SeedSyncError):
    """Se intentó arrancar una operación con otra todavía en curso."""
