"""Configuración de logging.

Un único handler de Rich sobre stderr para que los diagnósticos no se mezclen
con las tablas/paneles que la CLI imprime en stdout.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_CONFIGURED = False


def configure_logging(level: str | int = "INFO") -> None:
    global _CONFIGURED

    root = logging.getLogger()
    root.setLevel(level.upper() if isinstance(level, str) else level)
    if _CONFIGURED:
        return

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)

    # httpx registra cada request a INFO; demasiado ruido para un seeder.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    _CONFIGURED = True
