"""External-facing routers (non-versioned endpoints).

The versioned API lives under ``src.presentation.routers.api.v1``.
"""

from src.presentation.routers.system import system_router

__all__ = ["system_router"]
