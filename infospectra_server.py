"""infospectra backend server.

Mounts the analysis router under a FastAPI application with CORS set up
for a local web client. The router is imported lazily so that a broken
install is reported by the health endpoint instead of preventing the
server from starting.

Usage::

    # Development (auto-reload)
    uvicorn infospectra_server:app --reload --port 8430

    # Production
    uvicorn infospectra_server:app --host 0.0.0.0 --port 8430

    # Or run directly
    python infospectra_server.py
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from infospectra import __version__

logger = logging.getLogger("infospectra")

# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------

app = FastAPI(
    title="infospectra API",
    description=(
        "Information spectra of texts: character grids, frequency tables, "
        "row and column spectra, summary statistics, and text comparison."
    ),
    version=__version__,
)

# ---------------------------------------------------------------------------
# CORS -- allow local dev server origins
# ---------------------------------------------------------------------------

_ALLOWED_ORIGINS = [
    "http://localhost:5173",   # Vite dev server
    "http://localhost:8430",   # Self (for Swagger UI)
    "http://127.0.0.1:5173",
    "http://127.0.0.1:8430",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=_ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_router_status: dict[str, Any] = {"loaded": False, "error": None}


def _mount_analysis() -> None:
    """Mount the analysis router. Its paths already carry the ``/api/`` prefix."""
    try:
        from infospectra.server import router as analysis_router

        app.include_router(analysis_router, tags=["analysis"])
        _router_status["loaded"] = True
        logger.info("Analysis router mounted successfully")
    except Exception as exc:
        _router_status["error"] = str(exc)
        logger.warning("Analysis router failed to load: %s", exc)


# ---------------------------------------------------------------------------
# Health endpoint (registered BEFORE the router so that /api/health
# resolves here rather than to the router's own version)
# ---------------------------------------------------------------------------


@app.get("/api/health")
async def server_health() -> dict[str, Any]:
    """Return server health, including whether the analysis router loaded.

    Returns:
        Dictionary with overall status, version, and router status.
    """
    return {
        "status": "ok" if _router_status["loaded"] else "error",
        "version": __version__,
        "analysis": _router_status,
    }


_mount_analysis()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------


def run_server(host: str = "127.0.0.1", port: int = 8430) -> None:
    """Start the infospectra server via uvicorn.

    Args:
        host: Bind address. Defaults to localhost.
        port: Port number. Defaults to 8430.
    """
    import uvicorn

    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )
    run_server()
