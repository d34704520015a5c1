"""FastAPI application factory.

Routers
-------
All endpoint groups are mounted under their respective path prefix:

    /audits    - run audits over posted artifacts
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from auditor import __version__
from auditor.config import configure_logging, settings

from auditor.api.routers import audits as audits_router


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    configure_logging()

    app = FastAPI(
        title="Anchor Audit API",
        description=(
            "REST interface for the external-anchors audit. Accepts gathered "
            "page artifacts and reports cross-origin target=_blank links "
            "missing rel=noopener / rel=noreferrer."
        ),
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(audits_router.router, prefix="/audits", tags=["audits"])

    return app


# Module-level instance used by uvicorn:
#   uvicorn auditor.api.app:app --reload
app = create_app()
