"""
SimplyMaid — FastAPI app
Démarrer : uvicorn simplymaid.api.main:create_app --factory --reload --port 8001
"""
import logging
import os
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..core.config import APP_VERSION
from ..core.context import AppContext
from ..core.errors import AlreadyRegisteredError, NotFoundError, ValidationError
from .routes import pages, sections, seo, templates

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s — %(message)s",
)
log = logging.getLogger(__name__)


def create_app(context: Optional[AppContext] = None) -> FastAPI:
    """App FastAPI autour d'un AppContext (construit depuis l'environnement si absent)."""
    app = FastAPI(title="SimplyMaid — Content Core", version=APP_VERSION, docs_url="/docs")
    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])
    app.state.context = context or AppContext.from_env()

    @app.exception_handler(ValidationError)
    async def _validation_error(request: Request, exc: ValidationError):
        return JSONResponse(exc.to_dict(), status_code=400)

    @app.exception_handler(NotFoundError)
    async def _not_found(request: Request, exc: NotFoundError):
        return JSONResponse({"error": exc.message, "code": exc.code}, status_code=404)

    @app.exception_handler(AlreadyRegisteredError)
    async def _conflict(request: Request, exc: AlreadyRegisteredError):
        return JSONResponse({"error": exc.message, "code": exc.code}, status_code=409)

    @app.get("/health")
    def health():
        return {"status": "ok", "service": "simplymaid", "version": APP_VERSION}

    app.include_router(pages.router)
    app.include_router(sections.router)
    app.include_router(templates.router)
    app.include_router(seo.router)
    log.info("API SimplyMaid prête (%d types de section)", len(app.state.context.sections))
    return app
