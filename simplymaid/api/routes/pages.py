"""
Router pages.

POST /api/pages/validate  → {"page": {...}} → page validée + shared sections résolues
POST /api/pages           → valide puis enregistre (201, 409 si slug déjà pris)
GET  /api/pages           → liste des pages enregistrées
GET  /api/pages/{slug}    → une page (404 si absente)
"""
import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from ...core.context import AppContext
from ...core.errors import ValidationError
from ..deps import get_context

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/pages", tags=["pages"])


def _page_from_body(body: Dict[str, Any]) -> Any:
    page = body.get("page") if isinstance(body, dict) else None
    if page is None:
        raise ValidationError("Page data is required", "PAGE_REQUIRED")
    return page


@router.post("/validate", summary="Valide une page (structure, sections, shared sections)")
def validate(body: Any = Body(default=None), ctx: AppContext = Depends(get_context)) -> JSONResponse:
    try:
        page = ctx.validate_page(_page_from_body(body), resolve_shared=True)
        return JSONResponse({"page": page.to_wire()})
    except ValidationError as e:
        log.info("Page refusée : %s", e.code)
        return JSONResponse(e.to_dict(), status_code=400)
    except Exception:
        log.exception("Erreur interne pendant la validation de page")
        return JSONResponse({"error": "Internal validation error", "code": "INTERNAL_ERROR"}, status_code=500)


@router.post("", status_code=201, summary="Valide et enregistre une page")
def create(body: Any = Body(default=None), ctx: AppContext = Depends(get_context)) -> dict:
    page = ctx.accept_page(_page_from_body(body))
    log.info("Page enregistrée : %s", page.slug)
    return {"page": page.to_wire()}


@router.get("", summary="Liste les pages enregistrées")
def list_pages(ctx: AppContext = Depends(get_context)) -> dict:
    return {"pages": [p.to_wire() for p in ctx.pages.list()]}


@router.get("/{slug:path}", summary="Retourne une page par slug")
def get_page(slug: str, ctx: AppContext = Depends(get_context)) -> dict:
    # /api/pages/sydney/house-cleaning → slug "/sydney/house-cleaning"
    key = slug if ctx.pages.has(slug) else f"/{slug}"
    return {"page": ctx.pages.get(key).to_wire()}
