"""Router SEO programmatique."""
from fastapi import APIRouter, Depends

from ...core.context import AppContext
from ..deps import get_context

router = APIRouter(prefix="/api/seo", tags=["seo"])


@router.post("/programmatic", summary="Génère les pages ville × service manquantes")
def programmatic(ctx: AppContext = Depends(get_context)) -> dict:
    return {"created": ctx.seo.apply(), "enabled": ctx.seo.enabled}
