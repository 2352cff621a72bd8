"""Router sections — catalogue des types enregistrés."""
from fastapi import APIRouter, Depends

from ...core.context import AppContext
from ..deps import get_context

router = APIRouter(prefix="/api/sections", tags=["sections"])


@router.get("/catalog", summary="Liste les types de section disponibles")
def catalog(ctx: AppContext = Depends(get_context)) -> dict:
    items = ctx.sections.get_all()
    return {"sections": [
        {"type": section_type, **item.model_dump(exclude={"generate_content"})}
        for section_type, item in items.items()
    ]}
