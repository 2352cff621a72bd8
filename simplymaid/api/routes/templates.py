"""
Router templates.

GET  /api/templates                  → templates enregistrés
POST /api/templates                  → enregistre (201, 409 si id déjà pris)
POST /api/templates/{id}/instantiate → {"variables": {...}} → section instanciée
"""
from typing import Dict, Optional, Union

from fastapi import APIRouter, Body, Depends
from pydantic import BaseModel

from ...core.context import AppContext
from ..deps import get_context

router = APIRouter(prefix="/api/templates", tags=["templates"])


class InstantiateRequest(BaseModel):
    variables: Optional[Dict[str, Union[bool, int, float, str]]] = None


@router.get("", summary="Liste les templates")
def list_templates(ctx: AppContext = Depends(get_context)) -> dict:
    return {"templates": [t.to_wire() for t in ctx.templates.list()]}


@router.post("", status_code=201, summary="Enregistre un template")
def create(template: dict = Body(...), ctx: AppContext = Depends(get_context)) -> dict:
    tpl = ctx.templates.register_template(template)
    return {"template": tpl.to_wire()}


@router.post("/{template_id}/instantiate", summary="Instancie un template en section")
def instantiate(
    template_id: str,
    req: Optional[InstantiateRequest] = None,
    ctx: AppContext = Depends(get_context),
) -> dict:
    variables = req.variables if req else None
    section = ctx.template_service.instantiate(template_id, variables)
    return {"section": section.to_wire()}
