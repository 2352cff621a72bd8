"""Dépendances FastAPI partagées par les routers."""
from fastapi import Request

from ..core.context import AppContext


def get_context(request: Request) -> AppContext:
    return request.app.state.context
