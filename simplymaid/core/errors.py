"""
Erreurs typées du cœur SimplyMaid.

ValidationError  → entrée refusée (code machine + violations), récupérable par l'appelant
SchemaError      → incohérence de version / migration / cache (problème opérationnel)
RegistryError    → AlreadyRegisteredError (bug appelant) vs NotFoundError (pas encore créé)
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class Violation(BaseModel):
    """Violation structurée : chemin du champ + message."""
    path: str
    message: str
    type: str = "value_error"


def _details_to_json(details: Any) -> Any:
    if isinstance(details, list):
        return [d.model_dump() if isinstance(d, BaseModel) else d for d in details]
    if isinstance(details, BaseModel):
        return details.model_dump()
    return details


class SimplyMaidError(Exception):
    """Racine de toutes les erreurs du cœur."""


class ValidationError(SimplyMaidError):
    def __init__(self, message: str, code: str, details: Any = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details

    @property
    def violations(self) -> List[Violation]:
        if isinstance(self.details, list):
            return [d for d in self.details if isinstance(d, Violation)]
        return []

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message, "code": self.code, "details": _details_to_json(self.details)}

    def __repr__(self) -> str:
        return f"ValidationError(code={self.code!r}, message={self.message!r})"


class SchemaError(SimplyMaidError):
    def __init__(self, message: str, version: str, details: Any = None):
        super().__init__(message)
        self.message = message
        self.version = version
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message, "version": self.version, "details": _details_to_json(self.details)}


class RegistryError(SimplyMaidError):
    def __init__(self, message: str, key: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.key = key
        self.code = code


class AlreadyRegisteredError(RegistryError):
    """Clé déjà présente : aucune mise à jour en place n'existe."""


class NotFoundError(RegistryError):
    """Clé absente du registre."""
