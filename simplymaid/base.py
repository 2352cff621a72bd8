"""
Modèles de base partagés par tous les schémas SimplyMaid.

- StrictModel : rejette les clés inconnues, alias camelCase (format wire d'origine)
- FrozenModel : idem + immuable (configuration globale, thème)
"""
from types import MappingProxyType
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StrictModel(BaseModel):
    """Schéma strict : extra="forbid", noms Python snake_case, alias camelCase."""
    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_wire(self) -> dict:
        """Sérialisation JSON avec les noms d'origine (camelCase)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class FrozenModel(StrictModel):
    """Schéma strict et immuable (assignation interdite après construction)."""
    model_config = ConfigDict(frozen=True)


def freeze_mapping(value: Mapping[str, Any] | None) -> Mapping[str, Any] | None:
    """Vue en lecture seule d'un dict (utilisé par les validateurs des modèles gelés)."""
    if value is None:
        return None
    return MappingProxyType(dict(value))


def freeze_deep(value: Any) -> Any:
    """Copie gelée récursive : dict → MappingProxyType, list/tuple → tuple."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: freeze_deep(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze_deep(v) for v in value)
    return value


def thaw(value: Any) -> Any:
    """Inverse de freeze_deep (dicts et listes modifiables)."""
    if isinstance(value, Mapping):
        return {k: thaw(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [thaw(v) for v in value]
    return value
