"""
Moteur de validation.

safe_parse      → ne lève jamais pour une entrée mal formée (SafeParseResult)
validate_safely → point de passage unique des données non fiables (lève ValidationError)
validate_page   → processus en 3 étapes : structure → sections → shared sections (optionnel)
"""
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, Iterable, List, Optional, Sequence, TypeVar

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .errors import ValidationError, Violation
from .schemas import ContentField, Page, PageStructure, Section, Session, UserProfile

if TYPE_CHECKING:
    from .resolution import SharedSectionResolver

T = TypeVar("T")

_ADAPTERS: dict = {}


@dataclass
class SafeParseResult(Generic[T]):
    success: bool
    data: Optional[T] = None
    errors: List[Violation] = field(default_factory=list)


def _path(loc: Iterable[Any]) -> str:
    return ".".join(str(p) for p in loc)


def _violation(err: dict) -> Violation:
    if err["type"] == "union_tag_invalid":
        tag = (err.get("ctx") or {}).get("tag", "")
        return Violation(path=_path(err["loc"]), message=f"unrecognized field type {tag!r}", type=err["type"])
    return Violation(path=_path(err["loc"]), message=err["msg"], type=err["type"])


def violations_from(exc: PydanticValidationError) -> List[Violation]:
    return [_violation(e) for e in exc.errors()]


def _validate(schema: Any, data: Any) -> Any:
    if isinstance(schema, type) and issubclass(schema, BaseModel):
        if isinstance(data, BaseModel) and not isinstance(data, schema):
            data = data.model_dump(by_alias=True)
        return schema.model_validate(data)
    key = id(schema)
    adapter = _ADAPTERS.get(key)
    if adapter is None:
        adapter = _ADAPTERS[key] = (schema, TypeAdapter(schema))
    return adapter[1].validate_python(data)


def safe_parse(schema: Any, data: Any) -> SafeParseResult:
    """Valide `data` contre `schema` (modèle ou type) sans lever pour une entrée invalide."""
    try:
        return SafeParseResult(success=True, data=_validate(schema, data))
    except PydanticValidationError as e:
        return SafeParseResult(success=False, errors=violations_from(e))


def validate_safely(schema: Any, data: Any, error_code: str) -> Any:
    """
    Valide ou lève ValidationError(code=error_code, details=[Violation, ...]).

    Retourne la valeur normalisée (défauts remplis).
    """
    result = safe_parse(schema, data)
    if not result.success:
        raise ValidationError("Validation failed", error_code, result.errors)
    return result.data


def validate_page(
    page: Any,
    resolve_shared: bool = False,
    resolver: Optional["SharedSectionResolver"] = None,
) -> Page:
    """
    Valide une page en trois étapes, chacune bloquante :

    1. structure de la page (INVALID_PAGE_STRUCTURE) : les sections ne sont pas examinées
    2. chaque section indépendamment (INVALID_SECTION_{i})
    3. si resolve_shared : résolution des shared sections via `resolver`
    """
    if isinstance(page, BaseModel):
        page = page.model_dump(by_alias=True)

    structure = validate_safely(PageStructure, page, "INVALID_PAGE_STRUCTURE")

    sections = [
        validate_safely(Section, raw, f"INVALID_SECTION_{i}")
        for i, raw in enumerate(structure.sections)
    ]
    validated = Page.model_validate({**dict(structure), "sections": sections})

    if resolve_shared:
        if resolver is None:
            raise ValueError("resolve_shared=True requiert un SharedSectionResolver")
        return resolver.resolve(validated)
    return validated


def validate_content(
    content: str,
    min_length: Optional[int] = None,
    max_length: Optional[int] = None,
    required_keywords: Optional[Sequence[str]] = None,
) -> bool:
    """Longueur min/max + présence (insensible à la casse) de mots-clés."""
    if min_length and len(content) < min_length:
        return False
    if max_length and len(content) > max_length:
        return False
    if required_keywords:
        lowered = content.lower()
        return all(k.lower() in lowered for k in required_keywords)
    return True


# ── Type guards ──────────────────────────────────────────────────────────────

def is_field(data: Any) -> bool:
    return safe_parse(ContentField, data).success


def is_section(data: Any) -> bool:
    return safe_parse(Section, data).success


def is_page(data: Any) -> bool:
    return safe_parse(Page, data).success


def is_user_profile(data: Any) -> bool:
    return safe_parse(UserProfile, data).success


def is_session(data: Any) -> bool:
    return safe_parse(Session, data).success
