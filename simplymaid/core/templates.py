"""
Templates de section — substitution ${variable} + enrichissement IA optionnel.

Le template enregistré n'est jamais modifié : chaque instanciation part
d'une copie profonde de son squelette.
"""
import logging
import re
from typing import Any, Mapping, Optional, Union

from .ai import AIContentService
from .registry import TemplateRegistry
from .schemas import (
    AIPromptField,
    CTAField,
    FormField,
    ImageField,
    RichTextField,
    Section,
    SectionSEO,
    SectionStyle,
    SectionTracking,
    ServiceField,
    TextField,
)
from .validation import safe_parse, validate_safely

log = logging.getLogger(__name__)

VariableValue = Union[str, int, float, bool]

_PLACEHOLDER = re.compile(r"\$\{(\w+)\}")

_FIELD_MODELS = {
    m.model_fields["type"].default: m
    for m in (TextField, RichTextField, ImageField, CTAField, FormField, ServiceField, AIPromptField)
}


def _format(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def substitute(text: str, variables: Mapping[str, Any]) -> str:
    """"Hello ${city}" + {"city": "Sydney"} → "Hello Sydney" ; clé absente → ""."""
    return _PLACEHOLDER.sub(lambda m: _format(variables.get(m.group(1))), text)


def _substitute_all(obj: Any, variables: Mapping[str, Any]) -> Any:
    """Parcourt récursivement dict/list/str (clés comprises) et substitue."""
    if isinstance(obj, str):
        return substitute(obj, variables)
    if isinstance(obj, dict):
        return {substitute(k, variables): _substitute_all(v, variables) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_substitute_all(v, variables) for v in obj]
    return obj


def _parse_or_construct(model: Any, raw: Any) -> Any:
    if raw is None or model is None:
        return raw
    result = safe_parse(model, raw)
    return result.data if result.success else model.model_construct(**raw)


def _preview_section(data: dict) -> Section:
    """Section d'aperçu : chaque partie validée si possible, reprise telle quelle sinon."""
    fields = {
        key: _parse_or_construct(_FIELD_MODELS.get(raw.get("type")), raw)
        for key, raw in data["fields"].items()
    }
    return Section.model_construct(
        id=data["id"],
        type=data["type"],
        fields=fields,
        style=_parse_or_construct(SectionStyle, data.get("style")),
        tracking=_parse_or_construct(SectionTracking, data.get("tracking")),
        seo=_parse_or_construct(SectionSEO, data.get("seo")),
    )


class TemplateService:
    def __init__(self, templates: TemplateRegistry, ai: AIContentService):
        self.templates = templates
        self.ai = ai

    def instantiate(self, template_id: str, variables: Optional[Mapping[str, VariableValue]] = None) -> Section:
        """
        Instancie un template en section indépendante.

        1. lookup (NotFoundError TEMPLATE_NOT_FOUND)
        2. copie du squelette ; substitution si le template déclare des variables
           (variables déclarées toutes fournies : section revalidée ; jeu partiel :
           aperçu permissif, jamais d'erreur)
        3. si ai_prompt : fusion des fields de la première section générée (priorité au contenu IA)

        Raises:
            NotFoundError: template inconnu
            ValidationError: section substituée invalide alors que toutes les
                variables déclarées sont fournies (INVALID_TEMPLATE_SECTION)
        """
        variables = dict(variables or {})
        template = self.templates.get(template_id)

        data = template.section.model_dump()
        if template.variables:
            data = _substitute_all(data, variables)

        missing = [v.key for v in template.variables if v.key not in variables]
        if not missing:
            section = validate_safely(Section, data, "INVALID_TEMPLATE_SECTION")
        else:
            result = safe_parse(Section, data)
            section = result.data if result.success else _preview_section(data)
            log.info("Template %s instancié sans %s", template_id, ", ".join(missing))

        if template.ai_prompt:
            generated = self.ai.generate_sections(template.ai_prompt, {k: _format(v) for k, v in variables.items()})
            if generated:
                log.info("Template %s : %d field(s) IA fusionné(s)", template_id, len(generated[0].fields))
                section = section.model_copy(update={"fields": {**section.fields, **generated[0].fields}})

        return section
