"""
Génération de contenu IA — collaborateur externe.

Contrat : generate(instructions, variables) → liste de Section (éventuellement vide).
Une liste vide signifie « rien généré » ; aucun générateur ne lève pour ça.
"""
import logging
import os
from typing import Dict, List, Optional, Protocol

from .builder import PageBuilder
from .config import AppConfig
from .schemas import Section

log = logging.getLogger(__name__)

TEMP = 0.4
MAX_TOKENS = 800


class ContentGenerator(Protocol):
    def generate(self, instructions: str, variables: Dict[str, str]) -> List[Section]:
        ...


# ── Stub hors-ligne ──────────────────────────────────────────────────────────

class StubContentGenerator:
    """
    Générateur déterministe (tests, dev, provider "custom").

    Le texte vient du `generate_content` du type "text" s'il est enregistré,
    d'un gabarit fixe sinon.
    """

    def __init__(self, builder: PageBuilder):
        self.builder = builder

    def generate(self, instructions: str, variables: Dict[str, str]) -> List[Section]:
        if not instructions:
            return []
        item = self.builder.sections.get("text")
        if item.generate_content is not None:
            text = item.generate_content(variables)
        else:
            text = f"AI generated content for {variables.get('city', '')} {variables.get('service', '')}"
        return [self.builder.create_section("text", {"intro": {"id": "intro", "type": "text", "value": text}})]


# ── Adaptateurs LLM ──────────────────────────────────────────────────────────

def _openai(prompt: str, model: str) -> str:
    import openai
    r = openai.OpenAI(api_key=os.getenv("OPENAI_API_KEY")).chat.completions.create(
        model=model, messages=[{"role": "user", "content": prompt}],
        temperature=TEMP, max_tokens=MAX_TOKENS)
    return r.choices[0].message.content or ""


def _anthropic(prompt: str, model: str) -> str:
    import anthropic
    r = anthropic.Anthropic(api_key=os.getenv("ANTHROPIC_API_KEY")).messages.create(
        model=model, max_tokens=MAX_TOKENS, temperature=TEMP,
        messages=[{"role": "user", "content": prompt}])
    return r.content[0].text if r.content else ""


_CALLERS = {
    "openai":    (_openai,    "OPENAI_API_KEY"),
    "anthropic": (_anthropic, "ANTHROPIC_API_KEY"),
}


def build_prompt(instructions: str, variables: Dict[str, str]) -> str:
    lines = [instructions.strip()]
    if variables:
        lines.append("")
        lines.extend(f"- {k}: {v}" for k, v in variables.items())
    lines.append("")
    lines.append("Réponds en markdown, sans préambule.")
    return "\n".join(lines)


class LLMContentGenerator:
    """Appelle OpenAI ou Anthropic et emballe la réponse dans une section aiGenerated."""

    def __init__(self, builder: PageBuilder, provider: str = "openai", model: Optional[str] = None):
        if provider not in _CALLERS:
            raise ValueError(f"Provider IA inconnu : {provider!r}. Disponibles : {list(_CALLERS)}")
        self.builder = builder
        self.provider = provider
        self.model = model or ("gpt-4o-mini" if provider == "openai" else "claude-haiku-4-5-20251001")

    def generate(self, instructions: str, variables: Dict[str, str]) -> List[Section]:
        if not instructions:
            return []
        caller, _ = _CALLERS[self.provider]
        try:
            text = caller(build_prompt(instructions, variables), self.model)
        except Exception as e:
            log.error("[%s] génération IA échouée : %s", self.provider, e)
            return []
        if not text.strip():
            return []
        return [self.builder.create_section("aiGenerated", {
            "body": {"id": "body", "type": "richText", "value": text, "format": "markdown"},
        })]


def make_content_generator(config: AppConfig, builder: PageBuilder) -> ContentGenerator:
    """LLM si le provider configuré a sa clé API dans l'environnement, stub sinon."""
    ai = config.ai_content
    if ai is not None and ai.provider in _CALLERS:
        _, env_key = _CALLERS[ai.provider]
        if os.getenv(env_key):
            log.info("Génération IA via %s (%s)", ai.provider, ai.model)
            return LLMContentGenerator(builder, ai.provider, ai.model)
    return StubContentGenerator(builder)


class AIContentService:
    """Porte d'entrée unique : respecte advancedConfig.aiContent.enabled."""

    def __init__(self, config: AppConfig, generator: ContentGenerator):
        self.config = config
        self.generator = generator

    @property
    def enabled(self) -> bool:
        ai = self.config.ai_content
        return bool(ai and ai.enabled)

    def generate_sections(self, instructions: Optional[str], variables: Dict[str, str]) -> List[Section]:
        if not instructions or not self.enabled:
            return []
        return list(self.generator.generate(instructions, {k: str(v) for k, v in variables.items()}))
