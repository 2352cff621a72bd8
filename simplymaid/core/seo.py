"""
SEO programmatique — matérialise une page par combinaison (ville × service).

Idempotent au niveau du registre : un slug déjà présent est ignoré,
on peut relancer à chaque déploiement.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .ai import AIContentService
from .builder import PageBuilder
from .config import AppConfig
from .errors import AlreadyRegisteredError
from .locations import LocationSource
from .registry import PageRegistry
from .schemas import RouteRule

log = logging.getLogger(__name__)


@dataclass
class ProgrammaticSEODetails:
    route_rules: Tuple[RouteRule, ...]
    localization: bool
    ai_instructions: Optional[str]


def extract_programmatic_seo_details(config: AppConfig) -> ProgrammaticSEODetails:
    """Règles de routes + instructions IA partagées (celles de la première règle qui en porte)."""
    pseo = config.programmatic_seo
    rules = pseo.route_rules if pseo else ()
    return ProgrammaticSEODetails(
        route_rules=tuple(rules),
        localization=pseo.localization if pseo else False,
        ai_instructions=next((r.ai_instructions for r in rules if r.ai_instructions), None),
    )


class ProgrammaticSEOGenerator:
    def __init__(
        self,
        config: AppConfig,
        pages: PageRegistry,
        builder: PageBuilder,
        ai: AIContentService,
        locations: LocationSource,
    ):
        self.config = config
        self.pages = pages
        self.builder = builder
        self.ai = ai
        self.locations = locations

    @property
    def enabled(self) -> bool:
        # deux interrupteurs indépendants
        pseo = self.config.programmatic_seo
        return self.config.feature_flags.enable_programmatic_seo and bool(pseo and pseo.enabled)

    def apply(self) -> List[str]:
        """Génère les pages manquantes ; retourne les slugs créés pendant ce run."""
        if not self.enabled:
            log.debug("SEO programmatique désactivé")
            return []

        details = extract_programmatic_seo_details(self.config)
        use_ai = self.config.feature_flags.enable_ai_content and self.ai.enabled
        created: List[str] = []

        for rule in details.route_rules:
            if rule.type != "dynamic" or rule.generate_from != "locations":
                continue
            for city in self.locations.cities():
                for service in self.locations.services():
                    slug = f"/{city}/{service}"
                    if self.pages.has(slug):
                        continue
                    sections = []
                    if use_ai and rule.ai_instructions:
                        sections = self.ai.generate_sections(details.ai_instructions, {"city": city, "service": service})
                    page = self.builder.create_page("city", slug)
                    page = page.model_copy(update={"sections": [*page.sections, *sections]})
                    try:
                        self.pages.register_page(page)
                    except AlreadyRegisteredError:
                        log.warning("Slug %s enregistré entre-temps, ignoré", slug)
                        continue
                    created.append(slug)

        log.info("SEO programmatique : %d page(s) créée(s)", len(created))
        return created
