"""
Racine de composition — une instance par application (ou par test).

Regroupe config gelée, registres, builder, résolution, templates et SEO
programmatique ; aucun état global au niveau module.
"""
import logging
import os
from typing import Any, Optional

from .ai import AIContentService, ContentGenerator, make_content_generator
from .builder import PageBuilder, register_default_sections
from .config import AppConfig, load_app_config, load_app_config_file
from .locations import LocationSource, StaticLocationSource
from .migrations import MigrationRegistry
from .registry import PageRegistry, SectionRegistry, TemplateRegistry
from .resolution import SharedSectionResolver
from .schemas import Page
from .seo import ProgrammaticSEOGenerator
from .templates import TemplateService
from .validation import validate_page

log = logging.getLogger(__name__)


class AppContext:
    def __init__(
        self,
        config: Optional[AppConfig] = None,
        locations: Optional[LocationSource] = None,
        content_generator: Optional[ContentGenerator] = None,
        register_defaults: bool = True,
    ):
        self.config = config or load_app_config()

        self.sections = SectionRegistry()
        if register_defaults:
            register_default_sections(self.sections)
        self.pages = PageRegistry()
        self.templates = TemplateRegistry()
        self.migrations = MigrationRegistry()

        self.builder = PageBuilder(self.sections)
        self.resolver = SharedSectionResolver(self.config)
        self.ai = AIContentService(
            self.config, content_generator or make_content_generator(self.config, self.builder))
        self.template_service = TemplateService(self.templates, self.ai)
        self.seo = ProgrammaticSEOGenerator(
            self.config, self.pages, self.builder, self.ai,
            locations or StaticLocationSource.from_env())

    @classmethod
    def from_env(cls, **kwargs) -> "AppContext":
        """SIMPLYMAID_CONFIG → fichier JSON de configuration (défaut intégré sinon)."""
        path = os.getenv("SIMPLYMAID_CONFIG")
        config = load_app_config_file(path) if path else load_app_config()
        if path:
            log.info("Configuration lue depuis %s", path)
        return cls(config=config, **kwargs)

    def validate_page(self, page: Any, resolve_shared: bool = False) -> Page:
        return validate_page(page, resolve_shared=resolve_shared, resolver=self.resolver)

    def accept_page(self, page: Any) -> Page:
        """Valide (avec shared sections) puis enregistre ; rien n'est écrit si la validation échoue."""
        validated = self.validate_page(page, resolve_shared=True)
        self.pages.register_page(validated)
        return validated
