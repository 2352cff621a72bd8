"""
Page builder — construction de sections et de pages avec identité fraîche.

Deux canaux d'erreur distincts :
  - type de section non enregistré → NotFoundError (plugin oublié)
  - type de page hors enum / slug vide → ValidationError (mauvais usage du schéma)
"""
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

from .errors import NotFoundError, ValidationError
from .registry import SectionRegistry, SectionRegistryItem
from .schemas import Page, PageType, Section
from .validation import safe_parse, validate_safely


# ── Catalogue par défaut ─────────────────────────────────────────────────────
# Un item par type de section ; `component` est le nom du composant côté front.

DEFAULT_SECTION_CATALOG: Dict[str, SectionRegistryItem] = {
    "hero":              SectionRegistryItem(component="HeroSection",              label="Hero",                icon="layout",        description="Bannière principale avec titre et CTA"),
    "text":              SectionRegistryItem(component="TextSection",              label="Texte",               icon="type",          description="Bloc de texte libre"),
    "form":              SectionRegistryItem(component="FormSection",              label="Formulaire",          icon="clipboard",     description="Formulaire de contact ou de devis"),
    "gallery":           SectionRegistryItem(component="GallerySection",           label="Galerie",             icon="image",         description="Grille d'images"),
    "services":          SectionRegistryItem(component="ServicesSection",          label="Services",            icon="sparkles",      description="Liste des services de ménage"),
    "aiGenerated":       SectionRegistryItem(component="AIGeneratedSection",       label="Contenu IA",          icon="cpu",           description="Contenu généré par IA"),
    "clusteredContent":  SectionRegistryItem(component="ClusteredContentSection",  label="Cluster",             icon="layers",        description="Contenu regroupé par cluster SEO"),
    "reviewsMarquee":    SectionRegistryItem(component="ReviewsMarqueeSection",    label="Avis",                icon="star",          description="Défilement d'avis clients"),
    "howItWorks":        SectionRegistryItem(component="HowItWorksSection",        label="Comment ça marche",   icon="list-ordered",  description="Étapes du service"),
    "ourServices":       SectionRegistryItem(component="OurServicesSection",       label="Nos services",        icon="briefcase",     description="Présentation des prestations"),
    "serviceLocations":  SectionRegistryItem(component="ServiceLocationsSection",  label="Zones desservies",    icon="map-pin",       description="Villes et quartiers couverts"),
    "pricingComparison": SectionRegistryItem(component="PricingComparisonSection", label="Comparatif tarifs",   icon="scale",         description="Comparaison des formules"),
    "faq":               SectionRegistryItem(component="FAQSection",               label="FAQ",                 icon="help-circle",   description="Questions fréquentes"),
    "bestRatedCleaners": SectionRegistryItem(component="BestRatedCleanersSection", label="Mieux notés",         icon="award",         description="Agents de ménage les mieux notés"),
    "leadCapture":       SectionRegistryItem(component="LeadCaptureSection",       label="Capture de leads",    icon="mail",          description="Formulaire de capture de prospects"),
}


def register_default_sections(registry: SectionRegistry) -> None:
    """Enregistre le catalogue complet (types déjà présents ignorés)."""
    for section_type, item in DEFAULT_SECTION_CATALOG.items():
        if not registry.has(section_type):
            registry.register(section_type, item)


class PageBuilder:
    """
    Builder de sections et de pages.

    Usage:
        >>> builder = PageBuilder(section_registry)
        >>> hero = builder.create_section("hero", {"title": {"id": "title", "type": "text", "value": "Hi"}})
        >>> page = builder.create_page("city", "/sydney/house-cleaning")
    """

    def __init__(self, sections: SectionRegistry):
        self.sections = sections

    def create_section(self, section_type: str, fields: Optional[Mapping[str, Any]] = None) -> Section:
        """
        Crée une section d'un type enregistré.

        Raises:
            NotFoundError: type absent du registre
            ValidationError: champs invalides (INVALID_SECTION)
        """
        if not self.sections.has(section_type):
            raise NotFoundError(
                f"Cannot create section: type {section_type} not found in registry",
                section_type,
                SectionRegistry.missing_code,
            )
        return validate_safely(Section, {
            "id": str(uuid.uuid4()),
            "type": section_type,
            "fields": dict(fields or {}),
            "style": {},
            "tracking": {},
            "seo": {},
        }, "INVALID_SECTION")

    def create_page(self, page_type: str, slug: str, modified_by: str = "system") -> Page:
        """
        Crée une page vide (version 1, horodatée maintenant).

        Raises:
            ValidationError: INVALID_PAGE_TYPE ou INVALID_PAGE_SLUG
        """
        result = safe_parse(PageType, page_type)
        if not result.success:
            raise ValidationError(f"Invalid page type: {page_type}", "INVALID_PAGE_TYPE", result.errors)
        if not isinstance(slug, str) or not slug.strip():
            raise ValidationError("Invalid slug: must be non-empty string", "INVALID_PAGE_SLUG")
        return Page(
            id=str(uuid.uuid4()),
            type=page_type,
            slug=slug,
            sections=[],
            cluster_refs=[],
            shared_section_refs=[],
            version=1,
            last_modified=datetime.now(timezone.utc),
            last_modified_by=modified_by,
        )
