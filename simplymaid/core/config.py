"""
Configuration globale — feature flags + thème + advanced config (SEO / IA / concurrence).

Construite une seule fois au démarrage via validate_safely(..., "ERR_CONFIG"),
puis gelée : modèles frozen, séquences en tuples, dicts en vues lecture seule.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Literal, Mapping, Optional, Tuple

from pydantic import Field, field_serializer, field_validator, model_validator

from ..base import FrozenModel, freeze_deep, freeze_mapping, thaw
from ..theme.schema import ThemeConfig
from .schemas import ContentCluster, RouteRule, Section
from .validation import safe_parse, validate_safely

log = logging.getLogger(__name__)

APP_VERSION = "10.0.1"
SCHEMA_VERSION = "5.0.0"


# ── Feature flags ────────────────────────────────────────────────────────────

class FeatureFlags(FrozenModel):
    enable_personalization: bool = False
    enable_ab_testing: bool = Field(default=False, alias="enableABTesting")
    enable_versioning: bool = False
    enable_drafts: bool = False
    enable_templates: bool = False
    enable_ai_content: bool = Field(default=False, alias="enableAIContent")
    enable_market_intelligence: bool = False
    enable_advanced_seo: bool = Field(default=False, alias="enableAdvancedSEO")
    enable_competitor_crawling: bool = False
    enable_vector_seo: bool = Field(default=False, alias="enableVectorSEO")
    enable_lead_funnels: bool = False
    enable_multi_region_deploy: bool = False
    enable_microfrontends: bool = False
    enable_email_automation: bool = False
    enable_n8n_workflows: bool = Field(default=False, alias="enableN8nWorkflows")
    enable_programmatic_seo: bool = Field(default=False, alias="enableProgrammaticSEO")
    enable_content_clustering: bool = False
    enable_shared_sections: bool = False
    enable_route_personalization: bool = False
    enable_localization_seo: bool = Field(default=False, alias="enableLocalizationSEO")
    enable_advanced_competitor_analysis: bool = False
    enable_recently_cleaned: bool = False
    enable_provider_flow: bool = False


# ── Localisation / SEO ───────────────────────────────────────────────────────

class LocaleConfig(FrozenModel):
    lang: str = "en"
    region: Optional[str] = None
    alternate_links: Optional[Mapping[str, str]] = None

    @field_validator("alternate_links")
    @classmethod
    def _freeze_links(cls, value):
        return freeze_mapping(value)

    @field_serializer("alternate_links")
    def _dump_links(self, value):
        return dict(value) if value is not None else None


class InternalLinking(FrozenModel):
    enabled: bool
    strategy: Literal["keyword-based", "cluster-based", "ai-suggested"]


class VectorSEO(FrozenModel):
    enabled: bool
    embedding_model: str = "text-embedding-model"
    vector_db: str = Field(default="pinecone", alias="vectorDB")
    cluster_strategy: Literal["semantic", "keyword", "hybrid"] = "semantic"


class SharedSectionConfig(FrozenModel):
    """
    Shared section du pool global, figée à la lecture de la config.

    `section` est un instantané wire en lecture seule (mappings + tuples) ;
    le resolver le revalide en Section à chaque utilisation.
    """
    id: str
    section: Any

    @field_validator("section")
    @classmethod
    def _freeze_section(cls, value):
        result = safe_parse(Section, value)
        if not result.success:
            raise ValueError("invalid shared section: " + "; ".join(f"{v.path}: {v.message}" for v in result.errors))
        return freeze_deep(result.data.model_dump(by_alias=True, exclude_none=True))

    @field_serializer("section")
    def _dump_section(self, value):
        return thaw(value)


class ProgrammaticSEO(FrozenModel):
    enabled: bool = False
    route_rules: Tuple[RouteRule, ...] = ()
    localization: bool = False
    content_clusters: Tuple[ContentCluster, ...] = ()
    shared_sections: Tuple[SharedSectionConfig, ...] = ()
    multilingual_support: Tuple[LocaleConfig, ...] = ()


class SEOEnhancements(FrozenModel):
    internal_linking: InternalLinking
    schema_enhancements: Optional[Tuple[str, ...]] = None
    vector_seo: Optional[VectorSEO] = Field(default=None, alias="vectorSEO")
    programmatic_seo: ProgrammaticSEO = Field(alias="programmaticSEO")


# ── IA / concurrence ─────────────────────────────────────────────────────────

class AICapabilities(FrozenModel):
    enabled: bool
    provider: Literal["openai", "anthropic", "custom"]
    model: str = "gpt-4"
    fallback: bool = True
    prompt_templates: Optional[Mapping[str, str]] = None
    content_policies: Tuple[str, ...] = ()
    competitor_aware_content: bool = False
    localization_support: bool = False

    @field_validator("prompt_templates")
    @classmethod
    def _freeze_templates(cls, value):
        return freeze_mapping(value)

    @field_serializer("prompt_templates")
    def _dump_templates(self, value):
        return dict(value) if value is not None else None


class CompetitorMetrics(FrozenModel):
    track_serp: bool = Field(default=True, alias="trackSERP")
    track_backlinks: bool = False
    track_local_competitors: bool = True


class CompetitorAnalysis(FrozenModel):
    enabled: bool = False
    sources: Tuple[str, ...] = ()
    frequency: Literal["daily", "weekly", "monthly"] = "weekly"
    metrics: CompetitorMetrics


class AdvancedConfig(FrozenModel):
    seo: Optional[SEOEnhancements] = None
    ai_content: Optional[AICapabilities] = None
    competitor_analysis: Optional[CompetitorAnalysis] = None


# ── AppConfig ────────────────────────────────────────────────────────────────

class AppConfig(FrozenModel):
    """Configuration applicative complète (une instance par processus)."""
    feature_flags: FeatureFlags
    theme: Optional[ThemeConfig] = None
    advanced_config: Optional[AdvancedConfig] = None

    @model_validator(mode="after")
    def _advanced_requires_flags(self) -> "AppConfig":
        flags = self.feature_flags
        if self.advanced_config is not None and not (flags.enable_advanced_seo or flags.enable_ai_content):
            raise ValueError("Advanced config provided without enabling relevant feature flags")
        return self

    # ── Accès pratiques ──────────────────────────────────────────────────────

    @property
    def programmatic_seo(self) -> Optional[ProgrammaticSEO]:
        adv = self.advanced_config
        if adv is None or adv.seo is None:
            return None
        return adv.seo.programmatic_seo

    @property
    def shared_sections(self) -> Tuple[SharedSectionConfig, ...]:
        pseo = self.programmatic_seo
        return pseo.shared_sections if pseo else ()

    @property
    def ai_content(self) -> Optional[AICapabilities]:
        return self.advanced_config.ai_content if self.advanced_config else None


# ── Données par défaut ───────────────────────────────────────────────────────

DEFAULT_CONFIG_DATA: Dict[str, Any] = {
    "featureFlags": {
        "enablePersonalization": False,
        "enableABTesting": False,
        "enableVersioning": True,
        "enableDrafts": True,
        "enableTemplates": True,
        "enableAIContent": True,
        "enableMarketIntelligence": False,
        "enableAdvancedSEO": True,
        "enableCompetitorCrawling": True,
        "enableVectorSEO": False,
        "enableLeadFunnels": True,
        "enableMultiRegionDeploy": False,
        "enableMicrofrontends": False,
        "enableEmailAutomation": True,
        "enableN8nWorkflows": False,
        "enableProgrammaticSEO": True,
        "enableContentClustering": True,
        "enableSharedSections": True,
        "enableRoutePersonalization": False,
        "enableLocalizationSEO": True,
        "enableAdvancedCompetitorAnalysis": True,
        "enableRecentlyCleaned": False,
        "enableProviderFlow": False,
    },
    "theme": {
        "colors": {
            "primary": {"hue": 273, "saturation": 83, "lightness": 60},
            "secondary": {"hue": 335, "saturation": 85, "lightness": 65},
            "neutral": {"hue": 273, "saturation": 6, "lightness": 32},
            "semantic": {
                "background": [0, 0, 100],
                "foreground": [273, 45, 15],
                "accent": [273, 60, 97],
                "muted": [273, 60, 97],
                "destructive": [350, 84, 60],
                "border": [273, 30, 92],
                "input": [273, 30, 92],
                "ring": [273, 83, 60],
                "card": [0, 0, 100],
                "popover": [0, 0, 100],
                "cardForeground": [273, 45, 15],
                "popoverForeground": [273, 45, 15],
                "primaryForeground": [210, 40, 98],
                "secondaryForeground": [222.2, 47.4, 11.2],
                "mutedForeground": [215.4, 16.3, 46.9],
                "accentForeground": [222.2, 47.4, 11.2],
                "destructiveForeground": [210, 40, 98],
            },
            "sidebar": {
                "background": [0, 0, 98],
                "foreground": [240, 5.3, 26.1],
                "primary": [240, 5.9, 10],
                "primaryForeground": [0, 0, 98],
                "accent": [240, 4.8, 95.9],
                "accentForeground": [240, 5.9, 10],
                "border": [220, 13, 91],
                "ring": [217.2, 91.2, 59.8],
            },
            "chart": {
                "1": [12, 76, 61],
                "2": [173, 58, 39],
                "3": [197, 37, 24],
                "4": [43, 74, 66],
                "5": [27, 87, 67],
            },
        },
        "spacing": {"base": 16, "scale": 1.5, "fluid": {"min": 0.5, "max": 1.5}},
        "typography": {"baseSize": 16, "scaleRatio": 1.25, "fluid": {"minVw": 320, "maxVw": 1280}},
        "containers": {
            "maxWidth": {"sm": 640, "md": 768, "lg": 1024, "xl": 1280},
            "padding": {"sm": 16, "md": 24, "lg": 32},
        },
        "motion": {
            "duration": {"instant": 50, "fast": 100, "normal": 200, "slow": 300},
            "easing": {
                "default": "cubic-bezier(0.4,0,0.2,1)",
                "in": "cubic-bezier(0.4,0,1,1)",
                "out": "cubic-bezier(0,0,0.2,1)",
            },
        },
        "darkMode": False,
        "prefersReducedMotion": False,
    },
    "advancedConfig": {
        "seo": {
            "internalLinking": {"enabled": True, "strategy": "cluster-based"},
            "schemaEnhancements": ["FAQ", "LocalBusiness"],
            "vectorSEO": {
                "enabled": False,
                "embeddingModel": "text-embedding-model",
                "vectorDB": "pinecone",
                "clusterStrategy": "semantic",
            },
            "programmaticSEO": {
                "enabled": True,
                "routeRules": [{
                    "pattern": "/:city/:service",
                    "type": "dynamic",
                    "generateFrom": "locations",
                    "aiInstructions": "Generate city-service pages using AI",
                }],
                "localization": True,
                "contentClusters": [{
                    "clusterId": "cleaning-hub",
                    "label": "Cleaning Hub",
                    "description": "Cluster of cleaning guides",
                    "sectionRefs": [],
                }],
                "sharedSections": [],
                "multilingualSupport": [
                    {"lang": "en", "alternateLinks": {"fr": "/fr/home", "zh": "/zh/home"}},
                ],
            },
        },
        "aiContent": {
            "enabled": True,
            "provider": "openai",
            "model": "gpt-4",
            "fallback": True,
            "promptTemplates": {
                "rewriteSection": "Rewrite this section focusing on local relevance",
                "faqRefinement": "Refine these FAQs using GSC queries and transcripts",
            },
            "contentPolicies": ["No duplicate content", "Maintain brand voice"],
            "competitorAwareContent": True,
            "localizationSupport": True,
        },
        "competitorAnalysis": {
            "enabled": True,
            "sources": ["semrush", "serpApi", "searchConsole"],
            "frequency": "weekly",
            "metrics": {"trackSERP": True, "trackBacklinks": False, "trackLocalCompetitors": True},
        },
    },
}


def load_app_config(data: Optional[Mapping[str, Any]] = None) -> AppConfig:
    """Valide et gèle la configuration (défaut : DEFAULT_CONFIG_DATA)."""
    config = validate_safely(AppConfig, DEFAULT_CONFIG_DATA if data is None else data, "ERR_CONFIG")
    log.info("Configuration chargée (app %s, schema %s)", APP_VERSION, SCHEMA_VERSION)
    return config


def load_app_config_file(path: str | Path) -> AppConfig:
    """Charge une configuration JSON depuis le disque."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    return load_app_config(data)
