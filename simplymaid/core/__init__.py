"""Cœur SimplyMaid — schémas, validation, registres, résolution, SEO programmatique."""
from .errors import (
    SimplyMaidError,
    ValidationError,
    SchemaError,
    RegistryError,
    AlreadyRegisteredError,
    NotFoundError,
    Violation,
)
from .schemas import (
    TextField, RichTextField, ImageField, CTAField, FormField, ServiceField, AIPromptField,
    ContentField, FIELD_TYPES,
    Section, SectionType, SharedSection, ContentCluster, RouteRule, Locale,
    Page, PageType, PageStructure, PageMeta,
    Template, TemplateVariable,
    UserProfile, Session,
)
from .validation import (
    SafeParseResult,
    safe_parse,
    validate_safely,
    validate_page,
    validate_content,
    is_field, is_section, is_page, is_user_profile, is_session,
)
from .config import (
    APP_VERSION,
    SharedSectionConfig,
    SCHEMA_VERSION,
    FeatureFlags,
    AdvancedConfig,
    AppConfig,
    DEFAULT_CONFIG_DATA,
    load_app_config,
    load_app_config_file,
)
from .registry import Registry, SectionRegistry, SectionRegistryItem, PageRegistry, TemplateRegistry
from .builder import PageBuilder, DEFAULT_SECTION_CATALOG, register_default_sections
from .resolution import SharedSectionResolver, ResolutionReport, ResolvedPage, SkippedRef
from .ai import (
    ContentGenerator,
    StubContentGenerator,
    LLMContentGenerator,
    AIContentService,
    make_content_generator,
)
from .templates import TemplateService, substitute
from .locations import LocationSource, StaticLocationSource
from .seo import ProgrammaticSEOGenerator, extract_programmatic_seo_details
from .cache import CacheConfig, CacheEntry, validate_cache_config, validate_cache_entry, is_expired
from .migrations import MigrationRegistry
from .context import AppContext

__all__ = [
    # erreurs
    "SimplyMaidError", "ValidationError", "SchemaError", "RegistryError",
    "AlreadyRegisteredError", "NotFoundError", "Violation",
    # schémas
    "TextField", "RichTextField", "ImageField", "CTAField", "FormField", "ServiceField",
    "AIPromptField", "ContentField", "FIELD_TYPES",
    "Section", "SectionType", "SharedSection", "ContentCluster", "RouteRule", "Locale",
    "Page", "PageType", "PageStructure", "PageMeta", "Template", "TemplateVariable",
    "UserProfile", "Session",
    # validation
    "SafeParseResult", "safe_parse", "validate_safely", "validate_page", "validate_content",
    "is_field", "is_section", "is_page", "is_user_profile", "is_session",
    # config
    "APP_VERSION", "SharedSectionConfig", "SCHEMA_VERSION", "FeatureFlags", "AdvancedConfig", "AppConfig",
    "DEFAULT_CONFIG_DATA", "load_app_config", "load_app_config_file",
    # registres / builder
    "Registry", "SectionRegistry", "SectionRegistryItem", "PageRegistry", "TemplateRegistry",
    "PageBuilder", "DEFAULT_SECTION_CATALOG", "register_default_sections",
    # résolution / templates / IA / SEO
    "SharedSectionResolver", "ResolutionReport", "ResolvedPage", "SkippedRef",
    "ContentGenerator", "StubContentGenerator", "LLMContentGenerator", "AIContentService",
    "make_content_generator", "TemplateService", "substitute",
    "LocationSource", "StaticLocationSource",
    "ProgrammaticSEOGenerator", "extract_programmatic_seo_details",
    # cache / migrations
    "CacheConfig", "CacheEntry", "validate_cache_config", "validate_cache_entry", "is_expired",
    "MigrationRegistry",
    "AppContext",
]
