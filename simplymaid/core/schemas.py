"""
Schémas Pydantic du contenu SimplyMaid.
Structure : Page → Section → Field (union discriminée par `type`)

Tous les schémas sont stricts (clés inconnues refusées) et acceptent
les noms wire camelCase (sharedSectionRefs, lastModified…) comme les noms Python.
"""
from datetime import datetime
from typing import Annotated, Any, Dict, List, Literal, Optional, Tuple, Union

from pydantic import (
    AfterValidator,
    AnyUrl,
    ConfigDict,
    EmailStr,
    Field,
    PositiveInt,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    TypeAdapter,
)
from pydantic import ValidationError as PydanticValidationError

from ..base import FrozenModel, StrictModel

_URL = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    # valide sans normaliser : la chaîne d'origine est conservée
    try:
        _URL.validate_python(value)
    except PydanticValidationError:
        raise ValueError(f"invalid url: {value!r}") from None
    return value


UrlStr = Annotated[str, AfterValidator(_check_url)]
NonEmptyStr = Annotated[str, Field(min_length=1)]


# ── Enums ────────────────────────────────────────────────────────────────────

SectionType = Literal[
    "hero", "text", "form", "gallery", "services", "aiGenerated", "clusteredContent",
    "reviewsMarquee", "howItWorks", "ourServices", "serviceLocations",
    "pricingComparison", "faq", "bestRatedCleaners", "leadCapture",
]

PageType = Literal[
    "service", "home", "city", "about", "contact", "blog", "suburb", "cluster", "landing",
]

PageStatus = Literal["draft", "published", "archived"]
PagePriority = Literal["high", "medium", "low"]
SectionIntent = Literal["default", "primary", "secondary", "accent"]
Alignment = Literal["left", "center", "right"]
ComponentSize = Literal["xs", "sm", "md", "lg", "xl", "2xl"]
ContainerSize = Literal["sm", "md", "lg", "xl", "full"]


class StructuredData(StrictModel):
    """Bloc JSON-LD (type schema.org + données)."""
    type: str
    data: Dict[str, Any]


# ── Fields ───────────────────────────────────────────────────────────────────

class TextField(StrictModel):
    id: NonEmptyStr
    type: Literal["text"] = "text"
    value: str


class RichTextField(StrictModel):
    id: NonEmptyStr
    type: Literal["richText"] = "richText"
    value: str
    format: Literal["markdown", "html"]


class ImageOptimization(StrictModel):
    quality: Optional[float] = None
    format: Optional[Literal["webp", "avif", "jpeg"]] = None
    sizes: Optional[List[str]] = None
    loading: Optional[Literal["eager", "lazy"]] = None


class ImageField(StrictModel):
    id: NonEmptyStr
    type: Literal["image"] = "image"
    src: UrlStr
    alt: str
    width: Optional[float] = None
    height: Optional[float] = None
    optimization: Optional[ImageOptimization] = None


class CTAField(StrictModel):
    id: NonEmptyStr
    type: Literal["cta"] = "cta"
    text: str
    href: UrlStr
    variant: Optional[Literal["primary", "secondary", "ghost"]] = None
    size: Optional[Literal["sm", "md", "lg", "icon"]] = None
    icon: Optional[str] = None
    target: Optional[Literal["_blank", "_self"]] = None


class FormInput(StrictModel):
    name: str
    label: str
    type: Literal["text", "email", "tel", "textarea"]
    required: bool
    placeholder: Optional[str] = None


class FormField(StrictModel):
    id: NonEmptyStr
    type: Literal["form"] = "form"
    fields: List[FormInput]


class ServiceField(StrictModel):
    id: NonEmptyStr
    type: Literal["service"] = "service"
    name: str
    description: str
    price: float
    duration: float
    image: Optional[UrlStr] = None


class AIPromptField(StrictModel):
    id: NonEmptyStr
    type: Literal["aiPrompt"] = "aiPrompt"
    template: str
    variables: Dict[str, str] = Field(default_factory=dict)
    constraints: List[str] = Field(default_factory=list)
    expected_format: str = "markdown"
    fallback_strategy: str = "retry"


# Union discriminée par `type` : le tag est lu avant toute tentative de matching
ContentField = Annotated[
    Union[
        TextField,
        RichTextField,
        ImageField,
        CTAField,
        FormField,
        ServiceField,
        AIPromptField,
    ],
    Field(discriminator="type"),
]

FIELD_TYPES = ("text", "richText", "image", "cta", "form", "service", "aiPrompt")


# ── Section ──────────────────────────────────────────────────────────────────

class SectionStyle(StrictModel):
    intent: Optional[SectionIntent] = None
    align: Optional[Alignment] = None
    padding: Optional[ComponentSize] = None
    container: Optional[ContainerSize] = None


class TrackingEvent(StrictModel):
    name: str
    data: Optional[Dict[str, Any]] = None


class SectionTracking(StrictModel):
    id: Optional[str] = None
    events: Optional[List[TrackingEvent]] = None


class SectionSEO(StrictModel):
    title: Optional[str] = None
    description: Optional[str] = None
    schema_: Optional[StructuredData] = Field(default=None, alias="schema")


class Section(StrictModel):
    """Section typée : mapping field-id → Field + métadonnées style/tracking/SEO."""
    id: str
    type: SectionType
    fields: Dict[str, ContentField]
    style: Optional[SectionStyle] = None
    tracking: Optional[SectionTracking] = None
    seo: Optional[SectionSEO] = None


class SharedSection(StrictModel):
    """Section réutilisable, référencée par id depuis les pages (jamais possédée)."""
    id: str
    section: "Section"


class ContentCluster(FrozenModel):
    cluster_id: str
    label: str
    description: Optional[str] = None
    section_refs: Tuple[str, ...] = ()


class RouteRule(FrozenModel):
    pattern: str
    type: Literal["static", "dynamic"]
    generate_from: Optional[Literal["locations", "services", "clusters", "aiGenerated"]] = None
    ai_instructions: Optional[str] = None


class Locale(StrictModel):
    lang: str = "en"
    region: Optional[str] = None
    alternate_links: Optional[Dict[str, str]] = None


# ── Page ─────────────────────────────────────────────────────────────────────

class PageRobots(StrictModel):
    index: Optional[bool] = None
    follow: Optional[bool] = None
    image_index: Optional[bool] = None


class PageMeta(StrictModel):
    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[UrlStr] = None
    schema_: Optional[StructuredData] = Field(default=None, alias="schema")
    robots: Optional[PageRobots] = None


class _PageBase(StrictModel):
    id: str
    type: PageType
    slug: str
    status: Optional[PageStatus] = None
    priority: Optional[PagePriority] = None
    meta: Optional[PageMeta] = None
    navigation: Optional[Any] = None
    locale: Optional[Locale] = None
    cluster_refs: List[str] = Field(default_factory=list)
    shared_section_refs: List[str] = Field(default_factory=list)
    version: PositiveInt = 1
    last_modified: datetime
    last_modified_by: str
    published_at: Optional[datetime] = None
    published_by: Optional[str] = None


class PageStructure(_PageBase):
    """Structure de page seule : les sections ne sont pas encore validées."""
    sections: List[Any]


class Page(_PageBase):
    """Page routable, versionnée, composée de sections ordonnées."""
    sections: List[Section]


# ── Templates ────────────────────────────────────────────────────────────────

class TemplateVariable(StrictModel):
    key: str
    label: str
    description: Optional[str] = None
    type: Literal["text", "number", "boolean", "select"]
    options: Optional[List[str]] = None
    default_value: Optional[Union[StrictBool, StrictInt, StrictFloat, StrictStr]] = None


class Template(StrictModel):
    """Squelette de section avec placeholders ${variable}."""
    id: str
    name: str
    description: Optional[str] = None
    section: Section
    variables: List[TemplateVariable] = Field(default_factory=list)
    ai_prompt: Optional[str] = None
    category: Optional[str] = None
    tags: List[str] = Field(default_factory=list)


# ── Auth ─────────────────────────────────────────────────────────────────────

class _SnakeModel(StrictModel):
    # les schémas auth gardent leurs noms snake_case sur le wire
    model_config = ConfigDict(alias_generator=None)


class CrudPermissions(_SnakeModel):
    create: bool
    read: bool
    update: bool
    delete: bool


class PagePermissions(CrudPermissions):
    publish: bool


class AnalyticsPermissions(_SnakeModel):
    view: bool
    export: bool


class Permissions(_SnakeModel):
    pages: PagePermissions
    sections: CrudPermissions
    analytics: AnalyticsPermissions


class UserProfile(_SnakeModel):
    id: str
    email: EmailStr
    role: Literal["admin", "editor", "viewer"]
    permissions: Permissions
    last_login: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class Session(_SnakeModel):
    user: UserProfile
    access_token: str
    refresh_token: Optional[str] = None
    expires_at: PositiveInt


SharedSection.model_rebuild()
