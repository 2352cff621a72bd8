"""
Registres en mémoire — section types, pages (par slug), templates (par id).

Contrat commun : register (une seule fois par clé), get (NotFoundError),
has (ne lève jamais), get_all / list (copies : le registre ne peut pas être
corrompu par ce que reçoit l'appelant). Pas de mise à jour ni de suppression.
"""
import copy
import logging
import threading
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

from .errors import AlreadyRegisteredError, NotFoundError
from .schemas import Page, Template
from .validation import validate_safely

log = logging.getLogger(__name__)

V = TypeVar("V")


class Registry(Generic[V]):
    """Store clé → valeur, append-once, atomique sous verrou."""

    kind = "item"
    exists_code = "ALREADY_REGISTERED"
    missing_code = "NOT_FOUND"

    def __init__(self):
        self._items: Dict[str, V] = {}
        self._lock = threading.RLock()

    def register(self, key: str, value: V) -> None:
        with self._lock:
            if key in self._items:
                raise AlreadyRegisteredError(f"{self.kind} {key} already registered", key, self.exists_code)
            self._items[key] = value
        log.debug("%s enregistré : %s", self.kind, key)

    def get(self, key: str) -> V:
        with self._lock:
            if key not in self._items:
                raise NotFoundError(f"{self.kind} {key} not found", key, self.missing_code)
            return copy.deepcopy(self._items[key])

    def has(self, key: str) -> bool:
        with self._lock:
            return key in self._items

    def get_all(self) -> Dict[str, V]:
        with self._lock:
            return copy.deepcopy(self._items)

    def list(self) -> List[V]:
        with self._lock:
            return [copy.deepcopy(v) for v in self._items.values()]

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)


# ── Section types ────────────────────────────────────────────────────────────

class SectionRegistryItem(BaseModel):
    """Métadonnées d'un type de section (le composant est résolu côté rendu)."""
    model_config = ConfigDict(extra="forbid")

    component: str
    label: str
    icon: str
    description: str
    generate_content: Optional[Callable[[Dict[str, str]], str]] = None


class SectionRegistry(Registry[SectionRegistryItem]):
    kind = "Section type"
    exists_code = "SECTION_EXISTS"
    missing_code = "SECTION_NOT_FOUND"


# ── Pages ────────────────────────────────────────────────────────────────────

class PageRegistry(Registry[Page]):
    """Pages indexées par slug (unique, pas d'écrasement)."""
    kind = "Page slug"
    exists_code = "PAGE_EXISTS"
    missing_code = "PAGE_NOT_FOUND"

    def register_page(self, page: Page) -> None:
        self.register(page.slug, page)

    def find(self, slug: str) -> Optional[Page]:
        """Comme get, mais None si absent."""
        with self._lock:
            page = self._items.get(slug)
            return copy.deepcopy(page) if page is not None else None


# ── Templates ────────────────────────────────────────────────────────────────

class TemplateRegistry(Registry[Template]):
    kind = "Template"
    exists_code = "TEMPLATE_EXISTS"
    missing_code = "TEMPLATE_NOT_FOUND"

    def register_template(self, template: Any) -> Template:
        """Valide (INVALID_TEMPLATE) puis enregistre sous template.id."""
        tpl = validate_safely(Template, template, "INVALID_TEMPLATE")
        self.register(tpl.id, tpl)
        return tpl
