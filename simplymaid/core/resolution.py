"""
Résolution des shared sections.

Le pool de shared sections est un état global externe : une référence
pendante, une section corrompue ou un doublon sont ignorés (log + rapport)
au lieu de faire tomber toute la page. Seules les refs non-liste / non-str
lèvent une ValidationError.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, List, Literal, Optional, Sequence, Union

from pydantic import BaseModel

from ..base import thaw
from .config import AppConfig, SharedSectionConfig
from .errors import ValidationError
from .schemas import Page, Section, SharedSection
from .validation import safe_parse

log = logging.getLogger(__name__)

PoolEntry = Union[SharedSection, SharedSectionConfig]

SkipReason = Literal["not_found", "invalid_section", "duplicate"]


@dataclass
class SkippedRef:
    ref_id: str
    reason: SkipReason
    detail: str = ""


@dataclass
class ResolutionReport:
    resolved: List[str] = field(default_factory=list)
    skipped: List[SkippedRef] = field(default_factory=list)

    @property
    def degraded(self) -> bool:
        return bool(self.skipped)


@dataclass
class ResolvedPage:
    page: Page
    report: ResolutionReport


class SharedSectionResolver:
    """
    Ajoute à une page les shared sections qu'elle référence.

    Args:
        config: configuration globale (flag enableSharedSections + pool)
        shared_sections: pool explicite, remplace celui de la config
    """

    def __init__(self, config: AppConfig, shared_sections: Optional[Sequence[PoolEntry]] = None):
        self.config = config
        self._pool = shared_sections

    @property
    def pool(self) -> Sequence[PoolEntry]:
        return self.config.shared_sections if self._pool is None else self._pool

    @property
    def enabled(self) -> bool:
        return self.config.feature_flags.enable_shared_sections

    def resolve(self, page: Page) -> Page:
        return self.resolve_with_report(page).page

    def resolve_with_report(self, page: Page) -> ResolvedPage:
        """
        Retourne une nouvelle page (sections d'origine + shared sections en ordre
        de référence) et le rapport des refs ignorées. La page retournée est une
        copie profonde : la modifier ne touche jamais la page d'entrée.
        """
        if page is None:
            raise ValidationError("Page is required for resolving shared sections", "PAGE_REQUIRED")

        report = ResolutionReport()
        resolved = page.model_copy(deep=True)
        pool = self.pool
        if not self.enabled or not pool:
            return ResolvedPage(resolved, report)

        refs = resolved.shared_section_refs
        if not isinstance(refs, (list, tuple)):
            raise ValidationError("sharedSectionRefs must be an array", "INVALID_SHARED_REFS")

        by_id = {}
        for shared in pool:
            by_id.setdefault(shared.id, shared)

        sections = list(resolved.sections)
        for ref_id in refs:
            if not isinstance(ref_id, str):
                raise ValidationError(f"Invalid shared section reference: {ref_id!r}", "INVALID_REF_ID")

            if ref_id in report.resolved:
                log.warning("[resolve_shared_sections] Duplicate shared section reference: %s", ref_id)
                report.skipped.append(SkippedRef(ref_id, "duplicate"))
                continue

            shared = by_id.get(ref_id)
            if shared is None:
                log.warning("[resolve_shared_sections] Shared section not found: %s", ref_id)
                report.skipped.append(SkippedRef(ref_id, "not_found"))
                continue

            section = _checked_copy(shared.section)
            if section is None:
                log.error("[resolve_shared_sections] Invalid section structure for %s", ref_id)
                report.skipped.append(SkippedRef(ref_id, "invalid_section", "section payload fails Section schema"))
                continue

            report.resolved.append(ref_id)
            sections.append(section)

        return ResolvedPage(resolved.model_copy(update={"sections": sections}), report)


def _checked_copy(payload: Any) -> Optional[Section]:
    """Revalide le payload (le pool peut contenir des entrées obsolètes) ; None si invalide."""
    if isinstance(payload, BaseModel):
        payload = payload.model_dump(by_alias=True)
    else:
        payload = thaw(payload)
    result = safe_parse(Section, payload)
    return result.data if result.success else None
