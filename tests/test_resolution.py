"""
Tests de la résolution des shared sections
  resolve(page)             → nouvelle page (sections + shared en ordre de ref)
  resolve_with_report(page) → ResolvedPage(page, report) ; refs ignorées dans report.skipped
"""
import pytest

from simplymaid.core import (
    SharedSection,
    SharedSectionResolver,
    ValidationError,
    validate_page,
)

from conftest import make_config, make_page, make_section

PROMO = {"id": "promo", "section": make_section("promo-s", "text")}
FAQ = {"id": "faq", "section": make_section("faq-s", "faq")}


def _resolver(shared=(PROMO, FAQ), **flags):
    return SharedSectionResolver(make_config(shared=list(shared), flags=flags))


def _page(refs, sections=None):
    return validate_page(make_page(sections=sections or [make_section("own")], shared_refs=refs))


class TestResolve:
    def test_ordre_des_refs(self):
        page = _resolver().resolve(_page(["faq", "promo"]))
        assert [s.id for s in page.sections] == ["own", "faq-s", "promo-s"]

    def test_page_d_entree_intacte(self):
        page = _page(["promo"])
        resolved = _resolver().resolve(page)
        resolved.sections[0].fields.clear()
        resolved.shared_section_refs.append("faq")
        assert [s.id for s in page.sections] == ["own"]
        assert "title" in page.sections[0].fields
        assert page.shared_section_refs == ["promo"]

    def test_no_op_retourne_une_copie(self):
        page = _page(["promo"])
        resolved = _resolver(enableSharedSections=False).resolve(page)
        resolved.sections[0].fields.clear()
        assert "title" in page.sections[0].fields

    def test_deterministe(self):
        resolver, page = _resolver(), _page(["promo", "faq"])
        first, second = resolver.resolve(page), resolver.resolve(page)
        assert first.sections == second.sections

    def test_ref_dupliquee_une_seule_fois(self):
        result = _resolver().resolve_with_report(_page(["promo", "promo"]))
        assert [s.id for s in result.page.sections] == ["own", "promo-s"]
        assert result.report.resolved == ["promo"]
        assert [(s.ref_id, s.reason) for s in result.report.skipped] == [("promo", "duplicate")]

    def test_ref_pendante_toleree(self):
        page = _page(["does-not-exist"])
        result = _resolver().resolve_with_report(page)
        assert result.page.sections == page.sections
        assert result.report.degraded
        assert result.report.skipped[0].reason == "not_found"

    def test_section_corrompue_ignoree(self):
        broken = SharedSection.model_construct(id="broken", section={"id": "x", "type": "nope", "fields": {}})
        resolver = SharedSectionResolver(make_config(), shared_sections=[broken, SharedSection.model_validate(PROMO)])
        result = resolver.resolve_with_report(_page(["broken", "promo"]))
        assert [s.id for s in result.page.sections] == ["own", "promo-s"]
        assert [(s.ref_id, s.reason) for s in result.report.skipped] == [("broken", "invalid_section")]

    def test_copie_independante_du_pool(self):
        resolver = _resolver()
        page = resolver.resolve(_page(["promo"]))
        page.sections[-1].fields.clear()
        again = resolver.resolve(_page(["promo"]))
        assert "title" in again.sections[-1].fields

    def test_rapport_vide_sans_degradation(self):
        result = _resolver().resolve_with_report(_page(["promo"]))
        assert not result.report.degraded
        assert result.report.resolved == ["promo"]


class TestNoOp:
    def test_flag_desactive(self):
        page = _page(["promo"])
        assert _resolver(enableSharedSections=False).resolve(page) == page

    def test_pool_vide(self):
        page = _page(["promo"])
        assert _resolver(shared=()).resolve(page) == page


class TestErreurs:
    def test_page_absente(self):
        with pytest.raises(ValidationError) as exc:
            _resolver().resolve(None)
        assert exc.value.code == "PAGE_REQUIRED"

    def test_refs_non_liste(self):
        page = _page([]).model_copy(update={"shared_section_refs": "promo"})
        with pytest.raises(ValidationError) as exc:
            _resolver().resolve(page)
        assert exc.value.code == "INVALID_SHARED_REFS"

    def test_ref_non_chaine(self):
        page = _page([]).model_copy(update={"shared_section_refs": ["promo", 42]})
        with pytest.raises(ValidationError) as exc:
            _resolver().resolve(page)
        assert exc.value.code == "INVALID_REF_ID"
