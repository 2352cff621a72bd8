"""Tests du générateur SEO programmatique (ville × service)."""
from simplymaid.core import StaticLocationSource, extract_programmatic_seo_details

from conftest import make_config, make_context


class TestEnabled:
    def test_actif_par_defaut(self, ctx):
        assert ctx.seo.enabled

    def test_flag_desactive(self):
        ctx = make_context(make_config(flags={"enableProgrammaticSEO": False}))
        assert ctx.seo.apply() == []
        assert len(ctx.pages) == 0

    def test_advanced_desactive(self):
        ctx = make_context(make_config(pseo={"enabled": False}))
        assert not ctx.seo.enabled
        assert ctx.seo.apply() == []


class TestApply:
    def test_idempotent(self, ctx):
        assert ctx.seo.apply() == ["/sydney/house-cleaning"]
        assert ctx.seo.apply() == []
        assert ctx.pages.keys() == ["/sydney/house-cleaning"]

    def test_produit_cartesien_ordonne(self):
        ctx = make_context(cities=("sydney", "perth"), services=("house-cleaning", "end-of-lease"))
        assert ctx.seo.apply() == [
            "/sydney/house-cleaning", "/sydney/end-of-lease",
            "/perth/house-cleaning", "/perth/end-of-lease",
        ]

    def test_slug_existant_ignore(self, ctx):
        existing = ctx.builder.create_page("city", "/sydney/house-cleaning", modified_by="editor")
        ctx.pages.register_page(existing)
        assert ctx.seo.apply() == []
        assert ctx.pages.get("/sydney/house-cleaning").last_modified_by == "editor"

    def test_page_city_avec_contenu_ia(self, ctx):
        ctx.seo.apply()
        page = ctx.pages.get("/sydney/house-cleaning")
        assert page.type == "city"
        assert len(page.sections) == 1
        assert page.sections[0].fields["intro"].value == "AI generated content for sydney house-cleaning"

    def test_sans_ia(self):
        ctx = make_context(make_config(flags={"enableAIContent": False}))
        ctx.seo.apply()
        assert ctx.pages.get("/sydney/house-cleaning").sections == []

    def test_regle_statique_ignoree(self):
        ctx = make_context(make_config(pseo={"routeRules": [{"pattern": "/about", "type": "static"}]}))
        assert ctx.seo.apply() == []

    def test_sources_injectees(self):
        ctx = make_context(cities=(), services=("house-cleaning",))
        assert ctx.seo.apply() == []


class TestDetails:
    def test_instructions_de_la_premiere_regle(self):
        config = make_config(pseo={"routeRules": [
            {"pattern": "/a", "type": "static"},
            {"pattern": "/:city/:service", "type": "dynamic", "generateFrom": "locations", "aiInstructions": "first"},
            {"pattern": "/:city", "type": "dynamic", "generateFrom": "locations", "aiInstructions": "second"},
        ]})
        details = extract_programmatic_seo_details(config)
        assert details.ai_instructions == "first"
        assert len(details.route_rules) == 3
        assert details.localization is True


class TestLocations:
    def test_env(self, monkeypatch):
        monkeypatch.setenv("SIMPLYMAID_CITIES", "adelaide, hobart ,")
        monkeypatch.setenv("SIMPLYMAID_SERVICES", "")
        source = StaticLocationSource.from_env()
        assert list(source.cities()) == ["adelaide", "hobart"]
        assert list(source.services()) == ["house-cleaning", "end-of-lease"]
