"""Tests de l'API HTTP (TestClient, contexte isolé par test)."""
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from simplymaid.api import create_app

from conftest import make_config, make_context, make_page, make_section, text_field


@pytest.fixture
def client():
    ctx = make_context(make_config(shared=[{"id": "promo", "section": make_section("promo-s", "text")}]))
    with TestClient(create_app(ctx)) as c:
        yield c


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


class TestValidateEndpoint:
    def test_page_valide_resolue(self, client):
        r = client.post("/api/pages/validate", json={"page": make_page(sections=[make_section()], shared_refs=["promo"])})
        assert r.status_code == 200
        page = r.json()["page"]
        assert [s["id"] for s in page["sections"]] == ["s1", "promo-s"]
        assert page["sharedSectionRefs"] == ["promo"]

    def test_page_absente(self, client):
        r = client.post("/api/pages/validate", json={})
        assert r.status_code == 400
        assert r.json()["code"] == "PAGE_REQUIRED"

    def test_erreur_de_validation(self, client):
        r = client.post("/api/pages/validate", json={"page": make_page(sections=[make_section(stype="nope")])})
        assert r.status_code == 400
        body = r.json()
        assert body["code"] == "INVALID_SECTION_0"
        assert body["error"] == "Validation failed"
        assert body["details"][0]["path"] == "type"

    def test_erreur_interne_sans_fuite(self, client):
        with patch("simplymaid.core.context.validate_page", side_effect=RuntimeError("db password=secret")):
            r = client.post("/api/pages/validate", json={"page": make_page()})
        assert r.status_code == 500
        assert r.json() == {"error": "Internal validation error", "code": "INTERNAL_ERROR"}


class TestPagesEndpoints:
    def test_creation_puis_lecture(self, client):
        r = client.post("/api/pages", json={"page": make_page()})
        assert r.status_code == 201
        assert client.get("/api/pages/sydney/house-cleaning").json()["page"]["slug"] == "/sydney/house-cleaning"
        assert len(client.get("/api/pages").json()["pages"]) == 1

    def test_slug_duplique(self, client):
        client.post("/api/pages", json={"page": make_page()})
        r = client.post("/api/pages", json={"page": make_page(id="page-2")})
        assert r.status_code == 409
        assert r.json()["code"] == "PAGE_EXISTS"

    def test_creation_invalide(self, client):
        r = client.post("/api/pages", json={"page": {"slug": "/x"}})
        assert r.status_code == 400
        assert r.json()["code"] == "INVALID_PAGE_STRUCTURE"

    def test_page_absente(self, client):
        r = client.get("/api/pages/nowhere")
        assert r.status_code == 404
        assert r.json()["code"] == "PAGE_NOT_FOUND"


def test_catalogue(client):
    sections = client.get("/api/sections/catalog").json()["sections"]
    assert len(sections) == 15
    assert {"type": "hero", "component": "HeroSection"}.items() <= sections[0].items()


class TestTemplatesEndpoints:
    def _template(self):
        return {
            "id": "t1",
            "name": "Hero ville",
            "section": make_section("tpl-s", "hero", {"title": text_field("title", "Hello ${city}")}),
            "variables": [{"key": "city", "label": "Ville", "type": "text"}],
        }

    def test_cycle_complet(self, client):
        assert client.post("/api/templates", json=self._template()).status_code == 201
        assert client.post("/api/templates", json=self._template()).status_code == 409
        assert [t["id"] for t in client.get("/api/templates").json()["templates"]] == ["t1"]
        r = client.post("/api/templates/t1/instantiate", json={"variables": {"city": "Sydney"}})
        assert r.status_code == 200
        assert r.json()["section"]["fields"]["title"]["value"] == "Hello Sydney"

    def test_template_inconnu(self, client):
        r = client.post("/api/templates/nope/instantiate", json={"variables": {}})
        assert r.status_code == 404
        assert r.json()["code"] == "TEMPLATE_NOT_FOUND"

    def test_template_invalide(self, client):
        r = client.post("/api/templates", json={"id": "t1"})
        assert r.status_code == 400
        assert r.json()["code"] == "INVALID_TEMPLATE"


def test_seo_programmatique(client):
    assert client.post("/api/seo/programmatic").json()["created"] == ["/sydney/house-cleaning"]
    assert client.post("/api/seo/programmatic").json()["created"] == []


class TestFactory:
    def test_import_sans_effet_de_bord(self):
        import importlib

        import simplymaid.api.main as main

        with patch("simplymaid.core.context.AppContext.from_env") as from_env:
            importlib.reload(main)
        from_env.assert_not_called()
        assert not hasattr(main, "app")

    def test_contexte_par_defaut_depuis_env(self):
        ctx = make_context()
        with patch("simplymaid.core.context.AppContext.from_env", return_value=ctx) as from_env:
            app = create_app()
        from_env.assert_called_once_with()
        assert app.state.context is ctx
