"""Fixtures et helpers partagés."""
import copy

import pytest

from simplymaid.core import (
    AppContext,
    StaticLocationSource,
    StubContentGenerator,
    load_app_config,
)
from simplymaid.core.config import DEFAULT_CONFIG_DATA


# ── Helpers ───────────────────────────────────────────────────────────────

def text_field(fid="title", value="Hello"):
    return {"id": fid, "type": "text", "value": value}


def make_section(sid="s1", stype="hero", fields=None):
    return {"id": sid, "type": stype, "fields": fields if fields is not None else {"title": text_field()}}


def make_page(slug="/sydney/house-cleaning", sections=None, shared_refs=None, **extra):
    page = {
        "id": "page-1",
        "type": "city",
        "slug": slug,
        "sections": sections if sections is not None else [],
        "clusterRefs": [],
        "sharedSectionRefs": shared_refs or [],
        "version": 1,
        "lastModified": "2024-01-01T00:00:00Z",
        "lastModifiedBy": "tester",
    }
    page.update(extra)
    return page


def make_config_data(shared=None, flags=None, pseo=None, ai=None):
    """DEFAULT_CONFIG_DATA avec surcharges (copie profonde)."""
    data = copy.deepcopy(DEFAULT_CONFIG_DATA)
    data["featureFlags"].update(flags or {})
    prog = data["advancedConfig"]["seo"]["programmaticSEO"]
    if shared is not None:
        prog["sharedSections"] = shared
    prog.update(pseo or {})
    data["advancedConfig"]["aiContent"].update(ai or {})
    return data


def make_config(**kwargs):
    return load_app_config(make_config_data(**kwargs))


def make_context(config=None, cities=("sydney",), services=("house-cleaning",)):
    """Contexte isolé : générateur IA stub, villes/services fixes."""
    ctx = AppContext(config=config or make_config(), locations=StaticLocationSource(cities, services))
    ctx.ai.generator = StubContentGenerator(ctx.builder)
    return ctx


# ── Fixtures ──────────────────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def no_llm_keys(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    monkeypatch.delenv("SIMPLYMAID_CONFIG", raising=False)


@pytest.fixture
def ctx():
    return make_context()
