"""Tests SchemaError : configs / entrées de cache et migrations de schéma."""
from datetime import datetime, timedelta, timezone

import pytest

from simplymaid.core import (
    SCHEMA_VERSION,
    MigrationRegistry,
    SchemaError,
    is_expired,
    validate_cache_config,
    validate_cache_entry,
)


class TestCache:
    def test_config_valide(self):
        config = validate_cache_config({"maxSize": 100, "ttl": 60})
        assert config.max_size == 100

    @pytest.mark.parametrize("data", [{"maxSize": 0, "ttl": 60}, {"maxSize": 10, "ttl": -1}, {"ttl": 60}])
    def test_config_invalide(self, data):
        with pytest.raises(SchemaError) as exc:
            validate_cache_config(data)
        assert exc.value.message == "Invalid cache config"
        assert exc.value.version == SCHEMA_VERSION
        assert exc.value.details

    def test_entree(self):
        entry = validate_cache_entry({"key": "page:/", "value": {"a": 1}, "expires": "2030-01-01T00:00:00Z"})
        assert entry.value == {"a": 1}
        with pytest.raises(SchemaError) as exc:
            validate_cache_entry({"key": "page:/"})
        assert exc.value.to_dict()["error"] == "Invalid cache entry"

    def test_expiration(self):
        now = datetime(2025, 1, 1, tzinfo=timezone.utc)
        entry = validate_cache_entry({"key": "k", "expires": now - timedelta(seconds=1)})
        assert is_expired(entry, now)
        assert not is_expired(entry, now - timedelta(minutes=1))

    def test_expiration_date_naive(self):
        entry = validate_cache_entry({"key": "k", "expires": datetime(2000, 1, 1)})
        assert is_expired(entry)


class TestMigrations:
    def test_migration(self):
        reg = MigrationRegistry()
        reg.register("4.0.0", lambda data: {**data, "version": 2})
        assert reg.migrate("4.0.0", {"version": 1}) == {"version": 2}

    def test_sans_chemin(self):
        with pytest.raises(SchemaError) as exc:
            MigrationRegistry().migrate("1.0.0", {})
        assert exc.value.message == "No migration path found"
        assert exc.value.version == "1.0.0"
        assert exc.value.details == {"to": SCHEMA_VERSION}

    def test_derniere_migration_gagne(self):
        reg = MigrationRegistry()
        reg.register("4.0.0", lambda data: "a")
        reg.register("4.0.0", lambda data: "b")
        assert reg.migrate("4.0.0", None) == "b"
