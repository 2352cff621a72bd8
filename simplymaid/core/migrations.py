"""Migrations de schéma — une fonction par version source."""
import logging
from typing import Any, Callable, Dict

from .config import SCHEMA_VERSION
from .errors import SchemaError

log = logging.getLogger(__name__)

MigrationFn = Callable[[Any], Any]


class MigrationRegistry:
    def __init__(self):
        self.migrations: Dict[str, MigrationFn] = {}

    def register(self, from_version: str, fn: MigrationFn) -> None:
        # la dernière migration enregistrée pour une version l'emporte
        if from_version in self.migrations:
            log.warning("Migration %s remplacée", from_version)
        self.migrations[from_version] = fn

    def migrate(self, from_version: str, data: Any) -> Any:
        migration = self.migrations.get(from_version)
        if migration is None:
            raise SchemaError("No migration path found", from_version, {"to": SCHEMA_VERSION})
        return migration(data)
