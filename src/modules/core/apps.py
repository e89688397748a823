import atexit

import structlog
from django.apps import AppConfig
from pymongo.errors import PyMongoError

logger = structlog.get_logger(__name__)


class CoreConfig(AppConfig):
    name = "modules.core"
    label = "core"

    def ready(self) -> None:
        from modules.core import schema  # noqa: F401  (registers OpenAPI extensions)
        from modules.core.store import DocumentStore

        self.store = DocumentStore.from_settings()
        atexit.register(self.store.close)
        try:
            self.store.ensure_indexes()
        except PyMongoError:
            # Keep serving; /health reports the store as down.
            logger.exception("store.ensure_indexes_failed")
