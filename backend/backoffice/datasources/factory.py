"""
Construction de la source de données au démarrage, selon la configuration.

  USE_MOCK_DATA=true          → MockDataSource
  DATA_BACKEND=cms (défaut)   → CmsDataSource
  DATA_BACKEND=database       → DatabaseDataSource
"""

import logging
from dataclasses import dataclass
from typing import Optional

from backoffice.cms.client import CmsClient, FileTokenStore
from backoffice.config import Settings
from backoffice.database import Database
from backoffice.datasources.base import DataSource
from backoffice.datasources.cms import CmsDataSource
from backoffice.datasources.database import DatabaseDataSource
from backoffice.datasources.mock import MockDataSource

logger = logging.getLogger(__name__)


@dataclass
class Backend:
    """Ressources possédées par le processus, libérées à l'arrêt."""
    data_source: DataSource
    cms_client: Optional[CmsClient] = None
    database: Optional[Database] = None

    def close(self) -> None:
        if self.cms_client is not None:
            self.cms_client.close()
        if self.database is not None:
            self.database.close()


def build_cms_client(settings: Settings) -> CmsClient:
    return CmsClient(
        settings.CMS_URL,
        token_store=FileTokenStore(settings.CMS_TOKEN_FILE),
        timeout=settings.CMS_TIMEOUT_SECONDS,
    )


def build_backend(settings: Settings) -> Backend:
    """Lève une ValueError si le mode configuré est inconnu."""
    mode = settings.data_mode
    logger.info("Source de données : %s", mode)

    # Le client CMS sert aussi aux médias et à l'authentification, quel que soit le mode
    cms_client = build_cms_client(settings)

    if mode == "mock":
        return Backend(MockDataSource(), cms_client=cms_client)
    if mode == "cms":
        return Backend(CmsDataSource(cms_client), cms_client=cms_client)
    if mode == "database":
        database = Database(settings.DATABASE_URL, pool_pre_ping=True)
        return Backend(DatabaseDataSource(database), cms_client=cms_client, database=database)

    cms_client.close()
    raise ValueError(f"Mode de données inconnu : '{settings.DATA_BACKEND}' (attendu : cms ou database)")
