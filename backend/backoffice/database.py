"""
Connexion directe à la base de données (SQLAlchemy).

Le moteur n'est plus un singleton global créé au premier appel :
un objet Database est construit explicitement par le point d'entrée
(lifespan FastAPI) puis injecté dans la source de données qui l'utilise.
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

logger = logging.getLogger(__name__)

Base = declarative_base()


class Database:
    """Possède le moteur SQLAlchemy et la fabrique de sessions d'un processus."""

    def __init__(self, url: str, **engine_kwargs):
        self.url = url
        self.engine = create_engine(url, **engine_kwargs)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        self._closed = False

    def create_all(self) -> None:
        """Crée les tables manquantes (développement et tests uniquement)."""
        import backoffice.models  # noqa: F401 (enregistre les tables dans Base.metadata)

        Base.metadata.create_all(self.engine)

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Fournit une session et la ferme après usage."""
        if self._closed:
            raise RuntimeError("La connexion à la base de données a été fermée.")
        db = self.SessionLocal()
        try:
            yield db
        finally:
            db.close()

    def close(self) -> None:
        """Libère le pool de connexions (appelé à l'arrêt du processus)."""
        if not self._closed:
            self.engine.dispose()
            self._closed = True
            logger.info("Connexion base de données fermée.")
