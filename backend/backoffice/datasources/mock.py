"""
Source de données en mémoire (mode mock).

Chaque instance travaille sur sa propre copie des fixtures ; un verrou protège
les écritures, l'application pouvant servir plusieurs requêtes en parallèle.
"""

import copy
import logging
import threading
import uuid
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Type

from pydantic import BaseModel

from backoffice.datasources.base import DataSource, NotFoundError
from backoffice.fixtures import mock_data
from backoffice.schemas.appointment import Appointment
from backoffice.schemas.article import Article
from backoffice.schemas.contact import Contact
from backoffice.schemas.custom_programme import CustomProgramme
from backoffice.schemas.learner import Learner
from backoffice.schemas.programme import Programme
from backoffice.schemas.user import User

logger = logging.getLogger(__name__)


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _lookup(record: Dict[str, Any], path: str) -> Any:
    """Valeur d'un champ, éventuellement imbriqué ("client.email")."""
    value: Any = record
    for part in path.split("."):
        value = value.get(part) if isinstance(value, dict) else None
    return value


class MockRepository:
    def __init__(
        self,
        entity: Type[BaseModel],
        records: List[Dict[str, Any]],
        search_fields: Sequence[str],
        label: str,
        lock: threading.Lock,
        hidden_fields: Sequence[str] = (),
    ):
        self.entity = entity
        self.search_fields = search_fields
        self.label = label
        self.hidden_fields = hidden_fields  # ex. mot de passe, jamais conservé en mémoire
        self._records = copy.deepcopy(records)
        self._lock = lock

    def _to_entity(self, record: Dict[str, Any]) -> Any:
        return self.entity.model_validate(copy.deepcopy(record))

    def _clean(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return {k: _plain(v) for k, v in data.items() if k not in self.hidden_fields}

    def _find(self, entity_id: str) -> Optional[Dict[str, Any]]:
        return next((r for r in self._records if r["id"] == entity_id), None)

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Any]:
        with self._lock:
            records = [
                r for r in self._records
                if all(_plain(r.get(k)) == _plain(v) for k, v in (filters or {}).items())
            ]
            return [self._to_entity(r) for r in records]

    def get(self, entity_id: str) -> Optional[Any]:
        with self._lock:
            record = self._find(entity_id)
            return self._to_entity(record) if record else None

    def create(self, data: Dict[str, Any]) -> Any:
        now = datetime.now()
        record = {**self._clean(data), "id": str(uuid.uuid4()), "created_at": now, "updated_at": now}
        with self._lock:
            self._records.append(record)
            logger.debug("Mock : %s créé (%s)", self.label, record["id"])
            return self._to_entity(record)

    def update(self, entity_id: str, data: Dict[str, Any]) -> Any:
        with self._lock:
            record = self._find(entity_id)
            if record is None:
                raise NotFoundError(self.label, entity_id)
            record.update(self._clean(data))
            record["updated_at"] = datetime.now()
            return self._to_entity(record)

    def delete(self, entity_id: str) -> None:
        with self._lock:
            record = self._find(entity_id)
            if record is None:
                raise NotFoundError(self.label, entity_id)
            self._records.remove(record)

    def search(self, query: str) -> List[Any]:
        needle = query.lower()
        with self._lock:
            return [
                self._to_entity(r) for r in self._records
                if any(needle in str(_lookup(r, f) or "").lower() for f in self.search_fields)
            ]


class MockDataSource(DataSource):
    mode = "mock"

    def __init__(self):
        lock = threading.Lock()
        super().__init__(
            programmes=MockRepository(
                Programme, mock_data.PROGRAMMES, ("title", "description", "code"), "Programme", lock
            ),
            learners=MockRepository(
                Learner, mock_data.LEARNERS, ("last_name", "first_name", "email"), "Apprenant", lock
            ),
            appointments=MockRepository(
                Appointment,
                mock_data.APPOINTMENTS,
                ("client.last_name", "client.first_name", "client.email", "programme_title"),
                "Rendez-vous",
                lock,
            ),
            users=MockRepository(
                User, mock_data.USERS, ("email", "first_name", "last_name"), "Utilisateur", lock,
                hidden_fields=("password",),
            ),
            articles=MockRepository(
                Article, mock_data.ARTICLES, ("title", "summary", "content"), "Article", lock
            ),
            custom_programmes=MockRepository(
                CustomProgramme,
                mock_data.CUSTOM_PROGRAMMES,
                ("title", "code", "description"),
                "Formation personnalisée",
                lock,
            ),
            contacts=MockRepository(
                Contact, mock_data.CONTACTS, ("name", "email", "subject"), "Contact", lock
            ),
        )
