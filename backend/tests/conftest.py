"""
Configuration partagée pour tous les tests.

- client : API avec la dépendance get_data_source remplacée par une MockDataSource neuve
- fake_cms : faux serveur CMS en mémoire, branché à la place de requests.Session
- cms_source : CmsDataSource parlant au faux CMS
- database : base SQLite en mémoire pour le pilote d'accès direct
"""

import os
import re
import tempfile
from datetime import datetime
from urllib.parse import urlparse

# Avant l'import de l'application : le lifespan ne doit jamais viser un vrai CMS
os.environ.setdefault("USE_MOCK_DATA", "true")
os.environ.setdefault("CMS_TOKEN_FILE", os.path.join(tempfile.gettempdir(), "backoffice_test_cms_token"))

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from backoffice.cms.client import CmsClient  # noqa: E402
from backoffice.database import Database  # noqa: E402
from backoffice.datasources.cms import CmsDataSource  # noqa: E402
from backoffice.datasources.database import DatabaseDataSource  # noqa: E402
from backoffice.datasources.mock import MockDataSource  # noqa: E402
from backoffice.dependencies import get_data_source  # noqa: E402
from backoffice.main import app  # noqa: E402

_EQUALS = re.compile(r"^where\[([^\]]+)\]\[equals\]$")
_OR_CONTAINS = re.compile(r"^where\[or\]\[\d+\]\[([^\]]+)\]\[contains\]$")


class FakeResponse:
    """Sous-ensemble de requests.Response utilisé par CmsClient."""

    def __init__(self, status_code, body=None, reason="OK"):
        self.status_code = status_code
        self.reason = reason
        self.ok = 200 <= status_code < 300
        self._body = body
        self.content = b"" if body is None else b"{}"

    def json(self):
        if self._body is None:
            raise ValueError("Pas de corps JSON")
        return self._body


def _lookup(doc, path):
    value = doc
    for part in path.split("."):
        value = value.get(part) if isinstance(value, dict) else None
    return value


class FakeCmsSession:
    """
    Faux serveur Payload : collections en mémoire, réponses {"docs": [...]} / {"doc": ...},
    filtres where[champ][equals] et where[or][i][champ][contains].
    """

    def __init__(self):
        self.collections = {}
        self.calls = []
        self._next_id = 1

    def _docs(self, collection):
        return self.collections.setdefault(collection, {})

    def seed(self, collection, doc):
        doc = {"id": str(self._next_id), "createdAt": datetime.now().isoformat(), **doc}
        self._next_id += 1
        self._docs(collection)[doc["id"]] = doc
        return doc

    def request(self, method, url, headers=None, timeout=None, params=None, json=None, **kwargs):
        self.calls.append({"method": method, "url": url, "params": params, "json": json, "headers": headers})
        parts = urlparse(url).path.strip("/").split("/")
        collection = parts[1]
        doc_id = parts[2] if len(parts) > 2 else None
        docs = self._docs(collection)

        if method == "GET" and doc_id is None:
            items = list(docs.values())
            contains = []
            for key, value in (params or {}).items():
                match = _EQUALS.match(key)
                if match:
                    items = [d for d in items if str(_lookup(d, match.group(1))).lower() == str(value).lower()]
                match = _OR_CONTAINS.match(key)
                if match:
                    contains.append((match.group(1), str(value).lower()))
            if contains:
                items = [
                    d for d in items
                    if any(v in str(_lookup(d, f) or "").lower() for f, v in contains)
                ]
            return FakeResponse(200, {"docs": items, "totalDocs": len(items)})

        if method == "POST":
            doc = self.seed(collection, json or {})
            return FakeResponse(201, {"doc": doc, "message": "Document créé"})

        if doc_id not in docs:
            return FakeResponse(404, {"errors": [{"message": "Not Found"}]}, reason="Not Found")
        if method == "GET":
            return FakeResponse(200, docs[doc_id])
        if method == "PATCH":
            docs[doc_id].update(json or {})
            docs[doc_id]["updatedAt"] = datetime.now().isoformat()
            return FakeResponse(200, {"doc": docs[doc_id]})
        if method == "DELETE":
            return FakeResponse(200, docs.pop(doc_id))
        return FakeResponse(405, {"message": "Méthode non supportée"}, reason="Method Not Allowed")


@pytest.fixture
def source():
    """Source de données fictive, isolée pour chaque test."""
    return MockDataSource()


@pytest.fixture
def client(source):
    """Client HTTP de test branché sur la source fictive."""
    app.dependency_overrides[get_data_source] = lambda: source
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def fake_cms():
    return FakeCmsSession()


@pytest.fixture
def cms_client(fake_cms):
    return CmsClient("http://cms.test", session=fake_cms)


@pytest.fixture
def cms_source(cms_client):
    return CmsDataSource(cms_client)


@pytest.fixture
def database():
    """Base SQLite en mémoire partagée par toutes les sessions du test."""
    db = Database(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    db.create_all()
    yield db
    db.close()


@pytest.fixture
def db_source(database):
    return DatabaseDataSource(database)
