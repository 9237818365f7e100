"""
Tests d'intégration des endpoints adossés directement au client CMS
(authentification, médias) et des gestionnaires d'erreurs globaux.
"""

import json
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from backoffice.cms.client import CmsApiError
from backoffice.dependencies import get_cms_client, get_data_source
from backoffice.main import app


@pytest.fixture
def cms_api(client, cms_client):
    """API dont le client CMS parle au faux serveur Payload."""
    app.dependency_overrides[get_cms_client] = lambda: cms_client
    yield client


@pytest.fixture
def mocked_cms(client):
    """API dont le client CMS est un MagicMock piloté par le test."""
    cms = MagicMock()
    app.dependency_overrides[get_cms_client] = lambda: cms
    yield client, cms


# ============================================================
# Santé
# ============================================================

def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.json()["data_mode"] == "mock"


# ============================================================
# Authentification
# ============================================================

def test_login_renvoie_l_utilisateur(mocked_cms):
    api, cms = mocked_cms
    cms.login.return_value = {
        "token": "jwt-123",
        "user": {"id": "1", "email": "marie@exemple.fr", "firstName": "Marie", "lastName": "Dubois", "role": "admin"},
    }
    response = api.post("/api/auth/login", json={"email": "marie@exemple.fr", "password": "motdepasse"})
    assert response.status_code == 200
    assert response.json()["role"] == "ADMIN"
    cms.login.assert_called_once_with("marie@exemple.fr", "motdepasse")


def test_login_identifiants_invalides_401(mocked_cms):
    api, cms = mocked_cms
    cms.login.side_effect = CmsApiError("Email ou mot de passe incorrect", 401)
    response = api.post("/api/auth/login", json={"email": "marie@exemple.fr", "password": "faux"})
    assert response.status_code == 401
    assert response.json() == {"detail": "Email ou mot de passe incorrect", "field_errors": []}


def test_me_non_authentifie_401(mocked_cms):
    api, cms = mocked_cms
    cms.me.return_value = None
    assert api.get("/api/auth/me").status_code == 401


def test_logout_204(mocked_cms):
    api, cms = mocked_cms
    assert api.post("/api/auth/logout").status_code == 204
    cms.logout.assert_called_once()


# ============================================================
# Médias
# ============================================================

def test_liste_medias(cms_api, fake_cms):
    fake_cms.seed("media", {"filename": "logo.png", "url": "/media/logo.png", "mimeType": "image/png"})
    response = cms_api.get("/api/media")
    assert response.status_code == 200
    assert response.json()[0]["filename"] == "logo.png"
    assert response.json()[0]["mime_type"] == "image/png"


def test_media_introuvable_404(cms_api):
    assert cms_api.get("/api/media/999").status_code == 404


def test_upload_media(mocked_cms):
    api, cms = mocked_cms
    cms.upload.return_value = {"doc": {"id": "m1", "filename": "logo.png", "url": "/media/logo.png"}}
    response = api.post(
        "/api/media",
        files={"file": ("logo.png", b"\x89PNG", "image/png")},
        data={"alt": "Logo"},
    )
    assert response.status_code == 201
    assert response.json()["id"] == "m1"
    endpoint, files, data = cms.upload.call_args.args
    assert endpoint == "/api/media"
    assert files["file"][0] == "logo.png"
    assert files["file"][2] == "image/png"
    assert data == {"alt": "Logo"}


def test_suppression_media_erreur_cms_relayee(mocked_cms):
    api, cms = mocked_cms
    cms.delete.side_effect = CmsApiError("Interdit", 403)
    response = api.delete("/api/media/m1")
    assert response.status_code == 403
    assert response.json()["detail"] == "Interdit"


def test_upload_media_notification_en_en_tete(mocked_cms):
    api, cms = mocked_cms
    cms.upload.return_value = {"doc": {"id": "m1", "filename": "logo.png"}}
    response = api.post("/api/media", files={"file": ("logo.png", b"\x89PNG", "image/png")})
    notifications = json.loads(response.headers["X-Notifications"])
    assert [(n["level"], n["message"]) for n in notifications] == [("success", "Fichier uploadé avec succès")]


def test_suppression_media_erreur_dans_le_corps(mocked_cms):
    api, cms = mocked_cms
    cms.delete.side_effect = CmsApiError("Interdit", 403)
    body = api.delete("/api/media/m1").json()
    assert body["notifications"] == [{"level": "error", "message": "Interdit", "description": None}]


# ============================================================
# Gestionnaires d'erreurs
# ============================================================

def test_erreur_cms_detail_des_champs(client, source):
    error = CmsApiError("Validation échouée", 400, [{"field": "codeFormation", "message": "déjà utilisé"}])
    with patch.object(source, "create_programme", side_effect=error):
        response = client.post("/api/programmes", json={"code": "X", "title": "Titre", "duration_hours": 7})
    assert response.status_code == 400
    assert response.json()["field_errors"] == [{"field": "codeFormation", "message": "déjà utilisé"}]


def test_erreur_inattendue_message_generique(source):
    app.dependency_overrides[get_data_source] = lambda: source
    try:
        with patch.object(source, "get_stats", side_effect=RuntimeError("panne")):
            with TestClient(app, raise_server_exceptions=False) as c:
                response = c.get("/api/stats")
    finally:
        app.dependency_overrides.clear()
    assert response.status_code == 500
    assert response.json() == {"detail": "Une erreur est survenue"}
