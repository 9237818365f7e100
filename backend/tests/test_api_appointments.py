"""
Tests d'intégration des endpoints rendez-vous et du formulaire de prise de rendez-vous.
"""

from datetime import date, timedelta
from unittest.mock import patch

from fastapi.testclient import TestClient

from backoffice.dependencies import get_data_source
from backoffice.main import app

CLIENT = {"last_name": "Bernard", "first_name": "Claire", "email": "claire@exemple.fr"}
B2B = {
    "last_name": "Bernard",
    "first_name": "Claire",
    "email": "claire@exemple.fr",
    "structure_name": "Atelier Bernard",
    "siret": "12345678901234",
}


def make_appointment(**overrides):
    data = {"client": CLIENT, "type": "positionnement", "date": "2025-03-03", "time": "10:00"}
    data.update(overrides)
    return data


def test_liste_rendez_vous(client):
    assert len(client.get("/api/rendez-vous").json()) == 3


def test_liste_par_statut(client):
    response = client.get("/api/rendez-vous", params={"status": "enAttente"})
    assert [a["id"] for a in response.json()] == ["2"]


def test_recherche_par_client(client):
    response = client.get("/api/rendez-vous", params={"q": "boulangerie"})
    assert response.json() == []  # l'entreprise ne fait pas partie des champs de recherche
    assert [a["id"] for a in client.get("/api/rendez-vous", params={"q": "marie.dupont"}).json()] == ["1"]


def test_prochains_rendez_vous(client):
    tomorrow = (date.today() + timedelta(days=1)).isoformat()
    created = client.post("/api/rendez-vous", json=make_appointment(date=tomorrow)).json()
    response = client.get("/api/rendez-vous/upcoming")
    assert [a["id"] for a in response.json()] == [created["id"]]


def test_creation_visio_sans_adresse(client):
    response = client.post("/api/rendez-vous", json=make_appointment(
        location="visio", address="12 rue des Lilas", video_link="https://visio.exemple.fr/x",
    ))
    assert response.status_code == 201
    assert response.json()["address"] is None
    assert response.json()["status"] == "enAttente"


def test_heure_invalide_422(client):
    assert client.post("/api/rendez-vous", json=make_appointment(time="9h")).status_code == 422


def test_confirmation_et_annulation(client):
    assert client.patch("/api/rendez-vous/2/confirm").json()["status"] == "confirme"
    assert client.patch("/api/rendez-vous/2/cancel").json()["status"] == "annule"


def test_confirmation_introuvable_404(client):
    assert client.patch("/api/rendez-vous/999/confirm").status_code == 404


# ============================================================
# Prise de rendez-vous
# ============================================================

def test_booking_positionnement_cree_l_apprenant(client):
    response = client.post("/api/rendez-vous/booking", json={"appointment": make_appointment(), "learner": B2B})
    assert response.status_code == 201
    body = response.json()
    assert body["learner"]["structure"]["siret"] == "12345678901234"
    assert body["learner_error"] is None
    assert body["notifications"][-1]["message"] == "Rendez-vous et fiche apprenant créés avec succès!"


def test_booking_information_ignore_l_apprenant(client):
    response = client.post(
        "/api/rendez-vous/booking",
        json={"appointment": make_appointment(type="information"), "learner": B2B},
    )
    assert response.json()["learner"] is None
    assert client.get("/api/apprenants/email/claire@exemple.fr").status_code == 404


def test_booking_echec_apprenant_partiel(client, source):
    with patch.object(source, "create_learner", side_effect=ValueError("email déjà utilisé")):
        response = client.post("/api/rendez-vous/booking", json={"appointment": make_appointment(), "learner": B2B})
    assert response.status_code == 201
    body = response.json()
    assert body["learner"] is None
    assert body["learner_error"] == "email déjà utilisé"
    assert client.get(f"/api/rendez-vous/{body['appointment']['id']}").status_code == 200


def test_booking_siret_invalide_422(client):
    response = client.post(
        "/api/rendez-vous/booking",
        json={"appointment": make_appointment(), "learner": {**B2B, "siret": "123"}},
    )
    assert response.status_code == 422


def test_booking_echec_rendez_vous_500(source):
    app.dependency_overrides[get_data_source] = lambda: source
    try:
        with patch.object(source, "create_appointment", side_effect=RuntimeError("CMS indisponible")):
            with TestClient(app, raise_server_exceptions=False) as c:
                response = c.post("/api/rendez-vous/booking", json={"appointment": make_appointment()})
    finally:
        app.dependency_overrides.clear()
    assert response.status_code == 500
    body = response.json()
    assert body["detail"] == "Une erreur est survenue"
    assert body["notifications"][-1]["level"] == "error"


def test_modification_lieu_visio_efface_l_adresse(client):
    created = client.post("/api/rendez-vous", json=make_appointment(address="12 rue des Lilas")).json()
    response = client.patch(
        f"/api/rendez-vous/{created['id']}",
        json={"location": "visio", "video_link": "https://visio.exemple.fr/x"},
    )
    assert response.status_code == 200
    assert response.json()["address"] is None
    assert response.json()["video_link"] == "https://visio.exemple.fr/x"
