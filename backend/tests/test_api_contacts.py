"""
Tests d'intégration des endpoints messages de contact (source fictive).
"""

import json

CONTACT = {
    "name": "Julie Renard",
    "email": "julie.renard@exemple.fr",
    "type": "question",
    "subject": "Horaires des sessions",
    "message": "Quels sont les horaires des prochaines sessions ?",
}


def test_liste_contacts(client):
    response = client.get("/api/contacts")
    assert response.status_code == 200
    assert len(response.json()) == 3


def test_liste_contacts_filtres(client):
    assert [c["id"] for c in client.get("/api/contacts", params={"status": "enCours"}).json()] == ["2"]
    assert [c["id"] for c in client.get("/api/contacts", params={"type": "devis"}).json()] == ["3"]
    assert [c["id"] for c in client.get("/api/contacts", params={"priority": "haute"}).json()] == ["2"]


def test_recherche_contacts(client):
    assert [c["id"] for c in client.get("/api/contacts", params={"q": "atelier-moreau"}).json()] == ["3"]


def test_contact_introuvable_404(client):
    assert client.get("/api/contacts/999").status_code == 404


def test_creation_contact_201(client):
    response = client.post("/api/contacts", json={**CONTACT, "message": "Problème de connexion"})
    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "nouveau"
    assert body["priority"] == "haute"
    notifications = json.loads(response.headers["X-Notifications"])
    assert notifications[0]["message"] == "Contact créé avec succès"


def test_creation_contact_email_invalide_422(client):
    assert client.post("/api/contacts", json={**CONTACT, "email": "pas-un-email"}).status_code == 422


def test_creation_contact_champ_manquant_422(client):
    payload = {k: v for k, v in CONTACT.items() if k != "subject"}
    assert client.post("/api/contacts", json=payload).status_code == 422


def test_traitement_puis_fermeture(client):
    processed = client.patch("/api/contacts/1/process", json={"response": "Rappel prévu lundi"}).json()
    assert processed["status"] == "traite"
    assert processed["response"] == "Rappel prévu lundi"
    assert processed["responded_at"] is not None
    assert client.patch("/api/contacts/1/close").json()["status"] == "ferme"


def test_modification_contact(client):
    response = client.patch("/api/contacts/2", json={"priority": "urgente"})
    assert response.status_code == 200
    assert response.json()["priority"] == "urgente"


def test_traitement_contact_introuvable_404(client):
    response = client.patch("/api/contacts/999/process", json={})
    assert response.status_code == 404
    assert response.json()["notifications"][0]["level"] == "error"


def test_suppression_contact_204(client):
    assert client.delete("/api/contacts/3").status_code == 204
    assert client.get("/api/contacts/3").status_code == 404
