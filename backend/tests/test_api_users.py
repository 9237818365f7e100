"""
Tests d'intégration des endpoints utilisateurs.
"""

NEW_USER = {"email": "paul.durand@exemple.fr", "password": "motdepasse", "first_name": "Paul", "last_name": "Durand"}


def test_liste_utilisateurs_par_role(client):
    response = client.get("/api/users", params={"role": "FORMATEUR"})
    assert [u["id"] for u in response.json()] == ["2"]


def test_liste_utilisateurs_par_statut(client):
    assert [u["id"] for u in client.get("/api/users", params={"status": "pending"}).json()] == ["3"]


def test_utilisateur_courant(client):
    body = client.get("/api/users/current").json()
    assert body["id"] == "1"
    assert body["display_name"] == "Marie Dubois"


def test_permissions_utilisateur(client):
    permissions = client.get("/api/users/2/permissions").json()
    assert permissions == ["apprenants:read", "programmes:read"]


def test_creation_utilisateur_sans_mot_de_passe_en_reponse(client):
    response = client.post("/api/users", json=NEW_USER)
    assert response.status_code == 201
    body = response.json()
    assert "password" not in body
    assert body["role"] == "BENEFICIAIRE"
    assert body["permissions"] == ["programmes:read"]


def test_creation_utilisateur_email_existant_409(client):
    response = client.post("/api/users", json={**NEW_USER, "email": "marie.dubois@gestionmax.fr"})
    assert response.status_code == 409


def test_creation_utilisateur_mot_de_passe_court_422(client):
    assert client.post("/api/users", json={**NEW_USER, "password": "court"}).status_code == 422


def test_bascule_statut(client):
    assert client.patch("/api/users/1/toggle-status").json()["status"] == "inactive"
    assert client.patch("/api/users/3/toggle-status").json()["status"] == "active"


def test_bascule_statut_introuvable_404(client):
    assert client.patch("/api/users/999/toggle-status").status_code == 404


def test_changement_mot_de_passe_204(client):
    assert client.put("/api/users/2/password", json={"new_password": "nouveaumotdepasse"}).status_code == 204


def test_changement_mot_de_passe_introuvable_404(client):
    assert client.put("/api/users/999/password", json={"new_password": "nouveaumotdepasse"}).status_code == 404


def test_utilisateur_par_email(client):
    assert client.get("/api/users/email/pierre.martin@gestionmax.fr").json()["id"] == "2"


def test_suppression_utilisateur(client):
    assert client.delete("/api/users/3").status_code == 204
    assert client.get("/api/users/3").status_code == 404
