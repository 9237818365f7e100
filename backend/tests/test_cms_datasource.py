"""
Tests de la source de données CMS contre un faux serveur Payload en mémoire
(voir FakeCmsSession dans conftest.py) : paramètres envoyés, traduction des
documents et comportement identique à la source fictive.
"""

from datetime import date

import pytest

from backoffice.cms.client import CmsApiError
from backoffice.datasources.mock import MockDataSource
from backoffice.schemas.appointment import AppointmentCreate, AppointmentUpdate
from backoffice.schemas.article import ArticleCreate, ArticleUpdate
from backoffice.schemas.contact import ContactCreate, ContactUpdate
from backoffice.schemas.enums import (
    AppointmentStatus,
    ContactPriority,
    ContactStatus,
    ContactType,
    Level,
    LocationMode,
    ProgrammeStatus,
    UserRole,
    UserStatus,
)
from backoffice.schemas.learner import LearnerB2BCreate
from backoffice.schemas.programme import ProgrammeCreate, ProgrammeUpdate
from backoffice.schemas.user import UserCreate, UserUpdate


def make_programme(**overrides):
    data = {
        "code": "A020-SEO",
        "title": "Référencement naturel",
        "duration_hours": 14,
        "level": Level.INTERMEDIATE,
        "price": 980,
        "status": ProgrammeStatus.PUBLISHED,
        "competencies": ["SEO", "Search Console"],
    }
    data.update(overrides)
    return ProgrammeCreate(**data)


def last_call(fake_cms, method):
    return [c for c in fake_cms.calls if c["method"] == method][-1]


# ============================================================
# Paramètres de requête
# ============================================================

def test_liste_parametres_par_defaut(cms_source, fake_cms):
    cms_source.get_programmes()
    call = last_call(fake_cms, "GET")
    assert call["url"] == "http://cms.test/api/programmes"
    assert call["params"] == {"depth": 1, "limit": 1000, "sort": "-createdAt"}


def test_liste_filtre_traduit_en_where_equals(cms_source, fake_cms):
    cms_source.get_programmes({"status": ProgrammeStatus.PUBLISHED})
    assert last_call(fake_cms, "GET")["params"]["where[statut][equals]"] == "actif"


def test_filtre_booleen_en_chaine(cms_source, fake_cms):
    cms_source.get_articles({"featured": True})
    params = last_call(fake_cms, "GET")["params"]
    assert params["where[featured][equals]"] == "true"
    assert params["sort"] == "-datePublication"
    assert params["depth"] == 2


def test_recherche_where_or_contains(cms_source, fake_cms):
    cms_source.search_appointments("dupont")
    params = last_call(fake_cms, "GET")["params"]
    assert params["where[or][0][client.nom][contains]"] == "dupont"
    assert params["where[or][3][programmeTitre][contains]"] == "dupont"
    assert fake_cms.calls[-1]["url"] == "http://cms.test/api/rendez-vous"


# ============================================================
# Programmes
# ============================================================

def test_creation_programme_document_envoye(cms_source, fake_cms):
    created = cms_source.create_programme(make_programme())
    body = last_call(fake_cms, "POST")["json"]
    assert body["codeFormation"] == "A020-SEO"
    assert body["statut"] == "actif"
    assert body["competences"] == [{"competence": "SEO"}, {"competence": "Search Console"}]
    assert body["eligibleCPF"] is True
    assert created.id == "1"
    assert created.status == ProgrammeStatus.PUBLISHED


def test_creation_programme_code_duplique(cms_source, fake_cms):
    fake_cms.seed("programmes", {"codeFormation": "A020-SEO", "titre": "Existant", "duree": 7})
    with pytest.raises(ValueError):
        cms_source.create_programme(make_programme())
    assert not [c for c in fake_cms.calls if c["method"] == "POST"]


def test_programme_par_code(cms_source, fake_cms):
    fake_cms.seed("programmes", {"codeFormation": "A001-WP-DD", "titre": "WordPress", "duree": 14})
    assert cms_source.get_programme_by_code("A001-WP-DD").title == "WordPress"
    assert cms_source.get_programme_by_code("INCONNU") is None


def test_mise_a_jour_partielle(cms_source, fake_cms):
    created = cms_source.create_programme(make_programme())
    updated = cms_source.update_programme(created.id, ProgrammeUpdate(price=1200))
    assert last_call(fake_cms, "PATCH")["json"] == {"prix": 1200}
    assert updated.price == 1200
    assert updated.title == "Référencement naturel"


def test_programme_supprime_introuvable(cms_source):
    created = cms_source.create_programme(make_programme())
    cms_source.delete_programme(created.id)
    assert cms_source.get_programme(created.id) is None


def test_mise_a_jour_document_inconnu_erreur_cms(cms_source):
    with pytest.raises(CmsApiError) as exc:
        cms_source.update_programme("999", ProgrammeUpdate(price=10))
    assert exc.value.status == 404


def test_meme_forme_que_la_source_fictive(cms_source):
    mock_source = MockDataSource()
    payload = make_programme()
    from_mock = mock_source.create_programme(payload)
    from_cms = cms_source.create_programme(payload)
    ignored = {"id", "created_at", "updated_at", "objectives", "prerequisites"}
    assert from_cms.model_dump(exclude=ignored) == from_mock.model_dump(exclude=ignored)
    listed = cms_source.get_programmes()
    assert [p.model_dump(exclude=ignored) for p in listed] == [from_mock.model_dump(exclude=ignored)]


# ============================================================
# Apprenants, rendez-vous, utilisateurs
# ============================================================

def test_creation_apprenant_b2b(cms_source, fake_cms):
    b2b = LearnerB2BCreate(
        last_name="Bernard", first_name="Claire", email="claire@exemple.fr",
        structure_name="Atelier Bernard", siret="12345678901234",
    )
    learner = cms_source.create_learner(b2b.to_learner_create())
    body = last_call(fake_cms, "POST")["json"]
    assert body["structureJuridique"] == {"nom": "Atelier Bernard", "siret": "12345678901234"}
    assert learner.structure.siret == "12345678901234"
    assert cms_source.get_learner_by_email("claire@exemple.fr").id == learner.id


def test_rendez_vous_statut_traduit(cms_source, fake_cms):
    created = cms_source.create_appointment(AppointmentCreate(
        client={"last_name": "Roux", "first_name": "Jeanne", "email": "jeanne@exemple.fr"},
        date=date(2025, 3, 3),
        time="11:00",
    ))
    assert last_call(fake_cms, "POST")["json"]["statut"] == "en_attente"
    assert created.status == AppointmentStatus.PENDING
    confirmed = cms_source.confirm_appointment(created.id)
    assert last_call(fake_cms, "PATCH")["json"] == {"statut": "confirme"}
    assert confirmed.status == AppointmentStatus.CONFIRMED


def test_creation_utilisateur(cms_source, fake_cms):
    created = cms_source.create_user(UserCreate(
        email="paul@exemple.fr", password="motdepasse", first_name="Paul", last_name="Durand",
        role=UserRole.GESTIONNAIRE,
    ))
    body = last_call(fake_cms, "POST")["json"]
    assert body["role"] == "gestionnaire"
    assert body["name"] == "Paul Durand"
    assert created.role == UserRole.GESTIONNAIRE


def test_bascule_statut_utilisateur(cms_source, fake_cms):
    doc = fake_cms.seed("users", {"email": "a@exemple.fr", "name": "Anne Leroy", "role": "admin", "status": "active"})
    toggled = cms_source.toggle_user_status(doc["id"])
    assert last_call(fake_cms, "PATCH")["json"] == {"status": "inactive"}
    assert toggled.status == UserStatus.INACTIVE
    assert toggled.first_name == "Anne"


def test_changement_mot_de_passe(cms_source, fake_cms):
    doc = fake_cms.seed("users", {"email": "a@exemple.fr", "role": "admin"})
    cms_source.change_password(doc["id"], "nouveaumotdepasse")
    assert last_call(fake_cms, "PATCH")["json"] == {"password": "nouveaumotdepasse"}


# ============================================================
# Articles
# ============================================================

def test_creation_article_champs_calcules(cms_source, fake_cms):
    created = cms_source.create_article(ArticleCreate(
        title="Débuter avec Matomo", content="mot " * 450, categories=["analyse-web"],
    ))
    body = last_call(fake_cms, "POST")["json"]
    assert body["slug"] == "debuter-avec-matomo"
    assert body["tempsLecture"] == 3
    assert body["vue"] == 0
    assert created.categories == ["analyse-web"]


def test_increment_des_vues(cms_source, fake_cms):
    doc = fake_cms.seed("articles", {"titre": "Brevo", "slug": "brevo", "vue": 9})
    assert cms_source.increment_views(doc["id"]).views == 10
    assert last_call(fake_cms, "PATCH")["json"] == {"vue": 10}


def test_categories_peuplees(cms_source, fake_cms):
    fake_cms.seed("articles", {"titre": "A", "slug": "a", "categories": [{"slug": "seo", "nom": "SEO"}]})
    fake_cms.seed("articles", {"titre": "B", "slug": "b", "categories": ["seo", "site-web"]})
    assert [(c.slug, c.count) for c in cms_source.get_categories()] == [("seo", 2), ("site-web", 1)]


# ============================================================
# Unicité et cohérence lors des mises à jour
# ============================================================

def test_mise_a_jour_code_deja_utilise(cms_source, fake_cms):
    first = cms_source.create_programme(make_programme(code="P-A"))
    cms_source.create_programme(make_programme(code="P-B"))
    with pytest.raises(ValueError):
        cms_source.update_programme(first.id, ProgrammeUpdate(code="P-B"))
    assert not [c for c in fake_cms.calls if c["method"] == "PATCH"]


def test_mise_a_jour_email_deja_utilise(cms_source, fake_cms):
    fake_cms.seed("users", {"email": "a@exemple.fr", "name": "Anne Leroy", "role": "admin"})
    other = fake_cms.seed("users", {"email": "b@exemple.fr", "name": "Bruno Leroy", "role": "admin"})
    with pytest.raises(ValueError):
        cms_source.update_user(other["id"], UserUpdate(email="a@exemple.fr"))


def test_mise_a_jour_slug_deja_utilise(cms_source, fake_cms):
    fake_cms.seed("articles", {"titre": "Brevo", "slug": "brevo"})
    other = fake_cms.seed("articles", {"titre": "Matomo", "slug": "matomo"})
    with pytest.raises(ValueError):
        cms_source.update_article(other["id"], ArticleUpdate(title="Brevo"))


def test_prenom_seul_reconstruit_le_nom_complet(cms_source, fake_cms):
    doc = fake_cms.seed("users", {"email": "a@exemple.fr", "firstName": "Anne", "lastName": "Leroy", "role": "admin"})
    cms_source.update_user(doc["id"], UserUpdate(first_name="Annie"))
    body = last_call(fake_cms, "PATCH")["json"]
    assert body == {"firstName": "Annie", "lastName": "Leroy", "name": "Annie Leroy"}


def test_passage_en_visio_envoie_adresse_vide(cms_source, fake_cms):
    doc = fake_cms.seed("rendez-vous", {
        "client": {"nom": "Roux", "prenom": "Jeanne", "email": "jeanne@exemple.fr"},
        "date": "2025-03-03", "heure": "11:00", "lieu": "presentiel", "adresse": "1 rue X",
    })
    updated = cms_source.update_appointment(
        doc["id"], AppointmentUpdate(location=LocationMode.VIDEO, video_link="https://v.exemple.fr")
    )
    assert last_call(fake_cms, "PATCH")["json"]["adresse"] is None
    assert updated.address is None


# ============================================================
# Messages de contact
# ============================================================

def test_creation_contact_document_envoye(cms_source, fake_cms):
    created = cms_source.create_contact(ContactCreate(
        name="Julie Renard", email="julie@exemple.fr", type=ContactType.COMPLAINT,
        subject="Facture", message="Montant incorrect",
    ))
    body = last_call(fake_cms, "POST")["json"]
    assert body["nom"] == "Julie Renard"
    assert body["sujet"] == "Facture"
    assert body["statut"] == "nouveau"
    assert body["priorite"] == "haute"
    assert created.priority == ContactPriority.HIGH


def test_contacts_filtre_et_recherche(cms_source, fake_cms):
    fake_cms.seed("contacts", {"nom": "Julie", "email": "j@exemple.fr", "sujet": "Devis", "statut": "enCours"})
    assert [c.status for c in cms_source.get_contacts({"status": ContactStatus.IN_PROGRESS})] == [
        ContactStatus.IN_PROGRESS
    ]
    assert last_call(fake_cms, "GET")["params"]["where[statut][equals]"] == "enCours"
    cms_source.search_contacts("devis")
    params = last_call(fake_cms, "GET")["params"]
    assert params["where[or][2][sujet][contains]"] == "devis"


def test_traitement_contact_envoie_la_date_de_reponse(cms_source, fake_cms):
    doc = fake_cms.seed("contacts", {"nom": "Julie", "email": "j@exemple.fr", "sujet": "Devis", "statut": "nouveau"})
    updated = cms_source.update_contact(doc["id"], ContactUpdate(status=ContactStatus.PROCESSED, response="Envoyé"))
    body = last_call(fake_cms, "PATCH")["json"]
    assert body["statut"] == "traite"
    assert body["reponse"] == "Envoyé"
    assert body["dateReponse"]
    assert updated.responded_at is not None
