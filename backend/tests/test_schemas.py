"""
Tests unitaires des règles de validation portées par les schémas Pydantic.
"""

from datetime import date

import pytest
from pydantic import ValidationError

from backoffice.schemas.appointment import AppointmentCreate
from backoffice.schemas.article import ArticleCreate
from backoffice.schemas.enums import LocationMode, UserRole, UserStatus
from backoffice.schemas.learner import LearnerB2BCreate, LearnerCreate, ProgressionUpdate
from backoffice.schemas.programme import ProgrammeCreate
from backoffice.schemas.user import PasswordChange, User, UserCreate


def make_appointment(**overrides):
    data = {
        "client": {"last_name": "Durand", "first_name": "Luc", "email": "luc@exemple.fr"},
        "date": date(2025, 6, 2),
        "time": "09:30",
    }
    data.update(overrides)
    return AppointmentCreate(**data)


def make_b2b(**overrides):
    data = {
        "last_name": "Bernard",
        "first_name": "Claire",
        "email": "claire@exemple.fr",
        "structure_name": "Atelier Bernard",
        "siret": "12345678901234",
    }
    data.update(overrides)
    return LearnerB2BCreate(**data)


# --- Programmes ---

def test_programme_duree_nulle_refusee():
    with pytest.raises(ValidationError):
        ProgrammeCreate(code="A001", title="WordPress", duration_hours=0)


def test_programme_prix_negatif_refuse():
    with pytest.raises(ValidationError):
        ProgrammeCreate(code="A001", title="WordPress", duration_hours=14, price=-1)


def test_programme_code_vide_refuse():
    with pytest.raises(ValidationError):
        ProgrammeCreate(code="   ", title="WordPress", duration_hours=14)


# --- Apprenants ---

@pytest.mark.parametrize("value", [-1, 101])
def test_progression_hors_bornes_refusee(value):
    with pytest.raises(ValidationError):
        ProgressionUpdate(progression=value)


def test_progression_bornes_acceptees():
    assert ProgressionUpdate(progression=0).progression == 0
    assert ProgressionUpdate(progression=100).progression == 100


def test_apprenant_email_invalide_refuse():
    with pytest.raises(ValidationError):
        LearnerCreate(last_name="Petit", first_name="Léa", email="pas-un-email")


def test_b2b_renseigne_avec_siret_et_structure():
    assert make_b2b().is_populated()


def test_b2b_non_renseigne_sans_siret():
    assert not make_b2b(siret="").is_populated()


def test_b2b_non_renseigne_sans_structure():
    assert not make_b2b(structure_name="  ").is_populated()


def test_b2b_siret_invalide_refuse():
    with pytest.raises(ValidationError):
        make_b2b(siret="1234")


def test_b2b_siret_espaces_retires():
    assert make_b2b(siret="123 456 789 01234").siret == "12345678901234"


def test_b2b_vers_apprenant_rattache_la_structure():
    learner = make_b2b(structure_city="Lyon").to_learner_create()
    assert learner.last_name == "Bernard"
    assert learner.structure.name == "Atelier Bernard"
    assert learner.structure.siret == "12345678901234"
    assert learner.structure.city == "Lyon"


# --- Rendez-vous ---

def test_rendez_vous_heure_invalide_refusee():
    with pytest.raises(ValidationError):
        make_appointment(time="25:00")


def test_rendez_vous_duree_negative_refusee():
    with pytest.raises(ValidationError):
        make_appointment(duration_minutes=-30)


def test_rendez_vous_visio_sans_adresse():
    appointment = make_appointment(
        location=LocationMode.VIDEO,
        address="12 rue des Lilas",
        video_link="https://visio.exemple.fr/abc",
    )
    assert appointment.address is None
    assert appointment.video_link == "https://visio.exemple.fr/abc"


def test_rendez_vous_presentiel_sans_lien_visio():
    appointment = make_appointment(address="12 rue des Lilas", video_link="https://visio.exemple.fr/abc")
    assert appointment.address == "12 rue des Lilas"
    assert appointment.video_link is None


def test_rendez_vous_telephone_ni_adresse_ni_lien():
    appointment = make_appointment(
        location=LocationMode.PHONE, address="12 rue des Lilas", video_link="https://visio.exemple.fr/abc"
    )
    assert appointment.address is None
    assert appointment.video_link is None


# --- Utilisateurs ---

def test_utilisateur_mot_de_passe_trop_court():
    with pytest.raises(ValidationError):
        UserCreate(email="a@exemple.fr", password="court", first_name="Anne")


def test_changement_mot_de_passe_trop_court():
    with pytest.raises(ValidationError):
        PasswordChange(new_password="1234567")


def test_utilisateur_nom_affiche_et_permissions():
    user = User(id="9", email="j.roux@exemple.fr", first_name="Jeanne", last_name="Roux", role=UserRole.FORMATEUR)
    assert user.display_name == "Jeanne Roux"
    assert user.permissions == ["apprenants:read", "programmes:read"]


def test_utilisateur_sans_nom_affiche_email():
    assert User(id="9", email="anonyme@exemple.fr").display_name == "anonyme@exemple.fr"


def test_utilisateur_actif_selon_statut():
    assert User(id="1", email="a@exemple.fr").is_active()
    assert not User(id="1", email="a@exemple.fr", status=UserStatus.PENDING).is_active()


# --- Articles ---

def test_article_titre_trop_court():
    with pytest.raises(ValidationError):
        ArticleCreate(title="Hi", content="Contenu")


def test_article_meta_description_trop_longue():
    with pytest.raises(ValidationError):
        ArticleCreate(title="Titre valide", content="Contenu", meta_description="x" * 161)
