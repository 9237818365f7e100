"""
Tests de la génération du dossier HTML d'une formation personnalisée.
"""

from datetime import date

from backoffice.schemas.custom_programme import CustomProgramme, DropoutConditions, TrainerContact
from backoffice.services.dossier_export import export_filename, render_dossier


def test_nom_de_fichier_sans_caracteres_speciaux():
    assert export_filename("SEO & réseaux / 2025") == "SEO___r_seaux___2025.html"


def test_valeurs_echappees():
    programme = CustomProgramme(
        id="1", title="<script>alert(1)</script>", code="FP-1",
        trainer=TrainerContact(name="Jean & Co", email="jean@exemple.fr"),
    )
    html = render_dossier(programme, generated_on=date(2025, 3, 2))
    assert "<script>" not in html
    assert "&lt;script&gt;" in html
    assert "Jean &amp; Co" in html
    assert "Document généré le 02/03/2025" in html


def test_sections_vides_omises():
    html = render_dossier(CustomProgramme(id="1", title="Minimal", code="FP-2"))
    assert "Informations générales" in html
    assert "Programme détaillé" not in html
    assert "Contact formateur" not in html
    assert "Non spécifiée" in html


def test_conditions_d_abandon():
    programme = CustomProgramme(
        id="1", title="T", code="C", dropout=DropoutConditions(dropout_billing="Au prorata"),
    )
    html = render_dossier(programme)
    assert "Conditions d'abandon" in html
    assert "Au prorata" in html
