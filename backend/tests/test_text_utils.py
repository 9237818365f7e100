"""
Tests unitaires du slug et du temps de lecture des articles.
"""

import pytest

from backoffice.text_utils import count_words, reading_time, slugify


# --- slugify ---

def test_slugify_minuscules_et_tirets():
    assert slugify("Créer Son Site WordPress") == "creer-son-site-wordpress"


def test_slugify_accents_retires():
    assert slugify("Éducation à l'été") == "education-a-lete"


def test_slugify_espaces_multiples_un_seul_tiret():
    assert slugify("  SEO   et    réseaux  sociaux ") == "seo-et-reseaux-sociaux"


def test_slugify_tirets_en_bordure_retires():
    assert slugify("--Formation IA--") == "formation-ia"


@pytest.mark.parametrize("text", [
    "Création de son site internet (WordPress) + Stratégie",
    "Gestion de la sécurité & analyse Web",
    "déjà-un-slug",
    "   ",
    "ChatGPT : 10 astuces !",
])
def test_slugify_idempotent(text):
    once = slugify(text)
    assert slugify(once) == once


def test_slugify_texte_vide():
    assert slugify("") == ""


# --- Temps de lecture ---

def test_count_words_ignore_les_balises_html():
    assert count_words("<p>Un <strong>deux</strong> trois</p>") == 3


def test_reading_time_minimum_une_minute():
    assert reading_time("Un seul mot") == 1
    assert reading_time("") == 1


def test_reading_time_arrondi_superieur():
    assert reading_time("mot " * 200) == 1
    assert reading_time("mot " * 201) == 2


def test_reading_time_monotone():
    durations = [reading_time("mot " * n) for n in range(0, 2001, 50)]
    assert durations == sorted(durations)


def test_reading_time_vitesse_personnalisee():
    assert reading_time("mot " * 300, words_per_minute=100) == 3
