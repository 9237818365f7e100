"""
Tests du calcul des statistiques du tableau de bord (données fictives).
"""

from datetime import date

from backoffice.schemas.article import Article
from backoffice.services.stats_service import dashboard_stats, term_counts


def test_statistiques_programmes(source):
    stats = dashboard_stats(source, today=date(2025, 2, 1))
    assert stats.programmes.total == 4
    assert stats.programmes.by_status == {"PUBLIE": 3, "BROUILLON": 1}
    assert stats.programmes.by_modality["PRESENTIEL"] == 2


def test_statistiques_apprenants(source):
    stats = dashboard_stats(source, today=date(2025, 2, 1))
    assert stats.learners.total == 2
    assert stats.learners.average_progression == 54


def test_statistiques_rendez_vous(source):
    stats = dashboard_stats(source, today=date(2025, 2, 1))
    assert stats.appointments.total == 3
    assert stats.appointments.upcoming == 2
    assert stats.appointments.by_status == {"confirme": 1, "enAttente": 1, "termine": 1}


def test_statistiques_utilisateurs_et_articles(source):
    stats = dashboard_stats(source, today=date(2025, 2, 1))
    assert stats.users.active == 2
    assert stats.users.by_role == {"ADMIN": 1, "FORMATEUR": 1, "BENEFICIAIRE": 1}
    assert stats.articles.total_views == 120
    assert stats.articles.popular[0].id == "1"


def test_statistiques_source_vide(source):
    for learner in source.get_learners():
        source.delete_learner(learner.id)
    assert dashboard_stats(source).learners.average_progression == 0


def test_term_counts_un_article_compte_une_fois():
    articles = [
        Article(id="1", title="Un", slug="un", tags=["seo", "seo"]),
        Article(id="2", title="Deux", slug="deux", tags=["seo"]),
    ]
    assert [(t.slug, t.count) for t in term_counts(articles, "tags")] == [("seo", 2)]
