"""
Service de statistiques pour le tableau de bord.
Calculé à la volée depuis la source de données active (aucun cache).
"""

import datetime as dt
import logging
from collections import Counter
from typing import Iterable, List, Optional

from backoffice.schemas.article import Article, TermCount
from backoffice.schemas.enums import UserStatus
from backoffice.schemas.stats import (
    AppointmentStats,
    ArticleStats,
    DashboardStats,
    LearnerStats,
    ProgrammeStats,
    UserStats,
)

logger = logging.getLogger(__name__)

POPULAR_ARTICLES = 5


def _count_by(items: Iterable, attr: str) -> dict:
    return dict(Counter(getattr(item, attr).value for item in items))


def term_counts(articles: List[Article], attr: str) -> List[TermCount]:
    """
    Catégories ou tags (attr) avec leur nombre d'articles, du plus fréquent au moins fréquent.
    À égalité, ordre alphabétique du slug.
    """
    counter = Counter(slug for article in articles for slug in set(getattr(article, attr)))
    ranked = sorted(counter.items(), key=lambda item: (-item[1], item[0]))
    return [
        TermCount(slug=slug, name=slug.replace("-", " ").capitalize(), count=count)
        for slug, count in ranked
    ]


def programme_stats(source) -> ProgrammeStats:
    programmes = source.get_programmes()
    return ProgrammeStats(
        total=len(programmes),
        by_status=_count_by(programmes, "status"),
        by_level=_count_by(programmes, "level"),
        by_modality=_count_by(programmes, "modality"),
    )


def learner_stats(source) -> LearnerStats:
    learners = source.get_learners()
    average = round(sum(learner.progression for learner in learners) / len(learners)) if learners else 0
    return LearnerStats(
        total=len(learners),
        by_status=_count_by(learners, "status"),
        average_progression=average,
    )


def appointment_stats(source, today: Optional[dt.date] = None) -> AppointmentStats:
    appointments = source.get_appointments()
    return AppointmentStats(
        total=len(appointments),
        by_status=_count_by(appointments, "status"),
        upcoming=len(source.get_upcoming_appointments(today)),
    )


def user_stats(source) -> UserStats:
    users = source.get_users()
    return UserStats(
        total=len(users),
        by_role=_count_by(users, "role"),
        active=sum(1 for u in users if u.status == UserStatus.ACTIVE),
    )


def article_stats(source) -> ArticleStats:
    articles = source.get_articles()
    popular = sorted(articles, key=lambda a: a.views, reverse=True)[:POPULAR_ARTICLES]
    return ArticleStats(
        total=len(articles),
        by_status=_count_by(articles, "status"),
        total_views=sum(a.views for a in articles),
        popular=popular,
    )


def dashboard_stats(source, today: Optional[dt.date] = None) -> DashboardStats:
    """Agrège les statistiques de toutes les entités."""
    stats = DashboardStats(
        programmes=programme_stats(source),
        learners=learner_stats(source),
        appointments=appointment_stats(source, today),
        users=user_stats(source),
        articles=article_stats(source),
    )
    logger.debug(
        "Statistiques calculées : %d programmes, %d apprenants, %d rendez-vous",
        stats.programmes.total, stats.learners.total, stats.appointments.total,
    )
    return stats
