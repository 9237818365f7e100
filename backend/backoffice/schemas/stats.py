"""
Schémas Pydantic pour les statistiques du tableau de bord.
"""

from typing import Dict, List

from pydantic import BaseModel

from backoffice.schemas.article import Article


class ProgrammeStats(BaseModel):
    total: int
    by_status: Dict[str, int]
    by_level: Dict[str, int]
    by_modality: Dict[str, int]


class LearnerStats(BaseModel):
    total: int
    by_status: Dict[str, int]
    average_progression: int


class AppointmentStats(BaseModel):
    total: int
    by_status: Dict[str, int]
    upcoming: int


class UserStats(BaseModel):
    total: int
    by_role: Dict[str, int]
    active: int


class ArticleStats(BaseModel):
    total: int
    by_status: Dict[str, int]
    total_views: int
    popular: List[Article]


class DashboardStats(BaseModel):
    programmes: ProgrammeStats
    learners: LearnerStats
    appointments: AppointmentStats
    users: UserStats
    articles: ArticleStats
