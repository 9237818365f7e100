"""
Router des statistiques du tableau de bord.
"""

from fastapi import APIRouter, Depends

from backoffice.datasources.base import DataSource
from backoffice.dependencies import get_data_source
from backoffice.schemas.stats import DashboardStats

router = APIRouter(prefix="/api/stats", tags=["Statistiques"])


@router.get("", response_model=DashboardStats, summary="Statistiques du tableau de bord")
def get_stats(source: DataSource = Depends(get_data_source)):
    """Compteurs et répartitions calculés à la volée depuis la source active."""
    return source.get_stats()
