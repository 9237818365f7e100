"""
Router pour la gestion des apprenants.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from backoffice.cms.notifications import Notifier
from backoffice.datasources.base import DataSource
from backoffice.dependencies import get_data_source, get_notifier, run_mutation, safe_read
from backoffice.schemas.enums import LearnerStatus
from backoffice.schemas.learner import Learner, LearnerCreate, LearnerUpdate, ProgressionUpdate

router = APIRouter(prefix="/api/apprenants", tags=["Apprenants"])


@router.get("", response_model=List[Learner], summary="Lister les apprenants")
def list_learners(
    q: Optional[str] = None,
    status: Optional[LearnerStatus] = None,
    source: DataSource = Depends(get_data_source),
):
    if q:
        return safe_read(lambda: source.search_learners(q), [], "recherche d'apprenants")
    if status is not None:
        return safe_read(lambda: source.get_learners_by_status(status), [], "apprenants par statut")
    return safe_read(source.get_learners, [], "apprenants")


@router.get("/email/{email}", response_model=Learner, summary="Apprenant par email")
def get_learner_by_email(email: str, source: DataSource = Depends(get_data_source)):
    learner = safe_read(lambda: source.get_learner_by_email(email), None, f"apprenant {email}")
    if learner is None:
        raise HTTPException(status_code=404, detail="Apprenant introuvable.")
    return learner


@router.get("/{learner_id}", response_model=Learner, summary="Détail d'un apprenant")
def get_learner(learner_id: str, source: DataSource = Depends(get_data_source)):
    learner = safe_read(lambda: source.get_learner(learner_id), None, f"apprenant {learner_id}")
    if learner is None:
        raise HTTPException(status_code=404, detail="Apprenant introuvable.")
    return learner


@router.post("", response_model=Learner, status_code=201, summary="Créer un apprenant")
def create_learner(
    data: LearnerCreate,
    source: DataSource = Depends(get_data_source),
    notifier: Notifier = Depends(get_notifier),
):
    return run_mutation(
        notifier,
        lambda: source.create_learner(data),
        loading="Création de l'apprenant...",
        success="Apprenant créé avec succès",
        error="Erreur lors de la création de l'apprenant",
    )


@router.patch("/{learner_id}", response_model=Learner, summary="Modifier un apprenant")
def update_learner(
    learner_id: str,
    data: LearnerUpdate,
    source: DataSource = Depends(get_data_source),
    notifier: Notifier = Depends(get_notifier),
):
    return run_mutation(
        notifier,
        lambda: source.update_learner(learner_id, data),
        loading="Mise à jour de l'apprenant...",
        success="Apprenant mis à jour",
        error="Erreur lors de la mise à jour de l'apprenant",
    )


@router.patch("/{learner_id}/progression", response_model=Learner, summary="Mettre à jour la progression")
def update_progression(
    learner_id: str,
    data: ProgressionUpdate,
    source: DataSource = Depends(get_data_source),
    notifier: Notifier = Depends(get_notifier),
):
    """Progression en pourcentage (0 à 100)."""
    return run_mutation(
        notifier,
        lambda: source.update_progression(learner_id, data.progression),
        loading="Mise à jour de la progression...",
        success="Progression mise à jour",
        error="Erreur lors de la mise à jour de la progression",
    )


@router.delete("/{learner_id}", status_code=204, summary="Supprimer un apprenant")
def delete_learner(
    learner_id: str,
    source: DataSource = Depends(get_data_source),
    notifier: Notifier = Depends(get_notifier),
):
    run_mutation(
        notifier,
        lambda: source.delete_learner(learner_id),
        loading="Suppression de l'apprenant...",
        success="Apprenant supprimé",
        error="Erreur lors de la suppression de l'apprenant",
    )
