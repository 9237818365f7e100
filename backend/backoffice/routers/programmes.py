"""
Router pour la gestion des programmes de formation.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from backoffice.cms.notifications import Notifier
from backoffice.datasources.base import DataSource
from backoffice.dependencies import get_data_source, get_notifier, run_mutation, safe_read
from backoffice.schemas.enums import Level, Modality, ProgrammeStatus
from backoffice.schemas.programme import Programme, ProgrammeCreate, ProgrammeUpdate

router = APIRouter(prefix="/api/programmes", tags=["Programmes"])


@router.get("", response_model=List[Programme], summary="Lister les programmes")
def list_programmes(
    q: Optional[str] = None,
    status: Optional[ProgrammeStatus] = None,
    level: Optional[Level] = None,
    modality: Optional[Modality] = None,
    source: DataSource = Depends(get_data_source),
):
    """Liste filtrable par statut, niveau et modalité, ou recherche plein texte avec q."""
    if q:
        return safe_read(lambda: source.search_programmes(q), [], "recherche de programmes")
    filters = {k: v for k, v in {"status": status, "level": level, "modality": modality}.items() if v is not None}
    return safe_read(lambda: source.get_programmes(filters or None), [], "programmes")


@router.get("/code/{code}", response_model=Programme, summary="Programme par code formation")
def get_programme_by_code(code: str, source: DataSource = Depends(get_data_source)):
    programme = safe_read(lambda: source.get_programme_by_code(code), None, f"programme {code}")
    if programme is None:
        raise HTTPException(status_code=404, detail="Programme introuvable.")
    return programme


@router.get("/{programme_id}", response_model=Programme, summary="Détail d'un programme")
def get_programme(programme_id: str, source: DataSource = Depends(get_data_source)):
    programme = safe_read(lambda: source.get_programme(programme_id), None, f"programme {programme_id}")
    if programme is None:
        raise HTTPException(status_code=404, detail="Programme introuvable.")
    return programme


@router.post("", response_model=Programme, status_code=201, summary="Créer un programme")
def create_programme(
    data: ProgrammeCreate,
    source: DataSource = Depends(get_data_source),
    notifier: Notifier = Depends(get_notifier),
):
    """Crée un programme ; le code formation doit être unique."""
    return run_mutation(
        notifier,
        lambda: source.create_programme(data),
        loading="Création du programme...",
        success="Programme créé avec succès",
        error="Erreur lors de la création du programme",
    )


@router.patch("/{programme_id}", response_model=Programme, summary="Modifier un programme")
def update_programme(
    programme_id: str,
    data: ProgrammeUpdate,
    source: DataSource = Depends(get_data_source),
    notifier: Notifier = Depends(get_notifier),
):
    return run_mutation(
        notifier,
        lambda: source.update_programme(programme_id, data),
        loading="Mise à jour du programme...",
        success="Programme mis à jour",
        error="Erreur lors de la mise à jour du programme",
    )


@router.delete("/{programme_id}", status_code=204, summary="Supprimer un programme")
def delete_programme(
    programme_id: str,
    source: DataSource = Depends(get_data_source),
    notifier: Notifier = Depends(get_notifier),
):
    run_mutation(
        notifier,
        lambda: source.delete_programme(programme_id),
        loading="Suppression du programme...",
        success="Programme supprimé",
        error="Erreur lors de la suppression du programme",
    )
