"""
Router pour les formations personnalisées (dossiers programme sur mesure).
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import StreamingResponse

from backoffice.cms.notifications import Notifier
from backoffice.datasources.base import DataSource
from backoffice.dependencies import get_data_source, get_notifier, run_mutation, safe_read
from backoffice.schemas.custom_programme import CustomProgramme, CustomProgrammeCreate, CustomProgrammeUpdate
from backoffice.schemas.enums import CustomProgrammeStatus
from backoffice.services import dossier_export

router = APIRouter(prefix="/api/formations-personnalisees", tags=["Formations personnalisées"])


@router.get("", response_model=List[CustomProgramme], summary="Lister les formations personnalisées")
def list_custom_programmes(
    q: Optional[str] = None,
    status: Optional[CustomProgrammeStatus] = None,
    source: DataSource = Depends(get_data_source),
):
    if q:
        return safe_read(lambda: source.search_custom_programmes(q), [], "recherche de formations personnalisées")
    filters = {"status": status} if status is not None else None
    return safe_read(lambda: source.get_custom_programmes(filters), [], "formations personnalisées")


@router.get("/{custom_programme_id}", response_model=CustomProgramme, summary="Détail d'une formation personnalisée")
def get_custom_programme(custom_programme_id: str, source: DataSource = Depends(get_data_source)):
    custom_programme = safe_read(
        lambda: source.get_custom_programme(custom_programme_id), None, f"formation {custom_programme_id}"
    )
    if custom_programme is None:
        raise HTTPException(status_code=404, detail="Formation personnalisée introuvable.")
    return custom_programme


@router.get("/{custom_programme_id}/export", summary="Télécharger le dossier programme (HTML)")
def export_custom_programme(custom_programme_id: str, source: DataSource = Depends(get_data_source)):
    """Dossier imprimable en pièce jointe, nommé d'après le titre de la formation."""
    custom_programme = safe_read(
        lambda: source.get_custom_programme(custom_programme_id), None, f"formation {custom_programme_id}"
    )
    if custom_programme is None:
        raise HTTPException(status_code=404, detail="Formation personnalisée introuvable.")
    filename = dossier_export.export_filename(custom_programme.title)
    return StreamingResponse(
        iter([dossier_export.render_dossier(custom_programme)]),
        media_type="text/html; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("", response_model=CustomProgramme, status_code=201, summary="Créer une formation personnalisée")
def create_custom_programme(
    data: CustomProgrammeCreate,
    source: DataSource = Depends(get_data_source),
    notifier: Notifier = Depends(get_notifier),
):
    return run_mutation(
        notifier,
        lambda: source.create_custom_programme(data),
        loading="Création de la formation...",
        success="Formation personnalisée créée",
        error="Erreur lors de la création de la formation",
    )


@router.patch("/{custom_programme_id}", response_model=CustomProgramme, summary="Modifier une formation personnalisée")
def update_custom_programme(
    custom_programme_id: str,
    data: CustomProgrammeUpdate,
    source: DataSource = Depends(get_data_source),
    notifier: Notifier = Depends(get_notifier),
):
    return run_mutation(
        notifier,
        lambda: source.update_custom_programme(custom_programme_id, data),
        loading="Mise à jour de la formation...",
        success="Formation personnalisée mise à jour",
        error="Erreur lors de la mise à jour de la formation",
    )


@router.delete("/{custom_programme_id}", status_code=204, summary="Supprimer une formation personnalisée")
def delete_custom_programme(
    custom_programme_id: str,
    source: DataSource = Depends(get_data_source),
    notifier: Notifier = Depends(get_notifier),
):
    run_mutation(
        notifier,
        lambda: source.delete_custom_programme(custom_programme_id),
        loading="Suppression de la formation...",
        success="Formation personnalisée supprimée",
        error="Erreur lors de la suppression de la formation",
    )
