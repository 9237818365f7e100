"""
Router pour la gestion des rendez-vous et le formulaire de prise de rendez-vous.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from backoffice.cms.notifications import Notifier
from backoffice.datasources.base import DataSource
from backoffice.dependencies import get_data_source, get_notifier, run_mutation, safe_read
from backoffice.schemas.appointment import Appointment, AppointmentCreate, AppointmentUpdate
from backoffice.schemas.booking import BookingRequest, BookingResponse
from backoffice.schemas.enums import AppointmentStatus
from backoffice.services import booking_service

router = APIRouter(prefix="/api/rendez-vous", tags=["Rendez-vous"])


@router.get("", response_model=List[Appointment], summary="Lister les rendez-vous")
def list_appointments(
    q: Optional[str] = None,
    status: Optional[AppointmentStatus] = None,
    source: DataSource = Depends(get_data_source),
):
    if q:
        return safe_read(lambda: source.search_appointments(q), [], "recherche de rendez-vous")
    if status is not None:
        return safe_read(lambda: source.get_appointments_by_status(status), [], "rendez-vous par statut")
    return safe_read(source.get_appointments, [], "rendez-vous")


@router.get("/upcoming", response_model=List[Appointment], summary="Prochains rendez-vous")
def list_upcoming(source: DataSource = Depends(get_data_source)):
    return safe_read(source.get_upcoming_appointments, [], "prochains rendez-vous")


@router.post("/booking", response_model=BookingResponse, status_code=201, summary="Prendre un rendez-vous")
def book_appointment(
    data: BookingRequest,
    source: DataSource = Depends(get_data_source),
    notifier: Notifier = Depends(get_notifier),
):
    """
    Crée le rendez-vous puis, pour un positionnement avec structure et SIRET renseignés,
    la fiche apprenant. L'échec de la fiche apprenant n'annule pas le rendez-vous.
    """
    try:
        result = booking_service.book_appointment(source, notifier, data.appointment, data.learner)
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return BookingResponse(
        appointment=result.appointment,
        learner=result.learner,
        learner_error=result.learner_error,
        notifications=notifier.to_list(),
    )


@router.get("/{appointment_id}", response_model=Appointment, summary="Détail d'un rendez-vous")
def get_appointment(appointment_id: str, source: DataSource = Depends(get_data_source)):
    appointment = safe_read(lambda: source.get_appointment(appointment_id), None, f"rendez-vous {appointment_id}")
    if appointment is None:
        raise HTTPException(status_code=404, detail="Rendez-vous introuvable.")
    return appointment


@router.post("", response_model=Appointment, status_code=201, summary="Créer un rendez-vous")
def create_appointment(
    data: AppointmentCreate,
    source: DataSource = Depends(get_data_source),
    notifier: Notifier = Depends(get_notifier),
):
    return run_mutation(
        notifier,
        lambda: source.create_appointment(data),
        loading="Création du rendez-vous...",
        success=booking_service.MSG_APPOINTMENT_CREATED,
        error=booking_service.MSG_APPOINTMENT_FAILED,
    )


@router.patch("/{appointment_id}", response_model=Appointment, summary="Modifier un rendez-vous")
def update_appointment(
    appointment_id: str,
    data: AppointmentUpdate,
    source: DataSource = Depends(get_data_source),
    notifier: Notifier = Depends(get_notifier),
):
    return run_mutation(
        notifier,
        lambda: source.update_appointment(appointment_id, data),
        loading="Mise à jour du rendez-vous...",
        success="Rendez-vous mis à jour",
        error="Erreur lors de la mise à jour du rendez-vous",
    )


@router.patch("/{appointment_id}/confirm", response_model=Appointment, summary="Confirmer un rendez-vous")
def confirm_appointment(
    appointment_id: str,
    source: DataSource = Depends(get_data_source),
    notifier: Notifier = Depends(get_notifier),
):
    return run_mutation(
        notifier,
        lambda: source.confirm_appointment(appointment_id),
        loading="Confirmation du rendez-vous...",
        success="Rendez-vous confirmé",
        error="Erreur lors de la confirmation du rendez-vous",
    )


@router.patch("/{appointment_id}/cancel", response_model=Appointment, summary="Annuler un rendez-vous")
def cancel_appointment(
    appointment_id: str,
    source: DataSource = Depends(get_data_source),
    notifier: Notifier = Depends(get_notifier),
):
    return run_mutation(
        notifier,
        lambda: source.cancel_appointment(appointment_id),
        loading="Annulation du rendez-vous...",
        success="Rendez-vous annulé",
        error="Erreur lors de l'annulation du rendez-vous",
    )


@router.delete("/{appointment_id}", status_code=204, summary="Supprimer un rendez-vous")
def delete_appointment(
    appointment_id: str,
    source: DataSource = Depends(get_data_source),
    notifier: Notifier = Depends(get_notifier),
):
    run_mutation(
        notifier,
        lambda: source.delete_appointment(appointment_id),
        loading="Suppression du rendez-vous...",
        success="Rendez-vous supprimé",
        error="Erreur lors de la suppression du rendez-vous",
    )
