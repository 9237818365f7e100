"""
Router des messages de contact reçus via le formulaire du site.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from backoffice.cms.notifications import Notifier
from backoffice.datasources.base import DataSource
from backoffice.dependencies import get_data_source, get_notifier, run_mutation, safe_read
from backoffice.schemas.contact import Contact, ContactCreate, ContactProcess, ContactUpdate
from backoffice.schemas.enums import ContactPriority, ContactStatus, ContactType

router = APIRouter(prefix="/api/contacts", tags=["Contacts"])


@router.get("", response_model=List[Contact], summary="Lister les messages de contact")
def list_contacts(
    q: Optional[str] = None,
    status: Optional[ContactStatus] = None,
    type: Optional[ContactType] = None,
    priority: Optional[ContactPriority] = None,
    source: DataSource = Depends(get_data_source),
):
    """Filtrable par statut, type et priorité ; q cherche dans le nom, l'email et le sujet."""
    if q:
        return safe_read(lambda: source.search_contacts(q), [], "recherche de contacts")
    filters = {k: v for k, v in {"status": status, "type": type, "priority": priority}.items() if v is not None}
    return safe_read(lambda: source.get_contacts(filters or None), [], "contacts")


@router.get("/{contact_id}", response_model=Contact, summary="Détail d'un message")
def get_contact(contact_id: str, source: DataSource = Depends(get_data_source)):
    contact = safe_read(lambda: source.get_contact(contact_id), None, f"contact {contact_id}")
    if contact is None:
        raise HTTPException(status_code=404, detail="Contact introuvable.")
    return contact


@router.post("", response_model=Contact, status_code=201, summary="Enregistrer un message")
def create_contact(
    data: ContactCreate,
    source: DataSource = Depends(get_data_source),
    notifier: Notifier = Depends(get_notifier),
):
    return run_mutation(
        notifier,
        lambda: source.create_contact(data),
        loading="Envoi du message...",
        success="Contact créé avec succès",
        error="Erreur lors de la création du contact",
    )


@router.patch("/{contact_id}", response_model=Contact, summary="Modifier un message")
def update_contact(
    contact_id: str,
    data: ContactUpdate,
    source: DataSource = Depends(get_data_source),
    notifier: Notifier = Depends(get_notifier),
):
    return run_mutation(
        notifier,
        lambda: source.update_contact(contact_id, data),
        loading="Mise à jour du contact...",
        success="Contact mis à jour avec succès",
        error="Erreur lors de la mise à jour du contact",
    )


@router.patch("/{contact_id}/process", response_model=Contact, summary="Marquer un message comme traité")
def process_contact(
    contact_id: str,
    data: ContactProcess,
    source: DataSource = Depends(get_data_source),
    notifier: Notifier = Depends(get_notifier),
):
    return run_mutation(
        notifier,
        lambda: source.mark_contact_processed(contact_id, data.response),
        loading="Traitement du message...",
        success="Message marqué comme traité",
        error="Erreur lors du traitement du message",
    )


@router.patch("/{contact_id}/close", response_model=Contact, summary="Fermer un message")
def close_contact(
    contact_id: str,
    source: DataSource = Depends(get_data_source),
    notifier: Notifier = Depends(get_notifier),
):
    return run_mutation(
        notifier,
        lambda: source.close_contact(contact_id),
        loading="Fermeture du message...",
        success="Message fermé",
        error="Erreur lors de la fermeture du message",
    )


@router.delete("/{contact_id}", status_code=204, summary="Supprimer un message")
def delete_contact(
    contact_id: str,
    source: DataSource = Depends(get_data_source),
    notifier: Notifier = Depends(get_notifier),
):
    run_mutation(
        notifier,
        lambda: source.delete_contact(contact_id),
        loading="Suppression du contact...",
        success="Contact supprimé avec succès",
        error="Erreur lors de la suppression du contact",
    )
