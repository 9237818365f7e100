"""
Router pour la gestion des utilisateurs du back-office.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from backoffice.cms.notifications import Notifier
from backoffice.datasources.base import DataSource
from backoffice.dependencies import get_data_source, get_notifier, run_mutation, safe_read
from backoffice.schemas.enums import UserRole, UserStatus
from backoffice.schemas.user import PasswordChange, User, UserCreate, UserUpdate

router = APIRouter(prefix="/api/users", tags=["Utilisateurs"])


@router.get("", response_model=List[User], summary="Lister les utilisateurs")
def list_users(
    q: Optional[str] = None,
    role: Optional[UserRole] = None,
    status: Optional[UserStatus] = None,
    source: DataSource = Depends(get_data_source),
):
    if q:
        return safe_read(lambda: source.search_users(q), [], "recherche d'utilisateurs")
    filters = {k: v for k, v in {"role": role, "status": status}.items() if v is not None}
    return safe_read(lambda: source.get_users(filters or None), [], "utilisateurs")


@router.get("/current", response_model=User, summary="Utilisateur courant")
def get_current_user(source: DataSource = Depends(get_data_source)):
    """Premier administrateur, à défaut premier utilisateur."""
    user = safe_read(source.get_current_user, None, "utilisateur courant")
    if user is None:
        raise HTTPException(status_code=404, detail="Aucun utilisateur.")
    return user


@router.get("/email/{email}", response_model=User, summary="Utilisateur par email")
def get_user_by_email(email: str, source: DataSource = Depends(get_data_source)):
    user = safe_read(lambda: source.get_user_by_email(email), None, f"utilisateur {email}")
    if user is None:
        raise HTTPException(status_code=404, detail="Utilisateur introuvable.")
    return user


@router.get("/{user_id}", response_model=User, summary="Détail d'un utilisateur")
def get_user(user_id: str, source: DataSource = Depends(get_data_source)):
    user = safe_read(lambda: source.get_user(user_id), None, f"utilisateur {user_id}")
    if user is None:
        raise HTTPException(status_code=404, detail="Utilisateur introuvable.")
    return user


@router.get("/{user_id}/permissions", response_model=List[str], summary="Permissions d'un utilisateur")
def get_user_permissions(user_id: str, source: DataSource = Depends(get_data_source)):
    user = safe_read(lambda: source.get_user(user_id), None, f"utilisateur {user_id}")
    if user is None:
        raise HTTPException(status_code=404, detail="Utilisateur introuvable.")
    return user.permissions


@router.post("", response_model=User, status_code=201, summary="Créer un utilisateur")
def create_user(
    data: UserCreate,
    source: DataSource = Depends(get_data_source),
    notifier: Notifier = Depends(get_notifier),
):
    """Crée un utilisateur ; l'email doit être unique."""
    return run_mutation(
        notifier,
        lambda: source.create_user(data),
        loading="Création de l'utilisateur...",
        success="Utilisateur créé avec succès",
        error="Erreur lors de la création de l'utilisateur",
    )


@router.patch("/{user_id}", response_model=User, summary="Modifier un utilisateur")
def update_user(
    user_id: str,
    data: UserUpdate,
    source: DataSource = Depends(get_data_source),
    notifier: Notifier = Depends(get_notifier),
):
    return run_mutation(
        notifier,
        lambda: source.update_user(user_id, data),
        loading="Mise à jour de l'utilisateur...",
        success="Utilisateur mis à jour",
        error="Erreur lors de la mise à jour de l'utilisateur",
    )


@router.patch("/{user_id}/toggle-status", response_model=User, summary="Activer / désactiver un utilisateur")
def toggle_user_status(
    user_id: str,
    source: DataSource = Depends(get_data_source),
    notifier: Notifier = Depends(get_notifier),
):
    return run_mutation(
        notifier,
        lambda: source.toggle_user_status(user_id),
        loading="Changement de statut...",
        success="Statut de l'utilisateur modifié",
        error="Erreur lors du changement de statut",
    )


@router.put("/{user_id}/password", status_code=204, summary="Changer le mot de passe")
def change_password(
    user_id: str,
    data: PasswordChange,
    source: DataSource = Depends(get_data_source),
    notifier: Notifier = Depends(get_notifier),
):
    run_mutation(
        notifier,
        lambda: source.change_password(user_id, data.new_password),
        loading="Changement du mot de passe...",
        success="Mot de passe modifié",
        error="Erreur lors du changement de mot de passe",
    )


@router.delete("/{user_id}", status_code=204, summary="Supprimer un utilisateur")
def delete_user(
    user_id: str,
    source: DataSource = Depends(get_data_source),
    notifier: Notifier = Depends(get_notifier),
):
    run_mutation(
        notifier,
        lambda: source.delete_user(user_id),
        loading="Suppression de l'utilisateur...",
        success="Utilisateur supprimé",
        error="Erreur lors de la suppression de l'utilisateur",
    )
