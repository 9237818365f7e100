"""
Service CMS pour les utilisateurs (collection "users").

Le CMS a connu deux conventions de nommage : name / firstName / lastName
et l'ancienne nom / prenom. Toutes deux sont lues ici ; l'application ne
manipule que first_name / last_name.
"""

import logging
from typing import Any, Dict, Optional, Tuple

from backoffice.cms.client import CmsClient
from backoffice.schemas.enums import UserRole, UserStatus
from backoffice.schemas.user import User
from backoffice.services.cms_service import CmsEntityService
from backoffice.services.wire import date_part, doc_id, enum_value, iso_date, media_url, parse_enum, put

logger = logging.getLogger(__name__)


def role_to_wire(value: Any) -> str:
    return UserRole(enum_value(value)).value.lower()


def role_from_wire(value: Optional[str]) -> UserRole:
    return parse_enum(UserRole, (value or "").upper(), UserRole.BENEFICIAIRE)


def split_names(doc: Dict[str, Any]) -> Tuple[str, str]:
    """(prénom, nom) depuis l'une ou l'autre convention, en dernier recours depuis name."""
    first_name = doc.get("firstName") or doc.get("prenom")
    last_name = doc.get("lastName") or doc.get("nom")
    if not first_name and not last_name and doc.get("name"):
        parts = doc["name"].strip().split(" ", 1)
        first_name = parts[0]
        last_name = parts[1] if len(parts) > 1 else ""
    return first_name or "", last_name or ""


def to_entity(doc: Dict[str, Any]) -> User:
    first_name, last_name = split_names(doc)
    return User(
        id=doc_id(doc),
        email=doc.get("email") or "",
        first_name=first_name,
        last_name=last_name,
        role=role_from_wire(doc.get("role")),
        status=parse_enum(UserStatus, doc.get("status"), UserStatus.ACTIVE),
        phone=doc.get("phone"),
        address=doc.get("address"),
        birth_date=date_part(doc.get("dateOfBirth")),
        avatar=media_url(doc.get("avatar")),
        last_login_at=doc.get("lastLoginAt"),
        created_at=doc.get("createdAt"),
        updated_at=doc.get("updatedAt"),
    )


def to_wire(data: Dict[str, Any], partial: bool = False) -> Dict[str, Any]:
    wire: Dict[str, Any] = {}
    put(wire, data, "email", "email", partial=partial)
    put(wire, data, "password", "password", partial=True)  # jamais renvoyé vide
    put(wire, data, "first_name", "firstName", partial=partial)
    put(wire, data, "last_name", "lastName", partial=partial)
    put(wire, data, "role", "role", role_to_wire, partial=partial)
    put(wire, data, "status", "status", enum_value, partial=partial)
    put(wire, data, "phone", "phone", partial=partial)
    put(wire, data, "address", "address", partial=partial)
    put(wire, data, "birth_date", "dateOfBirth", iso_date, partial=partial)
    put(wire, data, "avatar", "avatar", partial=partial)
    if "firstName" in wire and "lastName" in wire:
        wire["name"] = f"{wire['firstName'] or ''} {wire['lastName'] or ''}".strip()
    return wire


class UserCmsService(CmsEntityService):
    collection = "users"
    label = "utilisateur"
    search_fields = ("email", "firstName", "lastName", "name")

    def __init__(self, client: CmsClient):
        super().__init__(client, to_entity, to_wire)
