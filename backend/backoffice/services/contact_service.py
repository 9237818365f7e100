"""
Service CMS pour les messages de contact (collection "contacts"),
et règle de priorité appliquée à la réception d'un message.
"""

import logging
from typing import Any, Dict, Optional

from backoffice.cms.client import CmsClient
from backoffice.schemas.contact import Contact
from backoffice.schemas.enums import ContactPriority, ContactStatus, ContactType
from backoffice.services.cms_service import CmsEntityService
from backoffice.services.wire import doc_id, enum_value, iso_date, parse_enum, put

logger = logging.getLogger(__name__)

URGENT_KEYWORDS = ("urgent", "urgence", "immédiat", "asap", "rapidement")
HIGH_KEYWORDS = ("important", "problème", "erreur", "bug", "dysfonctionnement")


def determine_priority(subject: str, message: str, contact_type: Optional[ContactType]) -> ContactPriority:
    """Priorité déduite des mots-clés du sujet et du message ; une réclamation est au moins haute."""
    content = f"{subject} {message}".lower()
    if any(keyword in content for keyword in URGENT_KEYWORDS):
        return ContactPriority.URGENT
    if any(keyword in content for keyword in HIGH_KEYWORDS):
        return ContactPriority.HIGH
    if contact_type == ContactType.COMPLAINT:
        return ContactPriority.HIGH
    return ContactPriority.NORMAL


def to_entity(doc: Dict[str, Any]) -> Contact:
    return Contact(
        id=doc_id(doc),
        name=doc.get("nom") or "",
        email=doc.get("email") or "",
        phone=doc.get("telephone") or "",
        type=parse_enum(ContactType, doc.get("type"), ContactType.QUESTION),
        subject=doc.get("sujet") or "",
        message=doc.get("message") or "",
        status=parse_enum(ContactStatus, doc.get("statut"), ContactStatus.NEW),
        priority=parse_enum(ContactPriority, doc.get("priorite"), ContactPriority.NORMAL),
        response=doc.get("reponse"),
        responded_at=doc.get("dateReponse"),
        created_at=doc.get("createdAt"),
        updated_at=doc.get("updatedAt"),
    )


def to_wire(data: Dict[str, Any], partial: bool = False) -> Dict[str, Any]:
    wire: Dict[str, Any] = {}
    put(wire, data, "name", "nom", partial=partial)
    put(wire, data, "email", "email", partial=partial)
    put(wire, data, "phone", "telephone", partial=partial)
    put(wire, data, "type", "type", enum_value, partial=partial)
    put(wire, data, "subject", "sujet", partial=partial)
    put(wire, data, "message", "message", partial=partial)
    put(wire, data, "status", "statut", enum_value, partial=partial)
    put(wire, data, "priority", "priorite", enum_value, partial=partial)
    put(wire, data, "response", "reponse", partial=True)
    put(wire, data, "responded_at", "dateReponse", iso_date, partial=True)
    if not partial:
        wire["statut"] = wire.get("statut") or ContactStatus.NEW.value
        wire["priorite"] = wire.get("priorite") or ContactPriority.NORMAL.value
        wire["telephone"] = wire.get("telephone") or ""
    return wire


class ContactCmsService(CmsEntityService):
    collection = "contacts"
    label = "contact"
    search_fields = ("nom", "email", "sujet")

    def __init__(self, client: CmsClient):
        super().__init__(client, to_entity, to_wire)
