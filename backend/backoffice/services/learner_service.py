"""
Service CMS pour les apprenants (collection "apprenants").
"""

import logging
from typing import Any, Dict, Optional

from backoffice.cms.client import CmsClient
from backoffice.schemas.enums import LearnerStatus
from backoffice.schemas.learner import Learner, LegalStructure
from backoffice.services.cms_service import CmsEntityService
from backoffice.services.wire import date_part, doc_id, enum_value, iso_date, media_url, parse_enum, put, ref_id

logger = logging.getLogger(__name__)

# Structure juridique : champ canonique → champ CMS
_STRUCTURE_FIELDS = {
    "name": "nom",
    "siret": "siret",
    "ape_code": "codeApe",
    "address": "adresse",
    "postal_code": "codePostal",
    "city": "ville",
    "phone": "telephone",
    "email": "email",
    "contact_last_name": "contactNom",
    "contact_first_name": "contactPrenom",
    "contact_role": "contactFonction",
    "contact_email": "contactEmail",
    "contact_phone": "contactTelephone",
}


def _structure_from_wire(value: Any) -> Optional[LegalStructure]:
    # Relation non peuplée (simple identifiant) : rien à afficher
    if not isinstance(value, dict) or not value.get("nom"):
        return None
    return LegalStructure(**{field: value.get(key) for field, key in _STRUCTURE_FIELDS.items()})


def _structure_to_wire(value: Any) -> Dict[str, Any]:
    if hasattr(value, "model_dump"):
        value = value.model_dump()
    return {key: value.get(field) for field, key in _STRUCTURE_FIELDS.items() if value.get(field) is not None}


def to_entity(doc: Dict[str, Any]) -> Learner:
    return Learner(
        id=doc_id(doc),
        last_name=doc.get("nom") or "",
        first_name=doc.get("prenom") or "",
        email=doc.get("email") or "",
        phone=doc.get("telephone") or "",
        birth_date=date_part(doc.get("dateNaissance")),
        address=doc.get("adresse") or "",
        status=parse_enum(LearnerStatus, doc.get("statut"), LearnerStatus.ACTIVE),
        programme_ids=[i for i in (ref_id(p) for p in doc.get("programmes") or []) if i],
        progression=int(doc.get("progression") or 0),
        avatar=media_url(doc.get("avatar")),
        structure=_structure_from_wire(doc.get("structureJuridique")),
        created_at=doc.get("createdAt"),
        updated_at=doc.get("updatedAt"),
    )


def to_wire(data: Dict[str, Any], partial: bool = False) -> Dict[str, Any]:
    wire: Dict[str, Any] = {}
    put(wire, data, "last_name", "nom", partial=partial)
    put(wire, data, "first_name", "prenom", partial=partial)
    put(wire, data, "email", "email", partial=partial)
    put(wire, data, "phone", "telephone", partial=partial)
    put(wire, data, "birth_date", "dateNaissance", iso_date, partial=partial)
    put(wire, data, "address", "adresse", partial=partial)
    put(wire, data, "status", "statut", enum_value, partial=partial)
    put(wire, data, "programme_ids", "programmes", partial=partial)
    put(wire, data, "progression", "progression", partial=partial)
    put(wire, data, "avatar", "avatar", partial=partial)
    put(wire, data, "structure", "structureJuridique", _structure_to_wire, partial=partial)
    if not partial:
        wire["statut"] = wire.get("statut") or LearnerStatus.ACTIVE.value
        wire["progression"] = wire.get("progression") or 0
        wire["programmes"] = wire.get("programmes") or []
    return wire


class LearnerCmsService(CmsEntityService):
    collection = "apprenants"
    label = "apprenant"
    search_fields = ("nom", "prenom", "email")

    def __init__(self, client: CmsClient):
        super().__init__(client, to_entity, to_wire)
