"""
Service CMS pour les rendez-vous (collection "rendez-vous").
Le statut "enAttente" de l'application correspond à "en_attente" dans le CMS.
"""

import logging
from typing import Any, Dict

from backoffice.cms.client import CmsClient
from backoffice.schemas.appointment import Appointment, AppointmentClient
from backoffice.schemas.enums import AppointmentStatus, AppointmentType, LocationMode
from backoffice.services.cms_service import CmsEntityService
from backoffice.services.wire import date_part, doc_id, enum_value, iso_date, parse_enum, put, ref_id

logger = logging.getLogger(__name__)

STATUS_TO_WIRE = {
    AppointmentStatus.PENDING: "en_attente",
    AppointmentStatus.CONFIRMED: "confirme",
    AppointmentStatus.CANCELLED: "annule",
    AppointmentStatus.DONE: "termine",
    AppointmentStatus.POSTPONED: "reporte",
}
STATUS_FROM_WIRE = {v: k for k, v in STATUS_TO_WIRE.items()}


def _status_to_wire(value: Any) -> str:
    return STATUS_TO_WIRE[AppointmentStatus(enum_value(value))]


def _client_to_wire(value: Any) -> Dict[str, Any]:
    if hasattr(value, "model_dump"):
        value = value.model_dump()
    return {
        "nom": value.get("last_name"),
        "prenom": value.get("first_name"),
        "email": value.get("email"),
        "telephone": value.get("phone"),
        "entreprise": value.get("company"),
    }


def to_entity(doc: Dict[str, Any]) -> Appointment:
    client = doc.get("client") or {}
    programme = doc.get("programme")
    return Appointment(
        id=doc_id(doc),
        programme_id=ref_id(programme) or "",
        programme_title=doc.get("programmeTitre")
        or (programme.get("titre") if isinstance(programme, dict) else None)
        or "",
        client=AppointmentClient(
            last_name=client.get("nom") or "-",
            first_name=client.get("prenom") or "-",
            email=client.get("email"),
            phone=client.get("telephone"),
            company=client.get("entreprise"),
        ),
        type=parse_enum(AppointmentType, doc.get("type"), AppointmentType.INFORMATION),
        status=STATUS_FROM_WIRE.get(doc.get("statut"), AppointmentStatus.PENDING),
        date=date_part(doc.get("date")),
        time=doc.get("heure") or "00:00",
        duration_minutes=int(doc.get("duree") or 60),
        location=parse_enum(LocationMode, doc.get("lieu"), LocationMode.IN_PERSON),
        address=doc.get("adresse"),
        video_link=doc.get("lienVisio"),
        notes=doc.get("notes"),
        reminder_sent=bool(doc.get("rappelEnvoye")),
        created_by=ref_id(doc.get("createdBy")),
        created_at=doc.get("createdAt"),
        updated_at=doc.get("updatedAt"),
    )


def to_wire(data: Dict[str, Any], partial: bool = False) -> Dict[str, Any]:
    wire: Dict[str, Any] = {}
    put(wire, data, "programme_id", "programme", lambda v: v or None, partial=partial)
    put(wire, data, "programme_title", "programmeTitre", partial=partial)
    put(wire, data, "client", "client", _client_to_wire, partial=partial)
    put(wire, data, "type", "type", enum_value, partial=partial)
    put(wire, data, "status", "statut", _status_to_wire, partial=partial)
    put(wire, data, "date", "date", iso_date, partial=partial)
    put(wire, data, "time", "heure", partial=partial)
    put(wire, data, "duration_minutes", "duree", partial=partial)
    put(wire, data, "location", "lieu", enum_value, partial=partial)
    put(wire, data, "address", "adresse", partial=partial)
    put(wire, data, "video_link", "lienVisio", partial=partial)
    put(wire, data, "notes", "notes", partial=partial)
    put(wire, data, "reminder_sent", "rappelEnvoye", partial=partial)
    put(wire, data, "created_by", "createdBy", partial=partial)
    if not partial:
        wire["statut"] = wire.get("statut") or STATUS_TO_WIRE[AppointmentStatus.PENDING]
        wire["duree"] = wire.get("duree") or 60
        wire["rappelEnvoye"] = bool(wire.get("rappelEnvoye"))
    return wire


class AppointmentCmsService(CmsEntityService):
    collection = "rendez-vous"
    label = "rendez-vous"
    plural = "rendez-vous"
    search_fields = ("client.nom", "client.prenom", "client.email", "programmeTitre")

    def __init__(self, client: CmsClient):
        super().__init__(client, to_entity, to_wire)
