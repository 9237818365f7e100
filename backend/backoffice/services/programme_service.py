"""
Service CMS pour les programmes de formation (collection "programmes").

Format du CMS : codeFormation, titre, duree, niveau, modalites, prix, statut
(actif / inactif / archive), competences [{competence}], formateurs [ids].
"""

import logging
from typing import Any, Dict

from backoffice.cms.client import CmsClient
from backoffice.schemas.enums import Level, Modality, ProgrammeStatus
from backoffice.schemas.programme import Programme
from backoffice.services.cms_service import CmsEntityService
from backoffice.services.wire import doc_id, enum_value, media_url, parse_enum, put, ref_id

logger = logging.getLogger(__name__)

STATUS_TO_WIRE = {
    ProgrammeStatus.PUBLISHED: "actif",
    ProgrammeStatus.DRAFT: "inactif",
    ProgrammeStatus.ARCHIVED: "archive",
}
STATUS_FROM_WIRE = {v: k for k, v in STATUS_TO_WIRE.items()}


def _status_to_wire(value: Any) -> str:
    return STATUS_TO_WIRE[ProgrammeStatus(enum_value(value))]


def to_entity(doc: Dict[str, Any]) -> Programme:
    """Document CMS → Programme, avec valeurs par défaut pour les champs optionnels."""
    return Programme(
        id=doc_id(doc),
        code=doc.get("codeFormation") or "",
        title=doc.get("titre") or "",
        description=doc.get("description") or "",
        duration_hours=int(doc.get("duree") or 0),
        level=parse_enum(Level, doc.get("niveau"), Level.BEGINNER),
        modality=parse_enum(Modality, doc.get("modalites"), Modality.IN_PERSON),
        price=float(doc.get("prix") or 0),
        status=STATUS_FROM_WIRE.get(doc.get("statut"), ProgrammeStatus.DRAFT),
        competencies=[
            c.get("competence", "") if isinstance(c, dict) else str(c)
            for c in doc.get("competences") or []
        ],
        trainer_ids=[i for i in (ref_id(f) for f in doc.get("formateurs") or []) if i],
        image=media_url(doc.get("image")),
        objectives=doc.get("objectifs"),
        prerequisites=doc.get("prerequis"),
        created_at=doc.get("createdAt"),
        updated_at=doc.get("updatedAt"),
    )


def _default_fields(wire: Dict[str, Any]) -> None:
    """Textes pédagogiques exigés par le CMS, déduits du programme s'ils manquent."""
    title = wire.get("titre") or ""
    level = wire.get("niveau") or Level.BEGINNER.value
    modality = wire.get("modalites") or Modality.IN_PERSON.value
    defaults = {
        "objectifs": f"Formation {level.lower()} de {wire.get('duree')} heures sur {title}",
        "prerequis": (
            "Aucun prérequis technique"
            if level == Level.BEGINNER.value
            else "Connaissances de base en informatique"
        ),
        "programme": f"Programme détaillé de la formation {title}",
        "modalitesPedagogiques": f"Formation en {modality.lower()} avec approche pratique",
        "evaluation": "Évaluation continue et projet final",
        "certification": "Attestation de formation délivrée",
        "eligibleCPF": True,
    }
    for key, value in defaults.items():
        if not wire.get(key):
            wire[key] = value


def to_wire(data: Dict[str, Any], partial: bool = False) -> Dict[str, Any]:
    """Données canoniques → document CMS. En mode partiel, aucun défaut n'est ajouté."""
    wire: Dict[str, Any] = {}
    put(wire, data, "code", "codeFormation", partial=partial)
    put(wire, data, "title", "titre", partial=partial)
    put(wire, data, "description", "description", partial=partial)
    put(wire, data, "duration_hours", "duree", partial=partial)
    put(wire, data, "level", "niveau", enum_value, partial=partial)
    put(wire, data, "modality", "modalites", enum_value, partial=partial)
    put(wire, data, "price", "prix", partial=partial)
    put(wire, data, "status", "statut", _status_to_wire, partial=partial)
    put(wire, data, "competencies", "competences", lambda cs: [{"competence": c} for c in cs], partial=partial)
    put(wire, data, "trainer_ids", "formateurs", partial=partial)
    put(wire, data, "image", "image", partial=partial)
    put(wire, data, "objectives", "objectifs", partial=partial)
    put(wire, data, "prerequisites", "prerequis", partial=partial)
    if not partial:
        wire["competences"] = wire.get("competences") or []
        wire["formateurs"] = wire.get("formateurs") or []
        _default_fields(wire)
    return wire


class ProgrammeCmsService(CmsEntityService):
    collection = "programmes"
    label = "programme"
    search_fields = ("titre", "description", "codeFormation")

    def __init__(self, client: CmsClient):
        super().__init__(client, to_entity, to_wire)
