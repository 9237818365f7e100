"""
Service CMS pour les formations personnalisées (collection "formations_personnalisees").

Le document CMS mélange snake_case (programme_detail, modalites_acces...) et
camelCase (sanctionFormation, accessibiliteHandicap...) : les tables ci-dessous
décrivent la correspondance de chaque sous-section.
"""

import logging
from typing import Any, Dict, Optional, Type

from pydantic import BaseModel

from backoffice.cms.client import CmsClient
from backoffice.schemas.custom_programme import (
    Accessibility,
    AccessModalities,
    CustomProgramme,
    DropoutConditions,
    EvaluationMethods,
    EvaluationType,
    Resource,
    ScheduleDay,
    ScheduleModule,
    TrainerContact,
)
from backoffice.schemas.enums import CustomProgrammeStatus
from backoffice.services.cms_service import CmsEntityService
from backoffice.services.wire import doc_id, enum_value, parse_enum, put

logger = logging.getLogger(__name__)

_ACCESS = {
    "prerequisites": "prerequis",
    "audience": "public_concerne",
    "duration": "duree",
    "schedule_hours": "horaires",
    "lead_time": "delais_mise_en_place",
    "fee": "tarif",
    "payment_terms": "modalites_reglement",
}
_TRAINER = {
    "name": "nom",
    "email": "email",
    "phone": "telephone",
    "role": "role",
    "biography": "biographie",
}
_ACCESSIBILITY = {
    "referent": "referentHandicap",
    "referent_contact": "contactReferent",
    "adaptations": "adaptationsProposees",
}
_DROPOUT = {
    "withdrawal_conditions": "conditionsRenonciation",
    "dropout_billing": "facturationAbandon",
}


def _block_from_wire(value: Any, model: Type[BaseModel], mapping: Dict[str, str]) -> Optional[Any]:
    if not isinstance(value, dict):
        return None
    return model(**{field: value.get(key) for field, key in mapping.items() if value.get(key) is not None})


def _block_to_wire(value: Any, mapping: Dict[str, str]) -> Dict[str, Any]:
    if hasattr(value, "model_dump"):
        value = value.model_dump()
    return {key: value.get(field) for field, key in mapping.items()}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value.model_dump() if hasattr(value, "model_dump") else dict(value)


def _schedule_from_wire(days: Any) -> list:
    return [
        ScheduleDay(
            day=day.get("jour"),
            duration=day.get("duree"),
            modules=[
                ScheduleModule(title=m.get("titre") or "", description=m.get("description"), duration=m.get("duree"))
                for m in day.get("modules") or []
            ],
        )
        for day in days or []
    ]


def _schedule_to_wire(days: list) -> list:
    wire = []
    for day in map(_as_dict, days):
        wire.append({
            "jour": day.get("day"),
            "duree": day.get("duration"),
            "modules": [
                {"titre": m.get("title"), "description": m.get("description"), "duree": m.get("duration")}
                for m in map(_as_dict, day.get("modules") or [])
            ],
        })
    return wire


def _evaluation_from_wire(value: Any) -> Optional[EvaluationMethods]:
    if not isinstance(value, dict):
        return None
    return EvaluationMethods(
        types=[
            EvaluationType(type=t.get("type") or "", description=t.get("description"))
            for t in value.get("types_evaluation") or []
        ],
        platform=value.get("plateforme_evaluation"),
        analysis_grid=value.get("grille_analyse"),
    )


def _evaluation_to_wire(value: Any) -> Dict[str, Any]:
    value = _as_dict(value)
    return {
        "types_evaluation": [_as_dict(t) for t in value.get("types") or []],
        "plateforme_evaluation": value.get("platform"),
        "grille_analyse": value.get("analysis_grid"),
    }


def to_entity(doc: Dict[str, Any]) -> CustomProgramme:
    return CustomProgramme(
        id=doc_id(doc),
        title=doc.get("title") or "",
        code=doc.get("code_formation") or "",
        description=doc.get("description"),
        duration_hours=doc.get("duree"),
        level=doc.get("niveau"),
        price=doc.get("prix"),
        objectives=doc.get("objectifs"),
        schedule=_schedule_from_wire(doc.get("programme_detail")),
        access=_block_from_wire(doc.get("modalites_acces"), AccessModalities, _ACCESS),
        trainer=_block_from_wire(doc.get("contact_formateur"), TrainerContact, _TRAINER),
        resources=[
            Resource(name=r.get("ressource") or "", description=r.get("description"))
            for r in doc.get("ressources_dispo") or []
        ],
        evaluation=_evaluation_from_wire(doc.get("modalites_evaluation")),
        certification_outcome=doc.get("sanctionFormation"),
        certification_level=doc.get("niveauCertification"),
        accessibility=_block_from_wire(doc.get("accessibiliteHandicap"), Accessibility, _ACCESSIBILITY),
        dropout=_block_from_wire(doc.get("cessationAbandon"), DropoutConditions, _DROPOUT),
        status=parse_enum(CustomProgrammeStatus, doc.get("statut"), CustomProgrammeStatus.IN_PROGRESS),
        created_at=doc.get("createdAt"),
        updated_at=doc.get("updatedAt"),
    )


def to_wire(data: Dict[str, Any], partial: bool = False) -> Dict[str, Any]:
    wire: Dict[str, Any] = {}
    put(wire, data, "title", "title", partial=partial)
    put(wire, data, "code", "code_formation", partial=partial)
    put(wire, data, "description", "description", partial=partial)
    put(wire, data, "duration_hours", "duree", partial=partial)
    put(wire, data, "level", "niveau", partial=partial)
    put(wire, data, "price", "prix", partial=partial)
    put(wire, data, "objectives", "objectifs", partial=partial)
    put(wire, data, "schedule", "programme_detail", _schedule_to_wire, partial=partial)
    put(wire, data, "access", "modalites_acces", lambda v: _block_to_wire(v, _ACCESS), partial=partial)
    put(wire, data, "trainer", "contact_formateur", lambda v: _block_to_wire(v, _TRAINER), partial=partial)
    put(
        wire, data, "resources", "ressources_dispo",
        lambda rs: [{"ressource": r["name"], "description": r.get("description")} for r in map(_as_dict, rs)],
        partial=partial,
    )
    put(wire, data, "evaluation", "modalites_evaluation", _evaluation_to_wire, partial=partial)
    put(wire, data, "certification_outcome", "sanctionFormation", partial=partial)
    put(wire, data, "certification_level", "niveauCertification", partial=partial)
    put(wire, data, "accessibility", "accessibiliteHandicap", lambda v: _block_to_wire(v, _ACCESSIBILITY), partial=partial)
    put(wire, data, "dropout", "cessationAbandon", lambda v: _block_to_wire(v, _DROPOUT), partial=partial)
    put(wire, data, "status", "statut", enum_value, partial=partial)
    if not partial:
        wire["statut"] = wire.get("statut") or CustomProgrammeStatus.IN_PROGRESS.value
    return wire


class CustomProgrammeCmsService(CmsEntityService):
    collection = "formations_personnalisees"
    label = "formation personnalisée"
    plural = "formations personnalisées"
    search_fields = ("title", "code_formation", "description")

    def __init__(self, client: CmsClient):
        super().__init__(client, to_entity, to_wire)
