"""
Schémas Pydantic pour les formations personnalisées (dossier programme sur mesure, B2B).
Agrégat de type document : aucun cycle de vie propre hors création / mise à jour / suppression.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, field_validator

from backoffice.schemas.enums import CustomProgrammeStatus


class ScheduleModule(BaseModel):
    title: str
    description: Optional[str] = None
    duration: Optional[str] = None


class ScheduleDay(BaseModel):
    day: Optional[str] = None  # ex. "Jour 1"
    duration: Optional[str] = None
    modules: List[ScheduleModule] = []


class AccessModalities(BaseModel):
    prerequisites: Optional[str] = None
    audience: Optional[str] = None
    duration: Optional[str] = None
    schedule_hours: Optional[str] = None
    lead_time: Optional[str] = None
    fee: Optional[float] = None
    payment_terms: Optional[str] = None


class TrainerContact(BaseModel):
    name: str
    email: str
    phone: Optional[str] = None
    role: Optional[str] = None
    biography: Optional[str] = None


class Resource(BaseModel):
    name: str
    description: Optional[str] = None


class EvaluationType(BaseModel):
    type: str
    description: Optional[str] = None


class EvaluationMethods(BaseModel):
    types: List[EvaluationType] = []
    platform: Optional[str] = None
    analysis_grid: Optional[str] = None


class Accessibility(BaseModel):
    referent: Optional[str] = None
    referent_contact: Optional[str] = None
    adaptations: Optional[str] = None


class DropoutConditions(BaseModel):
    withdrawal_conditions: Optional[str] = None
    dropout_billing: Optional[str] = None


class CustomProgrammeCreate(BaseModel):
    title: str
    code: str
    description: Optional[str] = None
    duration_hours: Optional[int] = None
    level: Optional[str] = None
    price: Optional[float] = None
    objectives: Optional[str] = None
    schedule: List[ScheduleDay] = []
    access: Optional[AccessModalities] = None
    trainer: Optional[TrainerContact] = None
    resources: List[Resource] = []
    evaluation: Optional[EvaluationMethods] = None
    certification_outcome: Optional[str] = None
    certification_level: Optional[str] = None
    accessibility: Optional[Accessibility] = None
    dropout: Optional[DropoutConditions] = None
    status: CustomProgrammeStatus = CustomProgrammeStatus.IN_PROGRESS

    @field_validator("title", "code")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Le champ ne peut pas être vide.")
        return v.strip()


class CustomProgrammeUpdate(BaseModel):
    title: Optional[str] = None
    code: Optional[str] = None
    description: Optional[str] = None
    duration_hours: Optional[int] = None
    level: Optional[str] = None
    price: Optional[float] = None
    objectives: Optional[str] = None
    schedule: Optional[List[ScheduleDay]] = None
    access: Optional[AccessModalities] = None
    trainer: Optional[TrainerContact] = None
    resources: Optional[List[Resource]] = None
    evaluation: Optional[EvaluationMethods] = None
    certification_outcome: Optional[str] = None
    certification_level: Optional[str] = None
    accessibility: Optional[Accessibility] = None
    dropout: Optional[DropoutConditions] = None
    status: Optional[CustomProgrammeStatus] = None


class CustomProgramme(BaseModel):
    id: str
    title: str
    code: str
    description: Optional[str] = None
    duration_hours: Optional[int] = None
    level: Optional[str] = None
    price: Optional[float] = None
    objectives: Optional[str] = None
    schedule: List[ScheduleDay] = []
    access: Optional[AccessModalities] = None
    trainer: Optional[TrainerContact] = None
    resources: List[Resource] = []
    evaluation: Optional[EvaluationMethods] = None
    certification_outcome: Optional[str] = None
    certification_level: Optional[str] = None
    accessibility: Optional[Accessibility] = None
    dropout: Optional[DropoutConditions] = None
    status: CustomProgrammeStatus = CustomProgrammeStatus.IN_PROGRESS
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
