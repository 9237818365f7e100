"""
Schémas Pydantic pour les programmes de formation.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, field_validator

from backoffice.schemas.enums import Level, Modality, ProgrammeStatus


def _clean_list(values: List[str]) -> List[str]:
    return [v.strip() for v in values if v and v.strip()]


class ProgrammeCreate(BaseModel):
    code: str
    title: str
    description: str = ""
    duration_hours: int
    level: Level = Level.BEGINNER
    modality: Modality = Modality.IN_PERSON
    price: float = 0
    status: ProgrammeStatus = ProgrammeStatus.DRAFT
    competencies: List[str] = []
    trainer_ids: List[str] = []  # identifiants simples, aucune intégrité référentielle
    image: Optional[str] = None
    objectives: Optional[str] = None
    prerequisites: Optional[str] = None

    @field_validator("code", "title")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Le champ ne peut pas être vide.")
        return v.strip()

    @field_validator("title")
    @classmethod
    def title_min_length(cls, v: str) -> str:
        if len(v) < 3:
            raise ValueError("Le titre doit contenir au moins 3 caractères.")
        return v

    @field_validator("duration_hours")
    @classmethod
    def duration_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("La durée doit être strictement positive.")
        return v

    @field_validator("price")
    @classmethod
    def price_not_negative(cls, v: float) -> float:
        if v < 0:
            raise ValueError("Le prix ne peut pas être négatif.")
        return v

    @field_validator("competencies", "trainer_ids")
    @classmethod
    def clean_list(cls, v: List[str]) -> List[str]:
        return _clean_list(v)


class ProgrammeUpdate(BaseModel):
    code: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    duration_hours: Optional[int] = None
    level: Optional[Level] = None
    modality: Optional[Modality] = None
    price: Optional[float] = None
    status: Optional[ProgrammeStatus] = None
    competencies: Optional[List[str]] = None
    trainer_ids: Optional[List[str]] = None
    image: Optional[str] = None
    objectives: Optional[str] = None
    prerequisites: Optional[str] = None

    @field_validator("code", "title")
    @classmethod
    def not_empty(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("Le champ ne peut pas être vide.")
        return v.strip() if v else v

    @field_validator("duration_hours")
    @classmethod
    def duration_positive(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v <= 0:
            raise ValueError("La durée doit être strictement positive.")
        return v

    @field_validator("price")
    @classmethod
    def price_not_negative(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and v < 0:
            raise ValueError("Le prix ne peut pas être négatif.")
        return v


class Programme(BaseModel):
    id: str
    code: str
    title: str
    description: str = ""
    duration_hours: int = 0
    level: Level = Level.BEGINNER
    modality: Modality = Modality.IN_PERSON
    price: float = 0
    status: ProgrammeStatus = ProgrammeStatus.DRAFT
    competencies: List[str] = []
    trainer_ids: List[str] = []
    image: Optional[str] = None
    objectives: Optional[str] = None
    prerequisites: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
