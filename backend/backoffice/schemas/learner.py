"""
Schémas Pydantic pour les apprenants et le formulaire B2B
(fiche apprenant rattachée à une structure juridique).
"""

import datetime as dt
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, EmailStr, field_validator

from backoffice.schemas.enums import LearnerStatus


def _check_progression(v: Optional[int]) -> Optional[int]:
    if v is not None and not 0 <= v <= 100:
        raise ValueError("La progression doit être comprise entre 0 et 100.")
    return v


class LegalStructure(BaseModel):
    """Structure juridique (entreprise) qui finance la formation d'un apprenant."""
    name: str
    siret: str
    ape_code: Optional[str] = None
    address: Optional[str] = None
    postal_code: Optional[str] = None
    city: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    contact_last_name: Optional[str] = None
    contact_first_name: Optional[str] = None
    contact_role: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None


class LearnerCreate(BaseModel):
    last_name: str
    first_name: str
    email: EmailStr
    phone: str = ""
    birth_date: Optional[dt.date] = None
    address: str = ""
    status: LearnerStatus = LearnerStatus.ACTIVE
    programme_ids: List[str] = []
    progression: int = 0
    avatar: Optional[str] = None
    structure: Optional[LegalStructure] = None

    @field_validator("last_name", "first_name")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Le champ ne peut pas être vide.")
        return v.strip()

    @field_validator("progression")
    @classmethod
    def progression_range(cls, v: int) -> int:
        return _check_progression(v)


class LearnerUpdate(BaseModel):
    last_name: Optional[str] = None
    first_name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    birth_date: Optional[dt.date] = None
    address: Optional[str] = None
    status: Optional[LearnerStatus] = None
    programme_ids: Optional[List[str]] = None
    progression: Optional[int] = None
    avatar: Optional[str] = None
    structure: Optional[LegalStructure] = None

    @field_validator("last_name", "first_name")
    @classmethod
    def not_empty(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("Le champ ne peut pas être vide.")
        return v.strip() if v else v

    @field_validator("progression")
    @classmethod
    def progression_range(cls, v: Optional[int]) -> Optional[int]:
        return _check_progression(v)


class ProgressionUpdate(BaseModel):
    progression: int

    @field_validator("progression")
    @classmethod
    def progression_range(cls, v: int) -> int:
        return _check_progression(v)


class Learner(BaseModel):
    id: str
    last_name: str
    first_name: str
    email: str
    phone: str = ""
    birth_date: Optional[dt.date] = None
    address: str = ""
    status: LearnerStatus = LearnerStatus.ACTIVE
    programme_ids: List[str] = []
    progression: int = 0
    avatar: Optional[str] = None
    structure: Optional[LegalStructure] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class LearnerB2BCreate(BaseModel):
    """
    Sous-formulaire apprenant B2B saisi lors d'un rendez-vous de positionnement.
    Considéré comme renseigné uniquement si le nom de la structure et le SIRET sont fournis.
    """
    last_name: str
    first_name: str
    email: EmailStr
    phone: Optional[str] = None
    birth_date: Optional[dt.date] = None

    structure_name: str = ""
    siret: str = ""
    ape_code: Optional[str] = None
    structure_address: Optional[str] = None
    structure_postal_code: Optional[str] = None
    structure_city: Optional[str] = None
    structure_phone: Optional[str] = None
    structure_email: Optional[str] = None

    contact_last_name: Optional[str] = None
    contact_first_name: Optional[str] = None
    contact_role: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None

    @field_validator("last_name", "first_name")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Le champ ne peut pas être vide.")
        return v.strip()

    @field_validator("siret")
    @classmethod
    def siret_format(cls, v: str) -> str:
        digits = v.replace(" ", "")
        if digits and (not digits.isdigit() or len(digits) != 14):
            raise ValueError("Le SIRET doit contenir 14 chiffres.")
        return digits

    def is_populated(self) -> bool:
        return bool(self.siret and self.structure_name.strip())

    def to_learner_create(self) -> LearnerCreate:
        return LearnerCreate(
            last_name=self.last_name,
            first_name=self.first_name,
            email=self.email,
            phone=self.phone or "",
            birth_date=self.birth_date,
            structure=LegalStructure(
                name=self.structure_name.strip(),
                siret=self.siret,
                ape_code=self.ape_code,
                address=self.structure_address,
                postal_code=self.structure_postal_code,
                city=self.structure_city,
                phone=self.structure_phone,
                email=self.structure_email,
                contact_last_name=self.contact_last_name,
                contact_first_name=self.contact_first_name,
                contact_role=self.contact_role,
                contact_email=self.contact_email,
                contact_phone=self.contact_phone,
            ),
        )
