"""
Schémas Pydantic pour les utilisateurs.

Schéma canonique unique (first_name / last_name) : les conventions historiques
du CMS (name, firstName, lastName, nom, prenom) sont traduites par le service CMS.
"""

import datetime as dt
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, EmailStr, computed_field, field_validator

from backoffice.permissions import permissions_for_role
from backoffice.schemas.enums import UserRole, UserStatus

MIN_PASSWORD_LENGTH = 8


class UserCreate(BaseModel):
    email: EmailStr
    password: str
    first_name: str
    last_name: str = ""
    role: UserRole = UserRole.BENEFICIAIRE
    status: UserStatus = UserStatus.ACTIVE
    phone: Optional[str] = None
    address: Optional[str] = None
    birth_date: Optional[dt.date] = None
    avatar: Optional[str] = None

    @field_validator("first_name")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Le prénom ne peut pas être vide.")
        return v.strip()

    @field_validator("password")
    @classmethod
    def password_length(cls, v: str) -> str:
        if len(v) < MIN_PASSWORD_LENGTH:
            raise ValueError(f"Le mot de passe doit contenir au moins {MIN_PASSWORD_LENGTH} caractères.")
        return v


class UserUpdate(BaseModel):
    email: Optional[EmailStr] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: Optional[UserRole] = None
    status: Optional[UserStatus] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    birth_date: Optional[dt.date] = None
    avatar: Optional[str] = None

    @field_validator("first_name")
    @classmethod
    def not_empty(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("Le prénom ne peut pas être vide.")
        return v.strip() if v else v


class PasswordChange(BaseModel):
    new_password: str

    @field_validator("new_password")
    @classmethod
    def password_length(cls, v: str) -> str:
        if len(v) < MIN_PASSWORD_LENGTH:
            raise ValueError(f"Le mot de passe doit contenir au moins {MIN_PASSWORD_LENGTH} caractères.")
        return v


class User(BaseModel):
    id: str
    email: str
    first_name: str = ""
    last_name: str = ""
    role: UserRole = UserRole.BENEFICIAIRE
    status: UserStatus = UserStatus.ACTIVE
    phone: Optional[str] = None
    address: Optional[str] = None
    birth_date: Optional[dt.date] = None
    avatar: Optional[str] = None
    last_login_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}

    @computed_field
    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip() or self.email

    @computed_field
    @property
    def permissions(self) -> List[str]:
        return sorted(permissions_for_role(self.role))

    def is_active(self) -> bool:
        return self.status == UserStatus.ACTIVE
