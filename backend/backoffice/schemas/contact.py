"""
Schémas Pydantic pour les messages de contact (formulaire public du site).
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, field_validator

from backoffice.schemas.enums import ContactPriority, ContactStatus, ContactType


class ContactCreate(BaseModel):
    name: str
    email: EmailStr
    phone: str = ""
    type: ContactType
    subject: str
    message: str
    status: ContactStatus = ContactStatus.NEW
    priority: Optional[ContactPriority] = None  # déduite du contenu si absente

    @field_validator("name", "subject", "message")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Le champ ne peut pas être vide.")
        return v.strip()


class ContactUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    type: Optional[ContactType] = None
    subject: Optional[str] = None
    message: Optional[str] = None
    status: Optional[ContactStatus] = None
    priority: Optional[ContactPriority] = None
    response: Optional[str] = None


class ContactProcess(BaseModel):
    response: Optional[str] = None


class Contact(BaseModel):
    id: str
    name: str
    email: str
    phone: str = ""
    type: ContactType = ContactType.QUESTION
    subject: str = ""
    message: str = ""
    status: ContactStatus = ContactStatus.NEW
    priority: ContactPriority = ContactPriority.NORMAL
    response: Optional[str] = None
    responded_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
