"""
Schémas Pydantic pour les rendez-vous.

Note : datetime est importé en tant que module (dt) pour éviter le conflit de nommage
entre le champ `date` et le type `datetime.date` dans Pydantic v2.
"""

import datetime as dt
import re
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, field_validator, model_validator

from backoffice.schemas.enums import AppointmentStatus, AppointmentType, LocationMode

_TIME_FORMAT = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def _check_time(v: Optional[str]) -> Optional[str]:
    if v is not None and not _TIME_FORMAT.match(v):
        raise ValueError("L'heure doit être au format HH:MM.")
    return v


class AppointmentClient(BaseModel):
    """Contact ponctuel du rendez-vous (ce n'est pas un utilisateur)."""
    last_name: str
    first_name: str
    email: EmailStr
    phone: Optional[str] = None
    company: Optional[str] = None

    @field_validator("last_name", "first_name")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Le champ ne peut pas être vide.")
        return v.strip()


class AppointmentCreate(BaseModel):
    programme_id: str = ""
    programme_title: str = ""
    client: AppointmentClient
    type: AppointmentType = AppointmentType.INFORMATION
    status: AppointmentStatus = AppointmentStatus.PENDING
    date: dt.date
    time: str
    duration_minutes: int = 60
    location: LocationMode = LocationMode.IN_PERSON
    address: Optional[str] = None  # présentiel uniquement
    video_link: Optional[str] = None  # visio uniquement
    notes: Optional[str] = None
    reminder_sent: bool = False
    created_by: Optional[str] = None

    @field_validator("time")
    @classmethod
    def time_format(cls, v: str) -> str:
        return _check_time(v)

    @field_validator("duration_minutes")
    @classmethod
    def duration_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("La durée doit être strictement positive.")
        return v

    @model_validator(mode="after")
    def keep_location_fields(self) -> "AppointmentCreate":
        if self.location != LocationMode.IN_PERSON:
            self.address = None
        if self.location != LocationMode.VIDEO:
            self.video_link = None
        return self


class AppointmentUpdate(BaseModel):
    programme_id: Optional[str] = None
    programme_title: Optional[str] = None
    client: Optional[AppointmentClient] = None
    type: Optional[AppointmentType] = None
    status: Optional[AppointmentStatus] = None
    date: Optional[dt.date] = None
    time: Optional[str] = None
    duration_minutes: Optional[int] = None
    location: Optional[LocationMode] = None
    address: Optional[str] = None
    video_link: Optional[str] = None
    notes: Optional[str] = None
    reminder_sent: Optional[bool] = None

    @field_validator("time")
    @classmethod
    def time_format(cls, v: Optional[str]) -> Optional[str]:
        return _check_time(v)

    @field_validator("duration_minutes")
    @classmethod
    def duration_positive(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v <= 0:
            raise ValueError("La durée doit être strictement positive.")
        return v


class Appointment(BaseModel):
    id: str
    programme_id: str = ""
    programme_title: str = ""
    client: AppointmentClient
    type: AppointmentType
    status: AppointmentStatus = AppointmentStatus.PENDING
    date: dt.date
    time: str
    duration_minutes: int = 60
    location: LocationMode = LocationMode.IN_PERSON
    address: Optional[str] = None
    video_link: Optional[str] = None
    notes: Optional[str] = None
    reminder_sent: bool = False
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
