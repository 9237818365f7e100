"""
Schémas Pydantic du formulaire de prise de rendez-vous (rendez-vous + fiche apprenant B2B).
"""

from typing import Dict, List, Optional

from pydantic import BaseModel

from backoffice.schemas.appointment import Appointment, AppointmentCreate
from backoffice.schemas.learner import Learner, LearnerB2BCreate


class BookingRequest(BaseModel):
    appointment: AppointmentCreate
    learner: Optional[LearnerB2BCreate] = None


class BookingResponse(BaseModel):
    appointment: Appointment
    learner: Optional[Learner] = None
    learner_error: Optional[str] = None
    notifications: List[Dict[str, Optional[str]]] = []
