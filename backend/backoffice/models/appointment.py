"""
Modèle SQLAlchemy pour les rendez-vous.
"""

from sqlalchemy import JSON, Boolean, Column, Date, DateTime, Integer, String, Text, func

from backoffice.database import Base
from backoffice.models._ids import new_id


class Appointment(Base):
    __tablename__ = "appointments"

    id = Column(String(36), primary_key=True, default=new_id)
    programme_id = Column(String(36), nullable=False, default="")  # référence simple, pas de FK
    programme_title = Column(String(255), nullable=False, default="")
    client = Column(JSON, nullable=False)  # {last_name, first_name, email, phone, company}
    type = Column(String(20), nullable=False)
    status = Column(String(20), nullable=False, default="enAttente")
    date = Column(Date, nullable=False)
    time = Column(String(5), nullable=False)  # HH:MM
    duration_minutes = Column(Integer, nullable=False, default=60)
    location = Column(String(20), nullable=False, default="presentiel")
    address = Column(Text, nullable=True)
    video_link = Column(String(500), nullable=True)
    notes = Column(Text, nullable=True)
    reminder_sent = Column(Boolean, nullable=False, default=False)
    created_by = Column(String(36), nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
