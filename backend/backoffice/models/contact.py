"""
Modèle SQLAlchemy pour les messages de contact.
"""

from sqlalchemy import Column, DateTime, String, Text, func

from backoffice.database import Base
from backoffice.models._ids import new_id


class Contact(Base):
    __tablename__ = "contacts"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(200), nullable=False)
    email = Column(String(255), nullable=False, index=True)
    phone = Column(String(30), nullable=False, default="")
    type = Column(String(20), nullable=False, default="question")  # question, reclamation, formation, devis
    subject = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    status = Column(String(20), nullable=False, default="nouveau")  # nouveau, enCours, traite, ferme
    priority = Column(String(20), nullable=False, default="normale")
    response = Column(Text, nullable=True)
    responded_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
