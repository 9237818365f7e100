"""
Modèle SQLAlchemy pour les formations personnalisées.
Les sous-sections du dossier (planning, modalités, évaluation...) sont des documents JSON.
"""

from sqlalchemy import JSON, Column, DateTime, Float, Integer, String, Text, func

from backoffice.database import Base
from backoffice.models._ids import new_id


class CustomProgramme(Base):
    __tablename__ = "custom_programmes"

    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(String(255), nullable=False)
    code = Column(String(50), nullable=False)
    description = Column(Text, nullable=True)
    duration_hours = Column(Integer, nullable=True)
    level = Column(String(50), nullable=True)
    price = Column(Float, nullable=True)
    objectives = Column(Text, nullable=True)
    schedule = Column(JSON, nullable=False, default=list)
    access = Column(JSON, nullable=True)
    trainer = Column(JSON, nullable=True)
    resources = Column(JSON, nullable=False, default=list)
    evaluation = Column(JSON, nullable=True)
    certification_outcome = Column(Text, nullable=True)
    certification_level = Column(String(100), nullable=True)
    accessibility = Column(JSON, nullable=True)
    dropout = Column(JSON, nullable=True)
    status = Column(String(20), nullable=False, default="EN_COURS")
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
