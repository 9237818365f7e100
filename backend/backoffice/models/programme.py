"""
Modèle SQLAlchemy pour les programmes de formation.
"""

from sqlalchemy import JSON, Column, DateTime, Float, Integer, String, Text, func

from backoffice.database import Base
from backoffice.models._ids import new_id


class Programme(Base):
    __tablename__ = "programmes"

    id = Column(String(36), primary_key=True, default=new_id)
    code = Column(String(50), unique=True, nullable=False)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    duration_hours = Column(Integer, nullable=False)
    level = Column(String(20), nullable=False, default="DEBUTANT")  # DEBUTANT, INTERMEDIAIRE, AVANCE
    modality = Column(String(20), nullable=False, default="PRESENTIEL")  # PRESENTIEL, DISTANCIEL, HYBRIDE
    price = Column(Float, nullable=False, default=0)
    status = Column(String(20), nullable=False, default="BROUILLON")  # BROUILLON, PUBLIE, ARCHIVE
    competencies = Column(JSON, nullable=False, default=list)
    trainer_ids = Column(JSON, nullable=False, default=list)
    image = Column(String(500), nullable=True)
    objectives = Column(Text, nullable=True)
    prerequisites = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
