"""
Modèle SQLAlchemy pour les apprenants.
La structure juridique (B2B) est stockée telle quelle en JSON.
"""

from sqlalchemy import JSON, Column, Date, DateTime, Integer, String, Text, func

from backoffice.database import Base
from backoffice.models._ids import new_id


class Learner(Base):
    __tablename__ = "learners"

    id = Column(String(36), primary_key=True, default=new_id)
    last_name = Column(String(100), nullable=False)
    first_name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False, index=True)
    phone = Column(String(30), nullable=False, default="")
    birth_date = Column(Date, nullable=True)
    address = Column(Text, nullable=False, default="")
    status = Column(String(20), nullable=False, default="ACTIF")  # ACTIF, INACTIF, TERMINE
    programme_ids = Column(JSON, nullable=False, default=list)
    progression = Column(Integer, nullable=False, default=0)
    avatar = Column(String(500), nullable=True)
    structure = Column(JSON, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
