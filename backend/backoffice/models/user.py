"""
Modèle SQLAlchemy pour les utilisateurs du back-office.
Le mot de passe n'est jamais stocké en clair (voir security.py).
"""

from sqlalchemy import Column, Date, DateTime, String, Text, func

from backoffice.database import Base
from backoffice.models._ids import new_id


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=new_id)
    email = Column(String(255), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=True)
    first_name = Column(String(100), nullable=False, default="")
    last_name = Column(String(100), nullable=False, default="")
    role = Column(String(50), nullable=False, default="BENEFICIAIRE")
    status = Column(String(20), nullable=False, default="active")  # active, inactive, pending
    phone = Column(String(30), nullable=True)
    address = Column(Text, nullable=True)
    birth_date = Column(Date, nullable=True)
    avatar = Column(String(500), nullable=True)
    last_login_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
