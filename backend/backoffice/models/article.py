"""
Modèle SQLAlchemy pour les articles du blog.
"""

from sqlalchemy import JSON, Boolean, Column, Date, DateTime, Integer, String, Text, func

from backoffice.database import Base
from backoffice.models._ids import new_id


class Article(Base):
    __tablename__ = "articles"

    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(String(255), nullable=False)
    slug = Column(String(255), unique=True, nullable=False)
    content = Column(Text, nullable=False, default="")
    summary = Column(Text, nullable=False, default="")
    author = Column(String(255), nullable=False, default="")
    status = Column(String(20), nullable=False, default="brouillon")  # brouillon, publie, archive
    categories = Column(JSON, nullable=False, default=list)
    tags = Column(JSON, nullable=False, default=list)
    main_image = Column(String(500), nullable=True)
    meta_description = Column(String(160), nullable=True)
    meta_keywords = Column(JSON, nullable=False, default=list)
    views = Column(Integer, nullable=False, default=0)
    reading_time = Column(Integer, nullable=False, default=1)
    featured = Column(Boolean, nullable=False, default=False)
    published_at = Column(Date, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
