"""
Schémas Pydantic pour les articles du blog.
Le slug et le temps de lecture sont calculés à l'enregistrement (voir services/article_fields.py).
"""

import datetime as dt
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, field_validator

from backoffice.schemas.enums import ArticleStatus


class ArticleCreate(BaseModel):
    title: str
    content: str
    summary: str = ""
    author: str = ""
    status: ArticleStatus = ArticleStatus.DRAFT
    slug: Optional[str] = None  # généré depuis le titre si absent
    categories: List[str] = []  # slugs
    tags: List[str] = []  # slugs
    main_image: Optional[str] = None
    meta_description: Optional[str] = None
    meta_keywords: List[str] = []
    featured: bool = False
    published_at: Optional[dt.date] = None

    @field_validator("title")
    @classmethod
    def title_min_length(cls, v: str) -> str:
        if len(v.strip()) < 3:
            raise ValueError("Le titre doit contenir au moins 3 caractères.")
        return v.strip()

    @field_validator("content")
    @classmethod
    def content_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Le contenu ne peut pas être vide.")
        return v

    @field_validator("meta_description")
    @classmethod
    def meta_description_length(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and len(v) > 160:
            raise ValueError("La meta description ne doit pas dépasser 160 caractères.")
        return v


class ArticleUpdate(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
    summary: Optional[str] = None
    author: Optional[str] = None
    status: Optional[ArticleStatus] = None
    categories: Optional[List[str]] = None
    tags: Optional[List[str]] = None
    main_image: Optional[str] = None
    meta_description: Optional[str] = None
    meta_keywords: Optional[List[str]] = None
    featured: Optional[bool] = None
    published_at: Optional[dt.date] = None

    @field_validator("title")
    @classmethod
    def title_min_length(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and len(v.strip()) < 3:
            raise ValueError("Le titre doit contenir au moins 3 caractères.")
        return v.strip() if v else v


class Article(BaseModel):
    id: str
    title: str
    slug: str
    content: str = ""
    summary: str = ""
    author: str = ""
    status: ArticleStatus = ArticleStatus.DRAFT
    categories: List[str] = []
    tags: List[str] = []
    main_image: Optional[str] = None
    meta_description: Optional[str] = None
    meta_keywords: List[str] = []
    views: int = 0
    reading_time: int = 1
    featured: bool = False
    published_at: Optional[dt.date] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class TermCount(BaseModel):
    """Catégorie ou tag agrégé depuis les articles."""
    slug: str
    name: str
    count: int
