"""
Schéma Pydantic pour les médias hébergés par le CMS.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class Media(BaseModel):
    id: str
    filename: str = ""
    url: Optional[str] = None
    mime_type: Optional[str] = None
    filesize: Optional[int] = None
    alt: Optional[str] = None
    created_at: Optional[datetime] = None
