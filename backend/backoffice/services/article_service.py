"""
Service CMS pour les articles du blog (collection "articles").
Les catégories et tags arrivent sous forme de slug ou d'objet peuplé (slug / nom).
"""

import logging
from typing import Any, Dict, List

from backoffice.cms.client import CmsClient
from backoffice.schemas.article import Article
from backoffice.schemas.enums import ArticleStatus
from backoffice.services.cms_service import CmsEntityService
from backoffice.services.wire import date_part, doc_id, enum_value, iso_date, media_url, parse_enum, put
from backoffice.text_utils import reading_time

logger = logging.getLogger(__name__)


def _term_slugs(values: Any) -> List[str]:
    slugs = []
    for value in values or []:
        if isinstance(value, dict):
            value = value.get("slug") or value.get("nom")
        if value:
            slugs.append(str(value))
    return slugs


def to_entity(doc: Dict[str, Any]) -> Article:
    content = doc.get("contenu") or ""
    return Article(
        id=doc_id(doc),
        title=doc.get("titre") or "",
        slug=doc.get("slug") or "",
        content=content,
        summary=doc.get("resume") or "",
        author=doc.get("auteur") or "",
        status=parse_enum(ArticleStatus, doc.get("statut"), ArticleStatus.DRAFT),
        categories=_term_slugs(doc.get("categories")),
        tags=_term_slugs(doc.get("tags")),
        main_image=media_url(doc.get("imagePrincipale")),
        meta_description=doc.get("metaDescription"),
        meta_keywords=[
            k.get("keyword", "") if isinstance(k, dict) else str(k)
            for k in doc.get("metaKeywords") or []
        ],
        views=int(doc.get("vue") or 0),
        reading_time=int(doc.get("tempsLecture") or reading_time(content)),
        featured=bool(doc.get("featured")),
        published_at=date_part(doc.get("datePublication")),
        created_at=doc.get("createdAt"),
        updated_at=doc.get("updatedAt"),
    )


def to_wire(data: Dict[str, Any], partial: bool = False) -> Dict[str, Any]:
    wire: Dict[str, Any] = {}
    put(wire, data, "title", "titre", partial=partial)
    put(wire, data, "slug", "slug", partial=partial)
    put(wire, data, "content", "contenu", partial=partial)
    put(wire, data, "summary", "resume", partial=partial)
    put(wire, data, "author", "auteur", partial=partial)
    put(wire, data, "status", "statut", enum_value, partial=partial)
    put(wire, data, "categories", "categories", partial=partial)
    put(wire, data, "tags", "tags", partial=partial)
    put(wire, data, "main_image", "imagePrincipale", partial=partial)
    put(wire, data, "meta_description", "metaDescription", partial=partial)
    put(wire, data, "meta_keywords", "metaKeywords", lambda ks: [{"keyword": k} for k in ks], partial=partial)
    put(wire, data, "views", "vue", partial=partial)
    put(wire, data, "reading_time", "tempsLecture", partial=partial)
    put(wire, data, "featured", "featured", partial=partial)
    put(wire, data, "published_at", "datePublication", iso_date, partial=partial)
    return wire


class ArticleCmsService(CmsEntityService):
    collection = "articles"
    label = "article"
    search_fields = ("titre", "resume", "contenu")
    sort = "-datePublication"
    depth = 2

    def __init__(self, client: CmsClient):
        super().__init__(client, to_entity, to_wire)
