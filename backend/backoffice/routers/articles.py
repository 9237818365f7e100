"""
Router pour les articles du blog, leurs catégories et leurs tags.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from backoffice.cms.notifications import Notifier
from backoffice.datasources.base import DataSource, NotFoundError
from backoffice.dependencies import get_data_source, get_notifier, run_mutation, safe_read
from backoffice.schemas.article import Article, ArticleCreate, ArticleUpdate, TermCount
from backoffice.schemas.enums import ArticleStatus

router = APIRouter(prefix="/api/articles", tags=["Articles"])


@router.get("", response_model=List[Article], summary="Lister les articles")
def list_articles(
    q: Optional[str] = None,
    status: Optional[ArticleStatus] = None,
    featured: Optional[bool] = None,
    source: DataSource = Depends(get_data_source),
):
    if q:
        return safe_read(lambda: source.search_articles(q), [], "recherche d'articles")
    filters = {k: v for k, v in {"status": status, "featured": featured}.items() if v is not None}
    return safe_read(lambda: source.get_articles(filters or None), [], "articles")


@router.get("/categories", response_model=List[TermCount], summary="Catégories utilisées")
def list_categories(source: DataSource = Depends(get_data_source)):
    """Catégories avec leur nombre d'articles, par ordre décroissant."""
    return safe_read(source.get_categories, [], "catégories")


@router.get("/tags", response_model=List[TermCount], summary="Tags utilisés")
def list_tags(source: DataSource = Depends(get_data_source)):
    return safe_read(source.get_tags, [], "tags")


@router.get("/slug/{slug}", response_model=Article, summary="Article par slug")
def get_article_by_slug(slug: str, source: DataSource = Depends(get_data_source)):
    article = safe_read(lambda: source.get_article_by_slug(slug), None, f"article {slug}")
    if article is None:
        raise HTTPException(status_code=404, detail="Article introuvable.")
    return article


@router.get("/{article_id}", response_model=Article, summary="Détail d'un article")
def get_article(article_id: str, source: DataSource = Depends(get_data_source)):
    article = safe_read(lambda: source.get_article(article_id), None, f"article {article_id}")
    if article is None:
        raise HTTPException(status_code=404, detail="Article introuvable.")
    return article


@router.post("", response_model=Article, status_code=201, summary="Créer un article")
def create_article(
    data: ArticleCreate,
    source: DataSource = Depends(get_data_source),
    notifier: Notifier = Depends(get_notifier),
):
    """Le slug et le temps de lecture sont calculés à l'enregistrement."""
    return run_mutation(
        notifier,
        lambda: source.create_article(data),
        loading="Publication de l'article...",
        success="Article créé avec succès",
        error="Erreur lors de la création de l'article",
    )


@router.patch("/{article_id}", response_model=Article, summary="Modifier un article")
def update_article(
    article_id: str,
    data: ArticleUpdate,
    source: DataSource = Depends(get_data_source),
    notifier: Notifier = Depends(get_notifier),
):
    return run_mutation(
        notifier,
        lambda: source.update_article(article_id, data),
        loading="Mise à jour de l'article...",
        success="Article mis à jour",
        error="Erreur lors de la mise à jour de l'article",
    )


@router.post("/{article_id}/views", response_model=Article, summary="Incrémenter les vues")
def increment_views(article_id: str, source: DataSource = Depends(get_data_source)):
    """Compteur de lecture : aucune notification."""
    try:
        return source.increment_views(article_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{article_id}", status_code=204, summary="Supprimer un article")
def delete_article(
    article_id: str,
    source: DataSource = Depends(get_data_source),
    notifier: Notifier = Depends(get_notifier),
):
    run_mutation(
        notifier,
        lambda: source.delete_article(article_id),
        loading="Suppression de l'article...",
        success="Article supprimé",
        error="Erreur lors de la suppression de l'article",
    )
