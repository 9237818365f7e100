"""
Calcul des champs dérivés d'un article au moment de l'enregistrement.

- création : slug depuis le titre (sauf slug fourni), temps de lecture, compteur de vues à 0
- mise à jour : slug régénéré si le titre change, temps de lecture recalculé si le contenu change

Un titre sans aucun caractère exploitable ("???") ne produit pas de slug : ValueError.
"""

from typing import Any, Dict, Optional

from backoffice.schemas.article import Article
from backoffice.text_utils import reading_time, slugify


def _slug_from(text: str) -> str:
    slug = slugify(text)
    if not slug:
        raise ValueError(f"Impossible de générer un slug à partir de '{text}'.")
    return slug


def for_create(data: Dict[str, Any]) -> Dict[str, Any]:
    data = dict(data)
    data["slug"] = _slug_from(data.get("slug") or data["title"])
    data["reading_time"] = reading_time(data.get("content") or "")
    data["views"] = 0
    return data


def for_update(current: Optional[Article], changes: Dict[str, Any]) -> Dict[str, Any]:
    changes = dict(changes)
    title = changes.get("title")
    if title is not None and (current is None or title != current.title):
        changes["slug"] = _slug_from(title)
    content = changes.get("content")
    if content is not None and (current is None or content != current.content):
        changes["reading_time"] = reading_time(content)
    return changes
