"""
Service générique d'accès à une collection du CMS.

Chaque service d'entité fournit sa collection, ses champs de recherche et
sa paire de fonctions de mapping pures (document CMS → entité, données → document CMS).
Les erreurs de transport sont journalisées puis relancées sans modification.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Sequence

from backoffice.cms.client import CmsApiError, CmsClient
from backoffice.services.wire import unwrap_doc

logger = logging.getLogger(__name__)

LIST_LIMIT = 1000


def _query_value(value: Any) -> Any:
    # Payload attend "true" / "false" dans la query string
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


class CmsEntityService:
    collection: str = ""
    label: str = "document"  # utilisé dans les messages de log
    plural: str = ""
    search_fields: Sequence[str] = ()  # noms des champs côté CMS
    sort: str = "-createdAt"
    depth: int = 1

    def __init__(
        self,
        client: CmsClient,
        to_entity: Callable[[Dict[str, Any]], Any],
        to_wire: Callable[..., Dict[str, Any]],
    ):
        self.client = client
        self._to_entity = to_entity
        self._to_wire = to_wire

    @property
    def _plural(self) -> str:
        return self.plural or f"{self.label}s"

    @property
    def endpoint(self) -> str:
        return f"/api/{self.collection}"

    def _fetch(self, params: Dict[str, Any]) -> List[Any]:
        params = {"depth": self.depth, "limit": LIST_LIMIT, "sort": self.sort, **params}
        result = self.client.get(self.endpoint, params)
        return [self._to_entity(doc) for doc in result.get("docs", [])]

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Any]:
        """Liste complète, filtrée par égalité sur les champs fournis."""
        params: Dict[str, Any] = {}
        if filters:
            for key, value in self._to_wire(filters, partial=True).items():
                params[f"where[{key}][equals]"] = _query_value(value)
        try:
            return self._fetch(params)
        except Exception as e:
            logger.error("Erreur lors de la récupération des %s : %s", self._plural, e)
            raise

    def get(self, entity_id: str) -> Optional[Any]:
        """Retourne None si le document n'existe pas (404)."""
        try:
            doc = self.client.get(f"{self.endpoint}/{entity_id}", {"depth": self.depth})
        except CmsApiError as e:
            if e.status == 404:
                return None
            logger.error("Erreur lors de la récupération du %s %s : %s", self.label, entity_id, e)
            raise
        return self._to_entity(doc)

    def create(self, data: Dict[str, Any]) -> Any:
        try:
            result = self.client.post(self.endpoint, self._to_wire(data))
        except Exception as e:
            logger.error("Erreur lors de la création du %s : %s", self.label, e)
            raise
        return self._to_entity(unwrap_doc(result))

    def update(self, entity_id: str, data: Dict[str, Any]) -> Any:
        """Mise à jour partielle : seuls les champs fournis sont envoyés."""
        try:
            result = self.client.patch(f"{self.endpoint}/{entity_id}", self._to_wire(data, partial=True))
        except Exception as e:
            logger.error("Erreur lors de la mise à jour du %s %s : %s", self.label, entity_id, e)
            raise
        return self._to_entity(unwrap_doc(result))

    def delete(self, entity_id: str) -> None:
        try:
            self.client.delete(f"{self.endpoint}/{entity_id}")
        except Exception as e:
            logger.error("Erreur lors de la suppression du %s %s : %s", self.label, entity_id, e)
            raise

    def search(self, query: str) -> List[Any]:
        """Recherche par sous-chaîne (insensible à la casse côté CMS) sur search_fields."""
        params = {
            f"where[or][{i}][{field}][contains]": query
            for i, field in enumerate(self.search_fields)
        }
        try:
            return self._fetch(params)
        except Exception as e:
            logger.error("Erreur lors de la recherche de %s (%r) : %s", self._plural, query, e)
            raise
