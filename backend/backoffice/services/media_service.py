"""
Service des médias (collection "media" du CMS).

Les appels passent par le client à notifications : chaque lecture en échec,
chaque envoi et chaque suppression produit un toast.
"""

import logging
from typing import Any, BinaryIO, Dict, List, Optional

from backoffice.cms.client import CmsApiError
from backoffice.cms.notifications import NotifyingClient, ToastOptions
from backoffice.schemas.media import Media
from backoffice.services.wire import doc_id, unwrap_doc

logger = logging.getLogger(__name__)

ENDPOINT = "/api/media"

_READ_WITH_ERRORS = ToastOptions(show_success=False, show_error=True)
_DELETE = ToastOptions(success_message="Média supprimé")


def to_entity(doc: Dict[str, Any]) -> Media:
    return Media(
        id=doc_id(doc),
        filename=doc.get("filename") or "",
        url=doc.get("url"),
        mime_type=doc.get("mimeType"),
        filesize=doc.get("filesize"),
        alt=doc.get("alt"),
        created_at=doc.get("createdAt"),
    )


class MediaService:
    def __init__(self, client: NotifyingClient):
        self.client = client

    def list(self, params: Optional[Dict[str, str]] = None) -> List[Media]:
        result = self.client.get(ENDPOINT, params, options=_READ_WITH_ERRORS)
        return [to_entity(doc) for doc in result.get("docs", [])]

    def get(self, media_id: str) -> Optional[Media]:
        try:
            doc = self.client.get(f"{ENDPOINT}/{media_id}", options=_READ_WITH_ERRORS)
        except CmsApiError as e:
            if e.status == 404:
                return None
            raise
        return to_entity(doc)

    def upload(self, filename: str, content: BinaryIO, content_type: str, alt: Optional[str] = None) -> Media:
        """Envoi multipart du fichier ; le texte alternatif accompagne le formulaire."""
        files = {"file": (filename, content, content_type)}
        data = {"alt": alt} if alt else None
        result = self.client.upload(ENDPOINT, files, data)
        media = to_entity(unwrap_doc(result))
        logger.info("Média envoyé : %s (%s)", media.filename, media.id)
        return media

    def delete(self, media_id: str) -> None:
        self.client.delete(f"{ENDPOINT}/{media_id}", options=_DELETE)
