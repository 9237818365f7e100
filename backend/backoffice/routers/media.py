"""
Router des médias (fichiers hébergés par le CMS).
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile

from backoffice.cms.client import CmsClient
from backoffice.cms.notifications import Notifier, NotifyingClient
from backoffice.dependencies import get_cms_client, get_notifier
from backoffice.schemas.media import Media
from backoffice.services.media_service import MediaService

router = APIRouter(prefix="/api/media", tags=["Médias"])


def get_media_service(
    client: CmsClient = Depends(get_cms_client),
    notifier: Notifier = Depends(get_notifier),
) -> MediaService:
    return MediaService(NotifyingClient(client, notifier))


@router.get("", response_model=List[Media], summary="Lister les médias")
def list_media(service: MediaService = Depends(get_media_service)):
    return service.list()


@router.get("/{media_id}", response_model=Media, summary="Détail d'un média")
def get_media(media_id: str, service: MediaService = Depends(get_media_service)):
    media = service.get(media_id)
    if media is None:
        raise HTTPException(status_code=404, detail="Média introuvable.")
    return media


@router.post("", response_model=Media, status_code=201, summary="Envoyer un média")
def upload_media(
    file: UploadFile = File(...),
    alt: Optional[str] = Form(None),
    service: MediaService = Depends(get_media_service),
):
    return service.upload(file.filename, file.file, file.content_type or "application/octet-stream", alt)


@router.delete("/{media_id}", status_code=204, summary="Supprimer un média")
def delete_media(media_id: str, service: MediaService = Depends(get_media_service)):
    service.delete(media_id)
