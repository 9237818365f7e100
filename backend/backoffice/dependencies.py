"""
Dépendances FastAPI partagées par les routers.

La source de données et le client CMS sont construits dans le lifespan
(voir main.py) et rangés dans app.state ; les tests remplacent
get_data_source via app.dependency_overrides.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, TypeVar

from fastapi import HTTPException, Request

from backoffice.cms.client import CmsClient
from backoffice.cms.notifications import Notifier
from backoffice.datasources.base import DataSource, NotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def get_data_source(request: Request) -> DataSource:
    return request.app.state.backend.data_source


def get_cms_client(request: Request) -> CmsClient:
    return request.app.state.backend.cms_client


def get_notifier(request: Request) -> Notifier:
    """
    Un collecteur de notifications par requête, rangé dans request.state :
    main.py le renvoie au client (en-tête X-Notifications, corps des erreurs).
    """
    notifier = Notifier()
    request.state.notifier = notifier
    return notifier


def request_notifications(request: Request) -> List[Dict[str, Optional[str]]]:
    notifier = getattr(request.state, "notifier", None)
    return notifier.to_list() if notifier is not None else []


def safe_read(fn: Callable[[], T], default: Any, what: str) -> T:
    """Lecture tolérante : en cas d'échec de la source, journalise et renvoie default."""
    try:
        return fn()
    except Exception as e:
        logger.error("Lecture impossible (%s) : %s", what, e)
        return default


def run_mutation(notifier: Notifier, fn: Callable[[], T], *, loading: str, success: str, error: str) -> T:
    """
    Exécute une écriture avec sa notification chargement → succès / erreur,
    puis traduit les erreurs métier en réponses HTTP.
    """
    try:
        return notifier.promise(fn, loading=loading, success=success, error=error)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))
