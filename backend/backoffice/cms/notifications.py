"""
Notifications utilisateur ("toasts") et client CMS décoré.

Le Notifier collecte les messages d'une action (une requête HTTP) et les journalise.
NotifyingClient enveloppe chaque verbe du CmsClient avec un message de succès
ou d'erreur configurable ; les erreurs sont toujours relancées telles quelles.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, TypeVar, Union

from backoffice.cms.client import CmsApiError, CmsClient

logger = logging.getLogger(__name__)

T = TypeVar("T")

GENERIC_ERROR_MESSAGE = "Une erreur est survenue"

_LOG_LEVELS = {
    "success": logging.INFO,
    "info": logging.INFO,
    "loading": logging.DEBUG,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


@dataclass
class Notification:
    level: str  # success | error | info | warning | loading
    message: str
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {"level": self.level, "message": self.message, "description": self.description}


class Notifier:
    def __init__(self):
        self.notifications: List[Notification] = []

    def _push(self, level: str, message: str, description: Optional[str] = None) -> Notification:
        notification = Notification(level=level, message=message, description=description)
        self.notifications.append(notification)
        logger.log(_LOG_LEVELS[level], "[%s] %s%s", level, message, f" ({description})" if description else "")
        return notification

    def success(self, message: str, description: Optional[str] = None) -> Notification:
        return self._push("success", message, description)

    def error(self, message: str, description: Optional[str] = None) -> Notification:
        return self._push("error", message, description)

    def info(self, message: str, description: Optional[str] = None) -> Notification:
        return self._push("info", message, description)

    def warning(self, message: str, description: Optional[str] = None) -> Notification:
        return self._push("warning", message, description)

    def api_error(self, error: CmsApiError) -> Notification:
        """Erreur du CMS avec le détail des champs invalides en description."""
        return self.error(error.message, error.describe_fields())

    def generic_error(self, error: Exception) -> Notification:
        if isinstance(error, CmsApiError):
            return self.api_error(error)
        return self.error(str(error) or GENERIC_ERROR_MESSAGE)

    def promise(
        self,
        fn: Callable[[], T],
        *,
        loading: str,
        success: Union[str, Callable[[T], str]],
        error: Union[str, Callable[[Exception], str]],
    ) -> T:
        """
        Notification à trois états liée au déroulement de l'appel :
        chargement, puis succès ou erreur (la même notification est mise à jour).
        """
        notification = self._push("loading", loading)
        try:
            result = fn()
        except Exception as exc:
            notification.level = "error"
            notification.message = error(exc) if callable(error) else error
            logger.error("%s : %s", notification.message, exc)
            raise
        notification.level = "success"
        notification.message = success(result) if callable(success) else success
        logger.info("%s", notification.message)
        return result

    def to_list(self) -> List[Dict[str, Optional[str]]]:
        return [n.to_dict() for n in self.notifications]


@dataclass(frozen=True)
class ToastOptions:
    show_success: bool = True
    show_error: bool = True
    success_message: Optional[str] = None
    error_message: Optional[str] = None


READ_OPTIONS = ToastOptions(show_success=False)
CREATE_OPTIONS = ToastOptions(success_message="Création réussie")
UPDATE_OPTIONS = ToastOptions(success_message="Modification réussie")
DELETE_OPTIONS = ToastOptions(success_message="Suppression réussie")
UPLOAD_OPTIONS = ToastOptions(success_message="Fichier uploadé avec succès")


class NotifyingClient:
    """Verbes du CmsClient accompagnés d'une notification de succès ou d'erreur."""

    def __init__(self, client: CmsClient, notifier: Notifier):
        self.client = client
        self.notifier = notifier

    def _call(self, options: ToastOptions, fn: Callable[[], Any]) -> Any:
        try:
            result = fn()
        except CmsApiError as exc:
            if options.show_error:
                if options.error_message:
                    self.notifier.error(options.error_message)
                else:
                    self.notifier.api_error(exc)
            raise
        except Exception as exc:
            if options.show_error:
                self.notifier.error(options.error_message or GENERIC_ERROR_MESSAGE, str(exc))
            raise
        if options.show_success and options.success_message:
            self.notifier.success(options.success_message)
        return result

    def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None, options: ToastOptions = READ_OPTIONS) -> Any:
        return self._call(options, lambda: self.client.get(endpoint, params))

    def post(self, endpoint: str, data: Any, options: ToastOptions = CREATE_OPTIONS) -> Any:
        return self._call(options, lambda: self.client.post(endpoint, data))

    def put(self, endpoint: str, data: Any, options: ToastOptions = UPDATE_OPTIONS) -> Any:
        return self._call(options, lambda: self.client.put(endpoint, data))

    def patch(self, endpoint: str, data: Any, options: ToastOptions = UPDATE_OPTIONS) -> Any:
        return self._call(options, lambda: self.client.patch(endpoint, data))

    def delete(self, endpoint: str, options: ToastOptions = DELETE_OPTIONS) -> Any:
        return self._call(options, lambda: self.client.delete(endpoint))

    def upload(
        self,
        endpoint: str,
        files: Dict[str, Any],
        data: Optional[Dict[str, Any]] = None,
        options: ToastOptions = UPLOAD_OPTIONS,
    ) -> Any:
        return self._call(options, lambda: self.client.upload(endpoint, files, data))
