"""
Client HTTP centralisé pour les requêtes vers le CMS headless (Payload).
Gère l'authentification (jeton bearer + cookies de session), les en-têtes
et la normalisation des erreurs.

Une seule tentative par appel : pas de retry ni de backoff.
Les erreurs réseau remontent telles quelles (requests.RequestException).
"""

import logging
import os
from typing import Any, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)


class CmsApiError(Exception):
    """Réponse non-2xx du CMS : message, statut HTTP et erreurs par champ."""

    def __init__(self, message: str, status: int, field_errors: Optional[List[Dict[str, str]]] = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.field_errors = field_errors or []

    def describe_fields(self) -> Optional[str]:
        """Détail lisible des erreurs de validation, ex. "email: déjà utilisé"."""
        if not self.field_errors:
            return None
        return ", ".join(f"{e['field']}: {e['message']}" for e in self.field_errors)

    def to_dict(self) -> dict:
        return {"message": self.message, "status": self.status, "field_errors": self.field_errors}


class MemoryTokenStore:
    """Conserve le jeton en mémoire (tests, scripts ponctuels)."""

    def __init__(self, token: Optional[str] = None):
        self._token = token

    def load(self) -> Optional[str]:
        return self._token

    def save(self, token: Optional[str]) -> None:
        self._token = token


class FileTokenStore:
    """Persiste le jeton dans un fichier pour le rejouer au prochain démarrage."""

    def __init__(self, path: str):
        self.path = path

    def load(self) -> Optional[str]:
        if not os.path.exists(self.path):
            return None
        with open(self.path, encoding="utf-8") as f:
            token = f.read().strip()
        return token or None

    def save(self, token: Optional[str]) -> None:
        if token:
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(token)
        elif os.path.exists(self.path):
            os.remove(self.path)


def _extract_field_errors(data: dict) -> List[Dict[str, str]]:
    """
    Accepte les deux formes rencontrées :
    - {"errors": [{"field": "email", "message": "..."}]}
    - {"errors": [{"message": "...", "data": {"errors": [{"path": "email", "message": "..."}]}}]}
    """
    field_errors = []
    for error in data.get("errors") or []:
        if not isinstance(error, dict):
            continue
        if "field" in error:
            field_errors.append({"field": str(error["field"]), "message": str(error.get("message", ""))})
        nested = (error.get("data") or {}).get("errors") if isinstance(error.get("data"), dict) else None
        for item in nested or []:
            field = item.get("field") or item.get("path")
            if field:
                field_errors.append({"field": str(field), "message": str(item.get("message", ""))})
    return field_errors


class CmsClient:
    """
    Client REST du CMS.

    Le client est construit explicitement par le point d'entrée et injecté
    dans les services ; il n'existe pas d'instance globale.
    """

    def __init__(
        self,
        base_url: str,
        token_store=None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()  # conserve les cookies de session Payload
        self.token_store = token_store or MemoryTokenStore()
        self.token: Optional[str] = self.token_store.load()

    # --- Jeton ---

    def set_token(self, token: Optional[str]) -> None:
        self.token = token
        self.token_store.save(token)

    def get_token(self) -> Optional[str]:
        return self.token

    def _headers(self, json_body: bool = True) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if json_body:
            headers["Content-Type"] = "application/json"
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    # --- Requêtes ---

    def _to_error(self, response: requests.Response) -> CmsApiError:
        message = f"Erreur {response.status_code}: {response.reason}"
        field_errors: List[Dict[str, str]] = []
        try:
            data = response.json()
        except ValueError:
            data = None  # corps non JSON : message par défaut
        if isinstance(data, dict):
            errors = data.get("errors")
            first_error = errors[0].get("message") if errors and isinstance(errors[0], dict) else None
            message = data.get("message") or data.get("error") or first_error or message
            field_errors = _extract_field_errors(data)
        return CmsApiError(message, response.status_code, field_errors)

    def _request(self, method: str, endpoint: str, json_body: bool = True, **kwargs) -> Any:
        url = f"{self.base_url}{endpoint}"
        response = self.session.request(
            method,
            url,
            headers=self._headers(json_body),
            timeout=self.timeout,
            **kwargs,
        )
        if not response.ok:
            error = self._to_error(response)
            logger.debug("CMS %s %s → %s : %s", method, endpoint, error.status, error.message)
            raise error
        if response.status_code == 204 or not response.content:
            return {}
        return response.json()

    def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return self._request("GET", endpoint, params=params)

    def post(self, endpoint: str, data: Any = None) -> Any:
        return self._request("POST", endpoint, json=data)

    def put(self, endpoint: str, data: Any = None) -> Any:
        return self._request("PUT", endpoint, json=data)

    def patch(self, endpoint: str, data: Any = None) -> Any:
        return self._request("PATCH", endpoint, json=data)

    def delete(self, endpoint: str) -> Any:
        return self._request("DELETE", endpoint)

    def upload(self, endpoint: str, files: Dict[str, Any], data: Optional[Dict[str, Any]] = None) -> Any:
        """Envoi multipart : le Content-Type (boundary) est fixé par requests."""
        return self._request("POST", endpoint, json_body=False, files=files, data=data)

    # --- Authentification ---

    def login(self, email: str, password: str) -> dict:
        """Authentifie l'utilisateur et conserve le jeton retourné."""
        result = self.post("/api/users/login", {"email": email, "password": password})
        self.set_token(result.get("token"))
        logger.info("Connexion CMS réussie pour %s", email)
        return result

    def logout(self) -> None:
        """Déconnexion côté CMS ; le jeton local est effacé même si l'appel échoue."""
        try:
            self.post("/api/users/logout", {})
        finally:
            self.set_token(None)

    def me(self) -> Optional[dict]:
        """Utilisateur courant selon le CMS, ou None si non authentifié."""
        result = self.get("/api/users/me")
        return result.get("user")

    def close(self) -> None:
        self.session.close()
