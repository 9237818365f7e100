"""
Router d'authentification auprès du CMS (connexion, déconnexion, utilisateur courant).
Le jeton obtenu est conservé par le client CMS du processus.
"""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from backoffice.cms.client import CmsClient
from backoffice.dependencies import get_cms_client
from backoffice.schemas.user import User
from backoffice.services.user_service import to_entity as user_from_cms

router = APIRouter(prefix="/api/auth", tags=["Authentification"])


class LoginRequest(BaseModel):
    email: str
    password: str


@router.post("/login", response_model=User, summary="Connexion au CMS")
def login(data: LoginRequest, client: CmsClient = Depends(get_cms_client)):
    result = client.login(data.email, data.password)
    return user_from_cms(result.get("user") or {})


@router.post("/logout", status_code=204, summary="Déconnexion")
def logout(client: CmsClient = Depends(get_cms_client)):
    client.logout()


@router.get("/me", response_model=User, summary="Utilisateur authentifié")
def me(client: CmsClient = Depends(get_cms_client)):
    doc = client.me()
    if doc is None:
        raise HTTPException(status_code=401, detail="Non authentifié.")
    return user_from_cms(doc)
