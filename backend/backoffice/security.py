"""
Hachage des mots de passe pour le pilote base de données (Argon2id).
Le CMS hache lui-même les mots de passe : ce module ne sert qu'en accès direct.
"""

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHash, VerificationError, VerifyMismatchError

_pwd_hasher = PasswordHasher()


def hash_password(password: str) -> str:
    return _pwd_hasher.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """True si le mot de passe correspond au hash stocké."""
    if not plain_password or not hashed_password:
        return False
    try:
        return _pwd_hasher.verify(hashed_password, plain_password)
    except (VerifyMismatchError, VerificationError, InvalidHash):
        return False
