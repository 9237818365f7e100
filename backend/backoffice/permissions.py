"""
Table statique rôle → permissions.
Un rôle inconnu n'a aucune permission ; les jokers ("*", "programmes:*")
sont développés vers la liste complète des permissions connues.
"""

from typing import FrozenSet, Iterable, Union

from backoffice.schemas.enums import UserRole

RESOURCES = ("users", "programmes", "apprenants", "rendez_vous", "articles", "documents")
ACTIONS = ("read", "create", "update", "delete")

ALL_PERMISSIONS: FrozenSet[str] = frozenset(
    [f"{resource}:{action}" for resource in RESOURCES for action in ACTIONS]
    + ["admin:access", "system:settings", "reports:access"]
)

ROLE_PERMISSIONS = {
    "SUPER_ADMIN": ["*"],
    "ADMIN": ["users:read", "users:create", "users:update", "programmes:*"],
    "FORMATEUR": ["programmes:read", "apprenants:read"],
    "GESTIONNAIRE": ["programmes:read", "apprenants:*"],
    "APPRENANT": ["programmes:read"],
    "BENEFICIAIRE": ["programmes:read"],
}


def _expand(patterns: Iterable[str]) -> FrozenSet[str]:
    expanded = set()
    for pattern in patterns:
        if pattern == "*":
            expanded.update(ALL_PERMISSIONS)
        elif pattern.endswith(":*"):
            prefix = pattern[:-1]
            expanded.update(p for p in ALL_PERMISSIONS if p.startswith(prefix))
        else:
            expanded.add(pattern)
    return frozenset(expanded)


def permissions_for_role(role: Union[UserRole, str, None]) -> FrozenSet[str]:
    """Retourne l'ensemble développé des permissions d'un rôle (vide si inconnu)."""
    if role is None:
        return frozenset()
    key = role.value if isinstance(role, UserRole) else str(role).upper()
    return _expand(ROLE_PERMISSIONS.get(key, []))


def has_permission(role: Union[UserRole, str, None], permission: str) -> bool:
    return permission in permissions_for_role(role)
