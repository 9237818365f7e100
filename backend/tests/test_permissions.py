"""
Tests unitaires de la table rôle → permissions.
"""

from backoffice.permissions import ALL_PERMISSIONS, has_permission, permissions_for_role
from backoffice.schemas.enums import UserRole


def test_super_admin_a_toutes_les_permissions():
    assert permissions_for_role(UserRole.SUPER_ADMIN) == ALL_PERMISSIONS


def test_role_inconnu_aucune_permission():
    assert permissions_for_role("STAGIAIRE") == frozenset()


def test_role_absent_aucune_permission():
    assert permissions_for_role(None) == frozenset()


def test_joker_de_ressource_developpe():
    perms = permissions_for_role(UserRole.ADMIN)
    assert {"programmes:read", "programmes:create", "programmes:update", "programmes:delete"} <= perms
    assert "users:delete" not in perms


def test_role_accepte_en_minuscules():
    assert permissions_for_role("gestionnaire") == permissions_for_role(UserRole.GESTIONNAIRE)


def test_has_permission():
    assert has_permission(UserRole.FORMATEUR, "apprenants:read")
    assert not has_permission(UserRole.FORMATEUR, "apprenants:delete")
    assert not has_permission(UserRole.APPRENANT, "admin:access")
