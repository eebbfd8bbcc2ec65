"""
Tests pour la table des capacités et le contrôle de rôle.
"""

from types import SimpleNamespace

import pytest

from academy.exceptions import Forbidden
from academy.models.enums import Role
from academy.permissions import (
    ADMIN_ROLES,
    CAPABILITIES,
    Capability,
    allowed_roles_for,
    is_admin_role,
    require_role,
)


def user(role):
    return SimpleNamespace(role=role)


def test_table_couvre_toutes_les_capacites():
    assert set(CAPABILITIES) == set(Capability)


def test_chaque_capacite_a_des_roles():
    for capability in Capability:
        assert CAPABILITIES[capability]


def test_check_in_reserve_aux_eleves():
    assert allowed_roles_for(Capability.CHECKIN) == {Role.STUDENT}


@pytest.mark.parametrize("capability", [
    Capability.VIEW_DASHBOARD,
    Capability.MANAGE_STUDENTS,
    Capability.APPROVE_ADMINS,
    Capability.MANAGE_SETTINGS,
])
def test_capacites_equipe(capability):
    assert allowed_roles_for(capability) == ADMIN_ROLES
    assert Role.STUDENT not in allowed_roles_for(capability)


def test_is_admin_role():
    assert is_admin_role(Role.COORDINATOR)
    assert is_admin_role("professor")
    assert not is_admin_role(Role.STUDENT)


def test_require_role_accepte():
    require_role(user(Role.STUDENT), allowed_roles_for(Capability.CHECKIN))


def test_require_role_eleve_sur_route_equipe():
    with pytest.raises(Forbidden) as exc:
        require_role(user(Role.STUDENT), ADMIN_ROLES)
    assert exc.value.message == "Accès réservé à l'équipe de l'académie."


def test_require_role_equipe_sur_route_eleve():
    with pytest.raises(Forbidden) as exc:
        require_role(user(Role.PROFESSOR), allowed_roles_for(Capability.CHECKIN))
    assert exc.value.message == "Accès réservé aux élèves."


def test_require_role_inconnu():
    with pytest.raises(ValueError):
        require_role(user("visitante"), ADMIN_ROLES)
