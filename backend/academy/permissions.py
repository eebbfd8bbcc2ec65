"""
Table des capacités : chaque action protégée est associée explicitement
à l'ensemble des rôles autorisés.
"""

import enum
from typing import Iterable

from academy.exceptions import Forbidden
from academy.models.enums import Role

# Rôles "équipe" qui ouvrent les endpoints d'administration
ADMIN_ROLES = frozenset({Role.PROFESSOR, Role.ADMINISTRATIVE, Role.COORDINATOR})
STUDENT_ROLES = frozenset({Role.STUDENT})
ALL_ROLES = frozenset(Role)


class Capability(str, enum.Enum):
    CHECKIN = "checkin"
    VIEW_OWN_PROFILE = "view_own_profile"
    VIEW_OWN_ATTENDANCE = "view_own_attendance"
    MANAGE_FAMILY = "manage_family"
    VIEW_OWN_SCHEDULES = "view_own_schedules"
    VIEW_SCHEDULES = "view_schedules"
    VIEW_EVENTS = "view_events"
    VIEW_DASHBOARD = "view_dashboard"
    MANAGE_STUDENTS = "manage_students"
    VIEW_TODAY_CHECKINS = "view_today_checkins"
    APPROVE_ADMINS = "approve_admins"
    MANAGE_SETTINGS = "manage_settings"
    MANAGE_EVENTS = "manage_events"
    MANAGE_SCHEDULES = "manage_schedules"
    MANAGE_GRADES = "manage_grades"


CAPABILITIES = {
    Capability.CHECKIN: STUDENT_ROLES,
    Capability.VIEW_OWN_PROFILE: STUDENT_ROLES,
    Capability.VIEW_OWN_ATTENDANCE: STUDENT_ROLES,
    Capability.MANAGE_FAMILY: STUDENT_ROLES,
    Capability.VIEW_OWN_SCHEDULES: STUDENT_ROLES,
    Capability.VIEW_SCHEDULES: ALL_ROLES,
    Capability.VIEW_EVENTS: ALL_ROLES,
    Capability.VIEW_DASHBOARD: ADMIN_ROLES,
    Capability.MANAGE_STUDENTS: ADMIN_ROLES,
    Capability.VIEW_TODAY_CHECKINS: ADMIN_ROLES,
    Capability.APPROVE_ADMINS: ADMIN_ROLES,
    Capability.MANAGE_SETTINGS: ADMIN_ROLES,
    Capability.MANAGE_EVENTS: ADMIN_ROLES,
    Capability.MANAGE_SCHEDULES: ADMIN_ROLES,
    Capability.MANAGE_GRADES: ADMIN_ROLES,
}


def is_admin_role(role: Role) -> bool:
    return Role(role) in ADMIN_ROLES


def require_role(user, allowed_roles: Iterable[Role]) -> None:
    """Lève Forbidden si le rôle de l'utilisateur n'appartient pas à allowed_roles."""
    allowed = frozenset(Role(r) for r in allowed_roles)
    if Role(user.role) not in allowed:
        if allowed == STUDENT_ROLES:
            raise Forbidden("Accès réservé aux élèves.")
        if allowed <= ADMIN_ROLES:
            raise Forbidden("Accès réservé à l'équipe de l'académie.")
        raise Forbidden()


def allowed_roles_for(capability: Capability) -> frozenset:
    return CAPABILITIES[capability]
