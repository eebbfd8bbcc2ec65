"""
Dépendances FastAPI d'authentification et d'autorisation.

get_current_user résout le jeton Bearer ; require_capability vérifie ensuite
le rôle via la table des capacités et, pour les comptes équipe, l'approbation.
"""

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from academy.database import get_db
from academy.exceptions import MissingToken
from academy.models.user import User
from academy.permissions import Capability, allowed_roles_for, is_admin_role, require_role
from academy.services import auth_service

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    if credentials is None or not credentials.credentials:
        raise MissingToken()
    return auth_service.resolve_token(db, credentials.credentials)


def require_capability(capability: Capability):
    """Fabrique une dépendance qui retourne l'utilisateur s'il détient la capacité."""

    def dependency(
        user: User = Depends(get_current_user),
        db: Session = Depends(get_db),
    ) -> User:
        require_role(user, allowed_roles_for(capability))
        if is_admin_role(user.role):
            auth_service.ensure_admin_approved(db, user)
        return user

    return dependency
