"""
Service pour l'approbation des comptes équipe.
"""

import logging
import uuid
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from academy.exceptions import NotFound
from academy.models.admin import Admin

logger = logging.getLogger(__name__)


def get_pending_admins(db: Session) -> List[Admin]:
    """Demandes d'accès équipe non encore approuvées, les plus anciennes d'abord."""
    return db.execute(
        select(Admin)
        .where(Admin.is_approved.is_(False))
        .order_by(Admin.created_at)
    ).scalars().all()


def approve_admin(db: Session, admin_id: uuid.UUID, approved_by: uuid.UUID) -> Admin:
    admin = db.get(Admin, admin_id)
    if admin is None:
        raise NotFound("Demande d'accès introuvable.")

    admin.is_approved = True
    db.commit()
    db.refresh(admin)
    logger.info("Compte équipe %s approuvé par %s", admin_id, approved_by)
    return admin
