"""
Initialisation au démarrage : coordinateur initial et réglages par défaut.

Rien n'est créé si BOOTSTRAP_COORDINATOR_EMAIL / BOOTSTRAP_COORDINATOR_PASSWORD
ne sont pas fournis explicitement dans la configuration.
"""

import logging

from sqlalchemy.orm import Session

from academy.config import Settings
from academy.models.admin import Admin
from academy.models.enums import Role
from academy.models.setting import ABOUT_TEXT, ACADEMY_LATITUDE, ACADEMY_LONGITUDE, PIX_KEY
from academy.services import settings_service
from academy.services.auth_service import create_user, get_user_by_email

logger = logging.getLogger(__name__)


def bootstrap(db: Session, config: Settings) -> bool:
    """
    Crée le coordinateur initial (approuvé) s'il n'existe pas encore,
    puis sème les réglages par défaut absents.
    Retourne True si le coordinateur a été créé.
    """
    if not config.BOOTSTRAP_COORDINATOR_EMAIL or not config.BOOTSTRAP_COORDINATOR_PASSWORD:
        logger.info("Pas de coordinateur initial configuré, bootstrap ignoré.")
        return False

    created = False
    if get_user_by_email(db, config.BOOTSTRAP_COORDINATOR_EMAIL) is None:
        user = create_user(
            db,
            config.BOOTSTRAP_COORDINATOR_EMAIL,
            config.BOOTSTRAP_COORDINATOR_PASSWORD,
            Role.COORDINATOR,
        )
        db.add(Admin(
            user_id=user.id,
            full_name=config.BOOTSTRAP_COORDINATOR_NAME,
            whatsapp=config.BOOTSTRAP_COORDINATOR_WHATSAPP,
            role=Role.COORDINATOR,
            is_approved=True,
        ))
        db.commit()
        created = True
        logger.info("Coordinateur initial créé : %s", config.BOOTSTRAP_COORDINATOR_EMAIL)

    defaults = {
        PIX_KEY: config.DEFAULT_PIX_KEY or config.BOOTSTRAP_COORDINATOR_EMAIL,
        ABOUT_TEXT: config.DEFAULT_ABOUT_TEXT,
        ACADEMY_LATITUDE: config.DEFAULT_ACADEMY_LATITUDE,
        ACADEMY_LONGITUDE: config.DEFAULT_ACADEMY_LONGITUDE,
    }
    existing = settings_service.get_settings(db)
    for key, value in defaults.items():
        if value and key not in existing:
            settings_service.set_setting(db, key, value)

    return created
