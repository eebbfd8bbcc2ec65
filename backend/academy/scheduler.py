"""
Planificateur APScheduler pour le rappel quotidien des anniversaires.

Le job s'exécute chaque jour à BIRTHDAY_REMINDER_HOUR (fuseau de l'académie)
et journalise, par classe, les élèves actifs dont c'est l'anniversaire.
"""

import logging

from apscheduler.schedulers.background import BackgroundScheduler

from academy.config import settings
from academy.database import SessionLocal

logger = logging.getLogger(__name__)

scheduler = BackgroundScheduler(timezone=settings.ACADEMY_TIMEZONE)


def _log_birthdays_scheduled() -> None:
    """
    Tâche planifiée : liste les anniversaires du jour.
    Import local pour éviter les imports circulaires.
    """
    from academy.services.dashboard_service import birthdays_today

    db = SessionLocal()
    try:
        students = birthdays_today(db)
        if not students:
            logger.info("Aucun anniversaire aujourd'hui.")
        for student in students:
            logger.info(
                "Anniversaire du jour : %s (%s, %s)",
                student.full_name, student.class_type.value, student.whatsapp,
            )
    except Exception as exc:
        logger.error("Erreur lors du rappel des anniversaires : %s", exc)
    finally:
        db.close()


def start_scheduler() -> None:
    """Démarre le planificateur en arrière-plan (appelé au démarrage de l'API)."""
    if not settings.SCHEDULER_ENABLED:
        logger.info("Scheduler désactivé par configuration.")
        return
    scheduler.add_job(
        _log_birthdays_scheduled,
        trigger="cron",
        hour=settings.BIRTHDAY_REMINDER_HOUR,
        minute=0,
        id="daily_birthday_reminder",
        replace_existing=True,
    )
    scheduler.start()
    logger.info("Scheduler démarré : rappel des anniversaires chaque jour à %dh.", settings.BIRTHDAY_REMINDER_HOUR)


def stop_scheduler() -> None:
    """Arrête le planificateur proprement (appelé à l'arrêt de l'API)."""
    if scheduler.running:
        scheduler.shutdown(wait=False)
        logger.info("Scheduler arrêté.")
