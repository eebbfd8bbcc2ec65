"""
Date et heure "métier" : le jour calendaire est celui du fuseau de l'académie,
pas celui du serveur ni l'UTC.
"""

from datetime import date, datetime
from typing import Optional
from zoneinfo import ZoneInfo

from academy.config import settings


def academy_now() -> datetime:
    """Heure locale de l'académie, sans tzinfo (stockée telle quelle en base)."""
    return datetime.now(ZoneInfo(settings.ACADEMY_TIMEZONE)).replace(tzinfo=None)


def academy_today() -> date:
    return academy_now().date()


def compute_age(date_of_birth: date, today: Optional[date] = None) -> int:
    """Âge révolu : un an de moins tant que l'anniversaire de l'année n'est pas passé."""
    today = today or academy_today()
    birthday_passed = (today.month, today.day) >= (date_of_birth.month, date_of_birth.day)
    return today.year - date_of_birth.year - (0 if birthday_passed else 1)
