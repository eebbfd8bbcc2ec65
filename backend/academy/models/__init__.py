# Importe tous les modèles pour enregistrer leurs tables dans Base.metadata
# avant que SQLAlchemy tente de résoudre les clés étrangères inter-modèles.

from academy.models.user import User  # noqa: F401  (doit précéder students et admins)
from academy.models.student import Student  # noqa: F401
from academy.models.admin import Admin  # noqa: F401
from academy.models.checkin import Checkin  # noqa: F401
from academy.models.schedule import ClassSchedule  # noqa: F401
from academy.models.event import Event  # noqa: F401
from academy.models.grade_requirement import GradeRequirement  # noqa: F401
from academy.models.setting import Setting  # noqa: F401
