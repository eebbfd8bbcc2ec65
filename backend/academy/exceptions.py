"""
Erreurs métier de l'application.

Les services lèvent ces exceptions ; le handler enregistré dans main.py les
traduit en réponse JSON {"detail": ...} avec le statut HTTP porté par la classe.
"""


class AcademyError(Exception):
    """Base de toutes les erreurs métier."""
    status_code = 500
    default_message = "Une erreur interne est survenue."

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidCredentials(AcademyError):
    status_code = 401
    default_message = "Email ou mot de passe invalide."


class MissingToken(AcademyError):
    status_code = 401
    default_message = "Jeton d'accès requis."


class InvalidToken(AcademyError):
    status_code = 401
    default_message = "Jeton d'accès invalide ou expiré."


class Forbidden(AcademyError):
    status_code = 403
    default_message = "Accès refusé."


class NotFound(AcademyError):
    status_code = 404
    default_message = "Ressource introuvable."


class AlreadyCheckedIn(AcademyError):
    status_code = 400
    default_message = "Check-in déjà effectué aujourd'hui."


class OutOfRange(AcademyError):
    status_code = 400
    default_message = "Position hors du périmètre de l'académie."


class ValidationError(AcademyError):
    status_code = 400
    default_message = "Données invalides."


class Conflict(AcademyError):
    status_code = 409
    default_message = "La ressource existe déjà."
