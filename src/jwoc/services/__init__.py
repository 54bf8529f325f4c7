from jwoc.services.auth import AuthService
from jwoc.services.mentees import MenteesService

__all__ = ["AuthService", "MenteesService"]
