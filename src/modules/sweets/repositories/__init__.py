"""Sweet repositories package."""

from modules.sweets.repositories.django_repository import SweetDjangoRepository
from modules.sweets.repositories.interfaces import ISweetRepository

__all__ = ["ISweetRepository", "SweetDjangoRepository"]
