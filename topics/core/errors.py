"""
Taxonomie des erreurs du domaine.

Ces exceptions sont levées par le domaine et l'infrastructure, propagées
telles quelles par les services, puis converties en codes de protocole par
les adaptateurs de transport :

- ValidationError : un ou plusieurs champs invalides à la construction (HTTP 422)
- NotFoundError : aucune entité pour l'identifiant demandé (HTTP 404)
- RepositoryError : défaillance du stockage sous-jacent (HTTP 503)
"""

from dataclasses import dataclass
from typing import Sequence


class TopicsError(Exception):
    """Classe de base de toutes les erreurs du domaine."""


@dataclass(frozen=True)
class FieldError:
    """
    Violation portant sur un champ de configuration.

    Attributs :
        field : Nom du champ concerné (ex: "title")
        message : Description lisible de la violation
    """

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class ValidationError(TopicsError):
    """
    Configuration d'entité invalide.

    Regroupe TOUTES les violations détectées, jamais seulement la première.
    """

    def __init__(self, errors: Sequence[FieldError]) -> None:
        self.errors: list[FieldError] = list(errors)
        super().__init__("\n".join(str(error) for error in self.errors))

    @property
    def fields(self) -> list[str]:
        """Noms des champs en erreur, dans l'ordre de détection."""
        return [error.field for error in self.errors]


class NotFoundError(TopicsError):
    """Aucune entité ne correspond à l'identifiant recherché."""

    def __init__(self, entity: str, entity_id: str) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} introuvable : {entity_id}")


class RepositoryError(TopicsError):
    """Défaillance du stockage (I/O, sérialisation, contrainte)."""
