"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports repository : Contrats de persistance des données
- IRepository : Contrat générique save / find_by_id / list
- IUserRepository, IMovieRepository, IFileRepository, IMessageRepository

Port événements :
- IEventPublisher : Publication fire-and-forget des événements de domaine
"""

from topics.core.ports.events import IEventPublisher
from topics.core.ports.repositories import (
    IFileRepository,
    IMessageRepository,
    IMovieRepository,
    IRepository,
    IUserRepository,
    Predicate,
)

__all__ = [
    # Repositories
    "IRepository",
    "IUserRepository",
    "IMovieRepository",
    "IFileRepository",
    "IMessageRepository",
    "Predicate",
    # Événements
    "IEventPublisher",
]
