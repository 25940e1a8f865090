"""
Service des utilisateurs.

Même forme que le service des films : enregistrement validé, suppression
logique, lecture. Chaque enregistrement réussi publie UserRegistered.
"""

from typing import Optional

from loguru import logger

from topics.core.entities.config import with_tenancy
from topics.core.entities.user import (
    User,
    UserID,
    new_user_config,
    with_email,
    with_first_name,
    with_last_name,
)
from topics.core.events import UserRegistered
from topics.core.ports.events import IEventPublisher
from topics.core.ports.filters import all_of, belongs_to, is_active
from topics.core.ports.repositories import IUserRepository
from topics.services.dataclasses import UserInfo


class UserService:
    """
    Service applicatif des utilisateurs.

    Attributs injectes:
        user_repo: Repository des utilisateurs
        event_publisher: Puits d'evenements recevant UserRegistered
    """

    def __init__(self, user_repo: IUserRepository, event_publisher: IEventPublisher) -> None:
        self._user_repo = user_repo
        self._event_publisher = event_publisher

    def register_user(
        self, email: str, first_name: str, last_name: str, tenancy: str
    ) -> UserID:
        """
        Enregistre un utilisateur puis publie UserRegistered.

        Raises:
            ValidationError: Si l'email ou le tenant sont vides
            RepositoryError: Si la persistance échoue (aucun événement publié)
        """
        logger.info("Enregistrement de l'utilisateur", email=email, tenancy=tenancy)
        user = User(
            new_user_config(
                with_email(email),
                with_first_name(first_name),
                with_last_name(last_name),
                with_tenancy(tenancy),
            )
        )
        self._user_repo.save(user)

        self._event_publisher.publish(
            UserRegistered(
                id=user.id,
                email=user.email,
                first_name=user.first_name,
                last_name=user.last_name,
                tenancy=user.tenancy,
            )
        )
        logger.info("Utilisateur enregistre", id=user.id)
        return user.id

    def delete_user(self, user_id: str) -> None:
        """Supprime logiquement un utilisateur (idempotent)."""
        logger.info("Suppression de l'utilisateur", id=user_id)
        user = self._user_repo.find_by_id(UserID(user_id))
        user.delete()
        self._user_repo.save(user)
        logger.info("Utilisateur supprime", id=user_id)

    def get_user_info(self, user_id: str) -> UserInfo:
        return UserInfo.from_entity(self._user_repo.find_by_id(UserID(user_id)))

    def list_users(
        self, tenancy: Optional[str] = None, active_only: bool = False
    ) -> list[UserInfo]:
        """Liste les utilisateurs ; les supprimés sont inclus sauf si active_only."""
        predicate = all_of(
            belongs_to(tenancy) if tenancy else None,
            is_active if active_only else None,
        )
        return [UserInfo.from_entity(user) for user in self._user_repo.list(predicate)]
