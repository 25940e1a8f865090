"""
Implementation SQLModel du repository User.
"""

from topics.core.entities import User, UserConfig, UserID
from topics.core.ports.repositories import IUserRepository
from topics.infrastructure.persistence.models import UserModel
from topics.infrastructure.persistence.repositories.base import SQLModelRepository, as_utc


class SQLModelUserRepository(SQLModelRepository[User, UserID, UserModel], IUserRepository):
    """Repository SQLModel pour les utilisateurs."""

    entity_name = "User"
    model = UserModel

    def _to_entity(self, model: UserModel) -> User:
        return User(
            UserConfig(
                id=model.id,
                tenancy=model.tenancy,
                created_at=as_utc(model.created_at),
                deleted_at=as_utc(model.deleted_at),
                email=model.email,
                first_name=model.first_name,
                last_name=model.last_name,
            )
        )

    def _to_model(self, entity: User) -> UserModel:
        return UserModel(
            id=entity.id,
            tenancy=entity.tenancy,
            created_at=entity.created_at,
            deleted_at=entity.deleted_at,
            email=entity.email,
            first_name=entity.first_name,
            last_name=entity.last_name,
        )
