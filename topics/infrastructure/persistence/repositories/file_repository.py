"""
Implementation SQLModel du repository File.
"""

from topics.core.entities import File, FileConfig, FileID
from topics.core.ports.repositories import IFileRepository
from topics.infrastructure.persistence.models import FileModel
from topics.infrastructure.persistence.repositories.base import SQLModelRepository, as_utc


class SQLModelFileRepository(SQLModelRepository[File, FileID, FileModel], IFileRepository):
    """Repository SQLModel pour les fichiers media."""

    entity_name = "File"
    model = FileModel

    def _to_entity(self, model: FileModel) -> File:
        return File(
            FileConfig(
                id=model.id,
                tenancy=model.tenancy,
                created_at=as_utc(model.created_at),
                deleted_at=as_utc(model.deleted_at),
                movie_id=model.movie_id,
                uri=model.uri,
            )
        )

    def _to_model(self, entity: File) -> FileModel:
        return FileModel(
            id=entity.id,
            tenancy=entity.tenancy,
            created_at=entity.created_at,
            deleted_at=entity.deleted_at,
            movie_id=entity.movie_id,
            uri=entity.uri,
        )
