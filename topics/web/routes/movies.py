"""
Routes des films et de leurs fichiers.
"""

from typing import Optional

from fastapi import APIRouter, Depends, status

from ...services import FileService, MovieService
from ..deps import get_file_service, get_movie_service
from ..schemas import (
    FileInfoResponse,
    MovieInfoResponse,
    RegisterMovieRequest,
    RegisterMovieResponse,
)

router = APIRouter(prefix="/movies", tags=["movies"])


@router.post("", response_model=RegisterMovieResponse, status_code=status.HTTP_201_CREATED)
def register_movie(
    req: RegisterMovieRequest, service: MovieService = Depends(get_movie_service)
):
    """Enregistre un film et son fichier média."""
    movie_id = service.register_movie(req.title, req.uri, req.tenancy)
    return RegisterMovieResponse(id=movie_id)


@router.get("", response_model=list[MovieInfoResponse], response_model_exclude_none=True)
def list_movies(
    tenancy: Optional[str] = None,
    active_only: bool = False,
    service: MovieService = Depends(get_movie_service),
):
    """Liste les films ; les supprimés sont inclus sauf avec active_only."""
    return [
        MovieInfoResponse.model_validate(info)
        for info in service.list_movies(tenancy=tenancy, active_only=active_only)
    ]


@router.get("/{movie_id}", response_model=MovieInfoResponse, response_model_exclude_none=True)
def get_movie(movie_id: str, service: MovieService = Depends(get_movie_service)):
    return MovieInfoResponse.model_validate(service.get_movie(movie_id))


@router.delete("/{movie_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_movie(movie_id: str, service: MovieService = Depends(get_movie_service)) -> None:
    service.delete_movie(movie_id)


@router.get(
    "/{movie_id}/download",
    response_model=FileInfoResponse,
    response_model_exclude_none=True,
)
def download_movie(movie_id: str, service: MovieService = Depends(get_movie_service)):
    """Résout le fichier média du film (aucun transfert d'octets)."""
    return FileInfoResponse.model_validate(service.download_movie(movie_id))


@router.get(
    "/{movie_id}/files",
    response_model=list[FileInfoResponse],
    response_model_exclude_none=True,
)
def list_files_by_movie(movie_id: str, service: FileService = Depends(get_file_service)):
    return [
        FileInfoResponse.model_validate(info)
        for info in service.list_files_by_movie(movie_id)
    ]
