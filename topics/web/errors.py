"""
Conversion des erreurs du domaine en réponses HTTP.

- ValidationError -> 422, avec la liste complète des champs en erreur
- NotFoundError -> 404
- RepositoryError -> 503
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from ..core.errors import NotFoundError, RepositoryError, ValidationError
from .schemas import ErrorResponse, FieldErrorResponse


async def _validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    body = ErrorResponse(
        detail="Requete invalide",
        errors=[FieldErrorResponse(field=e.field, message=e.message) for e in exc.errors],
    )
    return JSONResponse(status_code=422, content=body.model_dump())


async def _not_found_error(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content=ErrorResponse(detail=str(exc)).model_dump())


async def _repository_error(request: Request, exc: RepositoryError) -> JSONResponse:
    logger.error("Erreur de stockage", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=503, content=ErrorResponse(detail="Stockage indisponible").model_dump()
    )


def register_error_handlers(app: FastAPI) -> None:
    """Enregistre les handlers d'erreurs du domaine sur l'application."""
    app.add_exception_handler(ValidationError, _validation_error)
    app.add_exception_handler(NotFoundError, _not_found_error)
    app.add_exception_handler(RepositoryError, _repository_error)
