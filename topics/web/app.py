"""
Application FastAPI de Topics.

Initialise l'application web avec le Container DI et monte les routes.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .. import __version__
from ..container import Container
from .errors import register_error_handlers
from .routes.messages import router as messages_router
from .routes.movies import router as movies_router
from .routes.users import router as users_router


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Construit l'application.

    Args:
        container: Container DI à utiliser ; un Container par défaut est
            créé au démarrage si absent.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Attache le Container DI au démarrage et libère ses ressources à l'arrêt."""
        active = container or Container()
        if active.config().persistent:
            active.database.init()
        app.state.container = active
        yield
        active.shutdown_resources()

    app = FastAPI(title="Topics", version=__version__, lifespan=lifespan)
    register_error_handlers(app)

    app.include_router(movies_router)
    app.include_router(users_router)
    app.include_router(messages_router)
    return app


app = create_app()
