"""
Point d'entrée CLI de Topics.

Initialise le container DI, configure le logging et fournit les commandes CLI.
Les commandes demo-* rejouent les scénarios de bout en bout sur le backend
configuré.
"""

from datetime import datetime
from typing import Annotated, Optional

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import Settings
from .container import Container
from .logging_config import configure_logging
from .services import MovieInfo

app = typer.Typer(
    name="topics",
    help="Domaine multi-tenant : utilisateurs, films, fichiers, messages",
)
container = Container()
console = Console()


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


def _format_date(value: Optional[datetime]) -> str:
    return value.isoformat(timespec="seconds") if value else "-"


def _movies_table(infos: list[MovieInfo]) -> Table:
    table = Table(title="Films")
    table.add_column("ID", style="cyan")
    table.add_column("Titre")
    table.add_column("Tenant")
    table.add_column("Créé le")
    table.add_column("Supprimé le", style="red")
    for info in infos:
        table.add_row(
            info.id,
            info.title,
            info.tenancy,
            _format_date(info.created_at),
            _format_date(info.deleted_at),
        )
    return table


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration Topics")
    typer.echo(f"Stockage : {config.storage_backend}")
    if config.persistent:
        typer.echo(f"Base de données : {config.database_url}")
    typer.echo(f"Tenant par défaut : {config.default_tenancy}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"Topics v{__version__}")


@app.command(name="demo-movies")
def demo_movies(
    title: Annotated[str, typer.Option(help="Titre du film")] = "John Wick",
    uri: Annotated[str, typer.Option(help="URI du média")] = "uri-example",
    tenancy: Annotated[str, typer.Option(help="Tenant propriétaire")] = "tenancy/test",
) -> None:
    """Enregistre, supprime puis relit un film et ses fichiers."""
    movie_service = container.movie_service()
    file_service = container.file_service()

    movie_id = movie_service.register_movie(title, uri, tenancy)
    movie_service.delete_movie(movie_id)

    movie = movie_service.get_movie(movie_id)
    typer.echo(f"Film {movie.id} : {movie.title} (supprimé le {_format_date(movie.deleted_at)})")

    media = movie_service.download_movie(movie_id)
    typer.echo(f"Média : {media.uri}")

    console.print(_movies_table(movie_service.list_movies()))

    for file_info in file_service.list_files_by_movie(movie_id):
        typer.echo(f"Fichier {file_info.id} -> {file_info.uri}")


@app.command(name="demo-users")
def demo_users(
    email: Annotated[str, typer.Option(help="Email de l'utilisateur")] = "john@doe.com",
    first_name: Annotated[str, typer.Option(help="Prénom")] = "john",
    last_name: Annotated[str, typer.Option(help="Nom")] = "doe",
    tenancy: Annotated[str, typer.Option(help="Tenant propriétaire")] = "tenancy/test",
) -> None:
    """Enregistre, supprime puis relit un utilisateur."""
    user_service = container.user_service()

    user_id = user_service.register_user(email, first_name, last_name, tenancy)
    user_service.delete_user(user_id)

    user = user_service.get_user_info(user_id)
    typer.echo(
        f"Utilisateur {user.id} : {user.email} (supprimé le {_format_date(user.deleted_at)})"
    )


@app.command()
def serve(
    host: Annotated[str, typer.Option(help="Adresse d'écoute")] = "0.0.0.0",
    port: Annotated[int, typer.Option(help="Port d'écoute")] = 8000,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur HTTP Topics."""
    import uvicorn

    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    uvicorn.run("topics.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        events_file=settings.events_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    if settings.persistent:
        container.database.init()

    logger.info("Démarrage de Topics", version=__version__, storage=settings.storage_backend)

    app()


if __name__ == "__main__":
    main()
