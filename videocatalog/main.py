"""
Point d'entree CLI de VideoCatalog.

Hote de persistance de l'agregat Video : initialise le container DI,
configure le logging, cree le schema et fournit quelques commandes
d'administration.
"""

from typing import Annotated
from uuid import UUID

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import Settings
from .container import Container
from .core.entities import Video
from .infrastructure.persistence.database import init_db, session_scope
from .logging_config import configure_logging

app = typer.Typer(
    name="videocatalog",
    help="Catalogue de videos : administration de la base",
)
container = Container()
console = Console()


def get_config() -> Settings:
    """Recupere les parametres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration VideoCatalog")
    typer.echo(f"Base de donnees : {config.database_url}")
    typer.echo(f"Trace SQL : {'activee' if config.database_echo else 'desactivee'}")
    typer.echo(
        "Reinitialisation au demarrage : "
        f"{'oui' if config.reset_schema_on_startup else 'non'}"
    )
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"VideoCatalog v{__version__}")


@app.command(name="init-db")
def init_database(
    reset: Annotated[
        bool,
        typer.Option("--reset", help="Supprime toutes les tables avant de les recreer"),
    ] = False,
) -> None:
    """Cree le schema de la base a partir des modeles."""
    init_db(reset=reset)
    typer.echo("Schema recree" if reset else "Schema cree")


@app.command()
def show(
    video_id: Annotated[str, typer.Argument(help="Identifiant (UUID) de la video")],
) -> None:
    """Affiche une video du catalogue."""
    try:
        parsed_id = UUID(video_id)
    except ValueError:
        console.print(f"[red]Identifiant invalide : {video_id}[/red]")
        raise typer.Exit(code=1)

    with session_scope() as session:
        video = container.video_repository(session=session).get_by_id(parsed_id)
        if video is None:
            console.print(f"[yellow]Video introuvable : {video_id}[/yellow]")
            raise typer.Exit(code=1)
        console.print(_video_table(video))


def _video_table(video: Video) -> Table:
    """Construit le tableau rich d'une video."""
    table = Table(title=video.title, show_header=False)
    table.add_column("Champ", style="cyan")
    table.add_column("Valeur")

    table.add_row("ID", str(video.id))
    table.add_row("Annee", str(video.year_launched))
    table.add_row("Duree", str(video.duration))
    table.add_row("Classification", video.rating.name)
    table.add_row("Ouverte", "oui" if video.opened else "non")
    table.add_row("Publiee", "oui" if video.published else "non")
    table.add_row("Creee le", video.created_at.isoformat(sep=" ", timespec="seconds"))

    for label, image in (
        ("Miniature", video.thumb),
        ("Demi-miniature", video.thumb_half),
        ("Banniere", video.banner),
    ):
        table.add_row(label, image.path if image else "-")

    for label, media in (("Media", video.media), ("Bande-annonce", video.trailer)):
        if media is None:
            table.add_row(label, "-")
        else:
            encoded = f" -> {media.encoded_path}" if media.encoded_path else ""
            table.add_row(label, f"{media.file_path} ({media.status.name}){encoded}")

    table.add_row("Categories", str(len(video.categories)))
    table.add_row("Genres", str(len(video.genres)))
    table.add_row("Casting", str(len(video.cast_members)))
    return table


def main() -> None:
    """Point d'entree de l'application."""
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
        sql_echo=settings.database_echo,
    )

    # Cree le schema (DROP prealable si reset_schema_on_startup)
    container.database.init()

    logger.info("Demarrage de VideoCatalog", version=__version__)

    app()


if __name__ == "__main__":
    main()
