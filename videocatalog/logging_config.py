"""
Configuration du logging de l'application via loguru.

Fournit un logging structure avec :
- Sortie console : lisible par l'humain, coloree
- Sortie fichier : serialisee en JSON, avec rotation
- Trace SQL optionnelle : les logs stdlib de SQLAlchemy sont rediriges vers loguru
"""

import logging
import sys
from pathlib import Path

from loguru import logger

_SQL_LOGGER_NAME = "sqlalchemy.engine"


class InterceptHandler(logging.Handler):
    """Redirige un logger stdlib (ici SQLAlchemy) vers loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Remonter au-dela des frames du module logging pour l'origine reelle
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/videocatalog.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
    sql_echo: bool = False,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau de log minimum pour la sortie console (DEBUG, INFO, WARNING, ERROR)
        log_file : Chemin vers le fichier de log
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs a conserver
        sql_echo : Journalise chaque requete SQL emise par l'engine (niveau INFO)
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    sql_logger = logging.getLogger(_SQL_LOGGER_NAME)
    sql_logger.handlers = [InterceptHandler()]
    sql_logger.propagate = False
    sql_logger.setLevel(logging.INFO if sql_echo else logging.WARNING)

    logger.debug(
        "Logging configure", log_file=str(log_file), sql_echo=sql_echo
    )
