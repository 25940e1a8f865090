"""
Configuration du logging de l'application via loguru.

Trois sorties :
- Console : lisible, colorée, pour la surveillance en temps réel
- Journal applicatif : JSON avec rotation, hors événements de domaine
- Journal d'événements : JSON avec rotation, uniquement les événements publiés
  par LoggingEventPublisher (records portant la clé extra "event")
"""

import sys
from pathlib import Path

from loguru import logger

EVENT_KEY = "event"


def is_domain_event(record: dict) -> bool:
    """Filtre loguru : vrai pour les records émis par le puits d'événements."""
    return EVENT_KEY in record["extra"]


def is_operational(record: dict) -> bool:
    return not is_domain_event(record)


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/topics.log"),
    events_file: Path = Path("logs/events.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau de log minimum pour la sortie console (DEBUG, INFO, WARNING, ERROR)
        log_file : Chemin du journal applicatif
        events_file : Chemin du journal des événements de domaine
        rotation_size : Taille maximale d'un fichier avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs à conserver
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    for path, record_filter, level in (
        (log_file, is_operational, "DEBUG"),
        (events_file, is_domain_event, "INFO"),
    ):
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            path,
            level=level,
            filter=record_filter,
            format="{message}",
            serialize=True,
            rotation=rotation_size,
            retention=retention_count,
            compression="zip",
            enqueue=True,  # Thread-safe
        )

    logger.debug(
        "Logging configuré",
        log_file=str(log_file),
        events_file=str(events_file),
        rotation=rotation_size,
    )
