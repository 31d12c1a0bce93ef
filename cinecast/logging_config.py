"""
Configuration du logging de CineCast via loguru.

Deux destinations :
- stderr : messages colores, au niveau choisi par l'utilisateur
- fichier : une ligne JSON par evenement (niveau DEBUG), avec rotation

Quand database_echo est actif, les requetes emises par SQLAlchemy (logging
standard) sont redirigees vers loguru au lieu d'etre imprimees directement.
"""

import logging
import sys

from loguru import logger

from cinecast.config import Settings

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan> | "
    "<level>{message}</level>"
)


class _LoguruHandler(logging.Handler):
    """Transmet les enregistrements du logging standard a loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        logger.opt(depth=6, exception=record.exc_info).log(level, record.getMessage())


def configure_logging(settings: Settings, verbose: bool = False) -> None:
    """Configure les handlers loguru a partir des Settings.

    Args :
        settings : Configuration (niveau, fichier, rotation, retention, echo SQL)
        verbose : Force le niveau DEBUG sur la console
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else settings.log_level,
        format=CONSOLE_FORMAT,
        colorize=True,
    )

    log_file = settings.log_file
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=settings.log_rotation_size,
        retention=settings.log_retention_count,
        compression="zip",
        enqueue=True,
    )

    # Doit preceder la creation de l'engine
    if settings.database_echo:
        sql_logger = logging.getLogger("sqlalchemy.engine.Engine")
        sql_logger.handlers = [_LoguruHandler()]
        sql_logger.propagate = False

    logger.debug(
        "Logging configure",
        log_file=str(log_file),
        rotation=settings.log_rotation_size,
    )
