"""
Logging de FilmShop via loguru.

Deux destinations :
- stderr, colore, au niveau configure : suivi des commandes CLI et des requetes
- fichier JSON (optionnel) avec rotation : journal des prises de commande,
  y compris les refus qui ne sont journalises qu'en DEBUG
"""

import sys
from pathlib import Path
from typing import Any, Optional

from loguru import logger

_CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def _console_handler(log_level: str) -> dict[str, Any]:
    return {"sink": sys.stderr, "level": log_level, "format": _CONSOLE_FORMAT, "colorize": True}


def _file_handler(log_file: Path, rotation_size: str, retention_count: int) -> dict[str, Any]:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    return {
        "sink": log_file,
        "level": "DEBUG",
        "format": "{message}",
        "serialize": True,
        "rotation": rotation_size,
        "retention": retention_count,
        "compression": "zip",
        # Les requetes HTTP sont servies par plusieurs threads
        "enqueue": True,
    }


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = Path("logs/filmshop.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Remplace les handlers loguru par ceux de l'application.

    Args :
        log_level : Niveau minimum affiche sur stderr (DEBUG, INFO, WARNING, ERROR)
        log_file : Journal JSON des commandes, None pour n'ecrire que sur stderr
        rotation_size : Taille declenchant la rotation du journal (ex: "10 MB")
        retention_count : Nombre d'archives zip conservees
    """
    handlers = [_console_handler(log_level)]
    if log_file is not None:
        handlers.append(_file_handler(log_file, rotation_size, retention_count))

    logger.configure(handlers=handlers)
    logger.debug("Logging configure", log_file=str(log_file) if log_file else None)
