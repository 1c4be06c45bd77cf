"""
Centralized logger for the key layer.

Provides configurable logging with file and console output,
level filtering, and consistent formatting. Defaults come from
config.keys_config.KEY_CONSTANTS.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from config.keys_config import KEY_CONSTANTS


class KeyLogger:
    """
    Centralized logger for ECDSA keys with file and console output.
    """

    _loggers = {}

    @staticmethod
    def get_logger(
        name: str,
        log_dir: Optional[str] = None,
        level: Optional[int] = None,
        console_output: Optional[bool] = None,
    ) -> logging.Logger:
        """
        Ottiene o crea un logger configurato.

        Args:
            name: Nome del logger (es. "sshkeys.ecdsa")
            log_dir: Directory per i file di log (default: KEY_CONSTANTS.LOG_DIR)
            level: Livello minimo di log (default: KEY_CONSTANTS.LOG_LEVEL)
            console_output: Se True, stampa anche su console
                (default: KEY_CONSTANTS.LOG_CONSOLE)

        Returns:
            Logger configurato pronto all'uso
        """
        # Se esiste già, ritorna il logger cached
        if name in KeyLogger._loggers:
            return KeyLogger._loggers[name]

        if log_dir is None:
            log_dir = KEY_CONSTANTS.LOG_DIR
        if level is None:
            level = KEY_CONSTANTS.LOG_LEVEL
        if console_output is None:
            console_output = KEY_CONSTANTS.LOG_CONSOLE

        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.propagate = False  # Non propagare ai logger parent

        # Rimuovi handler esistenti per evitare duplicati
        logger.handlers.clear()

        # Formato del log: [2026-10-09 14:30:45] [sshkeys.ecdsa] [DEBUG] Messaggio
        formatter = logging.Formatter(
            fmt="[%(asctime)s] [%(name)s] [%(levelname)s] %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )

        if console_output:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(level)
            console_handler.setFormatter(formatter)
            logger.addHandler(console_handler)

        if log_dir:
            log_path = Path(log_dir)
            log_path.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(log_path / f"{name}.log", encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        # Library use: stay silent unless an output was requested
        if not logger.handlers:
            logger.addHandler(logging.NullHandler())

        KeyLogger._loggers[name] = logger
        return logger

    @staticmethod
    def set_level(name: str, level: int):
        """Changes log level for an existing logger."""
        if name in KeyLogger._loggers:
            logger = KeyLogger._loggers[name]
            logger.setLevel(level)
            for handler in logger.handlers:
                handler.setLevel(level)

    @staticmethod
    def clear_cache():
        """Clears logger cache."""
        KeyLogger._loggers.clear()
